# ethical_screener/errors.py


class ScreeningError(Exception):
    """
    Base class for every error raised by the screening package.
    """


class InvalidMethodology(ScreeningError, ValueError):
    """
    Raised when no usable methodology can be resolved for a screener.
    """


class UnknownScreeningType(InvalidMethodology, LookupError):
    """
    Raised when a screening type has no registered methodologies.

    Subclasses InvalidMethodology, so callers constructing a screener can
    catch either.
    """

    def __init__(self, screening_type: str, suggestions: tuple[str, ...] = ()) -> None:
        self.screening_type = screening_type
        self.suggestions = suggestions

        message = f"No methodologies available for screening type: {screening_type}"
        if suggestions:
            message += f" (did you mean: {', '.join(suggestions)}?)"
        super().__init__(message)


class InvalidMethodologyConfiguration(ScreeningError, ValueError):
    """
    Raised when a methodology record fails structural validation.
    """
