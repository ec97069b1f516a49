# screening/models.py

from dataclasses import dataclass


@dataclass(frozen=True)
class ScreeningSettings:
    """
    Configuration values controlling screener construction.
    """

    # Screening type used when a screener is built without one
    default_screening_type: str = "islamic"
    # Methodology key used when a screener is built without one
    default_methodology_key: str = "AAOIFI"
    # Maximum close matches reported for an unknown type or key
    suggestion_limit: int = 3
    # Minimum fuzzy similarity (0-100) for a close match to be reported
    suggestion_cutoff: int = 60


def default_settings() -> ScreeningSettings:
    """
    Return default screener settings.

    Returns:
        ScreeningSettings: Default configuration values.
    """
    return ScreeningSettings()
