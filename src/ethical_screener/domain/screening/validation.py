# screening/validation.py

from dataclasses import dataclass

from pydantic import ValidationError

from ethical_screener.schemas import Stock


@dataclass(frozen=True)
class ValidStock:
    """
    Successful validation carrying the parsed stock.
    """

    stock: Stock
    valid: bool = True


@dataclass(frozen=True)
class MalformedStock:
    """
    Failed validation carrying one reason per schema violation.
    """

    reasons: tuple[str, ...]
    valid: bool = False


StockValidation = ValidStock | MalformedStock


def validate_stock(value: object) -> StockValidation:
    """
    Check whether an arbitrary value has the shape of a Stock.

    Advisory only: the screener applies its own defaults for missing
    financial fields and does not call this function.

    Returns:
        StockValidation: ValidStock with the parsed record, or MalformedStock
            listing the violations. Never raises.
    """
    if isinstance(value, Stock):
        return ValidStock(value)

    try:
        return ValidStock(Stock.model_validate(value))
    except ValidationError as error:
        return MalformedStock(tuple(_describe(detail) for detail in error.errors()))


def is_valid_stock(value: object) -> bool:
    """
    Boolean form of validate_stock.

    Returns:
        bool: True when the value has the shape of a Stock.
    """
    return validate_stock(value).valid


def _describe(detail: dict) -> str:
    location = ".".join(str(part) for part in detail["loc"]) or "stock"
    return f"{location}: {detail['msg']}"
