# domain/__init__.py

from .screening import (
    EthicalStockScreener,
    MalformedStock,
    ScreeningSettings,
    StockValidation,
    ValidStock,
    default_settings,
    is_valid_stock,
    validate_stock,
)

__all__ = [
    "EthicalStockScreener",
    "MalformedStock",
    "ScreeningSettings",
    "StockValidation",
    "ValidStock",
    "default_settings",
    "is_valid_stock",
    "validate_stock",
]
