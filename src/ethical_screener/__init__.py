# ethical_screener/__init__.py

from .domain import (
    EthicalStockScreener,
    MalformedStock,
    ScreeningSettings,
    StockValidation,
    ValidStock,
    default_settings,
    is_valid_stock,
    validate_stock,
)
from .errors import (
    InvalidMethodology,
    InvalidMethodologyConfiguration,
    ScreeningError,
    UnknownScreeningType,
)
from .registry import (
    MethodologyRegistry,
    build_registry,
    default_registry,
    list_screening_types,
    methodologies_for,
)
from .schemas import (
    Methodology,
    ScreeningCriteria,
    ScreeningResult,
    ScreeningType,
    ScreeningTypeInfo,
    Stock,
    StockControversies,
    StockFinancials,
)

__all__ = [
    # domain
    "EthicalStockScreener",
    "MalformedStock",
    "ScreeningSettings",
    "StockValidation",
    "ValidStock",
    "default_settings",
    "is_valid_stock",
    "validate_stock",
    # errors
    "InvalidMethodology",
    "InvalidMethodologyConfiguration",
    "ScreeningError",
    "UnknownScreeningType",
    # registry
    "MethodologyRegistry",
    "build_registry",
    "default_registry",
    "list_screening_types",
    "methodologies_for",
    # schemas
    "Methodology",
    "ScreeningCriteria",
    "ScreeningResult",
    "ScreeningType",
    "ScreeningTypeInfo",
    "Stock",
    "StockControversies",
    "StockFinancials",
]
