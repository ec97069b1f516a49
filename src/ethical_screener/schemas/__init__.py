# schemas/__init__.py

from .methodology import (
    Methodology,
    ScreeningCriteria,
    ScreeningType,
    ScreeningTypeInfo,
)
from .screening import (
    Bound,
    CriterionOutcome,
    QualitativeCheckResult,
    QuantitativeCheckResult,
    ScreeningResult,
    SectorCheckResult,
)
from .stock import Severity, Stock, StockControversies, StockFinancials

__all__ = [
    # methodology
    "Methodology",
    "ScreeningCriteria",
    "ScreeningType",
    "ScreeningTypeInfo",
    # screening
    "Bound",
    "CriterionOutcome",
    "QualitativeCheckResult",
    "QuantitativeCheckResult",
    "ScreeningResult",
    "SectorCheckResult",
    # stock
    "Severity",
    "Stock",
    "StockControversies",
    "StockFinancials",
]
