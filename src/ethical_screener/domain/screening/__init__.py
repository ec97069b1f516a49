# screening/__init__.py

from .models import ScreeningSettings, default_settings
from .qualitative import check_qualitative
from .quantitative import check_quantitative, evaluate_rule
from .scoring import build_recommendations, compliance_score
from .screener import EthicalStockScreener
from .sector import check_sector
from .validation import (
    MalformedStock,
    StockValidation,
    ValidStock,
    is_valid_stock,
    validate_stock,
)

__all__ = [
    # checks
    "check_qualitative",
    "check_quantitative",
    "check_sector",
    "evaluate_rule",
    # scoring
    "build_recommendations",
    "compliance_score",
    # screener
    "EthicalStockScreener",
    "ScreeningSettings",
    "default_settings",
    # validation
    "MalformedStock",
    "StockValidation",
    "ValidStock",
    "is_valid_stock",
    "validate_stock",
]
