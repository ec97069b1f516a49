# screening/_criteria_config.py

from decimal import Decimal
from typing import NamedTuple

from ethical_screener.schemas import (
    Bound,
    ScreeningCriteria,
    StockFinancials,
)

PERCENT = Decimal("100")
UNIT = Decimal("1")


class CriterionRule(NamedTuple):
    """
    Specification of one quantitative screening rule.

    Attributes:
        name: Short rule name reported in outcomes and recommendations.
        criterion: ScreeningCriteria field holding the threshold.
        field: StockFinancials field holding the measured value.
        bound: Whether the threshold is a maximum or a minimum.
        scale: Multiplier applied to the measured value before comparison,
            e.g. 100 to turn a fraction into a percentage.
        missing: Value compared when the stock does not report the field.
        unit: Suffix used when rendering values.
    """

    name: str
    criterion: str
    field: str
    bound: Bound
    scale: Decimal = UNIT
    missing: Decimal = Decimal("0")
    unit: str = ""

    def threshold_in(self, criteria: ScreeningCriteria) -> Decimal | None:
        """
        Read this rule's threshold, None when the methodology omits it.
        """
        return getattr(criteria, self.criterion)

    def reading_in(self, financials: StockFinancials) -> Decimal:
        """
        Read and scale the measured value, substituting the missing default.
        """
        value = getattr(financials, self.field)
        if value is None:
            return self.missing
        return value * self.scale


# Quantitative rules in evaluation order. Missing pollution and risk data
# defaults to the worst case so that absent data never passes those gates.
CRITERION_RULES: tuple[CriterionRule, ...] = (
    # Islamic / financial ratios
    CriterionRule("cash", "cash_limit", "cash_ratio", Bound.UPPER, PERCENT, unit="%"),
    CriterionRule("debt", "debt_limit", "debt_ratio", Bound.UPPER, PERCENT, unit="%"),
    CriterionRule(
        "receivables",
        "receivables_limit",
        "receivables_ratio",
        Bound.UPPER,
        PERCENT,
        unit="%",
    ),
    CriterionRule(
        "income",
        "impermissible_income_limit",
        "impermissible_income",
        Bound.UPPER,
        PERCENT,
        unit="%",
    ),
    # ESG
    CriterionRule("esg_score", "min_esg_score", "esg_score", Bound.LOWER),
    CriterionRule(
        "esg_risk",
        "max_esg_risk",
        "esg_risk",
        Bound.UPPER,
        missing=Decimal("100"),
    ),
    CriterionRule(
        "carbon",
        "max_carbon_intensity",
        "carbon_intensity",
        Bound.UPPER,
        missing=Decimal("Infinity"),
    ),
    CriterionRule(
        "diversity",
        "min_board_diversity",
        "board_diversity",
        Bound.LOWER,
        unit="%",
    ),
    CriterionRule(
        "governance", "min_governance_score", "governance_score", Bound.LOWER
    ),
)

# Criteria accepted on a methodology but never evaluated against a stock
PLACEHOLDER_CRITERIA: tuple[str, ...] = (
    "exclude_sin_stocks",
    "min_community_impact_score",
    "support_human_dignity",
    "kosher_food_only",
    "sabbath_observant",
    "exclude_mixed_textiles",
    "custom_rules",
)

# Controversy gates
SEVERE_SEVERITY = "severe"
FLAGGED_SEVERITIES: frozenset[str] = frozenset({"medium", "high", "severe"})
SEVERE_CONTROVERSY_REASON = "Severe controversies detected"
CONTROVERSY_REASON = "Controversies detected"
