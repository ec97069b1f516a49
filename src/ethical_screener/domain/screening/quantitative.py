# screening/quantitative.py

import operator
from collections.abc import Callable
from decimal import Decimal

from ethical_screener.schemas import (
    Bound,
    CriterionOutcome,
    QuantitativeCheckResult,
    ScreeningCriteria,
    StockFinancials,
)

from ._criteria_config import CRITERION_RULES, PLACEHOLDER_CRITERIA, CriterionRule

_COMPARATORS: dict[Bound, Callable[[Decimal, Decimal], bool]] = {
    Bound.UPPER: operator.le,
    Bound.LOWER: operator.ge,
}


def check_quantitative(
    financials: StockFinancials,
    criteria: ScreeningCriteria,
) -> QuantitativeCheckResult:
    """
    Evaluate every quantitative rule the criteria declare.

    Rules run in the fixed order of CRITERION_RULES; a rule whose threshold
    is absent from the criteria is skipped. `use_total_assets` only selects
    the reported denominator basis and never gates.

    Args:
        financials: Financial metrics of the stock.
        criteria: Methodology criteria holding the thresholds.

    Returns:
        QuantitativeCheckResult: Pass when every evaluated rule passes.
    """
    outcomes = tuple(
        evaluate_rule(rule, financials, threshold)
        for rule in CRITERION_RULES
        if (threshold := rule.threshold_in(criteria)) is not None
    )

    failed = tuple(outcome.name for outcome in outcomes if not outcome.passed)

    return QuantitativeCheckResult(
        passed=not failed,
        outcomes=outcomes,
        failed_criteria=failed,
        denominator="total_assets" if criteria.use_total_assets else "market_cap",
        unevaluated_criteria=_declared_placeholders(criteria),
    )


def evaluate_rule(
    rule: CriterionRule,
    financials: StockFinancials,
    threshold: Decimal,
) -> CriterionOutcome:
    """
    Compare one scaled financial value against its threshold.

    Returns:
        CriterionOutcome: The compared value, threshold and verdict.
    """
    value = rule.reading_in(financials)

    return CriterionOutcome(
        name=rule.name,
        criterion=rule.criterion,
        value=value,
        threshold=threshold,
        bound=rule.bound,
        unit=rule.unit,
        passed=_COMPARATORS[rule.bound](value, threshold),
    )


def _declared_placeholders(criteria: ScreeningCriteria) -> tuple[str, ...]:
    """
    List the informational criteria present on the methodology.

    Returns:
        tuple[str, ...]: Declared but unevaluated criteria names.
    """
    return tuple(
        name for name in PLACEHOLDER_CRITERIA if getattr(criteria, name) is not None
    )
