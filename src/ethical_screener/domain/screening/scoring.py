# screening/scoring.py

from decimal import Decimal

from ethical_screener.schemas import (
    CriterionOutcome,
    QualitativeCheckResult,
    QuantitativeCheckResult,
    SectorCheckResult,
)

CHECK_COUNT = 3


def compliance_score(
    sector: SectorCheckResult,
    quantitative: QuantitativeCheckResult,
    qualitative: QualitativeCheckResult,
) -> int:
    """
    Compute the percentage of sub-checks that passed.

    Returns:
        int: One of 0, 33, 67 or 100.
    """
    passed = sum(check.passed for check in (sector, quantitative, qualitative))
    return round(passed * 100 / CHECK_COUNT)


def build_recommendations(
    sector: SectorCheckResult,
    quantitative: QuantitativeCheckResult,
    qualitative: QualitativeCheckResult,
) -> tuple[str, ...]:
    """
    Derive human-readable recommendations from failed sub-checks.

    Sector messages come first, then one message per failed quantitative
    rule in evaluation order, then one per qualitative failure reason.

    Returns:
        tuple[str, ...]: Recommendations, empty when every check passed.
    """
    return (
        _sector_recommendations(sector)
        + _quantitative_recommendations(quantitative)
        + _qualitative_recommendations(qualitative)
    )


def _sector_recommendations(sector: SectorCheckResult) -> tuple[str, ...]:
    """
    One message per matched prohibited tag, plus one when no preferred tag
    lists the sector.
    """
    if sector.passed:
        return ()

    messages = tuple(
        f"Consider excluding due to prohibited sector: {sector.sector} ({tag})"
        for tag in sector.prohibited_categories
    )

    if not sector.is_preferred:
        messages += ("Consider focusing on preferred sectors for better alignment",)

    return messages


def _quantitative_recommendations(
    quantitative: QuantitativeCheckResult,
) -> tuple[str, ...]:
    """
    One message per failed rule, in evaluation order.
    """
    return tuple(
        _describe_failure(outcome)
        for outcome in quantitative.outcomes
        if not outcome.passed
    )


def _qualitative_recommendations(
    qualitative: QualitativeCheckResult,
) -> tuple[str, ...]:
    """
    One message per controversy gate that rejected the stock.
    """
    return tuple(
        f"Address qualitative concern: {reason}"
        for reason in qualitative.failure_reasons
    )


def _describe_failure(outcome: CriterionOutcome) -> str:
    """
    Render a failed rule with its measured value and threshold.

    Returns:
        str: e.g. "debt needs improvement: 45% (limit: 30%)".
    """
    label = _threshold_label(outcome)
    value = format_number(outcome.value)
    threshold = format_number(outcome.threshold)

    return (
        f"{outcome.name} needs improvement: {value}{outcome.unit} "
        f"({label}: {threshold}{outcome.unit})"
    )


def _threshold_label(outcome: CriterionOutcome) -> str:
    """
    Name a threshold after its criterion prefix: minimum, maximum or limit.
    """
    if outcome.criterion.startswith("min_"):
        return "minimum"
    if outcome.criterion.startswith("max_"):
        return "maximum"
    return "limit"


def format_number(value: Decimal) -> str:
    """
    Render a Decimal without trailing zeros or exponent notation.

    Returns:
        str: e.g. "45" for Decimal("45.00"), "unavailable" for infinity.
    """
    if value.is_infinite():
        return "unavailable"
    return f"{value.normalize():f}"
