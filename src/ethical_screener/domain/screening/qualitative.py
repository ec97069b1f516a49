# screening/qualitative.py

from ethical_screener.schemas import (
    QualitativeCheckResult,
    ScreeningCriteria,
    StockControversies,
)

from ._criteria_config import (
    CONTROVERSY_REASON,
    FLAGGED_SEVERITIES,
    SEVERE_CONTROVERSY_REASON,
    SEVERE_SEVERITY,
)


def check_qualitative(
    controversies: StockControversies | None,
    criteria: ScreeningCriteria,
) -> QualitativeCheckResult:
    """
    Apply the controversy gates declared by the criteria.

    `exclude_severe_controversies` rejects severe controversies and
    `exclude_controversies` rejects medium, high or severe ones. Faith flags
    carry no qualitative test.

    Args:
        controversies: The stock's controversy record, if any.
        criteria: Methodology criteria holding the gate flags.

    Returns:
        QualitativeCheckResult: Pass when no gate rejects the stock.
    """
    severity = controversies.severity if controversies else None
    reasons: list[str] = []

    if criteria.exclude_severe_controversies and severity == SEVERE_SEVERITY:
        reasons.append(SEVERE_CONTROVERSY_REASON)

    if criteria.exclude_controversies and severity in FLAGGED_SEVERITIES:
        reasons.append(CONTROVERSY_REASON)

    return QualitativeCheckResult(
        passed=not reasons,
        controversies=controversies,
        has_controversies=controversies is not None,
        severity_level=severity,
        failure_reasons=tuple(reasons),
    )
