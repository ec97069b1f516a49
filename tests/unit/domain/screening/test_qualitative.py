# screening/test_qualitative.py

import pytest

from ethical_screener.domain.screening import check_qualitative
from ethical_screener.schemas import ScreeningCriteria, StockControversies

pytestmark = pytest.mark.unit

_SEVERE_ONLY = ScreeningCriteria(exclude_severe_controversies=True)
_ANY = ScreeningCriteria(exclude_controversies=True)


def test_no_controversies_passes() -> None:
    """
    ARRANGE: stock without controversies, strictest flags set
    ACT:     check_qualitative
    ASSERT:  passes and has_controversies is False
    """
    criteria = ScreeningCriteria(
        exclude_controversies=True,
        exclude_severe_controversies=True,
    )

    actual = check_qualitative(None, criteria)

    assert (actual.passed, actual.has_controversies) == (True, False)


def test_severe_controversy_fails_severe_gate() -> None:
    """
    ARRANGE: severe controversy with exclude_severe_controversies
    ACT:     check_qualitative
    ASSERT:  fails with the severe reason
    """
    actual = check_qualitative(StockControversies(severity="severe"), _SEVERE_ONLY)

    assert actual.failure_reasons == ("Severe controversies detected",)


def test_high_controversy_passes_severe_gate() -> None:
    """
    ARRANGE: high controversy with exclude_severe_controversies only
    ACT:     check_qualitative
    ASSERT:  passes
    """
    actual = check_qualitative(StockControversies(severity="high"), _SEVERE_ONLY)

    assert actual.passed is True


@pytest.mark.parametrize("severity", ["medium", "high", "severe"])
def test_flagged_severity_fails_any_gate(severity: str) -> None:
    """
    ARRANGE: medium/high/severe controversy with exclude_controversies
    ACT:     check_qualitative
    ASSERT:  fails with the generic reason
    """
    actual = check_qualitative(StockControversies(severity=severity), _ANY)

    assert actual.failure_reasons == ("Controversies detected",)


def test_low_severity_passes_any_gate() -> None:
    """
    ARRANGE: low controversy with exclude_controversies
    ACT:     check_qualitative
    ASSERT:  passes
    """
    actual = check_qualitative(StockControversies(severity="low"), _ANY)

    assert actual.passed is True


def test_controversy_without_severity_passes() -> None:
    """
    ARRANGE: controversy record with no severity
    ACT:     check_qualitative
    ASSERT:  passes but has_controversies is True
    """
    actual = check_qualitative(StockControversies(description="pending"), _ANY)

    assert (actual.passed, actual.has_controversies) == (True, True)


def test_both_gates_report_both_reasons() -> None:
    """
    ARRANGE: severe controversy with both flags set
    ACT:     check_qualitative
    ASSERT:  severe reason followed by generic reason
    """
    criteria = ScreeningCriteria(
        exclude_controversies=True,
        exclude_severe_controversies=True,
    )

    actual = check_qualitative(StockControversies(severity="severe"), criteria)

    assert actual.failure_reasons == (
        "Severe controversies detected",
        "Controversies detected",
    )


def test_no_flags_ignore_severe_controversy() -> None:
    """
    ARRANGE: severe controversy, criteria with faith flags only
    ACT:     check_qualitative
    ASSERT:  passes
    """
    criteria = ScreeningCriteria(kosher_food_only=True, exclude_sin_stocks=True)

    actual = check_qualitative(StockControversies(severity="severe"), criteria)

    assert actual.passed is True


def test_severity_level_reported() -> None:
    """
    ARRANGE: medium controversy
    ACT:     check_qualitative
    ASSERT:  severity_level is medium
    """
    actual = check_qualitative(
        StockControversies(severity="medium"),
        ScreeningCriteria(),
    )

    assert actual.severity_level == "medium"
