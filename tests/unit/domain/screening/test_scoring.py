# screening/test_scoring.py

from decimal import Decimal

import pytest

from ethical_screener.domain.screening import (
    build_recommendations,
    check_qualitative,
    check_quantitative,
    compliance_score,
)
from ethical_screener.domain.screening.scoring import format_number
from ethical_screener.schemas import (
    ScreeningCriteria,
    SectorCheckResult,
    StockControversies,
    StockFinancials,
)

pytestmark = pytest.mark.unit


def _sector(
    passed: bool = True,
    categories: tuple[str, ...] = (),
    preferred: bool = True,
) -> SectorCheckResult:
    return SectorCheckResult(
        passed=passed,
        sector="Banks",
        is_prohibited=bool(categories),
        is_preferred=preferred,
        prohibited_categories=categories,
    )


def _quantitative(passed: bool = True):
    financials = StockFinancials(debt_ratio=Decimal("0.45" if not passed else "0.1"))
    return check_quantitative(financials, ScreeningCriteria(debt_limit=30))


def _qualitative(passed: bool = True):
    severity = "low" if passed else "severe"
    return check_qualitative(
        StockControversies(severity=severity),
        ScreeningCriteria(exclude_severe_controversies=True),
    )


@pytest.mark.parametrize(
    ("flags", "expected"),
    [
        ((False, False, False), 0),
        ((True, False, False), 33),
        ((False, True, False), 33),
        ((True, True, False), 67),
        ((False, True, True), 67),
        ((True, True, True), 100),
    ],
)
def test_compliance_score_values(flags: tuple[bool, bool, bool], expected: int) -> None:
    """
    ARRANGE: sub-check results with a given pass pattern
    ACT:     compliance_score
    ASSERT:  exactly 0, 33, 67 or 100
    """
    sector_ok, quantitative_ok, qualitative_ok = flags

    actual = compliance_score(
        _sector(sector_ok, () if sector_ok else ("financial_services",)),
        _quantitative(quantitative_ok),
        _qualitative(qualitative_ok),
    )

    assert actual == expected


def test_no_recommendations_when_all_pass() -> None:
    """
    ARRANGE: three passing sub-checks
    ACT:     build_recommendations
    ASSERT:  empty tuple
    """
    actual = build_recommendations(_sector(), _quantitative(), _qualitative())

    assert actual == ()


def test_one_recommendation_per_prohibited_tag() -> None:
    """
    ARRANGE: sector prohibited under two tags
    ACT:     build_recommendations
    ASSERT:  one message per tag
    """
    sector = _sector(False, ("financial_services", "banks"))

    actual = build_recommendations(sector, _quantitative(), _qualitative())

    assert actual == (
        "Consider excluding due to prohibited sector: Banks (financial_services)",
        "Consider excluding due to prohibited sector: Banks (banks)",
    )


def test_non_preferred_recommendation() -> None:
    """
    ARRANGE: sector failing only the preference test
    ACT:     build_recommendations
    ASSERT:  single preferred-sector message
    """
    sector = _sector(False, preferred=False)

    actual = build_recommendations(sector, _quantitative(), _qualitative())

    assert actual == ("Consider focusing on preferred sectors for better alignment",)


def test_quantitative_recommendation_names_value_and_limit() -> None:
    """
    ARRANGE: debt ratio of 45% against a 30% limit
    ACT:     build_recommendations
    ASSERT:  message names the rule, value and limit
    """
    actual = build_recommendations(_sector(), _quantitative(False), _qualitative())

    assert actual == ("debt needs improvement: 45% (limit: 30%)",)


def test_lower_bound_recommendation_uses_minimum() -> None:
    """
    ARRANGE: esg score of 5 against a minimum of 7
    ACT:     build_recommendations
    ASSERT:  threshold described as minimum
    """
    quantitative = check_quantitative(
        StockFinancials(esg_score=5),
        ScreeningCriteria(min_esg_score="7.0"),
    )

    actual = build_recommendations(_sector(), quantitative, _qualitative())

    assert actual == ("esg_score needs improvement: 5 (minimum: 7)",)


def test_missing_carbon_recommendation_reads_unavailable() -> None:
    """
    ARRANGE: missing carbon intensity against a maximum of 100
    ACT:     build_recommendations
    ASSERT:  value rendered as unavailable
    """
    quantitative = check_quantitative(
        StockFinancials(),
        ScreeningCriteria(max_carbon_intensity=100),
    )

    actual = build_recommendations(_sector(), quantitative, _qualitative())

    assert actual == ("carbon needs improvement: unavailable (maximum: 100)",)


def test_qualitative_recommendation() -> None:
    """
    ARRANGE: severe controversy under a severe gate
    ACT:     build_recommendations
    ASSERT:  message wraps the failure reason
    """
    actual = build_recommendations(_sector(), _quantitative(), _qualitative(False))

    assert actual == ("Address qualitative concern: Severe controversies detected",)


def test_recommendation_order_sector_quantitative_qualitative() -> None:
    """
    ARRANGE: all three sub-checks failing
    ACT:     build_recommendations
    ASSERT:  sector, then quantitative, then qualitative messages
    """
    actual = build_recommendations(
        _sector(False, ("financial_services",)),
        _quantitative(False),
        _qualitative(False),
    )

    assert [message.split(" ")[0] for message in actual] == [
        "Consider",
        "debt",
        "Address",
    ]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (Decimal("45.00"), "45"),
        (Decimal("100"), "100"),
        (Decimal("33.33"), "33.33"),
        (Decimal("Infinity"), "unavailable"),
    ],
)
def test_format_number(value: Decimal, expected: str) -> None:
    """
    ARRANGE: Decimal values with trailing zeros, exponents or infinity
    ACT:     format_number
    ASSERT:  plain rendering
    """
    assert format_number(value) == expected
