# screening/test_criteria_config.py

from decimal import Decimal

import pytest

from ethical_screener.domain.screening._criteria_config import (
    CRITERION_RULES,
    PLACEHOLDER_CRITERIA,
    CriterionRule,
)
from ethical_screener.schemas import Bound, ScreeningCriteria, StockFinancials

pytestmark = pytest.mark.unit


def test_rule_order() -> None:
    """
    ARRANGE: CRITERION_RULES
    ACT:     collect rule names
    ASSERT:  fixed evaluation order
    """
    actual = [rule.name for rule in CRITERION_RULES]

    assert actual == [
        "cash",
        "debt",
        "receivables",
        "income",
        "esg_score",
        "esg_risk",
        "carbon",
        "diversity",
        "governance",
    ]


def test_rules_reference_real_fields() -> None:
    """
    ARRANGE: CRITERION_RULES
    ACT:     compare with the schema fields
    ASSERT:  every criterion and financial field exists
    """
    for rule in CRITERION_RULES:
        assert rule.criterion in ScreeningCriteria.model_fields
        assert rule.field in StockFinancials.model_fields


def test_placeholders_are_criteria_fields() -> None:
    """
    ARRANGE: PLACEHOLDER_CRITERIA
    ACT:     compare with ScreeningCriteria fields
    ASSERT:  all present
    """
    assert set(PLACEHOLDER_CRITERIA) <= set(ScreeningCriteria.model_fields)


def test_rule_defaults() -> None:
    """
    ARRANGE: CriterionRule with only required fields
    ACT:     create instance
    ASSERT:  scale 1, missing 0, no unit
    """
    rule = CriterionRule("x", "min_esg_score", "esg_score", Bound.LOWER)

    assert (rule.scale, rule.missing, rule.unit) == (Decimal("1"), Decimal("0"), "")


def test_rule_reading_scales_value() -> None:
    """
    ARRANGE: cash rule and a 0.125 cash ratio
    ACT:     reading_in
    ASSERT:  12.5
    """
    cash = CRITERION_RULES[0]

    actual = cash.reading_in(StockFinancials(cash_ratio=Decimal("0.125")))

    assert actual == Decimal("12.5")


def test_rule_threshold_absent_is_none() -> None:
    """
    ARRANGE: cash rule and criteria without cash_limit
    ACT:     threshold_in
    ASSERT:  None
    """
    assert CRITERION_RULES[0].threshold_in(ScreeningCriteria()) is None
