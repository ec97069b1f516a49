# screening/test_sector.py

import pytest

from ethical_screener.domain.screening import check_sector
from ethical_screener.registry import default_registry
from ethical_screener.schemas import Methodology

pytestmark = pytest.mark.unit

_CLASSIFICATIONS = {
    "tobacco": ("Tobacco", "Cigarettes"),
    "alcohol": ("Brewers",),
    "tech": ("Software",),
    "health": ("Biotechnology",),
}


def _methodology(
    prohibited: tuple[str, ...] = ("tobacco", "alcohol"),
    preferred: tuple[str, ...] = (),
) -> Methodology:
    return Methodology(
        name="Test",
        type="esg",
        criteria={},
        prohibited_sectors=prohibited,
        preferred_sectors=preferred,
    )


def test_prohibited_sector_fails() -> None:
    """
    ARRANGE: sector listed under a prohibited tag
    ACT:     check_sector
    ASSERT:  check fails
    """
    actual = check_sector("Cigarettes", _methodology(), _CLASSIFICATIONS)

    assert actual.passed is False


def test_prohibited_sector_reports_tag() -> None:
    """
    ARRANGE: sector listed under the tobacco tag
    ACT:     check_sector
    ASSERT:  prohibited_categories names tobacco only
    """
    actual = check_sector("Cigarettes", _methodology(), _CLASSIFICATIONS)

    assert actual.prohibited_categories == ("tobacco",)


def test_sector_matched_by_member_not_tag_name() -> None:
    """
    ARRANGE: sector equal to a tag name but not a member literal
    ACT:     check_sector
    ASSERT:  not prohibited
    """
    actual = check_sector("alcohol", _methodology(), _CLASSIFICATIONS)

    assert actual.is_prohibited is False


def test_sector_match_is_case_sensitive() -> None:
    """
    ARRANGE: sector differing from a member only by case
    ACT:     check_sector
    ASSERT:  not prohibited
    """
    actual = check_sector("tobacco", _methodology(), _CLASSIFICATIONS)

    assert actual.passed is True


def test_unclassified_sector_passes_without_preferences() -> None:
    """
    ARRANGE: sector in no tag, methodology with no preferred tags
    ACT:     check_sector
    ASSERT:  check passes
    """
    actual = check_sector("Widgets", _methodology(), _CLASSIFICATIONS)

    assert actual.passed is True


def test_non_preferred_sector_fails() -> None:
    """
    ARRANGE: preferred tags that do not list the sector
    ACT:     check_sector
    ASSERT:  fails with is_preferred False and not prohibited
    """
    methodology = _methodology(preferred=("tech",))

    actual = check_sector("Biotechnology", methodology, _CLASSIFICATIONS)

    assert (actual.passed, actual.is_preferred, actual.is_prohibited) == (
        False,
        False,
        False,
    )


def test_preferred_sector_passes() -> None:
    """
    ARRANGE: preferred tags that list the sector
    ACT:     check_sector
    ASSERT:  check passes
    """
    methodology = _methodology(preferred=("tech", "health"))

    actual = check_sector("Biotechnology", methodology, _CLASSIFICATIONS)

    assert actual.passed is True


def test_prohibition_overrides_preference() -> None:
    """
    ARRANGE: sector listed under both a prohibited and a preferred tag
    ACT:     check_sector
    ASSERT:  check fails
    """
    methodology = _methodology(prohibited=("tech",), preferred=("tech",))

    actual = check_sector("Software", methodology, _CLASSIFICATIONS)

    assert actual.passed is False


def test_unknown_tags_match_nothing() -> None:
    """
    ARRANGE: prohibited tag absent from the classification table
    ACT:     check_sector
    ASSERT:  not prohibited
    """
    methodology = _methodology(prohibited=("oil_sands",))

    actual = check_sector("Oil Sands", methodology, _CLASSIFICATIONS)

    assert actual.is_prohibited is False


def test_every_prohibited_tag_is_reported() -> None:
    """
    ARRANGE: AAOIFI and every member sector of its prohibited tags
    ACT:     check_sector for each member
    ASSERT:  fails and reports the tag each time
    """
    registry = default_registry()
    methodology = registry.get("AAOIFI")

    for tag in methodology.prohibited_sectors:
        for sector in registry.sector_members(tag):
            actual = check_sector(sector, methodology, registry.sectors)

            assert actual.passed is False
            assert tag in actual.prohibited_categories


def test_consumer_finance_not_prohibited_by_aaoifi() -> None:
    """
    ARRANGE: AAOIFI, whose interest_based_activities tag has no members
    ACT:     check_sector for "Consumer Finance"
    ASSERT:  passes
    """
    registry = default_registry()

    actual = check_sector("Consumer Finance", registry.get("AAOIFI"), registry.sectors)

    assert actual.passed is True
