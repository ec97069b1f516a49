# screening/sector.py

from collections.abc import Mapping

from ethical_screener.schemas import Methodology, SectorCheckResult


def check_sector(
    sector: str,
    methodology: Methodology,
    classifications: Mapping[str, tuple[str, ...]],
) -> SectorCheckResult:
    """
    Match a literal sector against a methodology's sector restrictions.

    A sector is prohibited when any prohibited tag lists it, and preferred
    when the methodology declares no preferred tags or any preferred tag
    lists it.

    Args:
        sector: Literal sector name of the stock.
        methodology: Methodology supplying prohibited and preferred tags.
        classifications: Sector tag to member sector names.

    Returns:
        SectorCheckResult: Pass when not prohibited and preferred.
    """
    prohibited_categories = tuple(
        tag
        for tag in methodology.prohibited_sectors
        if _is_member(sector, tag, classifications)
    )
    is_prohibited = bool(prohibited_categories)

    is_preferred = not methodology.preferred_sectors or any(
        _is_member(sector, tag, classifications)
        for tag in methodology.preferred_sectors
    )

    return SectorCheckResult(
        passed=not is_prohibited and is_preferred,
        sector=sector,
        is_prohibited=is_prohibited,
        is_preferred=is_preferred,
        prohibited_categories=prohibited_categories,
    )


def _is_member(
    sector: str,
    tag: str,
    classifications: Mapping[str, tuple[str, ...]],
) -> bool:
    """
    Check whether a sector tag lists the literal sector name.

    Returns:
        bool: True on exact membership, False for unknown tags.
    """
    return sector in classifications.get(tag, ())
