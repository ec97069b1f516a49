# schemas/methodology.py

from decimal import Decimal
from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class ScreeningType(StrEnum):
    """
    Top-level ethical framework grouping related methodologies.
    """

    ISLAMIC = "islamic"
    ESG = "esg"
    CHRISTIAN = "christian"
    JEWISH = "jewish"
    CUSTOM = "custom"


class ScreeningCriteria(BaseModel):
    """
    Thresholds and flags applied by a methodology.

    Every field is optional: None means the rule is not evaluated, which is
    distinct from a zero threshold. Percentage limits are stored as
    percentages (e.g. 33 for 33%).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Islamic / financial ratio limits (%)
    cash_limit: Decimal | None = None
    debt_limit: Decimal | None = None
    receivables_limit: Decimal | None = None
    impermissible_income_limit: Decimal | None = None
    # Denominator convention for upstream ratio calculation
    use_total_assets: bool | None = None

    # ESG bounds
    min_esg_score: Decimal | None = None
    max_esg_risk: Decimal | None = None
    max_carbon_intensity: Decimal | None = None
    min_board_diversity: Decimal | None = None
    min_governance_score: Decimal | None = None
    exclude_controversies: bool | None = None
    exclude_severe_controversies: bool | None = None

    # Faith-based flags, declared but not evaluated
    exclude_sin_stocks: bool | None = None
    min_community_impact_score: Decimal | None = None
    support_human_dignity: bool | None = None
    kosher_food_only: bool | None = None
    sabbath_observant: bool | None = None
    exclude_mixed_textiles: bool | None = None

    # User-defined methodologies
    custom_rules: dict[str, object] | None = None


class Methodology(BaseModel):
    """
    A named screening standard: criteria plus sector restrictions.

    Sector restrictions are expressed as sector classification tags, never
    as literal sector names.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    type: ScreeningType
    criteria: ScreeningCriteria
    prohibited_sectors: tuple[str, ...]
    preferred_sectors: tuple[str, ...] = ()
    description: str | None = None
    region: str | None = None
    authority: str | None = None
    year_established: int | None = None
    last_updated: str | None = None


class ScreeningTypeInfo(BaseModel):
    """
    Descriptor of a screening type and the methodologies it offers.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    key: ScreeningType
    name: str
    description: str
    icon: str
    color: str
    methodologies: tuple[str, ...]
    market_size: str | None = None
    global_assets: str | None = None
