# schemas/screening.py

from decimal import Decimal
from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .methodology import ScreeningType
from .stock import StockControversies


class Bound(StrEnum):
    """
    Direction of a quantitative threshold.

    Attributes:
        UPPER: The value must not exceed the threshold.
        LOWER: The value must reach at least the threshold.
    """

    UPPER = "upper"
    LOWER = "lower"


class SectorCheckResult(BaseModel):
    """
    Outcome of matching a stock's sector against prohibited and preferred tags.
    """

    model_config = ConfigDict(strict=True, frozen=True)

    passed: bool
    sector: str
    is_prohibited: bool
    is_preferred: bool
    prohibited_categories: tuple[str, ...]


class CriterionOutcome(BaseModel):
    """
    A single evaluated quantitative rule.
    """

    model_config = ConfigDict(strict=True, frozen=True)

    name: str
    criterion: str
    # Missing carbon intensity is reported as +infinity
    value: Decimal = Field(allow_inf_nan=True)
    threshold: Decimal
    bound: Bound
    unit: str
    passed: bool


class QuantitativeCheckResult(BaseModel):
    """
    Outcome of every quantitative rule the methodology declares.
    """

    model_config = ConfigDict(strict=True, frozen=True)

    passed: bool
    outcomes: tuple[CriterionOutcome, ...]
    failed_criteria: tuple[str, ...]
    denominator: Literal["total_assets", "market_cap"]
    unevaluated_criteria: tuple[str, ...]

    @property
    def checks(self) -> dict[str, bool]:
        """
        Map each evaluated rule name to whether it passed.

        Returns:
            dict[str, bool]: Rule outcomes in evaluation order.
        """
        return {outcome.name: outcome.passed for outcome in self.outcomes}


class QualitativeCheckResult(BaseModel):
    """
    Outcome of the controversy gates.
    """

    model_config = ConfigDict(strict=True, frozen=True)

    passed: bool
    controversies: StockControversies | None
    has_controversies: bool
    severity_level: str | None
    failure_reasons: tuple[str, ...]


class ScreeningResult(BaseModel):
    """
    Complete verdict for one stock under one methodology.

    Combines the three sub-checks, the percentage of them that passed and
    the recommendations derived from any failures.
    """

    model_config = ConfigDict(strict=True, frozen=True)

    symbol: str
    is_compliant: bool
    sector_check: SectorCheckResult
    quantitative_check: QuantitativeCheckResult
    qualitative_check: QualitativeCheckResult
    screening_type: str
    methodology: str
    methodology_key: str
    methodology_type: ScreeningType
    compliance_score: int = Field(ge=0, le=100)
    recommendations: tuple[str, ...]
