# schemas/stock.py

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict

Severity = Literal["low", "medium", "high", "severe"]


class StockFinancials(BaseModel):
    """
    Sparse financial metrics supplied for a single stock.

    Ratios (cash, debt, receivables, impermissible income) are fractions of
    the relevant denominator, e.g. 0.25 for 25%. Scores and intensities are
    expressed on the scale used by the methodology that consumes them.
    Every field is optional; absence is resolved by the screening rules.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    cash_ratio: Decimal | None = None
    debt_ratio: Decimal | None = None
    receivables_ratio: Decimal | None = None
    impermissible_income: Decimal | None = None
    esg_score: Decimal | None = None
    esg_risk: Decimal | None = None
    carbon_intensity: Decimal | None = None
    board_diversity: Decimal | None = None
    governance_score: Decimal | None = None
    total_assets: Decimal | None = None
    market_cap: Decimal | None = None


class StockControversies(BaseModel):
    """
    The worst known reputational or ethical incident level for a stock.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    severity: Severity | None = None
    categories: tuple[str, ...] = ()
    description: str | None = None


class Stock(BaseModel):
    """
    A security submitted for screening.

    The sector is a literal sector name (e.g. "Software") and is matched
    exactly against the members of each sector classification tag.

    Args:
        symbol (str): The ticker symbol.
        name (str): The company name.
        sector (str): Literal sector name.
        financials (StockFinancials): Financial metrics, possibly empty.
        controversies (StockControversies | None): Known controversies.
        region (str | None): Listing region.
        exchange (str | None): Listing exchange.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    symbol: str
    name: str
    sector: str
    financials: StockFinancials
    controversies: StockControversies | None = None
    region: str | None = None
    exchange: str | None = None
