# screening/screener.py

import logging
from collections.abc import Iterable, Mapping

from ethical_screener.errors import InvalidMethodologyConfiguration
from ethical_screener.registry import (
    MethodologyRegistry,
    default_registry,
    list_screening_types,
    validate_methodology,
)
from ethical_screener.schemas import (
    Methodology,
    ScreeningCriteria,
    ScreeningResult,
    ScreeningTypeInfo,
    Stock,
)

from .models import ScreeningSettings, default_settings
from .qualitative import check_qualitative
from .quantitative import check_quantitative
from .scoring import build_recommendations, compliance_score
from .sector import check_sector
from .validation import is_valid_stock

logger = logging.getLogger(__name__)


class EthicalStockScreener:
    """
    Screens stocks against one methodology of one screening type.

    The methodology is resolved once at construction and never changes.
    Screening is a pure computation: neither the stock nor the methodology
    is mutated, so one instance may be shared freely.

    Args:
        screening_type: Screening type, e.g. "islamic" or "esg".
        methodology_key: Methodology key, e.g. "AAOIFI". Falls back to the
            first methodology of the screening type when unavailable.
        registry: Registry to resolve from (defaults to the bundled one).
        settings: Construction defaults (defaults to default_settings()).

    Raises:
        UnknownScreeningType: If the screening type has no methodologies.
        InvalidMethodologyConfiguration: If the resolved methodology is
            structurally incomplete.
    """

    __slots__ = ("_methodology", "_methodology_key", "_registry", "_screening_type")

    def __init__(
        self,
        screening_type: str | None = None,
        methodology_key: str | None = None,
        *,
        registry: MethodologyRegistry | None = None,
        settings: ScreeningSettings | None = None,
    ) -> None:
        active_settings = settings or default_settings()
        if screening_type is None:
            screening_type = active_settings.default_screening_type
        if methodology_key is None:
            methodology_key = active_settings.default_methodology_key

        self._registry = registry or default_registry()
        self._screening_type = str(screening_type)

        key, methodology = self._registry.resolve_entry(
            self._screening_type,
            methodology_key,
            suggestion_limit=active_settings.suggestion_limit,
            suggestion_cutoff=active_settings.suggestion_cutoff,
        )

        if not validate_methodology(methodology):
            raise InvalidMethodologyConfiguration(
                f"Invalid methodology configuration: {key}",
            )

        self._methodology_key = key
        self._methodology = methodology

        logger.info(
            "Screener ready: %s (%s) for screening type %s",
            methodology.name,
            key,
            self._screening_type,
        )

    @property
    def screening_type(self) -> str:
        return self._screening_type

    @property
    def methodology_key(self) -> str:
        return self._methodology_key

    @property
    def methodology(self) -> Methodology:
        return self._methodology

    def screen_stock(self, stock: Stock | Mapping[str, object]) -> ScreeningResult:
        """
        Screen one stock and derive its score and recommendations.

        Missing financial fields never raise; they fall back to the rule
        defaults. A mapping is parsed through the Stock schema first.

        Args:
            stock: The stock record, or a mapping with the same shape.

        Raises:
            pydantic.ValidationError: If a mapping does not parse as a Stock.

        Returns:
            ScreeningResult: The complete verdict for the stock.
        """
        record = stock if isinstance(stock, Stock) else Stock.model_validate(stock)
        methodology = self._methodology

        sector = check_sector(record.sector, methodology, self._registry.sectors)
        quantitative = check_quantitative(record.financials, methodology.criteria)
        qualitative = check_qualitative(record.controversies, methodology.criteria)

        result = ScreeningResult(
            symbol=record.symbol,
            is_compliant=sector.passed and quantitative.passed and qualitative.passed,
            sector_check=sector,
            quantitative_check=quantitative,
            qualitative_check=qualitative,
            screening_type=self._screening_type,
            methodology=methodology.name,
            methodology_key=self._methodology_key,
            methodology_type=methodology.type,
            compliance_score=compliance_score(sector, quantitative, qualitative),
            recommendations=build_recommendations(sector, quantitative, qualitative),
        )

        logger.debug(
            "Screened %s under %s: compliant=%s score=%d",
            record.symbol,
            self._methodology_key,
            result.is_compliant,
            result.compliance_score,
        )

        return result

    def screen_stocks(
        self,
        stocks: Iterable[Stock | Mapping[str, object]],
    ) -> tuple[ScreeningResult, ...]:
        """
        Screen several stocks, preserving input order.

        Returns:
            tuple[ScreeningResult, ...]: One result per stock.
        """
        results = tuple(self.screen_stock(stock) for stock in stocks)

        logger.info(
            "Screened %d stocks under %s: %d compliant",
            len(results),
            self._methodology_key,
            sum(result.is_compliant for result in results),
        )

        return results

    def methodology_info(self) -> dict[str, object]:
        """
        Summarise the descriptive metadata of the bound methodology.

        Returns:
            dict[str, object]: Name, type, description, authority, region
                and last update.
        """
        methodology = self._methodology
        return {
            "name": methodology.name,
            "type": methodology.type,
            "description": methodology.description,
            "authority": methodology.authority,
            "region": methodology.region,
            "last_updated": methodology.last_updated,
        }

    def criteria_info(self) -> ScreeningCriteria:
        return self._methodology.criteria

    def prohibited_sectors(self) -> tuple[str, ...]:
        return self._methodology.prohibited_sectors

    def preferred_sectors(self) -> tuple[str, ...]:
        return self._methodology.preferred_sectors

    @staticmethod
    def available_methodologies(
        screening_type: str | None = None,
        registry: MethodologyRegistry | None = None,
    ) -> Mapping[str, Methodology]:
        """
        List registered methodologies, optionally for one screening type.

        Returns:
            Mapping[str, Methodology]: Methodologies keyed by methodology key.
        """
        active = registry or default_registry()
        if screening_type:
            return active.list_by_type(screening_type)
        return active.all()

    @staticmethod
    def screening_types(
        registry: MethodologyRegistry | None = None,
    ) -> Mapping[str, ScreeningTypeInfo]:
        return (registry or default_registry()).types

    @staticmethod
    def available_screening_types(
        registry: MethodologyRegistry | None = None,
    ) -> tuple[str, ...]:
        return tuple(str(info.key) for info in list_screening_types(registry))

    @staticmethod
    def sector_classifications(
        registry: MethodologyRegistry | None = None,
    ) -> Mapping[str, tuple[str, ...]]:
        return (registry or default_registry()).sectors

    @staticmethod
    def validate_stock(value: object) -> bool:
        """
        Check whether a value has the shape of a Stock.

        Returns:
            bool: True for a well-formed stock, never raises.
        """
        return is_valid_stock(value)
