# registry/registry.py

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from pydantic import ValidationError

from ethical_screener.errors import (
    InvalidMethodologyConfiguration,
    UnknownScreeningType,
)
from ethical_screener.schemas import Methodology, ScreeningTypeInfo

from ._methodologies import METHODOLOGIES
from ._screening_types import SCREENING_TYPES
from ._sectors import SECTOR_CLASSIFICATIONS
from ._suggest import suggest_keys

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MethodologyRegistry:
    """
    Immutable lookup of methodologies, sector classifications and screening
    types.

    Built once from static configuration and shared by reference between
    screeners. All mappings are read-only views and preserve declaration
    order, which defines the fallback order during resolution.
    """

    methodologies: Mapping[str, Methodology]
    sectors: Mapping[str, tuple[str, ...]]
    types: Mapping[str, ScreeningTypeInfo]

    def get(self, methodology_key: str) -> Methodology | None:
        """
        Look up a methodology by its exact key.

        Returns:
            Methodology | None: The methodology, or None if unregistered.
        """
        return self.methodologies.get(methodology_key)

    def all(self) -> Mapping[str, Methodology]:
        """
        Return every registered methodology keyed by methodology key.

        Returns:
            Mapping[str, Methodology]: Read-only view in declaration order.
        """
        return self.methodologies

    def list_by_type(self, screening_type: str) -> dict[str, Methodology]:
        """
        Collect the methodologies belonging to a screening type.

        Returns:
            dict[str, Methodology]: Matching methodologies in declaration
                order, empty for an unknown type.
        """
        return {
            key: methodology
            for key, methodology in self.methodologies.items()
            if methodology.type == screening_type
        }

    def sector_members(self, tag: str) -> tuple[str, ...]:
        """
        Return the literal sector names classified under a sector tag.

        Returns:
            tuple[str, ...]: Member sector names, empty for an unknown tag.
        """
        return self.sectors.get(tag, ())

    def resolve(self, screening_type: str, methodology_key: str) -> Methodology:
        """
        Resolve the methodology a screener should apply.

        Returns:
            Methodology: The requested methodology, or the first methodology
                of the screening type when the key is unavailable for it.
        """
        _, methodology = self.resolve_entry(screening_type, methodology_key)
        return methodology

    def resolve_entry(
        self,
        screening_type: str,
        methodology_key: str,
        *,
        suggestion_limit: int = 3,
        suggestion_cutoff: int = 60,
    ) -> tuple[str, Methodology]:
        """
        Resolve a methodology together with the key it is registered under.

        The exact key wins when its type matches the screening type.
        Otherwise the first methodology registered for the type (in
        declaration order) is used as a fallback.

        Args:
            screening_type: Requested screening type, e.g. "islamic".
            methodology_key: Requested methodology key, e.g. "AAOIFI".
            suggestion_limit: Maximum number of close matches to report.
            suggestion_cutoff: Minimum similarity score for a close match.

        Raises:
            UnknownScreeningType: If no methodology is registered for the type.

        Returns:
            tuple[str, Methodology]: The resolved key and methodology.
        """
        methodology = self.methodologies.get(methodology_key)

        if methodology is not None and methodology.type == screening_type:
            return methodology_key, methodology

        candidates = self.list_by_type(screening_type)

        if not candidates:
            raise UnknownScreeningType(
                screening_type,
                suggest_keys(
                    screening_type,
                    self.types,
                    limit=suggestion_limit,
                    score_cutoff=suggestion_cutoff,
                ),
            )

        fallback_key = next(iter(candidates))

        logger.warning(
            "Methodology %s is not available for screening type %s, "
            "falling back to %s (close matches: %s)",
            methodology_key,
            screening_type,
            fallback_key,
            ", ".join(
                suggest_keys(
                    methodology_key,
                    candidates,
                    limit=suggestion_limit,
                    score_cutoff=suggestion_cutoff,
                )
            )
            or "none",
        )

        return fallback_key, candidates[fallback_key]


def validate_methodology(methodology: Methodology) -> bool:
    """
    Check that a methodology carries the fields the screener relies on.

    Guards against records assembled without validation (for example via
    `Methodology.model_construct`) as well as empty names or types.

    Returns:
        bool: True when name, type, criteria and prohibited_sectors are set.
    """
    return bool(
        getattr(methodology, "name", None)
        and getattr(methodology, "type", None)
        and getattr(methodology, "criteria", None) is not None
        and getattr(methodology, "prohibited_sectors", None) is not None
    )


def build_registry(
    methodologies: Mapping[str, Methodology | Mapping[str, object]],
    sectors: Mapping[str, Iterable[str]],
    screening_types: Mapping[str, ScreeningTypeInfo | Mapping[str, object]],
) -> MethodologyRegistry:
    """
    Validate raw configuration tables and freeze them into a registry.

    Args:
        methodologies: Methodology key to methodology record.
        sectors: Sector tag to literal member sector names.
        screening_types: Screening type key to type descriptor.

    Raises:
        InvalidMethodologyConfiguration: If a record fails validation or a
            screening type lists a methodology registered under another type.

    Returns:
        MethodologyRegistry: The immutable registry.
    """
    validated = {
        key: _validate_methodology_record(key, record)
        for key, record in methodologies.items()
    }

    types = {
        key: _validate_type_record(key, record)
        for key, record in screening_types.items()
    }

    for info in types.values():
        _check_type_index(info, validated)

    registry = MethodologyRegistry(
        methodologies=MappingProxyType(validated),
        sectors=MappingProxyType(
            {tag: tuple(members) for tag, members in sectors.items()},
        ),
        types=MappingProxyType(types),
    )

    logger.debug(
        "Built methodology registry: %d methodologies, %d sector tags, "
        "%d screening types",
        len(registry.methodologies),
        len(registry.sectors),
        len(registry.types),
    )

    return registry


def default_registry() -> MethodologyRegistry:
    """
    Return the registry built from the bundled static configuration.

    Returns:
        MethodologyRegistry: The shared default registry.
    """
    return _DEFAULT_REGISTRY


def _validate_methodology_record(
    key: str,
    record: Methodology | Mapping[str, object],
) -> Methodology:
    """
    Parse one methodology record and check its structural completeness.

    Raises:
        InvalidMethodologyConfiguration: If the record is malformed.

    Returns:
        Methodology: The validated methodology.
    """
    try:
        methodology = Methodology.model_validate(record)
    except ValidationError as error:
        raise InvalidMethodologyConfiguration(
            f"Invalid methodology configuration: {key}",
        ) from error

    if not validate_methodology(methodology):
        raise InvalidMethodologyConfiguration(
            f"Invalid methodology configuration: {key}",
        )

    return methodology


def _validate_type_record(
    key: str,
    record: ScreeningTypeInfo | Mapping[str, object],
) -> ScreeningTypeInfo:
    """
    Parse one screening type descriptor, injecting its key.

    Raises:
        InvalidMethodologyConfiguration: If the descriptor is malformed.

    Returns:
        ScreeningTypeInfo: The validated descriptor.
    """
    if isinstance(record, ScreeningTypeInfo):
        return record

    try:
        return ScreeningTypeInfo.model_validate({"key": key, **record})
    except ValidationError as error:
        raise InvalidMethodologyConfiguration(
            f"Invalid screening type configuration: {key}",
        ) from error


def _check_type_index(
    info: ScreeningTypeInfo,
    methodologies: Mapping[str, Methodology],
) -> None:
    """
    Ensure no screening type lists a methodology registered under another type.

    Listed keys without a record are allowed; resolving one falls back to the
    first methodology of the type.

    Raises:
        InvalidMethodologyConfiguration: On a key registered with another type.
    """
    for key in info.methodologies:
        methodology = methodologies.get(key)
        if methodology is not None and methodology.type != info.key:
            raise InvalidMethodologyConfiguration(
                f"Screening type {info.key} lists methodology of type "
                f"{methodology.type}: {key}",
            )


_DEFAULT_REGISTRY = build_registry(
    METHODOLOGIES,
    SECTOR_CLASSIFICATIONS,
    SCREENING_TYPES,
)
