# registry/index.py

from ethical_screener.schemas import ScreeningTypeInfo

from .registry import MethodologyRegistry, default_registry


def list_screening_types(
    registry: MethodologyRegistry | None = None,
) -> tuple[ScreeningTypeInfo, ...]:
    """
    List every screening type descriptor in declaration order.

    Returns:
        tuple[ScreeningTypeInfo, ...]: Screening type descriptors.
    """
    active = registry or default_registry()
    return tuple(active.types.values())


def methodologies_for(
    screening_type: str,
    registry: MethodologyRegistry | None = None,
) -> tuple[str, ...]:
    """
    List the methodology keys a screening type offers.

    Returns:
        tuple[str, ...]: Methodology keys, empty for an unknown type.
    """
    active = registry or default_registry()
    info = active.types.get(screening_type)
    return info.methodologies if info else ()
