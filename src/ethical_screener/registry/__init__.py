# registry/__init__.py

from .index import list_screening_types, methodologies_for
from .registry import (
    MethodologyRegistry,
    build_registry,
    default_registry,
    validate_methodology,
)

__all__ = [
    # index
    "list_screening_types",
    "methodologies_for",
    # registry
    "MethodologyRegistry",
    "build_registry",
    "default_registry",
    "validate_methodology",
]
