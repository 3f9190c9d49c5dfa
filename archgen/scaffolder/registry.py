"""Architecture template registry.

Holds the immutable catalog mapping each supported architecture name to its
``ArchitectureTemplate``.  The catalog is built once at import time from the
layout definitions in :mod:`archgen.scaffolder.layouts` and exposed read-only
through :func:`lookup`.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from .errors import UnknownArchitecture
from .layouts import LAYOUTS
from .models import ArchitectureTemplate


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


SUPPORTED_ARCHITECTURES: tuple[str, ...] = (
    "flat",
    "ddd",
    "clean",
    "feature",
    "hexagonal",
    "modular",
    "monorepo",
    "cqrs",
    "onion",
    "common",
    "layered",
)


def _build_registry() -> Mapping[str, ArchitectureTemplate]:
    catalog = {
        name: ArchitectureTemplate(name=name, **LAYOUTS[name])
        for name in SUPPORTED_ARCHITECTURES
    }
    return MappingProxyType(catalog)


_REGISTRY: Mapping[str, ArchitectureTemplate] = _build_registry()


def supported_architectures() -> tuple[str, ...]:
    """Return the supported architecture names in display order."""
    return SUPPORTED_ARCHITECTURES


def is_supported(name: object) -> bool:
    return isinstance(name, str) and name in _REGISTRY


def lookup(name: object) -> ArchitectureTemplate:
    """Return the template registered under *name*.

    Raises:
        UnknownArchitecture: If *name* is not one of the supported names.
            Matching is exact and case-sensitive.
    """
    if not is_supported(name):
        raise UnknownArchitecture(name, SUPPORTED_ARCHITECTURES)
    return _REGISTRY[name]  # type: ignore[index]
