"""
luthier: lazy, memoised registry of configuration entities.

Entities (dimensions, search providers, key-value stores, metric makers and
physical tables) are declared in configuration sections, built on first request
by pluggable factories, and cached so that each name resolves to one instance.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .core import (
    ConceptType,
    Factory,
    FunctionFactory,
    IndustrialPark,
    IndustrialParkBuilder,
    LuthierError,
    ResourceDictionaries,
    configure,
    configure_logging,
    get_config,
)

__all__: list[str] = [
    "__version__",
    "ConceptType",
    "Factory",
    "FunctionFactory",
    "IndustrialPark",
    "IndustrialParkBuilder",
    "LuthierError",
    "ResourceDictionaries",
    "configure",
    "configure_logging",
    "get_config",
]
