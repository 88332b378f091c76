"""Entry point for the registry core: concepts, factories, parks and dictionaries."""

from __future__ import annotations

from .utils import (
    ParamValidationError,
    RuntimeConfig,
    configure,
    configure_logging,
    get_config,
    get_logger,
)
from .concepts import ConceptType, concepts_snapshot, normalize_concept
from .exceptions import (
    BuilderError,
    ConfigSourceError,
    CyclicDependencyError,
    EntityNotFoundError,
    EntityTypeError,
    IncompleteRegistrationError,
    LuthierError,
    RegistrationError,
    UnregisteredDiscriminatorError,
    UnsupportedConceptError,
)
from .factory import Factory, FunctionFactory, UnsupportedFactory
from .resources import (
    ConfigSource,
    DirectoryConfigSource,
    MappingConfigSource,
    ResourceNodeSupplier,
    config_source_from,
)
from .dictionaries import ResourceDictionaries
from .factory_park import FactoryPark
from .loader import ConfigurationLoader
from .industrial_park import IndustrialPark, IndustrialParkBuilder

__all__: list[str] = [
    # Utils
    "ParamValidationError",
    "RuntimeConfig",
    "configure",
    "configure_logging",
    "get_config",
    "get_logger",
    # Concepts
    "ConceptType",
    "concepts_snapshot",
    "normalize_concept",
    # Errors
    "BuilderError",
    "ConfigSourceError",
    "CyclicDependencyError",
    "EntityNotFoundError",
    "EntityTypeError",
    "IncompleteRegistrationError",
    "LuthierError",
    "RegistrationError",
    "UnregisteredDiscriminatorError",
    "UnsupportedConceptError",
    # Factories and sources
    "Factory",
    "FunctionFactory",
    "UnsupportedFactory",
    "ConfigSource",
    "DirectoryConfigSource",
    "MappingConfigSource",
    "ResourceNodeSupplier",
    "config_source_from",
    # Park
    "ResourceDictionaries",
    "FactoryPark",
    "ConfigurationLoader",
    "IndustrialPark",
    "IndustrialParkBuilder",
]
