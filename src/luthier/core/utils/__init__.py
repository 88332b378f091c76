"""Shared utility helpers used across the registry core."""

from .config import (
    RuntimeConfig,
    get_config,
    configure,
)
from .serialization import (
    serialize_to_json,
    deserialize_from_json,
    read_json_file,
)
from .logging import (
    get_logger,
    configure_logging,
)
from .param_validation import (
    ensure,
    ensure_type,
    ensure_mapping,
    ensure_name,
    ParamValidationError,
)

__all__ = [
    "RuntimeConfig",
    "get_config",
    "configure",
    "serialize_to_json",
    "deserialize_from_json",
    "read_json_file",
    "get_logger",
    "configure_logging",
    "ensure",
    "ensure_type",
    "ensure_mapping",
    "ensure_name",
    "ParamValidationError",
]
