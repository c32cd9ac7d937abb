"""Configuration presets and validation for vessel graph queries."""

from .presets import (
    default,
    strict,
    exploratory,
    get_preset,
    list_presets,
    PRESETS,
)

from .validation import (
    validate_config,
    validate_and_warn,
    PARAM_BOUNDS,
)

__all__ = [
    # Presets
    "default",
    "strict",
    "exploratory",
    "get_preset",
    "list_presets",
    "PRESETS",
    # Validation
    "validate_config",
    "validate_and_warn",
    "PARAM_BOUNDS",
]
