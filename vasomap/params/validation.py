"""Configuration validation with bounds checking.

This module provides validation for NavigatorConfig to catch settings that
are legal but likely to be mistakes.

Units: depths are counted in edges.
"""

from typing import List, Tuple
from ..api.navigator import NavigatorConfig


PARAM_BOUNDS = {
    "pathfinding.max_depth": (1, 100, "edges"),
    "default_neighbor_depth": (1, 10, "edges"),
    "max_neighbor_depth": (1, 10, "edges"),
}


def _lookup(config: NavigatorConfig, dotted_name: str):
    value = config
    for part in dotted_name.split("."):
        value = getattr(value, part, None)
        if value is None:
            return None
    return value


def validate_config(config: NavigatorConfig) -> Tuple[bool, List[str]]:
    """
    Validate NavigatorConfig against bounds.

    Parameters
    ----------
    config : NavigatorConfig
        Configuration to validate

    Returns
    -------
    is_valid : bool
        True if all values are within bounds
    warnings : list of str
        List of validation warnings
    """
    warnings = []

    for param_name, (min_val, max_val, unit) in PARAM_BOUNDS.items():
        value = _lookup(config, param_name)

        if value is None:
            continue

        if value < min_val:
            warnings.append(
                f"{param_name} = {value} {unit} is below minimum {min_val} {unit}"
            )
        elif value > max_val:
            warnings.append(
                f"{param_name} = {value} {unit} exceeds maximum {max_val} {unit}"
            )

    if config.pathfinding.max_depth < 5:
        warnings.append(
            f"pathfinding.max_depth ({config.pathfinding.max_depth}) is very small, "
            "most multi-branch routes will be reported as missing"
        )

    if config.max_neighbor_depth > config.pathfinding.max_depth:
        warnings.append(
            f"max_neighbor_depth ({config.max_neighbor_depth}) exceeds "
            f"pathfinding.max_depth ({config.pathfinding.max_depth})"
        )

    is_valid = len(warnings) == 0
    return is_valid, warnings


def validate_and_warn(config: NavigatorConfig) -> NavigatorConfig:
    """
    Validate configuration and print warnings.

    Parameters
    ----------
    config : NavigatorConfig
        Configuration to validate

    Returns
    -------
    config : NavigatorConfig
        Same configuration (for chaining)
    """
    is_valid, warnings = validate_config(config)

    if not is_valid:
        print(f"Configuration validation warnings ({len(warnings)}):")
        for warning in warnings:
            print(f"  - {warning}")

    return config
