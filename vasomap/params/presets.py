"""Configuration presets for vessel graph queries.

This module provides named NavigatorConfig presets for common deployments.

Units: depths are counted in edges.
"""

from ..analysis.pathfinding import PathfindingParams
from ..api.navigator import NavigatorConfig


def default() -> NavigatorConfig:
    """
    Reference configuration.

    Characteristics:
    - 20-edge path search bound
    - Detail views expand one level of neighbors
    """
    return NavigatorConfig(
        pathfinding=PathfindingParams(max_depth=20),
        default_neighbor_depth=1,
        max_neighbor_depth=5,
    )


def strict() -> NavigatorConfig:
    """
    Tight bounds for shared or latency-sensitive deployments.

    Characteristics:
    - Short path search bound caps worst-case work per query
    - Shallow neighbor expansion
    """
    return NavigatorConfig(
        pathfinding=PathfindingParams(max_depth=10),
        default_neighbor_depth=1,
        max_neighbor_depth=3,
    )


def exploratory() -> NavigatorConfig:
    """
    Loose bounds for large datasets explored offline.

    Characteristics:
    - Long path search bound for deep branching trees
    - Two-level neighbor expansion by default
    """
    return NavigatorConfig(
        pathfinding=PathfindingParams(max_depth=50),
        default_neighbor_depth=2,
        max_neighbor_depth=10,
    )


PRESETS = {
    "default": default,
    "strict": strict,
    "exploratory": exploratory,
}


def get_preset(name: str) -> NavigatorConfig:
    """
    Get a configuration preset by name.

    Parameters
    ----------
    name : str
        Preset name (see list_presets())

    Returns
    -------
    config : NavigatorConfig
        Fresh config instance

    Raises
    ------
    ValueError
        If preset name is not recognized
    """
    if name not in PRESETS:
        available = ", ".join(PRESETS.keys())
        raise ValueError(f"Unknown preset '{name}'. Available: {available}")

    return PRESETS[name]()


def list_presets() -> list:
    """
    List available preset names.

    Returns
    -------
    names : list of str
        Available preset names
    """
    return list(PRESETS.keys())
