"""Query algorithms over a vessel graph snapshot."""

from .pathfinding import PathFinder, PathfindingParams, OrderedPath, find_shortest_path
from .search import SearchIndex, search_vessels
from .regions import RegionNode, build_region_forest, find_region_cycle, count_regions
from .neighbors import Neighbor, NeighborhoodResult, get_neighbors
from .structure import (
    get_root_vessels,
    get_leaf_vessels,
    compute_degree_histogram,
    measure_diameters,
    summarize_network,
)

__all__ = [
    "PathFinder",
    "PathfindingParams",
    "OrderedPath",
    "find_shortest_path",
    "SearchIndex",
    "search_vessels",
    "RegionNode",
    "build_region_forest",
    "find_region_cycle",
    "count_regions",
    "Neighbor",
    "NeighborhoodResult",
    "get_neighbors",
    "get_root_vessels",
    "get_leaf_vessels",
    "compute_degree_histogram",
    "measure_diameters",
    "summarize_network",
]
