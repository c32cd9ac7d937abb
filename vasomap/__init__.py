"""
VasoMap - In-Memory Query Library for Anatomical Vessel Graphs

Loads a dataset of named blood vessels, their branch connections, aliases,
notes and anatomical regions into an immutable snapshot, and answers the
read-only queries an educational vessel browser needs.

Key Features:
- Shortest directed path between two vessels (breadth-first, depth-bounded)
- Case-insensitive name and alias search
- Region forest with cycle detection
- Upstream/downstream neighbor expansion
- Atomic snapshot reload for concurrent readers
- Full serializability (JSON/dict)

Example Usage:
    from vasomap import load_coronary_dataset, VesselNavigator

    navigator = VesselNavigator(load_coronary_dataset())

    path = navigator.find_shortest_path(1, 4)
    print(" -> ".join(path.names))

    for summary in navigator.search_vessels("lad"):
        print(summary.name, summary.aliases)
"""

__version__ = "1.0.0"

from .core.types import VesselType, Oxygenation, FlowDirection, DiameterRange
from .core.records import Vessel, VesselEdge, Alias, Region, Note
from .core.store import GraphStore
from .core.errors import ErrorCode, VasoMapError, NotFound, NoPathFound, DataIntegrityError

from .analysis.pathfinding import PathFinder, PathfindingParams, OrderedPath, find_shortest_path
from .analysis.search import SearchIndex, search_vessels
from .analysis.regions import RegionNode, build_region_forest
from .analysis.neighbors import get_neighbors
from .analysis.structure import summarize_network, measure_diameters

from .api.navigator import VesselNavigator, NavigatorConfig, SnapshotHolder

from .io.serialize import save_json, load_json, load_coronary_dataset

__all__ = [
    "VesselType",
    "Oxygenation",
    "FlowDirection",
    "DiameterRange",
    "Vessel",
    "VesselEdge",
    "Alias",
    "Region",
    "Note",
    "GraphStore",
    "ErrorCode",
    "VasoMapError",
    "NotFound",
    "NoPathFound",
    "DataIntegrityError",
    "PathFinder",
    "PathfindingParams",
    "OrderedPath",
    "find_shortest_path",
    "SearchIndex",
    "search_vessels",
    "RegionNode",
    "build_region_forest",
    "get_neighbors",
    "summarize_network",
    "measure_diameters",
    "VesselNavigator",
    "NavigatorConfig",
    "SnapshotHolder",
    "save_json",
    "load_json",
    "load_coronary_dataset",
]
