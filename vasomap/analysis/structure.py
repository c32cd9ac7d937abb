"""Structural summaries of a vessel graph snapshot."""

from typing import Dict, List, Optional
import numpy as np
from ..core.store import GraphStore
from ..core.types import VesselType, parse_enum


def get_root_vessels(store: GraphStore) -> List[int]:
    """
    Get vessels with no incoming edges.

    Parameters
    ----------
    store : GraphStore
        Snapshot to query

    Returns
    -------
    vessel_ids : List[int]
        Root vessel IDs, ascending
    """
    return [v.id for v in store.all_vessels() if not store.parent_ids(v.id)]


def get_leaf_vessels(
    store: GraphStore,
    vessel_type: Optional[VesselType] = None,
) -> List[int]:
    """
    Get vessels with no outgoing edges (terminal branches).

    Parameters
    ----------
    store : GraphStore
        Snapshot to query
    vessel_type : VesselType or str, optional
        Filter by vessel type

    Returns
    -------
    vessel_ids : List[int]
        Leaf vessel IDs, ascending
    """
    if vessel_type is not None:
        vessel_type = parse_enum(VesselType, vessel_type)

    leaves = []
    for vessel in store.all_vessels():
        if store.child_ids(vessel.id):
            continue
        if vessel_type is None or vessel.type is vessel_type:
            leaves.append(vessel.id)
    return leaves


def compute_degree_histogram(store: GraphStore) -> Dict[int, int]:
    """Histogram of out-degree (number of branches) per vessel."""
    histogram: Dict[int, int] = {}
    for vessel in store.all_vessels():
        degree = len(store.child_ids(vessel.id))
        histogram[degree] = histogram.get(degree, 0) + 1
    return dict(sorted(histogram.items()))


def measure_diameters(
    store: GraphStore,
    vessel_type: Optional[VesselType] = None,
) -> Dict[str, float]:
    """
    Vessel diameter statistics.

    Each vessel contributes the midpoint of its known diameter bounds; vessels
    with no diameter data are skipped.

    Parameters
    ----------
    store : GraphStore
        Snapshot to query
    vessel_type : VesselType or str, optional
        Filter by vessel type

    Returns
    -------
    stats : dict
        Dictionary with keys: mean, std, min, max, count (millimeters)
    """
    if vessel_type is not None:
        vessel_type = parse_enum(VesselType, vessel_type)

    diameters = []
    for vessel in store.all_vessels():
        if vessel_type is not None and vessel.type is not vessel_type:
            continue
        midpoint = vessel.diameter.midpoint()
        if midpoint is not None:
            diameters.append(midpoint)

    if not diameters:
        return {
            "mean": 0.0,
            "std": 0.0,
            "min": 0.0,
            "max": 0.0,
            "count": 0,
        }

    diameters_arr = np.array(diameters)

    return {
        "mean": float(np.mean(diameters_arr)),
        "std": float(np.std(diameters_arr)),
        "min": float(np.min(diameters_arr)),
        "max": float(np.max(diameters_arr)),
        "count": len(diameters),
    }


def summarize_network(store: GraphStore) -> Dict:
    """
    Compute a JSON-safe overview of a snapshot.

    Returns
    -------
    summary : dict
        Counts, roots, leaves, degree histogram, per-type counts and diameter stats
    """
    type_counts = {t.value: 0 for t in VesselType}
    for vessel in store.all_vessels():
        type_counts[vessel.type.value] += 1

    return {
        "num_vessels": store.num_vessels,
        "num_edges": store.num_edges,
        "num_regions": store.num_regions,
        "root_vessel_ids": get_root_vessels(store),
        "leaf_vessel_ids": get_leaf_vessels(store),
        "degree_histogram": compute_degree_histogram(store),
        "vessel_type_counts": type_counts,
        "diameter_mm": measure_diameters(store),
    }
