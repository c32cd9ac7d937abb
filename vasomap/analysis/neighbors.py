"""
Depth-bounded neighbor expansion around a single vessel.
"""

from collections import deque
from dataclasses import dataclass
from typing import List, Tuple
from ..core.store import GraphStore
from ..core.records import Vessel


UPSTREAM = "upstream"
DOWNSTREAM = "downstream"
BOTH = "both"
DIRECTIONS = (UPSTREAM, DOWNSTREAM, BOTH)


@dataclass(frozen=True)
class Neighbor:
    """A vessel reached from the center vessel."""

    vessel: Vessel
    distance: int  # edges from the center vessel
    relationship: str  # "upstream" or "downstream"

    def to_dict(self) -> dict:
        return {
            "id": self.vessel.id,
            "name": self.vessel.name,
            "distance": self.distance,
            "relationship": self.relationship,
        }


@dataclass(frozen=True)
class NeighborhoodResult:
    """Neighbors of one vessel within a depth bound."""

    vessel: Vessel
    depth: int
    direction: str
    neighbors: Tuple[Neighbor, ...]

    def upstream(self) -> List[Neighbor]:
        return [n for n in self.neighbors if n.relationship == UPSTREAM]

    def downstream(self) -> List[Neighbor]:
        return [n for n in self.neighbors if n.relationship == DOWNSTREAM]

    def to_dict(self) -> dict:
        """Convert to the neighbors response shape (JSON-safe)."""
        return {
            "vesselId": self.vessel.id,
            "vesselName": self.vessel.name,
            "depth": self.depth,
            "direction": self.direction,
            "neighbors": [n.to_dict() for n in self.neighbors],
        }


def _expand(store: GraphStore, start_id: int, depth: int, upstream: bool) -> List[Tuple[int, int]]:
    """BFS in one direction; return (vessel_id, distance) in discovery order."""
    step = store.parent_ids if upstream else store.child_ids
    visited = {start_id}
    found = []
    queue = deque([(start_id, 0)])

    while queue:
        vessel_id, distance = queue.popleft()
        if distance >= depth:
            continue
        for next_id in step(vessel_id):
            if next_id in visited:
                continue
            visited.add(next_id)
            found.append((next_id, distance + 1))
            queue.append((next_id, distance + 1))

    return found


def get_neighbors(
    store: GraphStore,
    vessel_id: int,
    depth: int = 1,
    direction: str = BOTH,
    max_depth: int = 5,
) -> NeighborhoodResult:
    """
    Collect upstream and/or downstream vessels within ``depth`` edges.

    Parameters
    ----------
    store : GraphStore
        Snapshot to query
    vessel_id : int
        Center vessel ID
    depth : int
        Maximum number of edges to follow (1..max_depth)
    direction : str
        "upstream", "downstream" or "both"
    max_depth : int
        Largest depth accepted

    Returns
    -------
    result : NeighborhoodResult
        Each neighbor once per relationship at its smallest distance, ordered
        by distance then discovery order (upstream before downstream on ties)

    Raises
    ------
    NotFound
        If the vessel does not exist.
    ValueError
        If depth is out of range or direction is unknown.
    """
    if direction not in DIRECTIONS:
        raise ValueError(f"direction must be one of {DIRECTIONS}, got {direction!r}")
    if isinstance(depth, bool) or not isinstance(depth, int) or not 1 <= depth <= max_depth:
        raise ValueError(f"depth must be an integer in [1, {max_depth}], got {depth!r}")

    center = store.get_vessel(vessel_id)

    found = []
    if direction in (UPSTREAM, BOTH):
        found.extend(
            (dist, 0, order, vid, UPSTREAM)
            for order, (vid, dist) in enumerate(_expand(store, vessel_id, depth, upstream=True))
        )
    if direction in (DOWNSTREAM, BOTH):
        found.extend(
            (dist, 1, order, vid, DOWNSTREAM)
            for order, (vid, dist) in enumerate(_expand(store, vessel_id, depth, upstream=False))
        )
    found.sort()

    neighbors = tuple(
        Neighbor(vessel=store.get_vessel(vid), distance=dist, relationship=rel)
        for dist, _, _, vid, rel in found
    )
    return NeighborhoodResult(vessel=center, depth=depth, direction=direction, neighbors=neighbors)
