"""
Shortest directed path search over the vessel graph.
"""

from collections import deque
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
from ..core.store import GraphStore
from ..core.records import Vessel
from ..core.errors import NotFound, NoPathFound


DEFAULT_MAX_DEPTH = 20


@dataclass
class PathfindingParams:
    """Parameters for breadth-first path search."""

    max_depth: int = DEFAULT_MAX_DEPTH  # edges; longer routes count as no route

    def __post_init__(self):
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            raise ValueError(f"max_depth must be an integer, got {self.max_depth!r}")
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {self.max_depth}")

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"max_depth": self.max_depth}

    @classmethod
    def from_dict(cls, d: dict) -> "PathfindingParams":
        """Create from dictionary."""
        return cls(max_depth=d.get("max_depth", DEFAULT_MAX_DEPTH))


@dataclass(frozen=True)
class OrderedPath:
    """Vessels from source to target inclusive, in traversal order."""

    vessels: Tuple[Vessel, ...]

    @property
    def length(self) -> int:
        """Number of vessels on the path (edges + 1)."""
        return len(self.vessels)

    @property
    def num_edges(self) -> int:
        return len(self.vessels) - 1

    @property
    def vessel_ids(self) -> List[int]:
        return [v.id for v in self.vessels]

    @property
    def names(self) -> List[str]:
        return [v.name for v in self.vessels]

    def to_dict(self) -> dict:
        """Convert to the path response shape (JSON-safe)."""
        return {
            "path": [
                {"id": v.id, "name": v.name, "type": v.type.value}
                for v in self.vessels
            ],
            "pathLength": self.length,
        }


class PathFinder:
    """
    Breadth-first shortest path search over outgoing edges.

    Holds only a reference to the store and its parameters; every call keeps
    its queue and visited set local, so one PathFinder can serve concurrent
    queries.
    """

    def __init__(self, store: GraphStore, params: Optional[PathfindingParams] = None):
        self.store = store
        self.params = params if params is not None else PathfindingParams()

    def find_shortest_path(self, source_id: int, target_id: int) -> OrderedPath:
        """
        Find the path with the fewest edges from source to target.

        Children are expanded in edge insertion order and the frontier is FIFO,
        with vessels marked visited when first enqueued. Among equally short
        paths the first one discovered in that order is returned.

        Parameters
        ----------
        source_id : int
            Starting vessel ID
        target_id : int
            Destination vessel ID

        Returns
        -------
        path : OrderedPath
            Source through target inclusive

        Raises
        ------
        NotFound
            If source or target does not exist (source is checked first).
        NoPathFound
            If target is unreachable within ``params.max_depth`` edges.
        """
        source = self._endpoint(source_id, "Source")
        target = self._endpoint(target_id, "Target")

        if source_id == target_id:
            return OrderedPath(vessels=(source,))

        came_from = self._search(source_id, target_id)
        if came_from is None:
            raise NoPathFound(source.name, target.name)

        path_ids = [target_id]
        while path_ids[-1] != source_id:
            path_ids.append(came_from[path_ids[-1]])
        path_ids.reverse()

        return OrderedPath(vessels=tuple(self.store.get_vessel(vid) for vid in path_ids))

    def _endpoint(self, vessel_id: int, role: str) -> Vessel:
        if not self.store.has_vessel(vessel_id):
            raise NotFound("vessel", vessel_id, f"{role} vessel with id {vessel_id} not found")
        return self.store.get_vessel(vessel_id)

    def distance(self, source_id: int, target_id: int) -> Optional[int]:
        """Edge count of the shortest path, or None when there is none."""
        try:
            return self.find_shortest_path(source_id, target_id).num_edges
        except NoPathFound:
            return None

    def _search(self, source_id: int, target_id: int) -> Optional[Dict[int, int]]:
        """Run BFS; return the predecessor map if target was reached."""
        max_depth = self.params.max_depth
        came_from: Dict[int, int] = {}
        visited = {source_id}
        queue = deque([(source_id, 0)])

        while queue:
            vessel_id, depth = queue.popleft()
            if depth >= max_depth:
                continue

            for child_id in self.store.child_ids(vessel_id):
                if child_id in visited:
                    continue
                visited.add(child_id)
                came_from[child_id] = vessel_id
                if child_id == target_id:
                    return came_from
                queue.append((child_id, depth + 1))

        return None


def find_shortest_path(
    store: GraphStore,
    source_id: int,
    target_id: int,
    params: Optional[PathfindingParams] = None,
) -> OrderedPath:
    """
    Find the shortest directed path between two vessels.

    Convenience wrapper around ``PathFinder(store, params).find_shortest_path``.

    Example
    -------
    >>> from vasomap import load_coronary_dataset, find_shortest_path
    >>> store = load_coronary_dataset()
    >>> find_shortest_path(store, 1, 3).names
    ['Ascending Aorta', 'Left Coronary Artery', 'Left Anterior Descending Artery']
    """
    return PathFinder(store, params).find_shortest_path(source_id, target_id)
