"""
Query entry points used by the request layer.

A VesselNavigator wraps one GraphStore snapshot; a SnapshotHolder publishes
navigators and swaps them atomically when the dataset is reloaded.
"""

import threading
from dataclasses import dataclass, field
from typing import Callable, List, Optional
from ..core.store import GraphStore
from ..core.records import Vessel
from ..analysis.pathfinding import PathFinder, PathfindingParams, OrderedPath
from ..analysis.search import SearchIndex
from ..analysis.regions import RegionNode
from ..analysis.neighbors import NeighborhoodResult, get_neighbors, BOTH
from .views import VesselSummary, VesselDetail, make_summary, make_detail


@dataclass
class NavigatorConfig:
    """Configuration for query behavior."""

    pathfinding: PathfindingParams = field(default_factory=PathfindingParams)
    default_neighbor_depth: int = 1
    max_neighbor_depth: int = 5

    def __post_init__(self):
        if self.max_neighbor_depth < 1:
            raise ValueError(f"max_neighbor_depth must be >= 1, got {self.max_neighbor_depth}")
        if not 1 <= self.default_neighbor_depth <= self.max_neighbor_depth:
            raise ValueError(
                f"default_neighbor_depth must be in [1, {self.max_neighbor_depth}], "
                f"got {self.default_neighbor_depth}"
            )

    def to_dict(self) -> dict:
        """Convert config to dictionary for serialization."""
        return {
            "pathfinding": self.pathfinding.to_dict(),
            "default_neighbor_depth": self.default_neighbor_depth,
            "max_neighbor_depth": self.max_neighbor_depth,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "NavigatorConfig":
        """Create from dictionary."""
        return cls(
            pathfinding=PathfindingParams.from_dict(d.get("pathfinding", {})),
            default_neighbor_depth=d.get("default_neighbor_depth", 1),
            max_neighbor_depth=d.get("max_neighbor_depth", 5),
        )


class VesselNavigator:
    """
    Read-only queries over one GraphStore snapshot.

    Safe to share between threads: the store is immutable and every query
    keeps its traversal state local.
    """

    def __init__(self, store: GraphStore, config: Optional[NavigatorConfig] = None):
        self.store = store
        self.config = config if config is not None else NavigatorConfig()
        self.path_finder = PathFinder(store, self.config.pathfinding)
        self.search_index = SearchIndex(store)

    def find_shortest_path(self, source_id: int, target_id: int) -> OrderedPath:
        """
        Shortest directed path between two vessels.

        Raises
        ------
        NotFound
            If either vessel id does not exist.
        NoPathFound
            If no route exists within the configured depth bound.
        """
        return self.path_finder.find_shortest_path(source_id, target_id)

    def search_vessels(self, query: Optional[str] = None, vessel_type=None) -> List[VesselSummary]:
        """All vessels, or those whose name or alias contains ``query``, by name."""
        return [
            make_summary(self.store, v)
            for v in self.search_index.search(query, vessel_type=vessel_type)
        ]

    def get_vessel_detail(self, vessel_id: int) -> VesselDetail:
        """
        Full vessel information with upstream and downstream neighbors.

        Raises
        ------
        NotFound
            If the vessel does not exist.
        """
        return make_detail(self.store, self.store.get_vessel(vessel_id))

    def get_region_forest(self) -> List[RegionNode]:
        """Root regions with their descendant trees, ordered by name."""
        return self.store.region_forest()

    def get_vessel_neighbors(
        self,
        vessel_id: int,
        depth: Optional[int] = None,
        direction: str = BOTH,
    ) -> NeighborhoodResult:
        """Vessels within ``depth`` edges upstream and/or downstream."""
        if depth is None:
            depth = self.config.default_neighbor_depth
        return get_neighbors(
            self.store,
            vessel_id,
            depth=depth,
            direction=direction,
            max_depth=self.config.max_neighbor_depth,
        )

    def find_vessel_by_name(self, name: str) -> Vessel:
        """Vessel with this exact primary name, ignoring case."""
        return self.store.find_by_name(name)


class SnapshotHolder:
    """
    Single swappable reference to the current navigator.

    Readers call ``current()`` once per request and keep using that navigator;
    ``reload()`` builds the replacement completely before publishing it, so a
    failed load leaves the previous snapshot in place.
    """

    def __init__(self, navigator: VesselNavigator):
        self._navigator = navigator
        self._reload_lock = threading.Lock()
        self.generation = 0

    @classmethod
    def from_store(cls, store: GraphStore, config: Optional[NavigatorConfig] = None) -> "SnapshotHolder":
        return cls(VesselNavigator(store, config))

    def current(self) -> VesselNavigator:
        """Navigator for the most recently published snapshot."""
        return self._navigator

    def reload(
        self,
        loader: Callable[[], GraphStore],
        config: Optional[NavigatorConfig] = None,
    ) -> VesselNavigator:
        """
        Build a new snapshot and publish it.

        Parameters
        ----------
        loader : callable
            Returns a freshly built GraphStore; any exception it raises
            (e.g. DataIntegrityError) propagates and nothing is published
        config : NavigatorConfig, optional
            Configuration for the new navigator; defaults to the current one

        Returns
        -------
        navigator : VesselNavigator
            The newly published navigator
        """
        with self._reload_lock:
            if config is None:
                config = self._navigator.config
            navigator = VesselNavigator(loader(), config)
            self._navigator = navigator
            self.generation += 1
        return navigator
