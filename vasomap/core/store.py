"""
GraphStore: one immutable snapshot of the vessel graph and its indices.
"""

import warnings
from typing import Dict, Iterable, List, Optional, Set, Tuple, Any
from .records import Vessel, VesselEdge, Alias, Region, Note
from .types import VesselType, parse_enum
from .errors import NotFound, DataIntegrityError, ErrorCode


class GraphStore:
    """
    Vessels, branch edges, aliases, notes and regions for one dataset.

    All records are kept in flat id-keyed collections and every relationship is
    an id reference. Construction is the only mutating phase: a changed dataset
    is loaded into a new GraphStore instead of editing this one, so a store can
    be shared across threads without locking.
    """

    def __init__(
        self,
        vessels: Iterable[Vessel],
        edges: Iterable[VesselEdge] = (),
        aliases: Iterable[Alias] = (),
        regions: Iterable[Region] = (),
        notes: Iterable[Note] = (),
        metadata: Optional[Dict[str, Any]] = None,
    ):
        """
        Build a snapshot and all of its indices.

        Parameters
        ----------
        vessels : iterable of Vessel
            Graph nodes; ids and names must be unique
        edges : iterable of VesselEdge
            Directed parent -> child connections, in insertion order
        aliases : iterable of Alias
            Alternative names for search
        regions : iterable of Region
            Anatomical region forest
        notes : iterable of Note
            Educational notes per vessel
        metadata : dict, optional
            Free-form dataset metadata (name, source, version)

        Raises
        ------
        DataIntegrityError
            On duplicate ids or names, duplicate edges, references to unknown
            vessels, invalid diameter ranges, or a cycle in the region forest.
        """
        self.metadata = dict(metadata or {})

        self._vessels: Dict[int, Vessel] = {}
        self._ids_by_name: Dict[str, int] = {}
        for vessel in vessels:
            self._add_vessel(vessel)

        from ..analysis.regions import build_region_forest
        regions = list(regions)
        # Rejects duplicate region ids and parent cycles.
        self._region_forest = tuple(build_region_forest(regions, stacklevel=3))
        self._regions: Dict[int, Region] = {r.id: r for r in regions}

        self._edges: List[VesselEdge] = []
        self._outgoing: Dict[int, List[VesselEdge]] = {vid: [] for vid in self._vessels}
        self._incoming: Dict[int, List[VesselEdge]] = {vid: [] for vid in self._vessels}
        seen_pairs: Set[Tuple[int, int]] = set()
        for edge in edges:
            self._require_vessel_reference(edge.parent_id, "edge parent")
            self._require_vessel_reference(edge.child_id, "edge child")
            pair = (edge.parent_id, edge.child_id)
            if pair in seen_pairs:
                raise DataIntegrityError(
                    f"Duplicate edge {edge.parent_id} -> {edge.child_id}",
                    ErrorCode.DUPLICATE_EDGE,
                )
            seen_pairs.add(pair)
            self._edges.append(edge)
            self._outgoing[edge.parent_id].append(edge)
            self._incoming[edge.child_id].append(edge)

        self._aliases: Dict[int, List[str]] = {vid: [] for vid in self._vessels}
        for alias in aliases:
            self._require_vessel_reference(alias.vessel_id, "alias")
            if alias.alias not in self._aliases[alias.vessel_id]:
                self._aliases[alias.vessel_id].append(alias.alias)

        self._notes: Dict[int, List[Note]] = {vid: [] for vid in self._vessels}
        for note in notes:
            self._require_vessel_reference(note.vessel_id, "note")
            self._notes[note.vessel_id].append(note)

        self._name_index = self._build_name_index()

        for vessel in self._vessels.values():
            if vessel.region_id is not None and vessel.region_id not in self._regions:
                warnings.warn(
                    f"Vessel {vessel.id} ('{vessel.name}') references unknown region "
                    f"{vessel.region_id}; treating it as having no region",
                    UserWarning,
                    stacklevel=2,
                )

    def _add_vessel(self, vessel: Vessel) -> None:
        if vessel.id in self._vessels:
            raise DataIntegrityError(
                f"Duplicate vessel id {vessel.id}", ErrorCode.DUPLICATE_VESSEL_ID
            )
        if vessel.name in self._ids_by_name:
            raise DataIntegrityError(
                f"Duplicate vessel name '{vessel.name}' "
                f"(ids {self._ids_by_name[vessel.name]} and {vessel.id})",
                ErrorCode.DUPLICATE_VESSEL_NAME,
            )
        if not vessel.diameter.is_valid():
            raise DataIntegrityError(
                f"Vessel {vessel.id} has diameter_min_mm {vessel.diameter.min_mm} "
                f"greater than diameter_max_mm {vessel.diameter.max_mm}",
                ErrorCode.INVALID_DIAMETER_RANGE,
            )
        self._vessels[vessel.id] = vessel
        self._ids_by_name[vessel.name] = vessel.id

    def _require_vessel_reference(self, vessel_id: int, what: str) -> None:
        if vessel_id not in self._vessels:
            raise DataIntegrityError(
                f"{what.capitalize()} references unknown vessel {vessel_id}",
                ErrorCode.UNKNOWN_VESSEL_REFERENCE,
            )

    def _build_name_index(self) -> Dict[str, Tuple[int, ...]]:
        """Map every case-folded name and alias to the ids that own it."""
        owners: Dict[str, Set[int]] = {}
        for vessel_id, vessel in self._vessels.items():
            owners.setdefault(vessel.name.casefold(), set()).add(vessel_id)
            for alias in self._aliases[vessel_id]:
                owners.setdefault(alias.casefold(), set()).add(vessel_id)
        return {key: tuple(sorted(ids)) for key, ids in owners.items()}

    @property
    def num_vessels(self) -> int:
        return len(self._vessels)

    @property
    def num_edges(self) -> int:
        return len(self._edges)

    @property
    def num_regions(self) -> int:
        return len(self._regions)

    def has_vessel(self, vessel_id: int) -> bool:
        """Check whether a vessel id exists in this snapshot."""
        return vessel_id in self._vessels

    def get_vessel(self, vessel_id: int) -> Vessel:
        """
        Get vessel by ID.

        Raises
        ------
        NotFound
            If no vessel has this id.
        """
        try:
            return self._vessels[vessel_id]
        except KeyError:
            raise NotFound("vessel", vessel_id) from None

    def outgoing_edges(self, vessel_id: int) -> List[VesselEdge]:
        """Edges leaving a vessel, in insertion order."""
        self.get_vessel(vessel_id)
        return list(self._outgoing[vessel_id])

    def incoming_edges(self, vessel_id: int) -> List[VesselEdge]:
        """Edges entering a vessel, in insertion order."""
        self.get_vessel(vessel_id)
        return list(self._incoming[vessel_id])

    def outgoing_neighbors(self, vessel_id: int) -> List[Tuple[int, Optional[str]]]:
        """Downstream (child_id, label) pairs, in edge insertion order."""
        return [(e.child_id, e.label) for e in self.outgoing_edges(vessel_id)]

    def incoming_neighbors(self, vessel_id: int) -> List[Tuple[int, Optional[str]]]:
        """Upstream (parent_id, label) pairs, in edge insertion order."""
        return [(e.parent_id, e.label) for e in self.incoming_edges(vessel_id)]

    def child_ids(self, vessel_id: int) -> Tuple[int, ...]:
        """Downstream vessel ids without the existence check; unknown ids have none."""
        return tuple(e.child_id for e in self._outgoing.get(vessel_id, ()))

    def parent_ids(self, vessel_id: int) -> Tuple[int, ...]:
        """Upstream vessel ids without the existence check; unknown ids have none."""
        return tuple(e.parent_id for e in self._incoming.get(vessel_id, ()))

    def all_vessels(self) -> List[Vessel]:
        """All vessels ordered by id ascending."""
        return [self._vessels[vid] for vid in sorted(self._vessels)]

    def all_edges(self) -> List[VesselEdge]:
        """All edges in insertion order."""
        return list(self._edges)

    def aliases_for(self, vessel_id: int) -> List[str]:
        """Aliases of a vessel, in load order."""
        self.get_vessel(vessel_id)
        return list(self._aliases[vessel_id])

    def notes_for(self, vessel_id: int) -> List[Note]:
        """Notes attached to a vessel, in load order."""
        self.get_vessel(vessel_id)
        return list(self._notes[vessel_id])

    def get_region(self, region_id: int) -> Region:
        """
        Get region by ID.

        Raises
        ------
        NotFound
            If no region has this id.
        """
        try:
            return self._regions[region_id]
        except KeyError:
            raise NotFound("region", region_id) from None

    def all_regions(self) -> List[Region]:
        """All regions ordered by id ascending."""
        return [self._regions[rid] for rid in sorted(self._regions)]

    def region_for_vessel(self, vessel_id: int) -> Optional[Region]:
        """Resolved region of a vessel, or None when absent or dangling."""
        vessel = self.get_vessel(vessel_id)
        if vessel.region_id is None:
            return None
        return self._regions.get(vessel.region_id)

    def region_forest(self) -> list:
        """Root RegionNodes assembled at load time, ordered by name."""
        return list(self._region_forest)

    def find_by_name(self, name: str) -> Vessel:
        """
        Find a vessel by exact primary name, ignoring case.

        Raises
        ------
        NotFound
            If no vessel has this name.
        """
        folded = name.casefold()
        for vessel_id in self._name_index.get(folded, ()):
            vessel = self._vessels[vessel_id]
            if vessel.name.casefold() == folded:
                return vessel
        raise NotFound("vessel", name, f"Vessel with name '{name}' not found")

    def vessels_by_type(self, vessel_type) -> List[Vessel]:
        """Vessels of one type, ordered by id ascending."""
        vessel_type = parse_enum(VesselType, vessel_type)
        return [v for v in self.all_vessels() if v.type is vessel_type]

    def index_matches(self, query: str) -> Set[int]:
        """
        Ids of vessels whose name or any alias contains ``query``.

        Matching is a case-insensitive substring test against each indexed
        string independently.
        """
        folded = query.casefold()
        matches: Set[int] = set()
        for key, vessel_ids in self._name_index.items():
            if folded in key:
                matches.update(vessel_ids)
        return matches

    def to_dict(self) -> dict:
        """Convert to a dataset document for serialization."""
        return {
            "schema_version": "1.0",
            "metadata": self.metadata,
            "regions": [r.to_dict() for r in self.all_regions()],
            "vessels": [v.to_dict() for v in self.all_vessels()],
            "edges": [e.to_dict() for e in self._edges],
            "aliases": [
                {"vessel_id": vid, "alias": alias}
                for vid in sorted(self._aliases)
                for alias in self._aliases[vid]
            ],
            "notes": [
                n.to_dict()
                for vid in sorted(self._notes)
                for n in self._notes[vid]
            ],
        }

    @classmethod
    def from_dict(cls, d: dict) -> "GraphStore":
        """Create from a dataset document."""
        return cls(
            vessels=[Vessel.from_dict(v) for v in d.get("vessels", [])],
            edges=[VesselEdge.from_dict(e) for e in d.get("edges", [])],
            aliases=[Alias.from_dict(a) for a in d.get("aliases", [])],
            regions=[Region.from_dict(r) for r in d.get("regions", [])],
            notes=[Note.from_dict(n) for n in d.get("notes", [])],
            metadata=d.get("metadata", {}),
        )

    def __repr__(self) -> str:
        return (
            f"GraphStore(vessels={self.num_vessels}, edges={self.num_edges}, "
            f"regions={self.num_regions})"
        )
