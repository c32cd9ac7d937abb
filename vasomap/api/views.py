"""Read-only views handed to the request layer.

Each view is a frozen dataclass whose ``to_dict()`` produces the camelCase
JSON shape of the corresponding VasoMap response.
"""

from dataclasses import dataclass
from typing import Optional, Tuple
from ..core.records import Vessel, Region, Note
from ..core.store import GraphStore
from ..core.types import VesselType, Oxygenation


@dataclass(frozen=True)
class VesselSummary:
    """List/search entry for a vessel."""
    id: int
    name: str
    type: VesselType
    oxygenation: Oxygenation
    region: Optional[str]  # region name
    aliases: Tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type.value,
            "oxygenation": self.oxygenation.value,
            "region": self.region,
            "aliases": list(self.aliases),
        }


@dataclass(frozen=True)
class NeighborSummary:
    """Upstream or downstream neighbor of a vessel."""
    id: int
    name: str
    type: VesselType

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "type": self.type.value}


@dataclass(frozen=True)
class RegionSummary:
    """Region resolved for a vessel detail view."""
    id: int
    name: str
    description: Optional[str] = None
    parent_id: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "parentId": self.parent_id,
            "description": self.description,
            "children": None,
        }


@dataclass(frozen=True)
class NoteView:
    """Educational note attached to a vessel."""
    title: str
    markdown: str

    def to_dict(self) -> dict:
        return {"title": self.title, "markdown": self.markdown}


@dataclass(frozen=True)
class VesselDetail:
    """Complete vessel information including its immediate neighbors."""
    id: int
    name: str
    type: VesselType
    oxygenation: Oxygenation
    diameter_min_mm: Optional[float]
    diameter_max_mm: Optional[float]
    description: Optional[str]
    clinical_notes: Optional[str]
    region: Optional[RegionSummary]
    aliases: Tuple[str, ...] = ()
    notes: Tuple[NoteView, ...] = ()
    upstream_neighbors: Tuple[NeighborSummary, ...] = ()
    downstream_neighbors: Tuple[NeighborSummary, ...] = ()

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type.value,
            "oxygenation": self.oxygenation.value,
            "diameterMinMm": self.diameter_min_mm,
            "diameterMaxMm": self.diameter_max_mm,
            "description": self.description,
            "clinicalNotes": self.clinical_notes,
            "region": self.region.to_dict() if self.region else None,
            "aliases": list(self.aliases),
            "notes": [n.to_dict() for n in self.notes],
            "upstreamNeighbors": [n.to_dict() for n in self.upstream_neighbors],
            "downstreamNeighbors": [n.to_dict() for n in self.downstream_neighbors],
        }


def make_summary(store: GraphStore, vessel: Vessel) -> VesselSummary:
    """Build the list/search view of a vessel."""
    region = store.region_for_vessel(vessel.id)
    return VesselSummary(
        id=vessel.id,
        name=vessel.name,
        type=vessel.type,
        oxygenation=vessel.oxygenation,
        region=region.name if region is not None else None,
        aliases=tuple(store.aliases_for(vessel.id)),
    )


def make_neighbor(vessel: Vessel) -> NeighborSummary:
    return NeighborSummary(id=vessel.id, name=vessel.name, type=vessel.type)


def make_region_summary(region: Region) -> RegionSummary:
    return RegionSummary(
        id=region.id,
        name=region.name,
        description=region.description,
        parent_id=region.parent_id,
    )


def make_note(note: Note) -> NoteView:
    return NoteView(title=note.title, markdown=note.markdown)


def make_detail(store: GraphStore, vessel: Vessel) -> VesselDetail:
    """
    Build the detail view of a vessel.

    Upstream neighbors come from incoming edges and downstream neighbors from
    outgoing edges, both in edge insertion order.
    """
    region = store.region_for_vessel(vessel.id)
    return VesselDetail(
        id=vessel.id,
        name=vessel.name,
        type=vessel.type,
        oxygenation=vessel.oxygenation,
        diameter_min_mm=vessel.diameter.min_mm,
        diameter_max_mm=vessel.diameter.max_mm,
        description=vessel.description,
        clinical_notes=vessel.clinical_notes,
        region=make_region_summary(region) if region is not None else None,
        aliases=tuple(store.aliases_for(vessel.id)),
        notes=tuple(make_note(n) for n in store.notes_for(vessel.id)),
        upstream_neighbors=tuple(
            make_neighbor(store.get_vessel(pid)) for pid, _ in store.incoming_neighbors(vessel.id)
        ),
        downstream_neighbors=tuple(
            make_neighbor(store.get_vessel(cid)) for cid, _ in store.outgoing_neighbors(vessel.id)
        ),
    )
