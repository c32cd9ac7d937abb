"""
Record types held by a GraphStore snapshot.

Every relationship is an integer id resolved through the store; records never
embed each other.
"""

from dataclasses import dataclass, field
from typing import Optional
from .types import VesselType, Oxygenation, FlowDirection, DiameterRange, parse_enum


@dataclass(frozen=True)
class Vessel:
    """
    Node of the vessel graph.

    Represents one named anatomical blood vessel.
    """

    id: int
    name: str
    type: VesselType
    oxygenation: Oxygenation
    diameter: DiameterRange = field(default_factory=DiameterRange)
    description: Optional[str] = None
    clinical_notes: Optional[str] = None
    region_id: Optional[int] = None

    def to_dict(self) -> dict:
        """Convert to a flat row, the shape the dataset loader reads."""
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type.value,
            "oxygenation": self.oxygenation.value,
            "diameter_min_mm": self.diameter.min_mm,
            "diameter_max_mm": self.diameter.max_mm,
            "description": self.description,
            "clinical_notes": self.clinical_notes,
            "region_id": self.region_id,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Vessel":
        """Create from a flat row."""
        return cls(
            id=int(d["id"]),
            name=d["name"],
            type=parse_enum(VesselType, d["type"]),
            oxygenation=parse_enum(Oxygenation, d["oxygenation"]),
            diameter=DiameterRange.from_dict({
                "min_mm": d.get("diameter_min_mm"),
                "max_mm": d.get("diameter_max_mm"),
            }),
            description=d.get("description"),
            clinical_notes=d.get("clinical_notes"),
            region_id=_optional_int(d.get("region_id")),
        )


@dataclass(frozen=True)
class VesselEdge:
    """Directed branch connection from a parent vessel to a child vessel."""

    parent_id: int
    child_id: int
    flow_direction: FlowDirection = FlowDirection.FORWARD
    label: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "parent_id": self.parent_id,
            "child_id": self.child_id,
            "flow_direction": self.flow_direction.value,
            "label": self.label,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "VesselEdge":
        """Create from dictionary."""
        return cls(
            parent_id=int(d["parent_id"]),
            child_id=int(d["child_id"]),
            flow_direction=parse_enum(FlowDirection, d.get("flow_direction", "FORWARD")),
            label=d.get("label"),
        )


@dataclass(frozen=True)
class Alias:
    """Secondary name bound to one vessel."""

    vessel_id: int
    alias: str

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {"vessel_id": self.vessel_id, "alias": self.alias}

    @classmethod
    def from_dict(cls, d: dict) -> "Alias":
        """Create from dictionary."""
        return cls(vessel_id=int(d["vessel_id"]), alias=d["alias"])


@dataclass(frozen=True)
class Region:
    """Anatomical region; regions form a forest through parent_id."""

    id: int
    name: str
    description: Optional[str] = None
    parent_id: Optional[int] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "parent_id": self.parent_id,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Region":
        """Create from dictionary."""
        return cls(
            id=int(d["id"]),
            name=d["name"],
            description=d.get("description"),
            parent_id=_optional_int(d.get("parent_id")),
        )


@dataclass(frozen=True)
class Note:
    """Titled markdown text attached to a vessel."""

    vessel_id: int
    title: str
    markdown: str

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {"vessel_id": self.vessel_id, "title": self.title, "markdown": self.markdown}

    @classmethod
    def from_dict(cls, d: dict) -> "Note":
        """Create from dictionary."""
        return cls(vessel_id=int(d["vessel_id"]), title=d["title"], markdown=d["markdown"])


def _optional_int(value) -> Optional[int]:
    return None if value is None else int(value)
