"""
Enumerations and small value types for the vessel graph.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class VesselType(Enum):
    """Kind of blood vessel."""
    ARTERY = "ARTERY"
    VEIN = "VEIN"
    CAPILLARY = "CAPILLARY"


class Oxygenation(Enum):
    """Oxygenation status of the blood carried by a vessel."""
    OXYGENATED = "OXYGENATED"
    DEOXYGENATED = "DEOXYGENATED"
    MIXED = "MIXED"


class FlowDirection(Enum):
    """
    Direction tag on a vessel edge.

    REVERSE is descriptive only; traversal always follows parent -> child.
    """
    FORWARD = "FORWARD"
    REVERSE = "REVERSE"


@dataclass(frozen=True)
class DiameterRange:
    """Diameter range of a vessel in millimeters. Either bound may be unknown."""

    min_mm: Optional[float] = None
    max_mm: Optional[float] = None

    def is_valid(self) -> bool:
        """Check min <= max when both bounds are present."""
        if self.min_mm is None or self.max_mm is None:
            return True
        return self.min_mm <= self.max_mm

    def is_known(self) -> bool:
        """Check whether at least one bound is present."""
        return self.min_mm is not None or self.max_mm is not None

    def midpoint(self) -> Optional[float]:
        """Mean of the known bounds, or None if neither is known."""
        bounds = [b for b in (self.min_mm, self.max_mm) if b is not None]
        if not bounds:
            return None
        return sum(bounds) / len(bounds)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {"min_mm": self.min_mm, "max_mm": self.max_mm}

    @classmethod
    def from_dict(cls, d: dict) -> "DiameterRange":
        """Create from dictionary."""
        return cls(
            min_mm=_optional_float(d.get("min_mm")),
            max_mm=_optional_float(d.get("max_mm")),
        )


def _optional_float(value) -> Optional[float]:
    return None if value is None else float(value)


def parse_enum(enum_cls, value):
    """
    Coerce a string (any case) or enum member into ``enum_cls``.

    Raises
    ------
    ValueError
        If the value names no member of ``enum_cls``.
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value.upper())
        except ValueError:
            pass
    allowed = ", ".join(m.value for m in enum_cls)
    raise ValueError(f"Invalid {enum_cls.__name__}: {value!r} (expected one of {allowed})")
