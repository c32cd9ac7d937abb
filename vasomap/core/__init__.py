"""Core data structures for the vessel graph."""

from .types import VesselType, Oxygenation, FlowDirection, DiameterRange
from .records import Vessel, VesselEdge, Alias, Region, Note
from .store import GraphStore
from .errors import ErrorCode, VasoMapError, NotFound, NoPathFound, DataIntegrityError

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
]
