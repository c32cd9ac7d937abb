"""High-level query API for the request layer."""

from .navigator import VesselNavigator, NavigatorConfig, SnapshotHolder
from .views import (
    VesselSummary,
    VesselDetail,
    NeighborSummary,
    RegionSummary,
    NoteView,
)

__all__ = [
    "VesselNavigator",
    "NavigatorConfig",
    "SnapshotHolder",
    "VesselSummary",
    "VesselDetail",
    "NeighborSummary",
    "RegionSummary",
    "NoteView",
]
