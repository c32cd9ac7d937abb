"""
Name and alias search over a GraphStore snapshot.
"""

from typing import List, Optional
from ..core.store import GraphStore
from ..core.records import Vessel
from ..core.types import VesselType, parse_enum


class SearchIndex:
    """
    Case-insensitive substring search against vessel names and aliases.

    Uses the folded name/alias index the store builds at load time.
    """

    def __init__(self, store: GraphStore):
        self.store = store

    def search(self, query: Optional[str] = None, vessel_type=None) -> List[Vessel]:
        """
        Find vessels whose name or any alias contains the query.

        Parameters
        ----------
        query : str, optional
            Search text. None, empty or whitespace-only returns every vessel.
            Anything else is matched literally, with no minimum length.
        vessel_type : VesselType or str, optional
            Restrict results to one vessel type

        Returns
        -------
        vessels : list of Vessel
            Each matching vessel once, ordered by name (ordinal comparison)
        """
        if query is None or not query.strip():
            vessels = self.store.all_vessels()
        else:
            vessels = [self.store.get_vessel(vid) for vid in self.store.index_matches(query)]

        if vessel_type is not None:
            vessel_type = parse_enum(VesselType, vessel_type)
            vessels = [v for v in vessels if v.type is vessel_type]

        return sorted(vessels, key=lambda v: (v.name, v.id))


def search_vessels(store: GraphStore, query: Optional[str] = None) -> List[Vessel]:
    """Search a store by name or alias; see ``SearchIndex.search``."""
    return SearchIndex(store).search(query)
