"""
Adapter for converting between GraphStore and NetworkX graphs.

This enables use of the NetworkX algorithm library on a vessel graph
snapshot, e.g. for centrality or connectivity analysis.
"""

import networkx as nx
from typing import Optional
from ..core.store import GraphStore
from ..core.records import Vessel, VesselEdge
from ..core.types import DiameterRange, FlowDirection, Oxygenation, VesselType, parse_enum


def to_networkx_graph(store: GraphStore) -> nx.DiGraph:
    """
    Convert GraphStore to a NetworkX directed graph.

    Nodes are vessel IDs with attributes:
    - 'name': str primary name
    - 'vessel_type': str vessel type
    - 'oxygenation': str oxygenation status
    - 'diameter_min_mm', 'diameter_max_mm': float or None
    - 'region_id': int or None

    Edges point parent -> child with attributes:
    - 'label': str or None
    - 'flow_direction': str flow direction tag

    Edges are added in dataset insertion order, so ``G.successors(v)`` yields
    children in the same order the store does.

    Parameters
    ----------
    store : GraphStore
        The snapshot to convert

    Returns
    -------
    G : nx.DiGraph
        NetworkX graph representation
    """
    G = nx.DiGraph()
    G.graph.update(store.metadata)

    for vessel in store.all_vessels():
        G.add_node(
            vessel.id,
            name=vessel.name,
            vessel_type=vessel.type.value,
            oxygenation=vessel.oxygenation.value,
            diameter_min_mm=vessel.diameter.min_mm,
            diameter_max_mm=vessel.diameter.max_mm,
            region_id=vessel.region_id,
        )

    for edge in store.all_edges():
        G.add_edge(
            edge.parent_id,
            edge.child_id,
            label=edge.label,
            flow_direction=edge.flow_direction.value,
        )

    return G


def from_networkx_graph(G: nx.DiGraph, metadata: Optional[dict] = None) -> GraphStore:
    """
    Convert a NetworkX directed graph to a GraphStore.

    Node keys must be integer vessel IDs. Missing attributes fall back to an
    oxygenated artery named after the node ID. Regions, aliases and notes are
    not represented in the graph and come back empty.

    Parameters
    ----------
    G : nx.DiGraph
        Graph with the node and edge attributes written by to_networkx_graph
    metadata : dict, optional
        Dataset metadata; defaults to ``G.graph``

    Returns
    -------
    GraphStore
        Reconstructed snapshot
    """
    if not G.is_directed():
        raise ValueError("Vessel graphs are directed; got an undirected graph")

    vessels = []
    for node_id, data in G.nodes(data=True):
        vessels.append(Vessel(
            id=int(node_id),
            name=data.get('name', f"Vessel {node_id}"),
            type=parse_enum(VesselType, data.get('vessel_type', 'ARTERY')),
            oxygenation=parse_enum(Oxygenation, data.get('oxygenation', 'OXYGENATED')),
            diameter=DiameterRange(
                min_mm=data.get('diameter_min_mm'),
                max_mm=data.get('diameter_max_mm'),
            ),
            region_id=None,
        ))

    edges = [
        VesselEdge(
            parent_id=int(u),
            child_id=int(v),
            flow_direction=parse_enum(FlowDirection, data.get('flow_direction', 'FORWARD')),
            label=data.get('label'),
        )
        for u, v, data in G.edges(data=True)
    ]

    if metadata is None:
        metadata = dict(G.graph)

    return GraphStore(vessels=vessels, edges=edges, metadata=metadata)
