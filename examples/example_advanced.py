"""
Advanced example using individual components of the vasomap package.

This example demonstrates:
1. Loading a dataset from JSON and validating a configuration preset
2. Neighbor expansion, region trees and structure summaries
3. Exporting to NetworkX and reloading a snapshot
"""

import json
import tempfile
from pathlib import Path

import networkx as nx

from vasomap import load_coronary_dataset, load_json, save_json, SnapshotHolder
from vasomap.params import get_preset, validate_and_warn
from vasomap.analysis import get_neighbors, summarize_network
from vasomap.adapters import to_networkx_graph

print("Loading configuration preset...")
config = validate_and_warn(get_preset("exploratory"))
print(json.dumps(config.to_dict(), indent=2))

store = load_coronary_dataset()
holder = SnapshotHolder.from_store(store, config)
navigator = holder.current()

print("\nNeighbors of the Left Coronary Artery (depth 2):")
result = get_neighbors(store, 2, depth=2)
for neighbor in result.neighbors:
    print(f"  {neighbor.relationship:10s} d={neighbor.distance}  {neighbor.vessel.name}")

print("\nRegion forest:")
for root in navigator.get_region_forest():
    for node in root.walk():
        print(f"  {node.name}")

print("\nStructure summary:")
summary = summarize_network(store)
print(f"  Roots: {summary['root_vessel_ids']}")
print(f"  Leaves: {summary['leaf_vessel_ids']}")
print(f"  Mean diameter: {summary['diameter_mm']['mean']:.2f} mm")

print("\nNetworkX export...")
G = to_networkx_graph(store)
centrality = nx.betweenness_centrality(G)
busiest = max(centrality, key=centrality.get)
print(f"  Highest betweenness: {G.nodes[busiest]['name']}")

print("\nEditing and reloading the dataset...")
with tempfile.TemporaryDirectory() as tmpdir:
    filepath = Path(tmpdir) / "coronary.json"
    save_json(store, filepath)

    with open(filepath) as f:
        doc = json.load(f)
    doc["aliases"].append({"vessel_id": 1, "alias": "Aortic Root"})
    with open(filepath, "w") as f:
        json.dump(doc, f)

    navigator = holder.reload(lambda: load_json(filepath, verbose=True))

print(f"  Snapshot generation: {holder.generation}")
print(f"  Search 'root': {[s.name for s in navigator.search_vessels('root')]}")

print("\nProcessing complete!")
