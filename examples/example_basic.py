"""
Basic example of using the vasomap package.

This example demonstrates:
1. Loading the bundled coronary dataset
2. Finding the shortest path between two vessels
3. Searching by name or alias and viewing vessel details
"""

from vasomap import load_coronary_dataset, VesselNavigator, NoPathFound

print("Loading coronary dataset...")

store = load_coronary_dataset(verbose=True)
navigator = VesselNavigator(store)

print("\n=== Shortest Path ===")
path = navigator.find_shortest_path(1, 4)
print(" -> ".join(path.names))
print(f"Path length: {path.length} vessels")

try:
    navigator.find_shortest_path(4, 1)
except NoPathFound as e:
    print(f"Reverse direction: {e.message}")

print("\n=== Search 'lad' ===")
for summary in navigator.search_vessels("lad"):
    print(f"{summary.id:3d}  {summary.name}  aliases={list(summary.aliases)}")

print("\n=== Vessel Detail ===")
detail = navigator.get_vessel_detail(3)
print(f"Name: {detail.name}")
print(f"Diameter: {detail.diameter_min_mm}-{detail.diameter_max_mm} mm")
print(f"Region: {detail.region.name if detail.region else None}")
print(f"Upstream: {[n.name for n in detail.upstream_neighbors]}")
print(f"Downstream: {[n.name for n in detail.downstream_neighbors]}")
for note in detail.notes:
    print(f"Note: {note.title}")
