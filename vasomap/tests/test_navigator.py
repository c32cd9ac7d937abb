"""
Tests for the query facade and snapshot reload.
"""

import threading
import pytest
from vasomap.core.store import GraphStore
from vasomap.core.records import Vessel, VesselEdge, Region
from vasomap.core.types import VesselType, Oxygenation
from vasomap.core.errors import NotFound, NoPathFound, DataIntegrityError
from vasomap.analysis.pathfinding import PathfindingParams
from vasomap.api.navigator import VesselNavigator, NavigatorConfig, SnapshotHolder
from vasomap.api.views import VesselSummary
from vasomap.io.serialize import load_coronary_dataset


@pytest.fixture
def navigator():
    return VesselNavigator(load_coronary_dataset())


def test_search_returns_summaries(navigator):
    results = navigator.search_vessels("LAD")

    assert all(isinstance(r, VesselSummary) for r in results)
    lad = next(r for r in results if r.id == 3)
    assert lad.name == "Left Anterior Descending Artery"
    assert lad.region == "Heart"
    assert "Widow Maker" in lad.aliases
    assert lad.to_dict()["type"] == "ARTERY"


def test_search_all(navigator):
    assert len(navigator.search_vessels()) == 15
    assert len(navigator.search_vessels("", vessel_type="ARTERY")) == 15


def test_vessel_detail(navigator):
    """Test detail carries neighbors, region and notes."""
    detail = navigator.get_vessel_detail(12)

    assert detail.name == "Right Coronary Artery"
    assert detail.diameter_min_mm == 3.0
    assert detail.diameter_max_mm == 4.0
    assert detail.region.name == "Heart"
    assert [n.id for n in detail.upstream_neighbors] == [1]
    assert [n.id for n in detail.downstream_neighbors] == [13, 14, 15]
    assert detail.aliases == ("RCA", "Right Coronary")
    assert [n.title for n in detail.notes] == ["RCA Dominance and Inferior MI"]


def test_vessel_detail_to_dict(navigator):
    d = navigator.get_vessel_detail(1).to_dict()

    assert d["upstreamNeighbors"] == []
    assert [n["name"] for n in d["downstreamNeighbors"]] == [
        "Left Coronary Artery",
        "Right Coronary Artery",
    ]
    assert d["region"]["name"] == "Heart"
    assert d["region"]["parentId"] is None
    assert d["diameterMaxMm"] == 30.0
    assert d["notes"] == []


def test_vessel_detail_missing(navigator):
    with pytest.raises(NotFound):
        navigator.get_vessel_detail(0)


def test_vessel_without_region():
    store = GraphStore([Vessel(1, "A", VesselType.ARTERY, Oxygenation.OXYGENATED)])

    detail = VesselNavigator(store).get_vessel_detail(1)

    assert detail.region is None
    assert detail.to_dict()["region"] is None
    assert VesselNavigator(store).search_vessels()[0].region is None


def test_path_uses_configured_depth():
    vessels = [Vessel(i, f"V{i}", VesselType.ARTERY, Oxygenation.OXYGENATED) for i in range(1, 5)]
    store = GraphStore(vessels, [VesselEdge(i, i + 1) for i in range(1, 4)])

    shallow = VesselNavigator(store, NavigatorConfig(pathfinding=PathfindingParams(max_depth=2)))

    with pytest.raises(NoPathFound):
        shallow.find_shortest_path(1, 4)
    assert VesselNavigator(store).find_shortest_path(1, 4).length == 4


def test_region_forest(navigator):
    forest = navigator.get_region_forest()

    assert [r.name for r in forest] == ["Heart", "Thorax"]
    assert forest == navigator.get_region_forest()


def test_neighbors_default_depth():
    store = load_coronary_dataset()
    nav = VesselNavigator(store, NavigatorConfig(default_neighbor_depth=2))

    result = nav.get_vessel_neighbors(1, direction="downstream")

    assert result.depth == 2
    assert [n.vessel.id for n in result.neighbors] == [2, 12, 3, 8, 13, 14, 15]


def test_neighbors_depth_limited_by_config(navigator):
    with pytest.raises(ValueError):
        navigator.get_vessel_neighbors(1, depth=6)


def test_find_vessel_by_name(navigator):
    assert navigator.find_vessel_by_name("RIGHT CORONARY ARTERY").id == 12


@pytest.mark.parametrize("kwargs", [
    {"max_neighbor_depth": 0},
    {"default_neighbor_depth": 0},
    {"default_neighbor_depth": 6, "max_neighbor_depth": 5},
])
def test_invalid_config(kwargs):
    with pytest.raises(ValueError):
        NavigatorConfig(**kwargs)


def test_config_dict_roundtrip():
    config = NavigatorConfig(pathfinding=PathfindingParams(max_depth=7), default_neighbor_depth=2)

    assert NavigatorConfig.from_dict(config.to_dict()) == config


def test_snapshot_reload_publishes_new_store():
    """Test reload swaps in a navigator over the new store."""
    holder = SnapshotHolder.from_store(load_coronary_dataset())
    before = holder.current()

    small = GraphStore([Vessel(1, "Only", VesselType.VEIN, Oxygenation.DEOXYGENATED)])
    after = holder.reload(lambda: small)

    assert holder.current() is after
    assert after is not before
    assert holder.generation == 1
    assert after.store.num_vessels == 1
    assert before.store.num_vessels == 15
    assert after.config is before.config


def test_failed_reload_keeps_previous_snapshot():
    holder = SnapshotHolder.from_store(load_coronary_dataset())
    before = holder.current()

    def bad_loader():
        return GraphStore(
            [Vessel(1, "A", VesselType.ARTERY, Oxygenation.OXYGENATED)],
            regions=[Region(1, "Loop", parent_id=1)],
        )

    with pytest.raises(DataIntegrityError):
        holder.reload(bad_loader)

    assert holder.current() is before
    assert holder.generation == 0


def test_concurrent_readers_during_reload():
    """Test readers always see a complete snapshot while reloads happen."""
    holder = SnapshotHolder.from_store(load_coronary_dataset())
    errors = []

    def reader():
        for _ in range(200):
            nav = holder.current()
            try:
                assert nav.find_shortest_path(1, 4).length == 4
                assert len(nav.search_vessels("lad")) >= 1
            except Exception as e:  # collected and re-raised in the main thread
                errors.append(e)

    def reloader():
        for _ in range(20):
            holder.reload(load_coronary_dataset)

    threads = [threading.Thread(target=reader) for _ in range(4)]
    threads.append(threading.Thread(target=reloader))
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    assert holder.generation == 20


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
