"""
Tests for structural summaries.
"""

import numpy as np
import pytest
from vasomap.core.store import GraphStore
from vasomap.core.records import Vessel, VesselEdge
from vasomap.core.types import VesselType, Oxygenation, DiameterRange
from vasomap.analysis.structure import (
    get_root_vessels,
    get_leaf_vessels,
    compute_degree_histogram,
    measure_diameters,
    summarize_network,
)
from vasomap.io.serialize import load_coronary_dataset


def test_roots_and_leaves():
    store = load_coronary_dataset()

    assert get_root_vessels(store) == [1]
    assert get_leaf_vessels(store) == [4, 5, 6, 7, 9, 10, 11, 13, 14, 15]
    assert get_leaf_vessels(store, vessel_type="VEIN") == []


def test_degree_histogram():
    store = load_coronary_dataset()

    histogram = compute_degree_histogram(store)

    # aorta and LCA branch twice; LAD four times; LCx and RCA three times
    assert histogram == {0: 10, 2: 2, 3: 2, 4: 1}
    assert sum(histogram.values()) == store.num_vessels


def test_measure_diameters():
    """Test statistics use the midpoint of each vessel's range."""
    vessels = [
        Vessel(1, "A", VesselType.ARTERY, Oxygenation.OXYGENATED, diameter=DiameterRange(2.0, 4.0)),
        Vessel(2, "B", VesselType.ARTERY, Oxygenation.OXYGENATED, diameter=DiameterRange(min_mm=1.0)),
        Vessel(3, "C", VesselType.VEIN, Oxygenation.DEOXYGENATED, diameter=DiameterRange(5.0, 7.0)),
        Vessel(4, "D", VesselType.ARTERY, Oxygenation.OXYGENATED),
    ]
    store = GraphStore(vessels)

    stats = measure_diameters(store)

    assert stats["count"] == 3
    assert stats["mean"] == pytest.approx(np.mean([3.0, 1.0, 6.0]))
    assert stats["min"] == pytest.approx(1.0)
    assert stats["max"] == pytest.approx(6.0)

    arteries = measure_diameters(store, vessel_type=VesselType.ARTERY)
    assert arteries["count"] == 2
    assert arteries["std"] == pytest.approx(1.0)


def test_measure_diameters_empty():
    store = GraphStore([Vessel(1, "A", VesselType.CAPILLARY, Oxygenation.MIXED)])

    assert measure_diameters(store)["count"] == 0


def test_summarize_network():
    store = load_coronary_dataset()

    summary = summarize_network(store)

    assert summary["num_vessels"] == 15
    assert summary["num_edges"] == 14
    assert summary["vessel_type_counts"] == {"ARTERY": 15, "VEIN": 0, "CAPILLARY": 0}
    assert summary["diameter_mm"]["max"] == pytest.approx(27.5)
    assert summary["root_vessel_ids"] == [1]


def test_summary_of_disconnected_graph():
    vessels = [Vessel(i, f"V{i}", VesselType.ARTERY, Oxygenation.OXYGENATED) for i in (1, 2, 3)]
    store = GraphStore(vessels, [VesselEdge(1, 2)])

    assert get_root_vessels(store) == [1, 3]
    assert get_leaf_vessels(store) == [2, 3]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
