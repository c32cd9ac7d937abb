import pytest
from pathlib import Path
import tempfile

from vasomap import load_coronary_dataset, VesselNavigator, GraphStore
from vasomap.core.records import Vessel, VesselEdge, Alias, Region
from vasomap.core.types import VesselType, Oxygenation


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def coronary_store():
    """Bundled coronary circulation dataset."""
    return load_coronary_dataset()


@pytest.fixture
def coronary_navigator(coronary_store):
    """Navigator over the coronary dataset with default configuration."""
    return VesselNavigator(coronary_store)


@pytest.fixture
def left_coronary_store():
    """Aorta -> LCA -> LAD chain plus an unconnected RCA."""
    def artery(vessel_id, name):
        return Vessel(vessel_id, name, VesselType.ARTERY, Oxygenation.OXYGENATED, region_id=1)

    vessels = [
        artery(1, "Ascending Aorta"),
        artery(2, "Left Coronary Artery"),
        artery(3, "Left Anterior Descending Artery"),
        artery(12, "Right Coronary Artery"),
    ]
    edges = [VesselEdge(1, 2), VesselEdge(2, 3)]
    aliases = [Alias(3, "LAD"), Alias(3, "Anterior Interventricular Artery")]
    regions = [Region(1, "Heart"), Region(2, "Thorax")]

    return GraphStore(vessels, edges, aliases, regions)
