"""
Tests for region forest assembly.
"""

import json
import pytest
from vasomap.core.records import Region
from vasomap.core.store import GraphStore
from vasomap.api.navigator import VesselNavigator
from vasomap.core.errors import DataIntegrityError, ErrorCode
from vasomap.analysis.regions import (
    RegionNode,
    build_region_forest,
    find_region_cycle,
    count_regions,
)
from vasomap.io.serialize import load_coronary_dataset


def test_coronary_regions_are_two_roots():
    store = load_coronary_dataset()

    forest = store.region_forest()

    assert [r.name for r in forest] == ["Heart", "Thorax"]
    assert all(r.children == () for r in forest)


def test_nested_forest_sorted_by_name():
    """Test roots and siblings are ordered by name."""
    regions = [
        Region(1, "Thorax"),
        Region(2, "Heart", parent_id=1),
        Region(3, "Lungs", parent_id=1),
        Region(4, "Abdomen"),
        Region(5, "Left Ventricle", parent_id=2),
        Region(6, "Aortic Root", parent_id=2),
    ]

    forest = build_region_forest(regions)

    assert [r.name for r in forest] == ["Abdomen", "Thorax"]
    thorax = forest[1]
    assert [c.name for c in thorax.children] == ["Heart", "Lungs"]
    heart = thorax.children[0]
    assert [c.name for c in heart.children] == ["Aortic Root", "Left Ventricle"]
    assert heart.parent_id == 1


def test_every_region_appears_once():
    regions = [Region(i, f"R{i}", parent_id=(i // 2 or None)) for i in range(1, 32)]

    forest = build_region_forest(regions)

    ids = [node.id for root in forest for node in root.walk()]
    assert sorted(ids) == list(range(1, 32))
    assert count_regions(forest) == 31


def test_walk_is_preorder():
    regions = [Region(1, "A"), Region(2, "B", parent_id=1), Region(3, "C", parent_id=2), Region(4, "D", parent_id=1)]

    (root,) = build_region_forest(regions)

    assert [n.name for n in root.walk()] == ["A", "B", "C", "D"]
    assert root.find(3).name == "C"
    assert root.find(99) is None


def test_self_parent_is_cycle():
    with pytest.raises(DataIntegrityError) as exc_info:
        build_region_forest([Region(1, "A", parent_id=1)])

    assert exc_info.value.code == ErrorCode.REGION_CYCLE


def test_long_cycle_detected():
    regions = {
        1: Region(1, "A", parent_id=3),
        2: Region(2, "B", parent_id=1),
        3: Region(3, "C", parent_id=2),
        4: Region(4, "D", parent_id=1),
    }

    cycle = find_region_cycle(regions)

    assert sorted(cycle) == [1, 2, 3]
    with pytest.raises(DataIntegrityError, match="Cycle"):
        build_region_forest(regions.values())


def test_acyclic_has_no_cycle():
    regions = {1: Region(1, "A"), 2: Region(2, "B", parent_id=1)}

    assert find_region_cycle(regions) is None


def test_unknown_parent_becomes_root():
    """Test regions with a dangling parent are kept as roots."""
    regions = [Region(1, "Heart"), Region(2, "Orphan", parent_id=77)]

    with pytest.warns(UserWarning, match="unknown parent"):
        forest = build_region_forest(regions)

    assert [r.name for r in forest] == ["Heart", "Orphan"]
    assert forest[1].parent_id == 77


def _chain(depth):
    return [Region(1, "R1")] + [Region(i, f"R{i}", parent_id=i - 1) for i in range(2, depth + 1)]


def test_deep_hierarchy():
    """Test deep chains are assembled without recursion."""
    depth = 5000

    (root,) = build_region_forest(_chain(depth))

    assert count_regions([root]) == depth


def test_deep_hierarchy_to_dict():
    """Test the nested dict form is built for trees deeper than the recursion limit."""
    depth = 5000
    (root,) = build_region_forest(_chain(depth))

    d = root.to_dict()

    levels = 0
    while d is not None:
        levels += 1
        assert d["id"] == levels
        d = d["children"][0] if d["children"] else None
    assert levels == depth


def test_deep_forest_through_navigator_serializes():
    depth = 300
    navigator = VesselNavigator(GraphStore([], regions=_chain(depth)))

    doc = json.loads(json.dumps([r.to_dict() for r in navigator.get_region_forest()]))

    assert doc[0]["name"] == "R1"
    assert doc[0]["children"][0]["parentId"] == 1


def test_deep_forests_compare_equal():
    """Test equality of independently built deep forests."""
    depth = 5000

    first = build_region_forest(_chain(depth))
    second = build_region_forest(_chain(depth))
    renamed = build_region_forest(_chain(depth - 1) + [Region(depth, "Leaf", parent_id=depth - 1)])

    assert first == second
    assert hash(first[0]) == hash(second[0])
    assert first != renamed
    assert "size=5000" in repr(first[0])


def test_region_node_equality_shallow():
    a = RegionNode(1, "Heart", children=(RegionNode(2, "Atrium", parent_id=1),))
    b = RegionNode(1, "Heart", children=(RegionNode(2, "Atrium", parent_id=1),))
    c = RegionNode(1, "Heart", children=(RegionNode(3, "Atrium", parent_id=1),))

    assert a == b
    assert a != c
    assert a != "Heart"
    assert len({a, b}) == 1


def test_orphan_warning_points_at_loading_call():
    """Test the orphan-parent warning is attributed to the code that built the store."""
    with pytest.warns(UserWarning, match="unknown parent") as record:
        GraphStore([], regions=[Region(1, "Orphan", parent_id=9)])

    assert record[0].filename == __file__


def test_orphan_warning_from_direct_build_points_at_caller():
    with pytest.warns(UserWarning, match="unknown parent") as record:
        build_region_forest([Region(1, "Orphan", parent_id=9)])

    assert record[0].filename == __file__


def test_store_rejects_duplicate_region_once():
    with pytest.raises(DataIntegrityError) as exc_info:
        GraphStore([], regions=[Region(1, "Heart"), Region(1, "Heart")])

    assert exc_info.value.code == ErrorCode.DUPLICATE_REGION_ID


def test_region_node_to_dict():
    regions = [Region(1, "Thorax", description="Chest"), Region(2, "Heart", parent_id=1)]

    (root,) = build_region_forest(regions)

    assert root.to_dict() == {
        "id": 1,
        "name": "Thorax",
        "parentId": None,
        "description": "Chest",
        "children": [
            {"id": 2, "name": "Heart", "parentId": 1, "description": None, "children": []},
        ],
    }


def test_empty_forest():
    assert build_region_forest([]) == []
    assert count_regions([]) == 0


def test_region_node_defaults():
    node = RegionNode(id=1, name="Heart")

    assert node.size() == 1
    assert node.children == ()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
