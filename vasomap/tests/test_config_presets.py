"""Tests for configuration presets and validation."""

import pytest
from vasomap.params import get_preset, list_presets, validate_config, validate_and_warn
from vasomap.analysis.pathfinding import PathfindingParams
from vasomap.api.navigator import NavigatorConfig


def test_list_presets():
    presets = list_presets()
    assert isinstance(presets, list)
    assert presets == ["default", "strict", "exploratory"]


def test_get_preset():
    config = get_preset("default")
    assert config.pathfinding.max_depth == 20
    assert config.default_neighbor_depth == 1
    assert config.max_neighbor_depth == 5


def test_get_preset_returns_fresh_instance():
    assert get_preset("strict") is not get_preset("strict")


def test_unknown_preset():
    with pytest.raises(ValueError, match="Available"):
        get_preset("liver_arterial_dense")


@pytest.mark.parametrize("name", ["default", "strict", "exploratory"])
def test_presets_validate(name):
    is_valid, warnings = validate_config(get_preset(name))
    assert is_valid is True
    assert warnings == []


def test_validate_flags_shallow_search():
    config = NavigatorConfig(pathfinding=PathfindingParams(max_depth=3))

    is_valid, warnings = validate_config(config)

    assert is_valid is False
    assert len(warnings) == 2
    assert any("very small" in w for w in warnings)
    assert any("max_neighbor_depth" in w for w in warnings)


def test_validate_flags_out_of_bounds():
    config = NavigatorConfig(pathfinding=PathfindingParams(max_depth=500), max_neighbor_depth=12)

    is_valid, warnings = validate_config(config)

    assert is_valid is False
    assert any("exceeds maximum 100" in w for w in warnings)
    assert any("max_neighbor_depth = 12" in w for w in warnings)


def test_validate_and_warn_prints(capsys):
    config = NavigatorConfig(pathfinding=PathfindingParams(max_depth=2), max_neighbor_depth=2)

    assert validate_and_warn(config) is config

    out = capsys.readouterr().out
    assert "Configuration validation warnings (1)" in out


def test_validate_and_warn_silent_when_valid(capsys):
    validate_and_warn(get_preset("default"))

    assert capsys.readouterr().out == ""


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
