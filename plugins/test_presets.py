#!/usr/bin/env python3
"""
Tests for the rule preset table.
"""

import pytest

from lifelike.life import Game, parse_rule
from lifelike.presets import (
    DEFAULT_PRESETS, PRESET_ORDER, PRESETS, default_preset_for, get_preset, list_presets,
)


def test_every_preset_is_a_threshold_rule():
    """All presets must parse into contiguous neighbour ranges."""
    for key, preset in PRESETS.items():
        min_survive, max_survive, min_birth, max_birth = parse_rule(preset["rule"])
        max_neighbors = 3 ** preset["dimensions"] - 1
        for value in (min_survive, max_survive, min_birth, max_birth):
            assert 0 <= value <= max_neighbors, f"{key}: {value} out of range"


def test_preset_order_covers_all_presets():
    assert sorted(PRESET_ORDER) == sorted(PRESETS)


def test_defaults():
    assert get_preset(DEFAULT_PRESETS[2])["rule"] == "B3/S23"
    assert default_preset_for(3)["rule"] == "B9-10/S6-10"
    assert default_preset_for(4) is None


def test_get_unknown_preset():
    assert get_preset("nope") is None


def test_list_presets_by_dimension():
    keys_3d = [key for key, _name, _desc in list_presets(dimensions=3)]
    assert keys_3d == ["cubic", "bays_4555", "bays_5766"]
    assert len(list_presets()) == len(PRESETS)


@pytest.mark.parametrize("key", PRESET_ORDER)
def test_every_preset_builds_and_ticks(key):
    game = Game.from_preset(key, 6, seed=0)
    assert game.dimensions == PRESETS[key]["dimensions"]
    game.tick()
    assert game.generation in (1, 2)


if __name__ == "__main__":
    raise SystemExit(pytest.main([__file__, "-v"]))
