"""Tests for the areas model, size formula and loader."""
import json

import pytest

from world_data import Area, Room, area_size, load_areas, parse_areas


def test_size_formula_boundaries():
    assert area_size(1) == 30
    assert area_size(100) == 30
    assert area_size(200) == pytest.approx(45)


def test_size_monotonic_and_bounded():
    sizes = [area_size(n) for n in range(1, 5000, 37)]
    assert sizes == sorted(sizes)
    assert all(30 <= s <= 60 for s in sizes)


def test_area_size_property():
    area = Area("Big", [Room(f"r{i}") for i in range(200)])
    assert area.room_count == 200
    assert area.size == pytest.approx(45)


def test_parse_areas():
    data = {
        "areas": [
            {"name": "Town", "rooms": [{"id": "t1", "exits": {"east": "f1", "north": None}}, {"id": "t2"}]},
            {"name": "Forest", "rooms": [{"id": "f1", "exits": {"west": "t1"}}]},
        ]
    }
    areas = parse_areas(data)
    assert [a.name for a in areas] == ["Town", "Forest"]
    town = areas[0]
    assert town.rooms[0].exits == {"east": "f1", "north": None}
    assert town.rooms[1].exits == {}


def test_empty_exit_target_normalized_to_none():
    areas = parse_areas({"areas": [{"name": "A", "rooms": [{"id": "a1", "exits": {"up": ""}}]}]})
    assert areas[0].rooms[0].exits == {"up": None}


@pytest.mark.parametrize(
    "data",
    [
        [],
        {"areas": {}},
        {"areas": [{"rooms": [{"id": "x"}]}]},
        {"areas": [{"name": "A", "rooms": []}]},
        {"areas": [{"name": "A", "rooms": [{"exits": {}}]}]},
        {"areas": [{"name": "A", "rooms": [{"id": "x", "exits": ["east"]}]}]},
        {"areas": [{"name": "A", "rooms": [{"id": "x"}]}, {"name": "A", "rooms": [{"id": "y"}]}]},
        {"areas": [{"name": "A", "rooms": [{"id": "x"}]}, {"name": "B", "rooms": [{"id": "x"}]}]},
    ],
)
def test_malformed_input_rejected(data):
    with pytest.raises(ValueError):
        parse_areas(data)


def test_load_areas(tmp_path):
    path = tmp_path / "areas.json"
    path.write_text(json.dumps({"areas": [{"name": "Solo", "rooms": [{"id": "s1"}]}]}), encoding="utf-8")
    areas = load_areas(str(path))
    assert len(areas) == 1
    assert areas[0].size == 30
