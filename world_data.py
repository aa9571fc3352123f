"""world_data.py: areas/rooms/exits model and the areas.json loader.

Expected file shape:

    {"areas": [{"name": "Town",
                "rooms": [{"id": "town_square",
                           "exits": {"east": "forest_edge", "north": null}}]}]}

Room ids must be unique across the whole file, not just within an area.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

MIN_AREA_SIZE = 30.0
AREA_SIZE_RANGE = 30.0
ROOMS_FOR_GROWTH = 100.0


def clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))


def area_size(room_count: int) -> float:
    """Render radius for an area: 30 + 30 * clamp(1 - 100/rooms, 0, 1).

    Stays at 30 up to 100 rooms and approaches 60 for very large areas.
    room_count must be >= 1.
    """
    return MIN_AREA_SIZE + AREA_SIZE_RANGE * clamp(1.0 - ROOMS_FOR_GROWTH / room_count, 0.0, 1.0)


@dataclass
class Room:
    id: str
    exits: Dict[str, Optional[str]] = field(default_factory=dict)


@dataclass
class Area:
    name: str
    rooms: List[Room] = field(default_factory=list)

    @property
    def room_count(self) -> int:
        return len(self.rooms)

    @property
    def size(self) -> float:
        return area_size(self.room_count)


def _parse_room(raw: Any, area_name: str) -> Room:
    if not isinstance(raw, dict) or "id" not in raw:
        raise ValueError(f"Area {area_name!r}: every room needs an 'id'")
    exits = raw.get("exits") or {}
    if not isinstance(exits, dict):
        raise ValueError(f"Room {raw['id']!r}: 'exits' must be an object")
    return Room(
        id=str(raw["id"]),
        exits={str(d): (str(t) if t else None) for d, t in exits.items()},
    )


def parse_areas(data: Any) -> List[Area]:
    """Build Area objects from decoded areas.json content.

    Raises ValueError on structural problems; dangling exit targets are not
    checked here (the connection extractor skips them).
    """
    if not isinstance(data, dict) or not isinstance(data.get("areas"), list):
        raise ValueError("Input must be an object with an 'areas' list")

    areas: List[Area] = []
    seen_names = set()
    seen_rooms = set()
    for raw in data["areas"]:
        if not isinstance(raw, dict) or not raw.get("name"):
            raise ValueError("Every area needs a non-empty 'name'")
        name = str(raw["name"])
        if name in seen_names:
            raise ValueError(f"Duplicate area name: {name!r}")
        seen_names.add(name)

        rooms_raw = raw.get("rooms")
        if not isinstance(rooms_raw, list) or not rooms_raw:
            raise ValueError(f"Area {name!r} has no rooms")
        rooms = [_parse_room(r, name) for r in rooms_raw]
        for room in rooms:
            if room.id in seen_rooms:
                raise ValueError(f"Duplicate room id: {room.id!r}")
            seen_rooms.add(room.id)

        areas.append(Area(name=name, rooms=rooms))
    return areas


def load_areas(path: str) -> List[Area]:
    with open(path, "r", encoding="utf-8") as f:
        return parse_areas(json.load(f))
