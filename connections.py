"""connections.py: derive area-to-area connections from room exits."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence, Set, Tuple

from world_data import Area

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Connection:
    source: str
    target: str
    direction: str


def index_room_areas(areas: Sequence[Area]) -> Dict[str, str]:
    """room id -> owning area name."""
    owner: Dict[str, str] = {}
    for area in areas:
        for room in area.rooms:
            owner.setdefault(room.id, area.name)
    return owner


def _raw_connections(areas: Sequence[Area]) -> List[Connection]:
    owner = index_room_areas(areas)
    found: List[Connection] = []
    for area in areas:
        for room in area.rooms:
            for direction, target_id in room.exits.items():
                if not target_id:
                    continue
                target_area = owner.get(target_id)
                if target_area is None:
                    logger.debug("Skipping dangling exit %s -%s-> %s", room.id, direction, target_id)
                    continue
                if target_area == area.name:
                    continue
                found.append(Connection(area.name, target_area, direction))
    return found


def find_directional_connections(areas: Sequence[Area]) -> List[Connection]:
    """One connection per pair of areas, in scan order (area, room, exit).

    When two areas link each other the first link encountered wins and keeps
    its direction; the reverse link's direction is discarded.
    """
    result: List[Connection] = []
    seen: Set[Tuple[str, str]] = set()
    for conn in _raw_connections(areas):
        if (conn.source, conn.target) in seen or (conn.target, conn.source) in seen:
            continue
        seen.add((conn.source, conn.target))
        result.append(conn)
    return result


def bidirectional_pairs(areas: Sequence[Area]) -> Set[Tuple[str, str]]:
    """All (source, target) pairs whose reverse also exists in the exit graph."""
    raw = {(c.source, c.target) for c in _raw_connections(areas)}
    return {(a, b) for (a, b) in raw if (b, a) in raw}
