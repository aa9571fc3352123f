"""force_layout.py: force-directed placement of areas on a 2D canvas.

Each area becomes a node. Per step:
  1. reset force accumulators
  2. short-range repulsion between overlapping pairs (anti-overlap only)
  3. per connection: a directional pull that steers the target toward the
     compass side of the source, plus a Hookean spring along the edge
  4. integrate velocity/position with damping and clamp to the canvas

The run is a fixed number of steps; there is no convergence test.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Callable, Dict, FrozenSet, List, Optional, Sequence, Set

from compass import get_direction_vector
from connections import Connection
from vector2 import Vector2
from world_data import Area, area_size, clamp

logger = logging.getLogger(__name__)

DEFAULT_ITERATIONS = 100


@dataclass
class ForceSettings:
    repulsion: float = 5000.0
    spring_constant: float = 0.01
    spring_length: float = 200.0
    damping: float = 0.95
    direction_bias: float = 2.0
    min_gap: float = 20.0           # extra clearance added to size_a + size_b
    source_recoil: float = -0.5     # share of the directional pull applied to the source
    spring_share: float = 0.5


@dataclass
class LayoutNode:
    """Simulation record for one area. Only the engine mutates it."""
    name: str
    room_count: int
    size: float
    position: Vector2 = field(default_factory=Vector2.zero)
    velocity: Vector2 = field(default_factory=Vector2.zero)
    force: Vector2 = field(default_factory=Vector2.zero)

    @classmethod
    def from_area(cls, area: Area, position: Vector2) -> "LayoutNode":
        return cls(
            name=area.name,
            room_count=area.room_count,
            size=area_size(area.room_count),
            position=position,
        )


@dataclass
class ResolvedEdge:
    source: LayoutNode
    target: LayoutNode
    direction: str


@dataclass
class WorldLayout:
    """What renderers consume: settled nodes and the edges that survived."""
    width: float
    height: float
    nodes: List[LayoutNode]
    edges: List[ResolvedEdge]
    bidirectional: Set[tuple] = field(default_factory=set)

    def node(self, name: str) -> Optional[LayoutNode]:
        for n in self.nodes:
            if n.name == name:
                return n
        return None


StepCallback = Callable[[int, List[LayoutNode]], None]


class ForceDirectedGraph:
    def __init__(
        self,
        areas: Sequence[Area],
        connections: Sequence[Connection],
        width: float,
        height: float,
        settings: Optional[ForceSettings] = None,
        rng: Optional[random.Random] = None,
        positions: Optional[Dict[str, Vector2]] = None,
    ):
        self.width = float(width)
        self.height = float(height)
        self.settings = settings or ForceSettings()
        self.settled = False
        self.repulsion_pairs: Set[FrozenSet[str]] = set()

        rnd = rng or random
        positions = positions or {}
        self.nodes: List[LayoutNode] = []
        for area in areas:
            # always draw, so injecting one position doesn't shift the others
            start = Vector2(
                self.width / 2 + (rnd.random() - 0.5) * self.width / 4,
                self.height / 2 + (rnd.random() - 0.5) * self.height / 4,
            )
            self.nodes.append(LayoutNode.from_area(area, positions.get(area.name, start)))

        by_name = {n.name: n for n in self.nodes}
        self.edges: List[ResolvedEdge] = []
        for conn in connections:
            source = by_name.get(conn.source)
            target = by_name.get(conn.target)
            if source is None or target is None:
                logger.debug("Dropping edge %s -> %s: unknown area", conn.source, conn.target)
                continue
            self.edges.append(ResolvedEdge(source, target, conn.direction))

    # -----------------------------
    # Forces
    # -----------------------------

    def _apply_repulsion(self) -> None:
        s = self.settings
        nodes = self.nodes
        for i in range(len(nodes)):
            a = nodes[i]
            for j in range(i + 1, len(nodes)):
                b = nodes[j]
                delta = b.position.subtract(a.position)
                distance = max(delta.magnitude(), 1.0)
                min_distance = a.size + b.size + s.min_gap
                if distance >= min_distance:
                    continue
                f = delta.normalize().multiply(s.repulsion / (distance * distance))
                b.force = b.force.add(f).validate()
                a.force = a.force.add(f.multiply(-1)).validate()
                if f.magnitude() > 0:
                    self.repulsion_pairs.add(frozenset((a.name, b.name)))

    def _apply_edge_forces(self) -> None:
        s = self.settings
        for edge in self.edges:
            source, target = edge.source, edge.target
            delta = target.position.subtract(source.position)
            distance = max(delta.magnitude(), 1.0)

            bias = get_direction_vector(edge.direction)
            ideal = source.position.add(bias.multiply(s.spring_length))
            directional = ideal.subtract(target.position).multiply(s.spring_constant * s.direction_bias)
            target.force = target.force.add(directional).validate()
            source.force = source.force.add(directional.multiply(s.source_recoil)).validate()

            spring = delta.normalize().multiply((distance - s.spring_length) * s.spring_constant * s.spring_share)
            source.force = source.force.add(spring).validate()
            target.force = target.force.add(spring.multiply(-1)).validate()

    def _integrate(self) -> None:
        damping = self.settings.damping
        for node in self.nodes:
            node.velocity = node.velocity.add(node.force).multiply(damping).validate()
            pos = node.position.add(node.velocity).validate()
            node.position = Vector2(
                clamp(pos.x, node.size, self.width - node.size),
                clamp(pos.y, node.size, self.height - node.size),
            )

    def apply_forces(self) -> None:
        """One settling step over every node."""
        for node in self.nodes:
            node.force = Vector2.zero()
        self._apply_repulsion()
        self._apply_edge_forces()
        self._integrate()

    def simulate(self, iterations: int = DEFAULT_ITERATIONS, on_step: Optional[StepCallback] = None) -> List[LayoutNode]:
        for i in range(iterations):
            self.apply_forces()
            if on_step is not None:
                on_step(i, self.nodes)
        self.settled = True
        return self.nodes

    def layout_result(self, bidirectional: Optional[Set[tuple]] = None) -> WorldLayout:
        """bidirectional: (source, target) name pairs whose reverse exit also exists."""
        return WorldLayout(
            width=self.width,
            height=self.height,
            nodes=self.nodes,
            edges=list(self.edges),
            bidirectional=set(bidirectional or ()),
        )
