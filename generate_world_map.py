#!/usr/bin/env python3
"""
generate_world_map.py: Lay out areas.json as a world map (HTML, optional PNG/PDF).

Loads the areas file, derives area-to-area connections from room exits, runs
the force-directed layout and writes world-map.html next to the input.

Usage:
  python generate_world_map.py areas.json [--out map.html] [--png map.png]
                                          [--iterations 100] [--seed 7]
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import random
import sys
from typing import List, Optional

import map_config
from connections import bidirectional_pairs, find_directional_connections
from force_layout import ForceDirectedGraph, WorldLayout
from world_data import Area, load_areas
from world_map_svg import save_html


def build_layout(
    areas: List[Area],
    width: float,
    height: float,
    iterations: int,
    seed: Optional[int] = None,
) -> WorldLayout:
    print(f"Processing areas: {len(areas)}")
    connections = find_directional_connections(areas)
    print(f"Found connections: {len(connections)}")

    rng = random.Random(seed) if seed is not None else None
    graph = ForceDirectedGraph(
        areas,
        connections,
        width,
        height,
        settings=map_config.force_settings_from_env(),
        rng=rng,
    )
    graph.simulate(iterations)
    return graph.layout_result(bidirectional=bidirectional_pairs(areas))


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Generate a world map from an areas JSON file.")
    parser.add_argument("input", help="Path to areas.json")
    parser.add_argument("--out", default=None, help="Output HTML path (default: world-map.html beside the input)")
    parser.add_argument("--png", default=None, help="Also draw the map to this PNG path")
    parser.add_argument("--pdf", default=None, help="Also draw the map to this PDF path (needs --png)")
    parser.add_argument("--iterations", type=int, default=map_config.LAYOUT_ITERATIONS)
    parser.add_argument("--width", type=float, default=map_config.MAP_WIDTH)
    parser.add_argument("--height", type=float, default=map_config.MAP_HEIGHT)
    parser.add_argument("--seed", type=int, default=None, help="Seed initial positions for a repeatable map")
    parser.add_argument("--title", default=map_config.MAP_TITLE)
    parser.add_argument("--verbose", action="store_true", help="Debug logging (skipped exits, dropped edges)")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.pdf and not args.png:
        parser.error("--pdf requires --png")

    try:
        areas = load_areas(args.input)
    except (OSError, json.JSONDecodeError, ValueError) as e:
        print(f"Error reading areas file: {e}", file=sys.stderr)
        return 1

    layout = build_layout(areas, args.width, args.height, args.iterations, seed=args.seed)

    out_path = args.out or os.path.join(os.path.dirname(os.path.abspath(args.input)), map_config.MAP_FILENAME)
    try:
        save_html(layout, out_path, title=args.title)
        if args.png:
            from draw_world_map import draw_world_map

            draw_world_map(layout, args.png, out_pdf=args.pdf, title=args.title, dpi=map_config.MAP_DPI)
    except OSError as e:
        print(f"Error writing output file: {e}", file=sys.stderr)
        return 1

    print(f"Map generated successfully: {out_path}")
    if args.png:
        print(f"Wrote: {args.png}")
    if args.pdf:
        print(f"Wrote: {args.pdf}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
