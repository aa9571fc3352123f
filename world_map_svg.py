"""world_map_svg.py: render a settled WorldLayout as SVG / standalone HTML."""

from __future__ import annotations

import math
from html import escape
from typing import List, Optional, Tuple

from force_layout import ResolvedEdge, WorldLayout

CURVE_OFFSET = 50.0
STROKE = "#666"
AREA_FILL = "#e2e8f0"
AREA_STROKE = "#64748b"


def label_font_size(size: float) -> float:
    return min(size / 4.0, 14.0)


def curve_paths(edge: ResolvedEdge) -> Optional[Tuple[str, str]]:
    """Forward and reverse quadratic Bezier paths, bowed to opposite sides.

    Returns None when the endpoints coincide (nothing sensible to draw).
    """
    sx, sy = edge.source.position.as_tuple()
    tx, ty = edge.target.position.as_tuple()
    dx, dy = tx - sx, ty - sy
    distance = math.sqrt(dx * dx + dy * dy)
    if distance == 0 or not math.isfinite(distance):
        return None

    mid_x, mid_y = (sx + tx) / 2.0, (sy + ty) / 2.0
    nx, ny = -dy / distance * CURVE_OFFSET, dx / distance * CURVE_OFFSET
    forward = f"M {sx:.2f} {sy:.2f} Q {mid_x + nx:.2f} {mid_y + ny:.2f} {tx:.2f} {ty:.2f}"
    reverse = f"M {tx:.2f} {ty:.2f} Q {mid_x - nx:.2f} {mid_y - ny:.2f} {sx:.2f} {sy:.2f}"
    return forward, reverse


def _path(d: str) -> str:
    return f'<path d="{d}" fill="none" stroke="{STROKE}" stroke-width="2" marker-end="url(#arrowhead)" />'


def render_svg(layout: WorldLayout) -> str:
    w, h = layout.width, layout.height
    parts: List[str] = [
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {w:g} {h:g}" width="{w:g}" height="{h:g}">',
        "<defs>",
        '<marker id="arrowhead" markerWidth="10" markerHeight="7" refX="9" refY="3.5" orient="auto">',
        f'<polygon points="0 0, 10 3.5, 0 7" fill="{STROKE}" />',
        "</marker>",
        "</defs>",
    ]

    for edge in layout.edges:
        paths = curve_paths(edge)
        if paths is None:
            continue
        forward, reverse = paths
        parts.append(_path(forward))
        if (edge.source.name, edge.target.name) in layout.bidirectional:
            parts.append(_path(reverse))

    # areas last so circles sit on top of the connection lines
    for node in layout.nodes:
        x, y = node.position.as_tuple()
        parts.append("<g>")
        parts.append(
            f'<circle cx="{x:.2f}" cy="{y:.2f}" r="{node.size:g}" '
            f'fill="{AREA_FILL}" stroke="{AREA_STROKE}" stroke-width="2" />'
        )
        parts.append(
            f'<text x="{x:.2f}" y="{y:.2f}" text-anchor="middle" dominant-baseline="middle" '
            f'font-family="Arial" font-size="{label_font_size(node.size):g}px">{escape(node.name)}</text>'
        )
        parts.append("</g>")

    parts.append("</svg>")
    return "\n".join(parts)


PAGE_STYLE = """
body {
    margin: 0;
    padding: 20px;
    display: flex;
    justify-content: center;
    align-items: center;
    min-height: 100vh;
    background-color: #f8fafc;
    font-family: Arial, sans-serif;
}
.card {
    background: white;
    border-radius: 8px;
    box-shadow: 0 1px 3px 0 rgba(0, 0, 0, 0.1);
    padding: 20px;
    max-width: 900px;
    width: 100%;
}
.card-title {
    font-size: 24px;
    font-weight: bold;
    margin-bottom: 20px;
    color: #1e293b;
}
.card svg {
    width: 100%;
    height: auto;
}
"""


def render_html(layout: WorldLayout, title: str = "Game World Map") -> str:
    t = escape(title)
    return "\n".join(
        [
            "<!DOCTYPE html>",
            "<html>",
            "<head>",
            '<meta charset="utf-8">',
            f"<title>{t}</title>",
            f"<style>{PAGE_STYLE}</style>",
            "</head>",
            "<body>",
            '<div class="card">',
            f'<div class="card-title">{t}</div>',
            render_svg(layout),
            "</div>",
            "</body>",
            "</html>",
            "",
        ]
    )


def save_html(layout: WorldLayout, path: str, title: str = "Game World Map") -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(render_html(layout, title=title))
