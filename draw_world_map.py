"""draw_world_map.py: matplotlib rendering of a settled WorldLayout (PNG/PDF)."""

from __future__ import annotations

import os
from typing import Optional

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.patches import Circle  # noqa: E402
import numpy as np  # noqa: E402

from force_layout import ResolvedEdge, WorldLayout  # noqa: E402
from world_map_svg import CURVE_OFFSET, label_font_size  # noqa: E402

# Drawing knobs (env override)
WORLD_CONN_LW = float(os.environ.get("WORLD_CONN_LW", "1.5"))
WORLD_CONN_ALPHA = float(os.environ.get("WORLD_CONN_ALPHA", "0.75"))
CURVE_SAMPLES = int(os.environ.get("CURVE_SAMPLES", "24"))


def bezier_points(edge: ResolvedEdge, bow: float = 1.0, samples: int = CURVE_SAMPLES) -> Optional[np.ndarray]:
    """(samples, 2) points along the quadratic curve source -> target.

    bow=+1 bends to the same side as the SVG forward path, -1 to the other.
    """
    p0 = np.array(edge.source.position.as_tuple(), dtype=float)
    p2 = np.array(edge.target.position.as_tuple(), dtype=float)
    d = p2 - p0
    dist = float(np.hypot(d[0], d[1]))
    if dist == 0 or not np.isfinite(dist):
        return None
    normal = np.array([-d[1], d[0]]) / dist * CURVE_OFFSET * bow
    p1 = (p0 + p2) / 2.0 + normal

    t = np.linspace(0.0, 1.0, samples)[:, None]
    return (1 - t) ** 2 * p0 + 2 * (1 - t) * t * p1 + t ** 2 * p2


def _draw_curve(ax, pts: np.ndarray) -> None:
    ax.plot(pts[:, 0], pts[:, 1], color="#666666", linewidth=WORLD_CONN_LW, alpha=WORLD_CONN_ALPHA, zorder=1)
    ax.annotate(
        "",
        xy=tuple(pts[-1]),
        xytext=tuple(pts[-2]),
        arrowprops=dict(arrowstyle="-|>", color="#666666", lw=WORLD_CONN_LW, alpha=WORLD_CONN_ALPHA),
        zorder=2,
    )


def draw_world_map(
    layout: WorldLayout,
    out_png: str,
    out_pdf: Optional[str] = None,
    title: str = "",
    dpi: int = 150,
) -> None:
    if not layout.nodes:
        print("[warn] No areas in layout; nothing to draw.")
        return

    # --- Crop to the occupied region instead of the whole virtual canvas ---
    xy = np.array([n.position.as_tuple() for n in layout.nodes], dtype=float)
    sizes = np.array([n.size for n in layout.nodes], dtype=float)
    minx, miny = (xy - sizes[:, None]).min(axis=0)
    maxx, maxy = (xy + sizes[:, None]).max(axis=0)
    world_w = max(1e-6, maxx - minx)
    world_h = max(1e-6, maxy - miny)
    pad = max(0.05 * max(world_w, world_h), CURVE_OFFSET)

    fig_w = float(np.clip(world_w / 100.0, 6.0, 40.0))
    fig_h = float(np.clip(world_h / 100.0, 6.0, 40.0))
    fig, ax = plt.subplots(figsize=(fig_w, fig_h), dpi=dpi)
    ax.set_aspect("equal", adjustable="box")
    ax.set_xlim(minx - pad, maxx + pad)
    # screen coordinates: y grows downward, so north stays at the top
    ax.set_ylim(maxy + pad, miny - pad)
    ax.axis("off")
    if title:
        ax.set_title(title, fontsize=14, fontweight="bold")

    # -----------------------------
    # Connections (under areas)
    # -----------------------------
    for edge in layout.edges:
        pts = bezier_points(edge)
        if pts is None:
            continue
        _draw_curve(ax, pts)
        if (edge.source.name, edge.target.name) in layout.bidirectional:
            back = bezier_points(edge, bow=-1.0)
            _draw_curve(ax, back[::-1])

    # -----------------------------
    # Areas + labels
    # -----------------------------
    for node in layout.nodes:
        x, y = node.position.as_tuple()
        ax.add_patch(Circle((x, y), node.size, facecolor="#e2e8f0", edgecolor="#64748b", linewidth=2, zorder=5))
        ax.text(
            x,
            y,
            node.name,
            ha="center",
            va="center",
            fontsize=max(4.0, label_font_size(node.size)),
            zorder=6,
        )

    fig.tight_layout(pad=0.2)
    fig.savefig(out_png, bbox_inches="tight")
    if out_pdf:
        fig.savefig(out_pdf, bbox_inches="tight")
    plt.close(fig)
