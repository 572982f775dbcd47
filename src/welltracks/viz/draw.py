# src/welltracks/viz/draw.py
from __future__ import annotations

from pathlib import Path
from typing import Dict

import matplotlib

matplotlib.use("Agg")  # headless rendering

import matplotlib.pyplot as plt
from matplotlib.patches import Circle, Patch, Rectangle

from welltracks.render.layout import EmptyInputState, Layout, TextLabel

_HA: Dict[str, str] = {"start": "left", "middle": "center", "end": "right"}
_VA: Dict[str, str] = {"auto": "baseline", "middle": "center"}

LEGEND_PX = 40.0


def _text(ax, lab: TextLabel, *, color: str = "#475569", **kw) -> None:
    ax.text(
        lab.x,
        lab.y,
        lab.text,
        ha=_HA.get(lab.anchor, "left"),
        va=_VA.get(lab.baseline, "baseline"),
        rotation=-lab.rotation,
        rotation_mode="anchor",
        color=color,
        **kw,
    )


def draw_layout(layout: Layout, out_path: Path, *, dpi: int = 100) -> Path:
    """
    Paint a Layout with matplotlib in pixel coordinates (y grows downward).

    The output format follows the file suffix (.png, .svg, .pdf, ...).
    A strip of LEGEND_PX below the chart holds the category legend.
    """
    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)

    W = float(layout.width)
    H = float(layout.height) + LEGEND_PX
    fig = plt.figure(figsize=(W / dpi, H / dpi), dpi=dpi)
    ax = fig.add_axes((0.0, 0.0, 1.0, 1.0))
    ax.set_xlim(0.0, W)
    ax.set_ylim(H, 0.0)
    ax.set_axis_off()

    try:
        for g in layout.gridlines:
            ax.plot([g.x1, g.x2], [g.y, g.y], color=layout.grid_color, linewidth=1.0, zorder=1)
            _text(ax, g.label, fontsize=8)

        for b in layout.bands:
            ax.add_patch(
                Rectangle((b.x, b.y), b.width, b.height, facecolor=b.color, alpha=b.opacity, linewidth=0, zorder=2)
            )
            if b.label is not None:
                _text(ax, b.label, color="white", fontsize=7, zorder=3)

        for d in layout.dividers:
            ax.plot([d.x, d.x], [d.y1, d.y2], color=layout.divider_color, linewidth=2.0, zorder=2)

        for t in layout.tracks:
            if t.points:
                xs = [p[0] for p in t.points]
                ys = [p[1] for p in t.points]
                ax.plot(xs, ys, color=t.color, linewidth=t.line_width, zorder=4)
            for x, y in t.points:
                ax.add_patch(Circle((x, y), t.marker_radius, facecolor=t.color, edgecolor="none", zorder=5))

        _text(ax, layout.title, color="#0f172a", fontsize=12)
        _text(ax, layout.depth_label, color="#0f172a", fontsize=10)
        for lab in layout.headers:
            _text(ax, lab, color="#0f172a", fontsize=10)
        for lab in layout.axis_labels:
            _text(ax, lab, fontsize=8)

        if layout.legend:
            handles = [Patch(facecolor=e.color, label=e.category) for e in layout.legend]
            fig.legend(
                handles=handles,
                loc="lower center",
                ncol=min(len(handles), 6),
                frameon=False,
                fontsize=8,
                title="Rock Types",
                title_fontsize=8,
            )

        fig.savefig(out, dpi=dpi)
    finally:
        plt.close(fig)
    return out


def draw_empty(state: EmptyInputState, out_path: Path, *, width: float = 900.0, height: float = 120.0, dpi: int = 100) -> Path:
    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    fig = plt.figure(figsize=(width / dpi, height / dpi), dpi=dpi)
    try:
        fig.text(0.5, 0.5, state.message, ha="center", va="center", color="#64748b")
        fig.savefig(out, dpi=dpi)
    finally:
        plt.close(fig)
    return out
