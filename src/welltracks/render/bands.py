# src/welltracks/render/bands.py
from __future__ import annotations

from typing import Dict, Iterable, Sequence, Tuple

from welltracks.model import CategoryBand, Measurement

from .layout import BandRect, TextLabel
from .scales import CATEGORY_TRACK, LinearScale, PlotGeometry


def assign_colors(records: Iterable[Measurement], palette: Sequence[str]) -> Dict[str, str]:
    """
    Map each distinct category to a palette color in first-seen order.

    The i-th distinct category gets palette[i % len(palette)], so categories
    past the end of the palette wrap around instead of going blank.
    """
    if not palette:
        raise ValueError("palette must contain at least one color")
    out: Dict[str, str] = {}
    for r in records:
        if r.category not in out:
            out[r.category] = palette[len(out) % len(palette)]
    return out


def category_bands(records: Sequence[Measurement], bottom_depth: float) -> Tuple[CategoryBand, ...]:
    """
    One band per measurement; band i ends where measurement i+1 starts and the
    last band runs to bottom_depth. Consecutive equal categories are NOT merged.
    """
    n = len(records)
    out = []
    for i, r in enumerate(records):
        end = records[i + 1].depth if i + 1 < n else bottom_depth
        out.append(CategoryBand(category=r.category, depth_start=float(r.depth), depth_end=float(end)))
    return tuple(out)


def build_bands(
    records: Sequence[Measurement],
    depth_scale: LinearScale,
    geom: PlotGeometry,
    colors: Dict[str, str],
    *,
    opacity: float = 0.7,
    label_min_height: float = 20.0,
) -> Tuple[BandRect, ...]:
    x, width = geom.track_inner(CATEGORY_TRACK)
    cx = geom.track_center(CATEGORY_TRACK)
    bottom_depth = depth_scale.invert(geom.plot_bottom)

    out = []
    for i, band in enumerate(category_bands(records, bottom_depth)):
        y1 = depth_scale(band.depth_start)
        y2 = depth_scale(records[i + 1].depth) if i + 1 < len(records) else geom.plot_bottom
        h = y2 - y1

        label = None
        if h > float(label_min_height):
            label = TextLabel(
                text=band.category,
                x=cx,
                y=y1 + h / 2.0,
                anchor="middle",
                baseline="middle",
                role="band",
            )

        out.append(
            BandRect(
                category=band.category,
                depth_start=band.depth_start,
                depth_end=band.depth_end,
                x=x,
                y=y1,
                width=width,
                height=h,
                color=colors[band.category],
                opacity=float(opacity),
                label=label,
            )
        )
    return tuple(out)
