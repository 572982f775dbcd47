# src/welltracks/render/compositor.py
from __future__ import annotations

from typing import List, Optional, Tuple

from welltracks.config.defaults import default_config
from welltracks.config.schema import RenderConfig

from .bands import assign_colors, build_bands
from .layout import Divider, GridLine, Layout, LegendEntry, LineTrack, TextLabel
from .normalize import NormalizedDataset
from .scales import (
    CATEGORY_TRACK,
    VALUE_A_TRACK,
    VALUE_B_TRACK,
    LinearScale,
    PlotGeometry,
    build_scales,
)


def depth_ticks(ds: NormalizedDataset, n: int) -> List[float]:
    """n + 1 tick depths: min_depth + i * (depth_span / n) for i in [0, n]."""
    n = int(n)
    step = ds.depth.span / n
    return [ds.depth.min + i * step for i in range(n + 1)]


def _gridlines(ds: NormalizedDataset, depth_scale: LinearScale, geom: PlotGeometry, n: int) -> Tuple[GridLine, ...]:
    out = []
    for d in depth_ticks(ds, n):
        y = depth_scale(d)
        out.append(
            GridLine(
                depth=d,
                y=y,
                x1=geom.plot_left,
                x2=geom.plot_right,
                label=TextLabel(
                    text=str(int(round(d))),
                    x=geom.plot_left - 10.0,
                    y=y,
                    anchor="end",
                    baseline="middle",
                    role="tick",
                ),
            )
        )
    return tuple(out)


def _axis_labels(ds: NormalizedDataset, geom: PlotGeometry) -> Tuple[TextLabel, ...]:
    # min at the inset left edge, max at the inset right edge of each value track
    y = geom.plot_bottom + 45.0
    out = []
    for track, rng in ((VALUE_A_TRACK, ds.value_a), (VALUE_B_TRACK, ds.value_b)):
        left, width = geom.track_inner(track)
        out.append(TextLabel(text=f"{rng.min:.0f}", x=left, y=y, anchor="start", role="axis_min"))
        out.append(TextLabel(text=f"{rng.max:.0f}", x=left + width, y=y, anchor="end", role="axis_max"))
    return tuple(out)


def _line_track(
    name: str,
    ds: NormalizedDataset,
    attr: str,
    scale: LinearScale,
    depth_scale: LinearScale,
    *,
    color: str,
    cfg: RenderConfig,
) -> LineTrack:
    # depth order, never resorted by value
    pts = tuple((scale(getattr(r, attr)), depth_scale(r.depth)) for r in ds.records)
    return LineTrack(
        name=name,
        color=color,
        line_width=float(cfg.tracks.line_width),
        marker_radius=float(cfg.tracks.marker_radius),
        points=pts,
    )


def compose(ds: NormalizedDataset, cfg: Optional[RenderConfig] = None) -> Layout:
    """
    Lay out the three depth-aligned tracks for a normalized dataset.

    Track order, left to right: categorical bands, value_a line, value_b line.
    Pure function of (ds, cfg); repeated calls give identical layouts.
    """
    cfg = (cfg or default_config()).validate()
    geom = PlotGeometry.from_config(cfg)
    scales = build_scales(ds, geom)

    colors = assign_colors(ds.records, cfg.bands.palette)
    bands = build_bands(
        ds.records,
        scales.depth,
        geom,
        colors,
        opacity=cfg.bands.opacity,
        label_min_height=cfg.bands.label_min_height,
    )

    tracks = (
        _line_track("value_a", ds, "value_a", scales.value_a, scales.depth, color=cfg.tracks.value_a_color, cfg=cfg),
        _line_track("value_b", ds, "value_b", scales.value_b, scales.depth, color=cfg.tracks.value_b_color, cfg=cfg),
    )

    dividers = tuple(
        Divider(x=geom.track_left(i), y1=geom.plot_top, y2=geom.plot_bottom) for i in (VALUE_A_TRACK, VALUE_B_TRACK)
    )

    header_y = geom.plot_bottom + 25.0
    headers = tuple(
        TextLabel(text=text, x=geom.track_center(i), y=header_y, anchor="middle", role="header")
        for i, text in (
            (CATEGORY_TRACK, cfg.tracks.category_header),
            (VALUE_A_TRACK, cfg.tracks.value_a_header),
            (VALUE_B_TRACK, cfg.tracks.value_b_header),
        )
    )

    return Layout(
        width=geom.width,
        height=geom.height,
        plot_top=geom.plot_top,
        plot_bottom=geom.plot_bottom,
        plot_left=geom.plot_left,
        plot_right=geom.plot_right,
        title=TextLabel(text=cfg.chart.title, x=geom.width / 2.0, y=25.0, anchor="middle", role="title"),
        depth_label=TextLabel(
            text=cfg.chart.depth_label,
            x=20.0,
            y=geom.height / 2.0,
            anchor="middle",
            rotation=-90.0,
            role="depth_axis",
        ),
        gridlines=_gridlines(ds, scales.depth, geom, cfg.grid.ticks),
        grid_color=cfg.grid.line_color,
        dividers=dividers,
        divider_color=cfg.grid.divider_color,
        headers=headers,
        axis_labels=_axis_labels(ds, geom),
        bands=bands,
        tracks=tracks,
        legend=tuple(LegendEntry(category=k, color=v) for k, v in colors.items()),
    )
