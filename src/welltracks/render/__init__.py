# src/welltracks/render/__init__.py
from __future__ import annotations

from typing import Iterable, Optional, Union

from welltracks.config.schema import RenderConfig
from welltracks.model import Measurement

from .bands import assign_colors, build_bands, category_bands
from .compositor import compose, depth_ticks
from .layout import BandRect, Divider, EmptyInputState, GridLine, Layout, LegendEntry, LineTrack, TextLabel
from .normalize import EmptyInputError, NormalizedDataset, normalize
from .scales import LinearScale, PlotGeometry, TrackScales, build_scales


def render(
    records: Iterable[Measurement],
    cfg: Optional[RenderConfig] = None,
) -> Union[Layout, EmptyInputState]:
    """
    Normalize -> scale -> bands/lines -> compose.

    Returns EmptyInputState (never raises) when there are no records.
    """
    try:
        ds = normalize(records)
    except EmptyInputError:
        return EmptyInputState()
    return compose(ds, cfg)


__all__ = [
    "BandRect",
    "Divider",
    "EmptyInputError",
    "EmptyInputState",
    "GridLine",
    "Layout",
    "LegendEntry",
    "LineTrack",
    "LinearScale",
    "NormalizedDataset",
    "PlotGeometry",
    "TextLabel",
    "TrackScales",
    "assign_colors",
    "build_bands",
    "build_scales",
    "category_bands",
    "compose",
    "depth_ticks",
    "normalize",
    "render",
]
