# src/welltracks/render/layout.py
from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Tuple

Point = Tuple[float, float]


@dataclass(frozen=True)
class TextLabel:
    text: str
    x: float
    y: float
    anchor: str = "start"  # start | middle | end
    baseline: str = "auto"  # auto | middle
    rotation: float = 0.0
    role: str = ""


@dataclass(frozen=True)
class GridLine:
    depth: float
    y: float
    x1: float
    x2: float
    label: TextLabel


@dataclass(frozen=True)
class Divider:
    x: float
    y1: float
    y2: float


@dataclass(frozen=True)
class BandRect:
    category: str
    depth_start: float
    depth_end: float
    x: float
    y: float
    width: float
    height: float
    color: str
    opacity: float
    label: Optional[TextLabel] = None


@dataclass(frozen=True)
class LineTrack:
    """Polyline through (x, depth-y) points in depth order, plus a marker per point."""
    name: str
    color: str
    line_width: float
    marker_radius: float
    points: Tuple[Point, ...]


@dataclass(frozen=True)
class LegendEntry:
    category: str
    color: str


@dataclass(frozen=True)
class Layout:
    width: float
    height: float
    plot_top: float
    plot_bottom: float
    plot_left: float
    plot_right: float
    title: TextLabel
    depth_label: TextLabel
    gridlines: Tuple[GridLine, ...]
    grid_color: str
    dividers: Tuple[Divider, ...]
    divider_color: str
    headers: Tuple[TextLabel, ...]
    axis_labels: Tuple[TextLabel, ...]
    bands: Tuple[BandRect, ...]
    tracks: Tuple[LineTrack, ...]
    legend: Tuple[LegendEntry, ...]

    def track(self, name: str) -> LineTrack:
        for t in self.tracks:
            if t.name == name:
                return t
        raise KeyError(name)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self, *, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent, sort_keys=True)


@dataclass(frozen=True)
class EmptyInputState:
    """What the host shows instead of a chart when there is nothing to plot."""
    message: str = "No data to display"

    def to_dict(self) -> Dict[str, Any]:
        return {"empty": True, "message": self.message}
