# src/welltracks/config/schema.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


DEFAULT_PALETTE: Tuple[str, ...] = (
    "#8b5cf6",
    "#ec4899",
    "#f59e0b",
    "#10b981",
    "#3b82f6",
    "#ef4444",
    "#14b8a6",
    "#f97316",
    "#a855f7",
    "#06b6d4",
)


@dataclass(frozen=True)
class PaddingConfig:
    top: float = 40.0
    right: float = 40.0
    bottom: float = 60.0
    left: float = 80.0


@dataclass(frozen=True)
class ChartConfig:
    width: float = 900.0
    height: float = 600.0
    padding: PaddingConfig = field(default_factory=PaddingConfig)
    title: str = "Well Drilling Data Visualization"
    depth_label: str = "Depth (ft)"


@dataclass(frozen=True)
class TrackConfig:
    category_header: str = "Rock Composition"
    value_a_header: str = "DT"
    value_b_header: str = "GR"
    value_a_color: str = "#3b82f6"
    value_b_color: str = "#ef4444"
    line_width: float = 2.0
    marker_radius: float = 3.0
    # fraction of a track's width kept clear on each side
    inset_frac: float = 0.1


@dataclass(frozen=True)
class BandConfig:
    palette: Tuple[str, ...] = DEFAULT_PALETTE
    opacity: float = 0.7
    label_min_height: float = 20.0


@dataclass(frozen=True)
class GridConfig:
    ticks: int = 10
    line_color: str = "#e2e8f0"
    divider_color: str = "#94a3b8"


@dataclass(frozen=True)
class RenderConfig:
    chart: ChartConfig = field(default_factory=ChartConfig)
    tracks: TrackConfig = field(default_factory=TrackConfig)
    bands: BandConfig = field(default_factory=BandConfig)
    grid: GridConfig = field(default_factory=GridConfig)

    def validate(self) -> "RenderConfig":
        c = self.chart
        p = c.padding
        if c.width - p.left - p.right <= 0 or c.height - p.top - p.bottom <= 0:
            raise ValueError(
                f"Plot area must be positive (chart {c.width}x{c.height}, padding {p})"
            )
        if not self.bands.palette:
            raise ValueError("bands.palette must contain at least one color")
        if int(self.grid.ticks) < 1:
            raise ValueError(f"grid.ticks must be >= 1 (got {self.grid.ticks!r})")
        if not (0.0 <= float(self.tracks.inset_frac) < 0.5):
            raise ValueError(f"tracks.inset_frac must be in [0, 0.5) (got {self.tracks.inset_frac!r})")
        return self
