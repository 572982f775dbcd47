# src/welltracks/render/scales.py
from __future__ import annotations

from dataclasses import dataclass

from welltracks.config.schema import RenderConfig
from welltracks.model import Range

from .normalize import NormalizedDataset


@dataclass(frozen=True)
class LinearScale:
    """
    Affine map from a data domain to a pixel range:

        f(v) = range_offset + (v - domain_min) / (domain_max - domain_min) * range_span

    A zero-width domain maps every input to the midpoint of the pixel range.
    """
    domain_min: float
    domain_max: float
    range_offset: float
    range_span: float

    @property
    def domain_span(self) -> float:
        return float(self.domain_max) - float(self.domain_min)

    @property
    def is_degenerate(self) -> bool:
        return self.domain_span == 0.0

    def __call__(self, value: float) -> float:
        if self.is_degenerate:
            return self.range_offset + self.range_span / 2.0
        return self.range_offset + (float(value) - self.domain_min) / self.domain_span * self.range_span

    def invert(self, pixel: float) -> float:
        if self.is_degenerate or self.range_span == 0.0:
            return float(self.domain_min)
        return self.domain_min + (float(pixel) - self.range_offset) / self.range_span * self.domain_span

    @classmethod
    def from_range(cls, r: Range, *, offset: float, span: float) -> "LinearScale":
        return cls(float(r.min), float(r.max), float(offset), float(span))


@dataclass(frozen=True)
class PlotGeometry:
    width: float
    height: float
    plot_top: float
    plot_bottom: float
    plot_left: float
    plot_right: float
    inset_frac: float = 0.1

    @property
    def plot_width(self) -> float:
        return self.plot_right - self.plot_left

    @property
    def plot_height(self) -> float:
        return self.plot_bottom - self.plot_top

    @property
    def track_width(self) -> float:
        return self.plot_width / 3.0

    def track_left(self, i: int) -> float:
        return self.plot_left + self.track_width * int(i)

    def track_center(self, i: int) -> float:
        return self.track_left(i) + self.track_width / 2.0

    def track_inner(self, i: int) -> tuple[float, float]:
        """(left, width) of track i after the inset on both sides."""
        pad = self.track_width * float(self.inset_frac)
        return self.track_left(i) + pad, self.track_width - 2.0 * pad

    @classmethod
    def from_config(cls, cfg: RenderConfig) -> "PlotGeometry":
        c = cfg.chart
        p = c.padding
        return cls(
            width=float(c.width),
            height=float(c.height),
            plot_top=float(p.top),
            plot_bottom=float(c.height) - float(p.bottom),
            plot_left=float(p.left),
            plot_right=float(c.width) - float(p.right),
            inset_frac=float(cfg.tracks.inset_frac),
        )


CATEGORY_TRACK = 0
VALUE_A_TRACK = 1
VALUE_B_TRACK = 2


@dataclass(frozen=True)
class TrackScales:
    depth: LinearScale
    value_a: LinearScale
    value_b: LinearScale


def build_scales(ds: NormalizedDataset, geom: PlotGeometry) -> TrackScales:
    a_left, a_width = geom.track_inner(VALUE_A_TRACK)
    b_left, b_width = geom.track_inner(VALUE_B_TRACK)
    return TrackScales(
        depth=LinearScale.from_range(ds.depth, offset=geom.plot_top, span=geom.plot_height),
        value_a=LinearScale.from_range(ds.value_a, offset=a_left, span=a_width),
        value_b=LinearScale.from_range(ds.value_b, offset=b_left, span=b_width),
    )
