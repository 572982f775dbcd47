from __future__ import annotations

import pytest

from welltracks.config import DEFAULT_PALETTE, default_config
from welltracks.model import Measurement
from welltracks.render.bands import assign_colors, build_bands, category_bands
from welltracks.render.normalize import normalize
from welltracks.render.scales import PlotGeometry, build_scales


def _m(depth: float, cat: str) -> Measurement:
    return Measurement(depth=depth, category=cat, value_a=0.0, value_b=0.0)


def test_assign_colors_first_seen_order() -> None:
    recs = [_m(i, c) for i, c in enumerate(["Sandstone", "Shale", "Sandstone", "Limestone"])]
    colors = assign_colors(recs, DEFAULT_PALETTE)
    assert list(colors) == ["Sandstone", "Shale", "Limestone"]
    assert list(colors.values()) == list(DEFAULT_PALETTE[:3])


def test_assign_colors_wraps_after_palette() -> None:
    recs = [_m(i, f"rock{i}") for i in range(11)]
    colors = assign_colors(recs, DEFAULT_PALETTE)
    assert len(colors) == 11
    assert colors["rock10"] == DEFAULT_PALETTE[0]
    assert all(colors.values())


def test_assign_colors_empty_palette() -> None:
    with pytest.raises(ValueError):
        assign_colors([_m(0, "Shale")], ())


def test_category_bands_one_per_record_not_merged() -> None:
    recs = [_m(10, "Shale"), _m(20, "Shale"), _m(35, "Sandstone")]
    bands = category_bands(recs, bottom_depth=35.0)
    assert [(b.category, b.depth_start, b.depth_end) for b in bands] == [
        ("Shale", 10.0, 20.0),
        ("Shale", 20.0, 35.0),
        ("Sandstone", 35.0, 35.0),
    ]


def test_bands_cover_depth_range_without_gaps(log_records) -> None:
    ds = normalize(log_records)
    geom = PlotGeometry.from_config(default_config())
    sc = build_scales(ds, geom)
    bands = build_bands(ds.records, sc.depth, geom, assign_colors(ds.records, DEFAULT_PALETTE))

    assert len(bands) == len(log_records)
    assert bands[0].depth_start == ds.depth.min
    for a, b in zip(bands, bands[1:]):
        assert a.depth_end == b.depth_start
        assert a.y + a.height == pytest.approx(b.y)
    assert bands[-1].depth_end == pytest.approx(sc.depth.invert(geom.plot_bottom))
    assert bands[-1].y + bands[-1].height == pytest.approx(geom.plot_bottom)


def test_band_labels_only_when_tall_enough(log_records) -> None:
    ds = normalize(log_records)
    geom = PlotGeometry.from_config(default_config())
    sc = build_scales(ds, geom)
    bands = build_bands(ds.records, sc.depth, geom, assign_colors(ds.records, DEFAULT_PALETTE))

    # 1000->1100 is ~167px, the tied 1100 sample is 0px, the last band is 0px
    assert bands[0].label is not None
    assert bands[0].label.text == "Sandstone"
    assert bands[1].label is None
    assert bands[-1].label is None


def test_band_label_threshold_is_strict() -> None:
    recs = [_m(0, "Shale"), _m(4, "Sandstone"), _m(100, "Shale")]
    ds = normalize(recs)
    geom = PlotGeometry.from_config(default_config())
    sc = build_scales(ds, geom)
    colors = assign_colors(ds.records, DEFAULT_PALETTE)
    # first band is exactly 20px high (4/100 of 500px)
    bands = build_bands(ds.records, sc.depth, geom, colors, label_min_height=20.0)
    assert bands[0].height == pytest.approx(20.0)
    assert bands[0].label is None
    bands = build_bands(ds.records, sc.depth, geom, colors, label_min_height=19.0)
    assert bands[0].label is not None


def test_band_geometry_uses_category_track_inset(two_records) -> None:
    ds = normalize(two_records)
    geom = PlotGeometry.from_config(default_config())
    sc = build_scales(ds, geom)
    bands = build_bands(ds.records, sc.depth, geom, {"Shale": "#111111", "Sandstone": "#222222"}, opacity=0.5)
    b = bands[0]
    assert b.x == pytest.approx(106.0)
    assert b.width == pytest.approx(208.0)
    assert (b.color, b.opacity) == ("#111111", 0.5)
