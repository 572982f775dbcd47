# src/welltracks/utils/config.py
from __future__ import annotations

from dataclasses import is_dataclass
from pathlib import Path
from typing import Any, Dict, Optional

try:
    import yaml  # type: ignore
except Exception:  # pragma: no cover
    yaml = None  # type: ignore

from welltracks.config.defaults import default_config
from welltracks.config.schema import (
    BandConfig,
    ChartConfig,
    GridConfig,
    PaddingConfig,
    RenderConfig,
    TrackConfig,
)


def require_yaml() -> None:
    if yaml is None:
        raise RuntimeError("PyYAML is required for --config. Install with: pip install pyyaml")


def load_yaml(path: Path) -> Dict[str, Any]:
    require_yaml()
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config not found: {p}")
    obj = yaml.safe_load(p.read_text(encoding="utf-8"))
    return obj if isinstance(obj, dict) else {}


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = deep_merge(out[k], v)  # type: ignore[arg-type]
        else:
            out[k] = v
    return out


def as_plain_dict(x: Any) -> Any:
    if is_dataclass(x):
        return {k: as_plain_dict(v) for k, v in x.__dict__.items()}
    if isinstance(x, dict):
        return {k: as_plain_dict(v) for k, v in x.items()}
    if isinstance(x, (list, tuple)):
        return [as_plain_dict(v) for v in x]
    return x


def config_from_dict(d: Dict[str, Any]) -> RenderConfig:
    """
    Build a RenderConfig from a (possibly partial) nested dict.

    Missing keys fall back to default_config(); unknown keys raise TypeError
    from the dataclass constructors so typos in YAML are not silently ignored.
    """
    merged = deep_merge(as_plain_dict(default_config()), d or {})

    chart = dict(merged.get("chart") or {})
    chart["padding"] = PaddingConfig(**(chart.get("padding") or {}))

    bands = dict(merged.get("bands") or {})
    palette = bands.get("palette") or ()
    if isinstance(palette, str):
        palette = (palette,)
    bands["palette"] = tuple(str(c) for c in palette)

    cfg = RenderConfig(
        chart=ChartConfig(**chart),
        tracks=TrackConfig(**(merged.get("tracks") or {})),
        bands=BandConfig(**bands),
        grid=GridConfig(**(merged.get("grid") or {})),
    )
    return cfg.validate()


def load_render_config(path: Optional[Path] = None) -> RenderConfig:
    if path is None:
        return default_config()
    return config_from_dict(load_yaml(Path(path)))
