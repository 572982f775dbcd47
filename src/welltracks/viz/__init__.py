from __future__ import annotations

from .draw import draw_empty, draw_layout

__all__ = ["draw_empty", "draw_layout"]
