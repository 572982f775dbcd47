# src/welltracks/io/__init__.py
from __future__ import annotations

from .measurements import EXCEL_SUFFIXES, frame_to_measurements, load_measurements, pick_col

__all__ = [
    "EXCEL_SUFFIXES",
    "frame_to_measurements",
    "load_measurements",
    "pick_col",
]
