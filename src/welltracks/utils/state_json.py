# src/welltracks/utils/state_json.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict


def write_state_json(out_path: Path, payload: Dict[str, Any]) -> Path:
    p = Path(out_path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
    return p
