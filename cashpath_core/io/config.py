from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from cashpath_core.domain.models import ProjectionConfig
from cashpath_core.io.plan import parse_date


def load_projection_config(path: str | Path) -> ProjectionConfig:
    data = _read_json(path)
    today = data.get("today")
    scenario_id = data.get("scenario_id")
    return ProjectionConfig(
        horizon_days=int(data.get("horizon_days", 120)),
        today=parse_date(today, "config today") if today else None,
        scenario_id=str(scenario_id) if scenario_id is not None else None,
    )


def _read_json(path: str | Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
