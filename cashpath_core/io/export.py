from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import pandas as pd

from cashpath_core.domain.models import ProjectionResult


def projection_to_dict(result: ProjectionResult) -> Dict[str, Any]:
    return {
        "series": [
            {
                "date": p.date.isoformat(),
                "balance": p.balance,
                "inflow": p.inflow,
                "outflow": p.outflow,
            }
            for p in result.series
        ],
        "lowest_balance": result.lowest_balance,
        "lowest_date": result.lowest_date.isoformat() if result.lowest_date else None,
        "ending_balance": result.ending_balance,
    }


def projection_to_frame(result: ProjectionResult) -> pd.DataFrame:
    df = pd.DataFrame(
        [
            {"date": p.date, "balance": p.balance, "inflow": p.inflow, "outflow": p.outflow}
            for p in result.series
        ],
        columns=["date", "balance", "inflow", "outflow"],
    )
    df["date"] = pd.to_datetime(df["date"])
    return df.set_index("date")


def write_projection_csv(result: ProjectionResult, path: str | Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    projection_to_frame(result).to_csv(path, date_format="%Y-%m-%d")
    return path
