from __future__ import annotations

import math

from cashpath_core.domain.models import ProjectionResult, ProjectionSummary


def summarize(result: ProjectionResult, start_balance: float) -> ProjectionSummary:
    """
    Headline figures for a projection. The 30-day delta compares the 30th
    projected day against today's balance and is 0 for shorter series.
    """
    delta_30d = 0.0
    if len(result.series) > 30:
        delta_30d = result.series[29].balance - start_balance

    return ProjectionSummary(
        starting_balance=start_balance,
        delta_30d=delta_30d,
        lowest_balance=result.lowest_balance,
        lowest_date=result.lowest_date,
        ending_balance=result.ending_balance,
        days=len(result.series),
    )


def format_currency(value: float) -> str:
    if value is None or math.isnan(value):
        return "$0"
    rounded = round(value)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,.0f}"
