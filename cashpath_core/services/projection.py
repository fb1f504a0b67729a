from __future__ import annotations

import datetime as dt
import logging
import math
from typing import Iterable, List, Optional, Sequence

import numpy as np

from cashpath_core.domain.models import (
    Account,
    CashFlowEntry,
    CreditCard,
    LifeEvent,
    Paycheck,
    ProjectionPoint,
    ProjectionResult,
)
from cashpath_core.services import expansion

logger = logging.getLogger(__name__)

DEFAULT_HORIZON_DAYS = 120


def round_cents(value: float) -> float:
    # half-cent values round up, including for negatives (-0.125 -> -0.12)
    return math.floor(value * 100 + 0.5) / 100


def _bucket(
    entries: Iterable[CashFlowEntry],
    today: dt.date,
    days: int,
    out: np.ndarray,
    magnitude: bool = True,
) -> None:
    """Add each entry into its day slot; entries outside the window are dropped."""
    offsets = []
    amounts = []
    for e in entries:
        offset = (e.date - today).days
        if 0 <= offset < days:
            offsets.append(offset)
            amounts.append(abs(e.amount) if magnitude else e.amount)
    if offsets:
        np.add.at(out, np.asarray(offsets, dtype=int), np.asarray(amounts, dtype=float))


def build_projection(
    accounts: Sequence[Account],
    paychecks: Sequence[Paycheck],
    credit_cards: Sequence[CreditCard],
    life_events: Sequence[LifeEvent],
    horizon_days: int = DEFAULT_HORIZON_DAYS,
    today: Optional[dt.date] = None,
) -> ProjectionResult:
    """
    Day-by-day running balance from today through today + horizon_days.

    - Starting balance is the sum of all account balances.
    - Paychecks and income-like life events count as inflow; card dues and
      all other life events count as outflow.
    - Paycheck amounts are summed as given, so a negative paycheck lowers
      the balance.
    - Emitted balances are rounded to cents, half up; the carried balance
      is not.
    """
    if horizon_days < 0:
        raise ValueError(f"horizon_days must be non-negative, got {horizon_days}")
    today = today or dt.date.today()
    days = horizon_days + 1

    start_balance = sum((a.current_balance or 0.0) for a in accounts)

    paycheck_entries = expansion.expand_paychecks(paychecks, horizon_days, today)
    event_entries = expansion.expand_life_events(life_events, horizon_days, today)
    card_entries = expansion.expand_credit_cards(credit_cards, horizon_days, today)

    inflows = np.zeros(days)
    outflows = np.zeros(days)
    _bucket(paycheck_entries, today, days, inflows, magnitude=False)
    _bucket((e for e in event_entries if e.amount > 0), today, days, inflows)
    _bucket(card_entries, today, days, outflows)
    _bucket((e for e in event_entries if e.amount < 0), today, days, outflows)

    balance = start_balance
    lowest_balance = start_balance
    lowest_date = today
    series: List[ProjectionPoint] = []

    for i in range(days):
        day = today + dt.timedelta(days=i)
        inflow = float(inflows[i])
        outflow = float(outflows[i])
        balance = balance + inflow - outflow

        if balance < lowest_balance:
            lowest_balance = balance
            lowest_date = day

        series.append(
            ProjectionPoint(date=day, balance=round_cents(balance), inflow=inflow, outflow=outflow)
        )

    logger.debug(
        "Projected %d days from %s: lowest %.2f on %s, ending %.2f",
        days,
        today.isoformat(),
        lowest_balance,
        lowest_date.isoformat(),
        balance,
    )
    return ProjectionResult(
        series=series,
        lowest_balance=lowest_balance,
        lowest_date=lowest_date,
        ending_balance=balance,
    )
