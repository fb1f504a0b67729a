from __future__ import annotations

import datetime as dt
import logging
from typing import Iterable, List, Optional

from cashpath_core.domain.models import CashFlowEntry, CreditCard, LifeEvent, Paycheck

logger = logging.getLogger(__name__)

INCOME_KEYWORDS = ("income", "raise", "bonus", "gift", "refund")

PAYCHECK_STEP_DAYS = {
    "weekly": 7,
    "biweekly": 14,
    "bi-weekly": 14,
    "fortnightly": 14,
    "semimonthly": 15,
    "semi-monthly": 15,
    "quarterly": 90,
}
PAYCHECK_DEFAULT_STEP_DAYS = 30

# Recurrences missing here occur once.
LIFE_EVENT_STEP_DAYS = {
    "weekly": 7,
    "biweekly": 14,
    "bi-weekly": 14,
    "monthly": 30,
    "yearly": 365,
    "annually": 365,
}

CREDIT_CARD_STEP_DAYS = 30


def _horizon(today: dt.date, horizon_days: int) -> dt.date:
    return today + dt.timedelta(days=horizon_days)


def is_income_life_event(event_type: str) -> bool:
    """
    Keyword heuristic: any income keyword appearing anywhere in the type
    (case-insensitive) makes the event an inflow.
    """
    lowered = (event_type or "").lower()
    return any(word in lowered for word in INCOME_KEYWORDS)


def expand_paychecks(
    paychecks: Iterable[Paycheck], horizon_days: int, today: dt.date
) -> List[CashFlowEntry]:
    horizon = _horizon(today, horizon_days)
    entries: List[CashFlowEntry] = []

    for p in paychecks:
        schedule = (p.schedule or "").lower()
        if schedule not in PAYCHECK_STEP_DAYS:
            logger.debug("Paycheck %s has schedule %r, stepping monthly", p.id, p.schedule)
        step = dt.timedelta(days=PAYCHECK_STEP_DAYS.get(schedule, PAYCHECK_DEFAULT_STEP_DAYS))

        cursor = p.next_date
        while cursor <= horizon:
            entries.append(CashFlowEntry(date=cursor, amount=p.amount))
            cursor += step

    logger.debug("Expanded paychecks into %d entries", len(entries))
    return entries


def expand_life_events(
    events: Iterable[LifeEvent], horizon_days: int, today: dt.date
) -> List[CashFlowEntry]:
    horizon = _horizon(today, horizon_days)
    entries: List[CashFlowEntry] = []

    for e in events:
        recurrence = (e.recurrence or "").lower()
        sign = 1 if is_income_life_event(e.type) else -1
        end = min(horizon, e.end_date) if e.end_date is not None else horizon
        step_days: Optional[int] = LIFE_EVENT_STEP_DAYS.get(recurrence)

        cursor = e.start_date
        while cursor <= end:
            entries.append(CashFlowEntry(date=cursor, amount=sign * e.amount))
            if step_days is None:
                break
            cursor += dt.timedelta(days=step_days)

    logger.debug("Expanded life events into %d entries", len(entries))
    return entries


def expand_credit_cards(
    cards: Iterable[CreditCard], horizon_days: int, today: dt.date
) -> List[CashFlowEntry]:
    """
    The first cycle charges the known statement amount; every later cycle
    assumes the card's average.
    """
    horizon = _horizon(today, horizon_days)
    step = dt.timedelta(days=CREDIT_CARD_STEP_DAYS)
    entries: List[CashFlowEntry] = []

    for c in cards:
        cursor = c.next_due_date
        first = True
        while cursor <= horizon:
            amount = c.next_due_amount if first else c.avg_future_amount
            entries.append(CashFlowEntry(date=cursor, amount=-amount))
            first = False
            cursor += step

    logger.debug("Expanded credit cards into %d entries", len(entries))
    return entries
