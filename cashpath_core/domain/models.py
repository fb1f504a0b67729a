from __future__ import annotations

import dataclasses
import datetime as dt
from typing import List, Optional, Tuple


@dataclasses.dataclass(frozen=True)
class Scenario:
    id: str
    name: str = ""


@dataclasses.dataclass(frozen=True)
class Account:
    current_balance: Optional[float]
    id: Optional[str] = None
    scenario_id: Optional[str] = None


@dataclasses.dataclass(frozen=True)
class Paycheck:
    amount: float
    schedule: str  # weekly, biweekly, semimonthly, quarterly; anything else is monthly
    next_date: dt.date
    id: Optional[str] = None
    scenario_id: Optional[str] = None
    name: Optional[str] = None


@dataclasses.dataclass(frozen=True)
class CreditCard:
    next_due_date: dt.date
    next_due_amount: float
    avg_future_amount: float
    id: Optional[str] = None
    scenario_id: Optional[str] = None
    name: Optional[str] = None


@dataclasses.dataclass(frozen=True)
class LifeEvent:
    type: str
    amount: float
    start_date: dt.date
    end_date: Optional[dt.date] = None
    recurrence: str = "once"
    id: Optional[str] = None
    scenario_id: Optional[str] = None
    label: Optional[str] = None


@dataclasses.dataclass(frozen=True)
class Plan:
    scenarios: Tuple[Scenario, ...] = ()
    accounts: Tuple[Account, ...] = ()
    paychecks: Tuple[Paycheck, ...] = ()
    credit_cards: Tuple[CreditCard, ...] = ()
    life_events: Tuple[LifeEvent, ...] = ()

    def for_scenario(self, scenario_id: str) -> "Plan":
        def keep(items):
            return tuple(i for i in items if i.scenario_id == scenario_id)

        return Plan(
            scenarios=tuple(s for s in self.scenarios if s.id == scenario_id),
            accounts=keep(self.accounts),
            paychecks=keep(self.paychecks),
            credit_cards=keep(self.credit_cards),
            life_events=keep(self.life_events),
        )

    @property
    def start_balance(self) -> float:
        return sum((a.current_balance or 0.0) for a in self.accounts)


@dataclasses.dataclass(frozen=True)
class ProjectionConfig:
    horizon_days: int = 120
    today: Optional[dt.date] = None
    scenario_id: Optional[str] = None


@dataclasses.dataclass(frozen=True)
class CashFlowEntry:
    date: dt.date
    amount: float  # signed


@dataclasses.dataclass(frozen=True)
class ProjectionPoint:
    date: dt.date
    balance: float
    inflow: float
    outflow: float


@dataclasses.dataclass
class ProjectionResult:
    series: List[ProjectionPoint]
    lowest_balance: float
    lowest_date: Optional[dt.date]
    ending_balance: float


@dataclasses.dataclass(frozen=True)
class ProjectionSummary:
    starting_balance: float
    delta_30d: float
    lowest_balance: float
    lowest_date: Optional[dt.date]
    ending_balance: float
    days: int
