from __future__ import annotations

import datetime as dt
import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import pandas as pd

from cashpath_core.domain.models import Account, CreditCard, LifeEvent, Paycheck, Plan, Scenario

logger = logging.getLogger(__name__)

TABLES = ("scenarios", "accounts", "paychecks", "credit_cards", "life_events")


def parse_date(value: Any, what: str) -> dt.date:
    if isinstance(value, dt.date):
        return value
    try:
        return dt.date.fromisoformat(str(value).strip())
    except ValueError as exc:
        raise ValueError(f"Invalid date for {what}: {value!r} (expected YYYY-MM-DD)") from exc


def _optional_date(value: Any, what: str) -> Optional[dt.date]:
    if value is None or value == "":
        return None
    return parse_date(value, what)


def _required(row: Dict[str, Any], key: str, table: str) -> Any:
    value = row.get(key)
    if value is None or value == "":
        raise ValueError(f"Missing field '{key}' in {table} row: {row}")
    return value


def _optional_str(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def _scenario(row: Dict[str, Any]) -> Scenario:
    return Scenario(id=str(_required(row, "id", "scenarios")), name=str(row.get("name") or ""))


def _account(row: Dict[str, Any]) -> Account:
    balance = row.get("current_balance")
    return Account(
        current_balance=float(balance) if balance not in (None, "") else None,
        id=_optional_str(row.get("id")),
        scenario_id=_optional_str(row.get("scenario_id")),
    )


def _paycheck(row: Dict[str, Any]) -> Paycheck:
    return Paycheck(
        amount=float(_required(row, "amount", "paychecks")),
        schedule=str(row.get("schedule") or ""),
        next_date=parse_date(_required(row, "next_date", "paychecks"), "paycheck next_date"),
        id=_optional_str(row.get("id")),
        scenario_id=_optional_str(row.get("scenario_id")),
        name=_optional_str(row.get("name")),
    )


def _credit_card(row: Dict[str, Any]) -> CreditCard:
    return CreditCard(
        next_due_date=parse_date(
            _required(row, "next_due_date", "credit_cards"), "credit card next_due_date"
        ),
        next_due_amount=float(_required(row, "next_due_amount", "credit_cards")),
        avg_future_amount=float(_required(row, "avg_future_amount", "credit_cards")),
        id=_optional_str(row.get("id")),
        scenario_id=_optional_str(row.get("scenario_id")),
        name=_optional_str(row.get("name")),
    )


def _life_event(row: Dict[str, Any]) -> LifeEvent:
    return LifeEvent(
        type=str(row.get("type") or ""),
        amount=float(_required(row, "amount", "life_events")),
        start_date=parse_date(_required(row, "start_date", "life_events"), "life event start_date"),
        end_date=_optional_date(row.get("end_date"), "life event end_date"),
        recurrence=str(row.get("recurrence") or ""),
        id=_optional_str(row.get("id")),
        scenario_id=_optional_str(row.get("scenario_id")),
        label=_optional_str(row.get("label")),
    )


BUILDERS: Dict[str, Callable[[Dict[str, Any]], Any]] = {
    "scenarios": _scenario,
    "accounts": _account,
    "paychecks": _paycheck,
    "credit_cards": _credit_card,
    "life_events": _life_event,
}


def plan_from_dict(data: Dict[str, Any]) -> Plan:
    tables = {name: tuple(BUILDERS[name](row) for row in data.get(name) or []) for name in TABLES}
    return Plan(**tables)


def _read_csv_rows(path: Path) -> List[Dict[str, Any]]:
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    return df.to_dict(orient="records")


def load_plan(path: str | Path) -> Plan:
    """
    Load a plan from a JSON file, or from a directory of per-table CSVs
    (scenarios.csv, accounts.csv, paychecks.csv, credit_cards.csv,
    life_events.csv). Missing tables are empty.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(path)

    if path.is_dir():
        data: Dict[str, Any] = {}
        for name in TABLES:
            table_path = path / f"{name}.csv"
            if table_path.exists():
                data[name] = _read_csv_rows(table_path)
    else:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

    plan = plan_from_dict(data)
    logger.debug(
        "Loaded plan from %s: %d accounts, %d paychecks, %d cards, %d life events",
        path,
        len(plan.accounts),
        len(plan.paychecks),
        len(plan.credit_cards),
        len(plan.life_events),
    )
    return plan


def select_scenario(plan: Plan, scenario_id: Optional[str]) -> Plan:
    """Narrow a plan to one scenario; ``None`` keeps the plan as is."""
    if scenario_id is None:
        return plan
    scoped = plan.for_scenario(scenario_id)
    if not (scoped.accounts or scoped.paychecks or scoped.credit_cards or scoped.life_events):
        logger.warning("Scenario %r has no entities in this plan", scenario_id)
    return scoped
