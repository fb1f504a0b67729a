import datetime as dt

from cashpath_core.domain.models import CreditCard, LifeEvent, Paycheck
from cashpath_core.services.expansion import (
    expand_credit_cards,
    expand_life_events,
    expand_paychecks,
    is_income_life_event,
)

TODAY = dt.date(2025, 1, 1)


def _days(entries):
    return [(e.date - TODAY).days for e in entries]


def test_weekly_paycheck_steps_seven_days_through_horizon():
    pay = Paycheck(amount=1000.0, schedule="weekly", next_date=TODAY)
    entries = expand_paychecks([pay], horizon_days=21, today=TODAY)
    assert _days(entries) == [0, 7, 14, 21]
    assert all(e.amount == 1000.0 for e in entries)


def test_paycheck_schedules_use_fixed_day_steps():
    cases = {
        "biweekly": 14,
        "Bi-Weekly": 14,
        "fortnightly": 14,
        "semimonthly": 15,
        "semi-monthly": 15,
        "quarterly": 90,
        "monthly": 30,
        "every so often": 30,
    }
    for schedule, step in cases.items():
        pay = Paycheck(amount=1.0, schedule=schedule, next_date=TODAY)
        entries = expand_paychecks([pay], horizon_days=180, today=TODAY)
        assert _days(entries)[:2] == [0, step], schedule


def test_source_starting_after_horizon_is_empty():
    later = TODAY + dt.timedelta(days=31)
    assert expand_paychecks([Paycheck(1.0, "weekly", later)], 30, TODAY) == []
    assert expand_credit_cards([CreditCard(later, 10.0, 5.0)], 30, TODAY) == []
    assert expand_life_events([LifeEvent("rent", 10.0, later, recurrence="monthly")], 30, TODAY) == []


def test_income_keywords_match_substrings_case_insensitively():
    assert is_income_life_event("Bonus")
    assert is_income_life_event("retirement income adjustment")
    assert is_income_life_event("supplemental income")
    assert is_income_life_event("giftcard")
    assert not is_income_life_event("incoming shipment")
    assert is_income_life_event("Tax REFUND")
    assert not is_income_life_event("rent")
    assert not is_income_life_event("")


def test_one_off_bonus_is_single_inflow():
    event = LifeEvent(type="Bonus", amount=500.0, start_date=TODAY, recurrence="once")
    entries = expand_life_events([event], horizon_days=120, today=TODAY)
    assert len(entries) == 1
    assert entries[0].date == TODAY
    assert entries[0].amount == 500.0


def test_unknown_recurrence_occurs_once():
    event = LifeEvent(type="vet bill", amount=80.0, start_date=TODAY, recurrence="fortnightly")
    entries = expand_life_events([event], horizon_days=120, today=TODAY)
    assert [(e.date, e.amount) for e in entries] == [(TODAY, -80.0)]


def test_life_event_steps_and_end_date():
    weekly = LifeEvent("groceries", 100.0, TODAY, end_date=TODAY + dt.timedelta(days=10), recurrence="weekly")
    assert _days(expand_life_events([weekly], 60, TODAY)) == [0, 7]

    yearly = LifeEvent("insurance", 100.0, TODAY, recurrence="Annually")
    assert _days(expand_life_events([yearly], 400, TODAY)) == [0, 365]

    monthly = LifeEvent("rent", 100.0, TODAY, recurrence="monthly")
    assert _days(expand_life_events([monthly], 65, TODAY)) == [0, 30, 60]


def test_life_event_ending_before_start_is_empty():
    event = LifeEvent(
        "gym",
        40.0,
        TODAY + dt.timedelta(days=5),
        end_date=TODAY,
        recurrence="weekly",
    )
    assert expand_life_events([event], 60, TODAY) == []


def test_credit_card_first_due_then_average():
    card = CreditCard(next_due_date=TODAY, next_due_amount=300.0, avg_future_amount=200.0)
    entries = expand_credit_cards([card], horizon_days=65, today=TODAY)
    assert [((e.date - TODAY).days, e.amount) for e in entries] == [
        (0, -300.0),
        (30, -200.0),
        (60, -200.0),
    ]
