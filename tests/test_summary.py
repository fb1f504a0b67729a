import datetime as dt

from cashpath_core.domain.models import Account, LifeEvent
from cashpath_core.services.projection import build_projection
from cashpath_core.services.summary import format_currency, summarize

TODAY = dt.date(2025, 1, 1)


def test_summary_reports_thirty_day_delta():
    event = LifeEvent(type="rent", amount=400.0, start_date=TODAY + dt.timedelta(days=10))
    result = build_projection([Account(1000.0)], [], [], [event], horizon_days=60, today=TODAY)
    stats = summarize(result, 1000.0)
    assert stats.starting_balance == 1000.0
    assert stats.delta_30d == -400.0
    assert stats.lowest_balance == 600.0
    assert stats.lowest_date == TODAY + dt.timedelta(days=10)
    assert stats.ending_balance == 600.0
    assert stats.days == 61


def test_summary_delta_is_zero_for_short_series():
    event = LifeEvent(type="rent", amount=400.0, start_date=TODAY)
    result = build_projection([Account(1000.0)], [], [], [event], horizon_days=20, today=TODAY)
    assert summarize(result, 1000.0).delta_30d == 0.0


def test_format_currency():
    assert format_currency(1234.4) == "$1,234"
    assert format_currency(-1000.0) == "-$1,000"
    assert format_currency(0.0) == "$0"
    assert format_currency(float("nan")) == "$0"
