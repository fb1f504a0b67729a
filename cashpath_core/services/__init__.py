from cashpath_core.services.expansion import (  # noqa: F401
    expand_credit_cards,
    expand_life_events,
    expand_paychecks,
    is_income_life_event,
)
from cashpath_core.services.projection import build_projection  # noqa: F401
from cashpath_core.services.summary import format_currency, summarize  # noqa: F401

__all__ = [
    "build_projection",
    "expand_credit_cards",
    "expand_life_events",
    "expand_paychecks",
    "format_currency",
    "is_income_life_event",
    "summarize",
]
