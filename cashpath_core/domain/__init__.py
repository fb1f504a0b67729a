from cashpath_core.domain.models import (  # noqa: F401
    Account,
    CashFlowEntry,
    CreditCard,
    LifeEvent,
    Paycheck,
    Plan,
    ProjectionConfig,
    ProjectionPoint,
    ProjectionResult,
    ProjectionSummary,
    Scenario,
)

__all__ = [
    "Account",
    "CashFlowEntry",
    "CreditCard",
    "LifeEvent",
    "Paycheck",
    "Plan",
    "ProjectionConfig",
    "ProjectionPoint",
    "ProjectionResult",
    "ProjectionSummary",
    "Scenario",
]
