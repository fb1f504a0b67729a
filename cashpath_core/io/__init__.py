from cashpath_core.io.plan import load_plan, select_scenario  # noqa: F401
from cashpath_core.io.config import load_projection_config  # noqa: F401
from cashpath_core.io.export import (  # noqa: F401
    projection_to_dict,
    projection_to_frame,
    write_projection_csv,
)

__all__ = [
    "load_plan",
    "load_projection_config",
    "projection_to_dict",
    "projection_to_frame",
    "select_scenario",
    "write_projection_csv",
]
