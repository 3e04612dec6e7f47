from .config import TrackerConfig
from .plan import PrintPointPlan, plan_print_points
from .report import ProgressReport
from .state import ProgressState, TrendStatus

__all__ = [
    "TrackerConfig",
    "PrintPointPlan",
    "plan_print_points",
    "ProgressReport",
    "ProgressState",
    "TrendStatus",
]
