# jps_lab/planning/planners/__init__.py

from .base import PlannerBase
from .jump_point_search import JumpPointSearchPlanner, SearchResult, plan


__all__ = [
    "PlannerBase",
    "JumpPointSearchPlanner",
    "SearchResult",
    "plan",
]
