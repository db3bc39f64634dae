# jps_lab/__init__.py

from jps_lab.config import GlobalConfig
from jps_lab.types import Cell, Motion, Node, INVALID_NODE
from jps_lab.map import CostGrid, MapGenerator
from jps_lab.planning.planners import JumpPointSearchPlanner, SearchResult, plan

__all__ = [
    "GlobalConfig",
    "Cell",
    "Motion",
    "Node",
    "INVALID_NODE",
    "CostGrid",
    "MapGenerator",
    "JumpPointSearchPlanner",
    "SearchResult",
    "plan",
]
