# jps_lab/planning/heuristics/manhattan.py
from jps_lab.types import Cell
from .base import Heuristic

class ManhattanHeuristic(Heuristic):
    """
    曼哈顿距离 (L1).
    Cost = |dx| + |dy|
    在 8-连通栅格上会高估斜向距离，搜索更偏向轴向跳点。
    """
    def estimate(self, current: Cell, goal: Cell) -> float:
        return abs(current[0] - goal[0]) + abs(current[1] - goal[1])
