# jps_lab/planning/heuristics/euclidean.py
import math
from jps_lab.types import Cell
from .base import Heuristic

class EuclideanHeuristic(Heuristic):
    """
    欧氏距离启发式
    JPS 的默认排序依据：OpenSet 只按 h 排序 (贪婪最佳优先)。
    """
    def estimate(self, current: Cell, goal: Cell) -> float:
        return math.hypot(current[0] - goal[0], current[1] - goal[1])
