from jps_lab.types import Cell
from .base import Heuristic

class OctileHeuristic(Heuristic):
    """
    针对 8-连通栅格地图的精确启发式。
    假设直行代价为 1.0，斜行代价为 sqrt(2) ≈ 1.414
    """
    def estimate(self, current: Cell, goal: Cell) -> float:
        dx = abs(current[0] - goal[0])
        dy = abs(current[1] - goal[1])
        # 公式: (sqrt(2) - 1) * min(dx, dy) + max(dx, dy)
        return 0.41421356 * min(dx, dy) + max(dx, dy)
