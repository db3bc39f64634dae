from abc import ABC, abstractmethod
from jps_lab.types import Cell

class Heuristic(ABC):
    @abstractmethod
    def estimate(self, current: Cell, goal: Cell) -> float:
        """统一接口：只接受当前格子和目标格子"""
        pass
