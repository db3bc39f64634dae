from abc import ABC, abstractmethod
import numpy as np
from typing import Tuple

# costmap 约定的代价值
FREE_SPACE = 0
INSCRIBED_INFLATED_OBSTACLE = 253
LETHAL_OBSTACLE = 254
NO_INFORMATION = 255


class CostGridBase(ABC):
    """
    代价地图抽象基类 (只读接口)
    规划器只通过这里的接口读取地图，从不修改它。
    约定：cost >= lethal_cost * inflation_factor 视为障碍物。
    """

    @property
    @abstractmethod
    def data(self) -> np.ndarray:
        """代价矩阵，形状 (ny, nx)，dtype uint8"""
        pass

    @property
    @abstractmethod
    def nx(self) -> int:
        """网格宽度 (x方向数量)"""
        pass

    @property
    @abstractmethod
    def ny(self) -> int:
        """网格高度 (y方向数量)"""
        pass

    @property
    @abstractmethod
    def lethal_cost(self) -> int:
        pass

    @property
    @abstractmethod
    def inflation_factor(self) -> float:
        pass

    @abstractmethod
    def cost(self, x_idx: int, y_idx: int) -> int:
        """
        查询格子代价。
        注意：只对界内坐标有效，调用方负责先做边界检查。
        """
        pass

    @property
    def size(self) -> int:
        return self.nx * self.ny

    @property
    def obstacle_threshold(self) -> float:
        return self.lethal_cost * self.inflation_factor

    def in_bounds(self, x_idx: int, y_idx: int) -> bool:
        return (0 <= x_idx < self.nx) and (0 <= y_idx < self.ny)

    def grid_to_index(self, x_idx: int, y_idx: int) -> int:
        """(x, y) -> 线性索引 id = y * nx + x"""
        return y_idx * self.nx + x_idx

    def index_to_grid(self, index: int) -> Tuple[int, int]:
        return index % self.nx, index // self.nx

    def is_obstacle(self, x_idx: int, y_idx: int) -> bool:
        """查询栅格索引是否为障碍"""
        if not self.in_bounds(x_idx, y_idx):
            return True  # 越界视为障碍，避免按行回绕
        return self.cost(x_idx, y_idx) >= self.obstacle_threshold
