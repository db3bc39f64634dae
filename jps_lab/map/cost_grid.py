# jps_lab/map/cost_grid.py
import numpy as np
import math
from typing import Optional, Tuple
from scipy.ndimage import distance_transform_edt

from .base import (CostGridBase, FREE_SPACE, INSCRIBED_INFLATED_OBSTACLE,
                   LETHAL_OBSTACLE)
from jps_lab.config import GlobalConfig


class CostGrid(CostGridBase):
    def __init__(self, nx: int, ny: int,
                 lethal_cost: int = 253,
                 inflation_factor: float = 0.5,
                 resolution: float = 1.0,
                 costs: Optional[np.ndarray] = None):
        if nx <= 0 or ny <= 0:
            raise ValueError(f"Grid size must be positive, got {nx}x{ny}")
        if inflation_factor <= 0:
            raise ValueError(f"inflation_factor must be > 0, got {inflation_factor}")

        self._nx = nx
        self._ny = ny
        self._lethal_cost = lethal_cost
        self._inflation_factor = inflation_factor
        self._resolution = resolution

        if costs is None:
            # 初始化全 0 (空闲) 矩阵，costmap 习惯用 uint8
            self._grid = np.full((ny, nx), FREE_SPACE, dtype=np.uint8)
        else:
            costs = np.asarray(costs)
            if costs.shape != (ny, nx):
                raise ValueError(f"Cost array shape {costs.shape} does not match (ny, nx)=({ny}, {nx})")
            # 代价是单字节，直接 astype 会把 300 回绕成 44、把 127.9 截成 127
            if not (np.issubdtype(costs.dtype, np.integer) or costs.dtype == np.bool_):
                raise ValueError(f"Cost array must have an integer dtype, got {costs.dtype}")
            if costs.size and (costs.min() < 0 or costs.max() > 255):
                raise ValueError(f"Costs must lie in [0, 255], got range "
                                 f"[{costs.min()}, {costs.max()}]")
            self._grid = costs.astype(np.uint8, copy=True)

    @classmethod
    def from_array(cls, costs: np.ndarray, **kwargs) -> "CostGrid":
        """按 (ny, nx) 的代价矩阵构造"""
        costs = np.asarray(costs)
        if costs.ndim != 2:
            raise ValueError(f"Cost array must be 2-D, got shape {costs.shape}")
        ny, nx = costs.shape
        return cls(nx, ny, costs=costs, **kwargs)

    @classmethod
    def from_occupancy(cls, occupied: np.ndarray, **kwargs) -> "CostGrid":
        """占据栅格 (True / 1 = 障碍) -> 代价地图"""
        occupied = np.asarray(occupied, dtype=bool)
        costs = np.where(occupied, LETHAL_OBSTACLE, FREE_SPACE).astype(np.uint8)
        return cls.from_array(costs, **kwargs)

    @classmethod
    def from_config(cls, nx: int, ny: int, config: GlobalConfig) -> "CostGrid":
        return cls(nx, ny,
                   lethal_cost=config.lethal_cost,
                   inflation_factor=config.inflation_factor,
                   resolution=config.map_resolution)

    @property
    def data(self) -> np.ndarray:
        return self._grid

    @property
    def nx(self) -> int:
        return self._nx

    @property
    def ny(self) -> int:
        return self._ny

    @property
    def lethal_cost(self) -> int:
        return self._lethal_cost

    @property
    def inflation_factor(self) -> float:
        return self._inflation_factor

    @property
    def resolution(self) -> float:
        return self._resolution

    def cost(self, x_idx: int, y_idx: int) -> int:
        return int(self._grid[y_idx, x_idx])

    def cost_at(self, index: int) -> int:
        """按线性索引查询代价"""
        x_idx, y_idx = self.index_to_grid(index)
        return self.cost(x_idx, y_idx)

    def set_obstacle(self, x_idx: int, y_idx: int, cost: int = LETHAL_OBSTACLE):
        if not 0 <= cost <= 255:
            raise ValueError(f"Cost must lie in [0, 255], got {cost}")
        self._grid[y_idx, x_idx] = cost

    def world_to_grid(self, x: float, y: float) -> Tuple[int, int]:
        """
        物理坐标 -> 栅格索引
        向下取整：floor(x / res)
        """
        return int(math.floor(x / self._resolution)), int(math.floor(y / self._resolution))

    def grid_to_world(self, x_idx: int, y_idx: int) -> Tuple[float, float]:
        """
        栅格索引 -> 物理坐标
        返回格子中心：idx * res + res/2
        """
        x = x_idx * self._resolution + self._resolution / 2.0
        y = y_idx * self._resolution + self._resolution / 2.0
        return x, y

    def validate_endpoint(self, cell: Tuple[int, int], name: str = "endpoint"):
        """
        给调用方用的前置检查 (规划器本身不做)。
        越界或落在障碍物上时抛 ValueError。
        """
        x_idx, y_idx = cell
        if not self.in_bounds(x_idx, y_idx):
            raise ValueError(f"{name} {cell} is out of map bounds {self._nx}x{self._ny}")
        if self.is_obstacle(x_idx, y_idx):
            raise ValueError(f"{name} {cell} lies on an obstacle (cost={self.cost(x_idx, y_idx)})")

    def snapshot(self) -> "CostGrid":
        """
        返回一份只读拷贝。
        多个规划请求可以并发共享同一个 snapshot。
        """
        frozen = CostGrid(self._nx, self._ny,
                          lethal_cost=self._lethal_cost,
                          inflation_factor=self._inflation_factor,
                          resolution=self._resolution,
                          costs=self._grid)
        frozen._grid.setflags(write=False)
        return frozen

    def outline(self, cost: int = LETHAL_OBSTACLE) -> "CostGrid":
        """把地图最外一圈标成障碍，防止规划穿出边界"""
        self._grid[0, :] = cost
        self._grid[-1, :] = cost
        self._grid[:, 0] = cost
        self._grid[:, -1] = cost
        return self

    def inflate(self,
                inscribed_radius: float,
                inflation_radius: float,
                cost_scaling_factor: float = 10.0) -> "CostGrid":
        """
        costmap 风格的障碍物膨胀。
        d == 0                      -> LETHAL_OBSTACLE
        d <= inscribed_radius       -> INSCRIBED_INFLATED_OBSTACLE
        d <= inflation_radius       -> (253 - 1) * exp(-k * (d - inscribed_radius))
        距离 d 单位为米，由 EDT 像素距离乘分辨率得到。
        """
        lethal_mask = self._grid >= LETHAL_OBSTACLE
        if not lethal_mask.any():
            return self

        # distance_transform_edt 计算的是“当前像素离最近的0值像素的距离”
        # 所以这里障碍物=0, 空闲=1
        dist = distance_transform_edt(~lethal_mask) * self._resolution

        decay = (INSCRIBED_INFLATED_OBSTACLE - 1) * np.exp(
            -cost_scaling_factor * (dist - inscribed_radius))
        inflated = np.zeros_like(self._grid, dtype=np.uint8)
        in_band = (dist > inscribed_radius) & (dist <= inflation_radius)
        inflated[in_band] = decay[in_band].astype(np.uint8)
        inflated[(dist > 0) & (dist <= inscribed_radius)] = INSCRIBED_INFLATED_OBSTACLE

        # 只抬高代价，不降低已有代价 (NO_INFORMATION 等保持原样)
        np.maximum(self._grid, inflated, out=self._grid)
        return self
