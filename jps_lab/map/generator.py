# jps_lab/map/generator.py
import numpy as np
import random
from typing import List, Optional

from jps_lab.map.cost_grid import CostGrid
from jps_lab.map.base import FREE_SPACE, LETHAL_OBSTACLE
from jps_lab.types import Cell


class MapGenerator:
    """
    代价地图生成器
    随机障碍 + 保证起终点之间至少有一条可通行走廊 (推土机式清除)
    """

    def __init__(
        self,
        obstacle_density: float = 0.1,
        clear_radius: int = 1,
        num_waypoints: int = 3,
        walls: bool = True,
        seed: Optional[int] = None
    ):
        """
        :param obstacle_density: 障碍物占比 [0, 1]
        :param clear_radius: 走廊半宽 (格子数)，0 表示只清除路径本身
        :param num_waypoints: 走廊经过的随机路点个数
        :param walls: 是否生成四周围墙
        """
        if not 0.0 <= obstacle_density <= 1.0:
            raise ValueError(f"obstacle_density must be in [0, 1], got {obstacle_density}")
        self.density = obstacle_density
        self.clear_radius = clear_radius
        self.num_waypoints = num_waypoints
        self.walls = walls
        self.seed = seed

        # 每个生成器实例持有自己的随机源，同一个 seed 生成同一张地图
        self._rng = random.Random(seed)
        self._np_rng = np.random.default_rng(seed)

    def generate(self, grid: CostGrid, start: Cell, goal: Cell,
                 extra_paths: int = 0,
                 dead_ends: int = 0) -> CostGrid:

        # 1. 随机障碍底图
        self._generate_random_obstacles(grid)

        # 2. 清除关键点 (起点和终点)
        self._clear_square(grid, start, self.clear_radius)
        self._clear_square(grid, goal, self.clear_radius)

        # 3. 主走廊 + 冗余走廊
        self._carve_path(grid, start, goal)
        for _ in range(extra_paths):
            self._carve_path(grid, start, goal)

        # 4. 死胡同/干扰路径：随机两点之间的走廊
        for _ in range(dead_ends):
            fake_start = self._get_random_cell(grid)
            fake_goal = self._get_random_cell(grid)
            self._carve_path(grid, fake_start, fake_goal)

        return grid

    def _get_random_cell(self, grid: CostGrid) -> Cell:
        """生成地图内部 (不含围墙) 的随机格子"""
        return (self._rng.randint(1, max(1, grid.nx - 2)),
                self._rng.randint(1, max(1, grid.ny - 2)))

    def _generate_random_obstacles(self, grid: CostGrid):
        random_mask = self._np_rng.random((grid.ny, grid.nx)) < self.density
        grid.data[random_mask] = LETHAL_OBSTACLE
        if self.walls:
            grid.outline(LETHAL_OBSTACLE)

    def _carve_path(self, grid: CostGrid, start: Cell, goal: Cell):
        # 1. 生成随机路点
        waypoints: List[Cell] = [self._get_random_cell(grid) for _ in range(self.num_waypoints)]
        waypoints.append(goal)

        # 2. 逐段直线推进，沿途清除障碍
        current = start
        for target in waypoints:
            steps = max(abs(target[0] - current[0]), abs(target[1] - current[1]))
            for i in range(steps + 1):
                t = i / steps if steps else 0.0
                x = int(round(current[0] + (target[0] - current[0]) * t))
                y = int(round(current[1] + (target[1] - current[1]) * t))
                self._clear_square(grid, (x, y), self.clear_radius)
            current = target

    def _clear_square(self, grid: CostGrid, center: Cell, radius: int):
        """清除以 center 为中心的 (2r+1)x(2r+1) 方块，围墙保留"""
        lo = 1 if self.walls else 0
        x_min = max(lo, center[0] - radius)
        x_max = min(grid.nx - lo, center[0] + radius + 1)
        y_min = max(lo, center[1] - radius)
        y_max = min(grid.ny - lo, center[1] + radius + 1)
        grid.data[y_min:y_max, x_min:x_max] = FREE_SPACE

