# jps_lab/planning/planners/jump_point_search.py
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from jps_lab.types import Cell, Node
from jps_lab.map.base import CostGridBase
from jps_lab.planning.planners.base import PlannerBase
from jps_lab.planning.heuristics import Heuristic, EuclideanHeuristic
from jps_lab.planning.interfaces import IPlannerObserver
from jps_lab.planning.containers import OpenSet, ClosedSet
from jps_lab.planning.motions import MOTIONS
from jps_lab.planning.jump import jump, make_node
from jps_lab.planning.path import reconstruct_path, densify
from jps_lab.visualization.observers import EfficientObserver


@dataclass
class SearchResult:
    found: bool
    path: List[Cell] = field(default_factory=list)        # 逐格路径
    jump_points: List[Node] = field(default_factory=list)  # 稀疏跳点路径
    expand: List[Node] = field(default_factory=list)       # 扩展轨迹 (所有入队节点)
    num_expanded: int = 0                                  # ClosedSet 大小


class JumpPointSearchPlanner(PlannerBase):
    """
    Jump Point Search (JPS) 栅格规划器。

    工作流程：
    1. OpenSet 以起点初始化，按启发值 h (默认欧氏距离) 排序。
    2. 每次弹出 h 最小的节点，向 8 个方向调用 jump，只把跳点放入 OpenSet。
    3. ClosedSet 按坐标判重，弹出已关闭节点时直接丢弃 (懒删除)。
    4. 弹出终点时沿 pid 回溯得到路径。

    注意：排序只用 h，不累积 g，所以这是贪婪最佳优先搜索，
    找到的路径不保证最短。
    """

    def __init__(self,
                 heuristic: Optional[Heuristic] = None,
                 max_jump_steps: Optional[int] = None):
        """
        :param heuristic: 启发式策略，默认 EuclideanHeuristic
        :param max_jump_steps: 单条跳跃射线的步数上限，默认按地图尺寸 max(nx, ny)
        """
        self.h_fn = heuristic if heuristic is not None else EuclideanHeuristic()
        self.max_jump_steps = max_jump_steps

    def plan(self,
             cost_grid: CostGridBase,
             start: Cell,
             goal: Cell,
             debugger: Optional[IPlannerObserver] = None) -> Tuple[bool, List[Cell]]:
        result = self.search(cost_grid, start, goal, debugger)
        return result.found, result.path

    def search(self,
               cost_grid: CostGridBase,
               start: Cell,
               goal: Cell,
               debugger: Optional[IPlannerObserver] = None) -> SearchResult:
        # 1. 初始化观察者
        if debugger is None:
            debugger = EfficientObserver()
        debugger.set_map_info(cost_grid)
        debugger.log("Plan requested", payload={'start': start, 'goal': goal,
                                                'size': (cost_grid.nx, cost_grid.ny)})

        start_node = make_node(cost_grid, start[0], start[1], pid=-1,
                               cost=self.h_fn.estimate(start, goal))
        goal_node = make_node(cost_grid, goal[0], goal[1])

        # 2. 初始化核心容器 (全部是局部变量，调用之间互不共享)
        open_set = OpenSet()
        open_set.push(start_node)
        closed_set = ClosedSet()
        expand: List[Node] = [start_node]
        debugger.record_open_set_node(start_node, h=start_node.cost)

        # 3. 主循环
        while open_set:
            current = open_set.pop()

            # A. 懒删除：同一坐标可能多次入队，只扩展第一次
            if current in closed_set:
                continue

            debugger.record_current_expansion(current)

            # B. 终止条件
            if current == goal_node:
                closed_set.add(current)
                jump_points = reconstruct_path(closed_set, current)
                path = densify([n.cell for n in jump_points])
                debugger.log("Path found", payload={'jump_points': len(jump_points),
                                                    'cells': len(path),
                                                    'expanded': len(closed_set)})
                return SearchResult(True, path, jump_points, expand, len(closed_set))

            # C. 向 8 个方向跳跃，收集不在 ClosedSet 中的跳点
            staged: List[Node] = []
            for motion in MOTIONS:
                jp = jump(cost_grid, current, motion, goal, self.max_jump_steps)
                if jp.is_valid and jp not in closed_set:
                    h_val = self.h_fn.estimate(jp.cell, goal)
                    staged.append(Node(jp.x, jp.y, jp.id, current.id, h_val))

            # D. 更新 OpenSet
            for jp in staged:
                open_set.push(jp)
                expand.append(jp)
                debugger.record_open_set_node(jp, h=jp.cost)
                debugger.record_edge(current, jp)
                if jp == goal_node:
                    break

            closed_set.add(current)

        debugger.log("Open set is empty, no path found.", level='WARN',
                     payload={'expanded': len(closed_set)})
        return SearchResult(False, [], [], expand, len(closed_set))


def plan(cost_grid: CostGridBase, start: Cell, goal: Cell,
         debugger: Optional[IPlannerObserver] = None) -> Tuple[bool, List[Cell]]:
    """使用默认配置 (欧氏启发式) 的 JPS 规划"""
    return JumpPointSearchPlanner().plan(cost_grid, start, goal, debugger)
