# jps_lab/planning/jump.py
"""
JPS 的两个核心局部操作：
1. detect_forced_neighbor: 3x3 邻域内判断当前格子是否存在强迫邻居
2. jump: 沿一个方向直线 "跳跃"，直到遇到障碍/越界、目标、强迫邻居，
   或 (斜向时) 在水平/竖直分量方向上找到跳点
"""
from typing import Optional

from jps_lab.map.base import CostGridBase
from jps_lab.types import Cell, Motion, Node, INVALID_NODE
from jps_lab.planning.motions import split_diagonal


def make_node(grid: CostGridBase, x: int, y: int, pid: int = -1, cost: float = 0.0) -> Node:
    """按坐标构造节点，id = y * nx + x"""
    return Node(x, y, grid.grid_to_index(x, y), pid, cost)


def detect_forced_neighbor(grid: CostGridBase, cell: Cell, motion: Motion) -> bool:
    """
    判断 cell 在 motion 方向上是否存在强迫邻居：
    某个邻居被挡住，而它 "前方" 的格子是空的，
    那个空格子只能在 cell 处转向才能到达，所以 cell 必须成为跳点。
    越界格子按障碍处理。
    """
    x, y = cell
    dx, dy = motion
    blocked = grid.is_obstacle

    # 水平
    if dx and not dy:
        if blocked(x, y + 1) and not blocked(x + dx, y + 1):
            return True
        if blocked(x, y - 1) and not blocked(x + dx, y - 1):
            return True

    # 竖直
    if dy and not dx:
        if blocked(x + 1, y) and not blocked(x + 1, y + dy):
            return True
        if blocked(x - 1, y) and not blocked(x - 1, y + dy):
            return True

    # 斜向
    if dx and dy:
        if blocked(x - dx, y) and not blocked(x - dx, y + dy):
            return True
        if blocked(x, y - dy) and not blocked(x + dx, y - dy):
            return True

    return False


def _walk(grid: CostGridBase, x: int, y: int, motion: Motion, goal: Cell,
          max_steps: int) -> Optional[Cell]:
    """
    从 (x, y) 出发沿 motion 推进，返回跳点坐标；没有跳点返回 None。
    用显式循环代替递归，步数上限为 max_steps。
    """
    dx, dy = motion
    diagonal = motion.is_diagonal
    if diagonal:
        h_motion, v_motion = split_diagonal(motion)

    for _ in range(max_steps):
        x += dx
        y += dy

        # 越界或撞到障碍
        if grid.is_obstacle(x, y):
            return None

        if (x, y) == goal:
            return (x, y)

        # 斜向：水平/竖直分量上只要有跳点，当前格子就是跳点
        if diagonal:
            if (_walk(grid, x, y, h_motion, goal, max_steps) is not None or
                    _walk(grid, x, y, v_motion, goal, max_steps) is not None):
                return (x, y)

        if detect_forced_neighbor(grid, (x, y), motion):
            return (x, y)

    return None


def jump(grid: CostGridBase, node: Node, motion: Motion, goal: Cell,
         max_steps: Optional[int] = None) -> Node:
    """
    计算 node 沿 motion 方向的下一个跳点。
    :param max_steps: 单条射线的最大步数，默认 max(nx, ny) (任何射线在此之前必然越界)
    :return: 跳点节点 (pid = node.id)；没有跳点时返回 INVALID_NODE
    """
    if max_steps is None:
        max_steps = max(grid.nx, grid.ny)

    cell = _walk(grid, node.x, node.y, motion, goal, max_steps)
    if cell is None:
        return INVALID_NODE
    return make_node(grid, cell[0], cell[1], pid=node.id)
