# jps_lab/planning/path.py
import math
from typing import List

from jps_lab.types import Cell, Node
from jps_lab.planning.containers import ClosedSet


class PathReconstructionError(RuntimeError):
    """父节点链断裂：说明有节点在没有可回溯祖先的情况下被扩展，属于内部逻辑错误"""
    pass


def reconstruct_path(closed_set: ClosedSet, goal: Node) -> List[Node]:
    """
    从 goal 沿 pid 回溯到起点 (pid == -1)，返回 起点 -> 终点 的跳点序列。
    """
    current = closed_set.get(goal.id)
    if current is None:
        raise PathReconstructionError(f"Goal {goal.cell} is not in the closed set")

    path = [current]
    # 父节点链长度不可能超过 closed set 大小，超过说明成环
    for _ in range(len(closed_set)):
        if current.pid < 0:
            return path[::-1]
        parent = closed_set.get(current.pid)
        if parent is None:
            raise PathReconstructionError(
                f"Parent id {current.pid} of node {current.cell} not found in closed set")
        current = parent
        path.append(current)

    raise PathReconstructionError("Parent chain does not terminate at the start node")


def interpolate_segment(start: Cell, end: Cell) -> List[Cell]:
    """
    两个跳点之间的格子 (含两端)。
    相邻跳点总在同一条 8-方向射线上，所以逐格前进即可。
    """
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    if dx and dy and abs(dx) != abs(dy):
        raise ValueError(f"Segment {start} -> {end} is not along one of the 8 motions")

    step_x = (dx > 0) - (dx < 0)
    step_y = (dy > 0) - (dy < 0)
    n = max(abs(dx), abs(dy))
    return [(start[0] + i * step_x, start[1] + i * step_y) for i in range(n + 1)]


def densify(jump_points: List[Cell]) -> List[Cell]:
    """跳点序列 -> 逐格路径"""
    if not jump_points:
        return []
    cells = [jump_points[0]]
    for a, b in zip(jump_points[:-1], jump_points[1:]):
        cells.extend(interpolate_segment(a, b)[1:])
    return cells


def path_length(path: List[Cell]) -> float:
    """计算路径的累积欧氏距离 (单位：格子)"""
    if not path or len(path) < 2:
        return 0.0
    length = 0.0
    for i in range(len(path) - 1):
        length += math.hypot(path[i + 1][0] - path[i][0], path[i + 1][1] - path[i][1])
    return length
