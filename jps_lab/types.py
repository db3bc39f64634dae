# jps_lab/types.py
from dataclasses import dataclass, field
from typing import NamedTuple, Tuple

# 栅格坐标 (x_index, y_index)
Cell = Tuple[int, int]


class Motion(NamedTuple):
    """单位运动向量 (dx, dy)，取值 -1 / 0 / 1"""
    dx: int
    dy: int

    @property
    def is_diagonal(self) -> bool:
        return self.dx != 0 and self.dy != 0


@dataclass(frozen=True)
class Node:
    """
    搜索节点
    [关键] 相等性与哈希只取决于 id (= y * nx + x)，
    与 pid / cost 无关：同一个格子无论从哪条路到达都是同一个实体。
    """
    x: int = field(compare=False)
    y: int = field(compare=False)
    id: int
    pid: int = field(default=-1, compare=False)
    cost: float = field(default=0.0, compare=False)  # 到目标的启发值 (不是累积代价)

    @property
    def is_valid(self) -> bool:
        return self.id >= 0

    @property
    def cell(self) -> Cell:
        return (self.x, self.y)


# 哨兵节点：表示 "该方向上没有跳点"
INVALID_NODE = Node(-1, -1, -1, -1, -1.0)
