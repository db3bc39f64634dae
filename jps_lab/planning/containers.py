# jps_lab/planning/containers.py
import heapq
import itertools
from typing import Dict, Iterator, List, Optional, Tuple

from jps_lab.types import Node


class OpenSet:
    """
    OpenSet: 按 cost 排序的二叉堆。
    堆元素为 (cost, seq, node)，seq 单调递增，
    同 cost 的节点按入队顺序 (FIFO) 出队，结果可复现。
    不支持 decrease-key：同一格子可以重复入队，由 ClosedSet 做懒删除。
    """

    def __init__(self):
        self._heap: List[Tuple[float, int, Node]] = []
        self._counter = itertools.count()

    def push(self, node: Node):
        heapq.heappush(self._heap, (node.cost, next(self._counter), node))

    def pop(self) -> Node:
        _, _, node = heapq.heappop(self._heap)
        return node

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


class ClosedSet:
    """
    ClosedSet: id -> Node 的哈希表。
    只按 id (坐标) 判重；插入后不会删除，也不会被覆盖。
    """

    def __init__(self):
        self._nodes: Dict[int, Node] = {}

    def add(self, node: Node):
        # 已存在则保留第一次扩展时的父节点
        self._nodes.setdefault(node.id, node)

    def get(self, node_id: int) -> Optional[Node]:
        return self._nodes.get(node_id)

    def __contains__(self, node: Node) -> bool:
        return node.id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes.values())
