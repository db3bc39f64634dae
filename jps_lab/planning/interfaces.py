from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from jps_lab.types import Node


class IPlannerObserver(ABC):
    """
    JPS 搜索过程的旁路记录接口。
    规划器只在四个时刻回调：跳点入队、节点出队扩展、父子边建立、日志。
    具体记录多少由实现决定 (见 visualization/observers.py)。
    """

    @abstractmethod
    def record_open_set_node(self, node: Node, h: float = 0.0):
        """跳点入队。h 是它在 OpenSet 中的排序键，node.pid 是产生它的节点"""

    @abstractmethod
    def record_current_expansion(self, node: Node):
        """节点出队并且不在 ClosedSet 中，即将向 8 个方向跳跃"""

    @abstractmethod
    def record_edge(self, parent: Node, jump_point: Node):
        """parent 经一次 jump 到达 jump_point"""

    @abstractmethod
    def set_map_info(self, map_info: Any):
        """本次规划使用的代价地图"""

    @abstractmethod
    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        """
        :param level: 'DEBUG' / 'INFO' / 'WARN' / 'ERROR'
        :param payload: 附加的结构化数据，例如起终点或扩展数量
        """
