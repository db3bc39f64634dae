import logging
import os
import time
from typing import Any, Dict, List, Optional, Tuple

from jps_lab.config import GlobalConfig
from jps_lab.planning.interfaces import IPlannerObserver
from jps_lab.types import Node

_LEVELS = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARN': logging.WARNING,
    'ERROR': logging.ERROR,
}


class EfficientObserver(IPlannerObserver):
    """默认模式：什么都不记，只把 ERROR 打到控制台"""

    def record_open_set_node(self, node: Node, h: float = 0.0): pass
    def record_current_expansion(self, node: Node): pass
    def record_edge(self, parent: Node, jump_point: Node): pass
    def set_map_info(self, map_info: Any): pass

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        if level == 'ERROR':
            print(f"[ERROR] {message}")


class ExperimentObserver(IPlannerObserver):
    """
    实验模式：把一次搜索完整保存在内存里，供绘图和回放。

    - open_set_history: 每次入队的 (x, y, h, pid)，顺序与 SearchResult.expand 一致
    - expanded_nodes: 真正被扩展的节点 (懒删除丢弃的重复项不在其中)
    - edges: (parent, jump_point)
    """

    def __init__(self):
        self.open_set_history: List[Tuple[int, int, float, int]] = []
        self.expanded_nodes: List[Node] = []
        self.edges: List[Tuple[Node, Node]] = []
        self.map_info = None

    def record_open_set_node(self, node: Node, h: float = 0.0):
        self.open_set_history.append((node.x, node.y, h, node.pid))

    def record_current_expansion(self, node: Node):
        self.expanded_nodes.append(node)

    def record_edge(self, parent: Node, jump_point: Node):
        self.edges.append((parent, jump_point))

    def set_map_info(self, map_info: Any):
        self.map_info = map_info

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        pass


class DebugObserver(ExperimentObserver):
    """
    Debug 模式：在实验模式的记录之上，把每一步写进独立的日志文件。

    用完需要 close()，也可以写成 ``with DebugObserver(...) as obs:``。
    """

    def __init__(self, log_dir: str = "logs/planning_debug"):
        super().__init__()
        self.log_dir = log_dir
        os.makedirs(self.log_dir, exist_ok=True)

        timestamp = time.strftime("%Y%m%d_%H%M%S")
        self.log_file = os.path.join(self.log_dir, f"plan_debug_{timestamp}_{id(self):x}.log")

        # 直接构造 Logger，不进 logging 的全局注册表，close 之后即可回收
        self.logger = logging.Logger(f"jps_lab.debug.{id(self):x}", level=logging.DEBUG)
        handler = logging.FileHandler(self.log_file, encoding='utf-8')
        handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
        self.logger.addHandler(handler)

        self.logger.info("=== Debug Session Started ===")

    def record_open_set_node(self, node: Node, h: float = 0.0):
        super().record_open_set_node(node, h)
        self.logger.debug(f"OpenSet Push: ({node.x}, {node.y}) id={node.id} pid={node.pid} h={h:.2f}")

    def record_current_expansion(self, node: Node):
        super().record_current_expansion(node)
        self.logger.debug(f"Expanding: ({node.x}, {node.y}) id={node.id}")

    def record_edge(self, parent: Node, jump_point: Node):
        super().record_edge(parent, jump_point)
        self.logger.debug(f"Jump: {parent.cell} -> {jump_point.cell}")

    def set_map_info(self, map_info: Any):
        super().set_map_info(map_info)
        self.logger.info(f"Map: {map_info.nx}x{map_info.ny}, "
                         f"obstacle threshold {map_info.obstacle_threshold:.1f}")

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        if payload:
            message = f"{message} | Payload: {payload}"
        self.logger.log(_LEVELS.get(level, logging.INFO), message)

    def close(self):
        """释放文件句柄 (Windows 下删除日志文件前需要)"""
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)

    def __enter__(self) -> "DebugObserver":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


def create_observer(config: Optional[GlobalConfig] = None) -> IPlannerObserver:
    """根据 GlobalConfig.observer_mode 构造观察者"""
    if config is None:
        config = GlobalConfig()
    mode = config.observer_mode.lower()
    if mode == "efficient":
        return EfficientObserver()
    if mode == "experiment":
        return ExperimentObserver()
    if mode == "debug":
        return DebugObserver(log_dir=config.log_dir)
    raise ValueError(f"Unknown observer mode: {config.observer_mode}")
