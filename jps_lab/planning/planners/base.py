# jps_lab/planning/planners/base.py
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from jps_lab.types import Cell
from jps_lab.map.base import CostGridBase
from jps_lab.planning.interfaces import IPlannerObserver

class PlannerBase(ABC):
    """
    所有栅格路径规划器的抽象基类
    [关键] 地图、起点、终点都是每次调用的参数，规划器对象本身不保存它们，
    因此同一个规划器实例可以被多个线程同时调用。
    """

    @abstractmethod
    def plan(self,
             cost_grid: CostGridBase,
             start: Cell,
             goal: Cell,
             debugger: Optional[IPlannerObserver] = None) -> Tuple[bool, List[Cell]]:
        """
        执行路径规划
        :param cost_grid: 只读代价地图
        :param start: 起点格子 (调用方保证在界内且不是障碍)
        :param goal: 终点格子 (同上)
        :param debugger: 观察者钩子 (用于可视化搜索过程)
        :return: (是否找到, 起点到终点的格子序列；失败时为空列表)
        """
        pass
