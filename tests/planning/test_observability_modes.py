import sys
import os
import glob
import logging

import pytest

sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from jps_lab.config import GlobalConfig
from jps_lab.map.cost_grid import CostGrid
from jps_lab.planning.planners import JumpPointSearchPlanner
from jps_lab.visualization.observers import (EfficientObserver, ExperimentObserver,
                                             DebugObserver, create_observer)


@pytest.fixture
def planner_setup():
    grid = CostGrid(5, 5)
    for y in range(4):
        grid.set_obstacle(2, y)
    planner = JumpPointSearchPlanner()
    return planner, (0, 0), (4, 0), grid


def test_efficient_mode(planner_setup):
    planner, start, goal, grid = planner_setup
    observer = EfficientObserver()

    found, path = planner.plan(grid, start, goal, debugger=observer)

    assert found
    # EfficientObserver 不记录任何东西
    assert not hasattr(observer, 'expanded_nodes')
    assert not hasattr(observer, 'open_set_history')


def test_experiment_mode(planner_setup):
    planner, start, goal, grid = planner_setup
    observer = ExperimentObserver()

    result = planner.search(grid, start, goal, debugger=observer)

    # 入队记录与扩展轨迹一一对应
    assert len(observer.open_set_history) == len(result.expand)
    assert [(x, y) for x, y, _, _ in observer.open_set_history] == [n.cell for n in result.expand]
    # 记录的 h 与 pid 就是节点在 OpenSet 中的排序键和父节点
    for (x, y, h, pid), node in zip(observer.open_set_history, result.expand):
        assert h == pytest.approx(node.cost)
        assert h == pytest.approx(((x - goal[0]) ** 2 + (y - goal[1]) ** 2) ** 0.5)
        assert pid == node.pid
    assert observer.open_set_history[0][3] == -1
    for parent, child in observer.edges:
        assert child.pid == parent.id
    # 每个非起点入队节点对应一条边
    assert len(observer.edges) == len(result.expand) - 1
    assert observer.expanded_nodes[0].cell == start
    assert observer.expanded_nodes[-1].cell == goal
    assert observer.map_info is grid


def test_debug_mode(planner_setup, tmp_path):
    planner, start, goal, grid = planner_setup
    log_dir = str(tmp_path / "planning_debug")

    observer = DebugObserver(log_dir=log_dir)
    found, _ = planner.plan(grid, start, goal, debugger=observer)
    observer.close()

    # 1. 兼容 Experiment 模式 (可以取到 expanded_nodes)
    assert found
    assert len(observer.expanded_nodes) > 0

    # 2. 检查日志文件
    log_files = glob.glob(os.path.join(log_dir, "*.log"))
    assert len(log_files) == 1

    with open(log_files[0], 'r', encoding='utf-8') as f:
        content = f.read()
    assert "Plan requested" in content
    assert "Path found" in content


def test_debug_mode_logs_failure(tmp_path):
    grid = CostGrid(5, 5)
    for y in range(5):
        grid.set_obstacle(2, y)

    observer = DebugObserver(log_dir=str(tmp_path))
    found, _ = JumpPointSearchPlanner().plan(grid, (0, 0), (4, 0), debugger=observer)
    observer.close()

    assert not found
    with open(observer.log_file, 'r', encoding='utf-8') as f:
        content = f.read()
    assert "WARNING" in content
    assert "no path found" in content


def test_debug_observer_context_manager(planner_setup, tmp_path):
    planner, start, goal, grid = planner_setup

    with DebugObserver(log_dir=str(tmp_path)) as observer:
        found, _ = planner.plan(grid, start, goal, debugger=observer)

    assert found
    # 退出 with 后文件句柄已经释放
    assert observer.logger.handlers == []
    # logger 不进入 logging 的全局注册表
    assert observer.logger.name not in logging.Logger.manager.loggerDict

    with open(observer.log_file, 'r', encoding='utf-8') as f:
        content = f.read()
    assert "OpenSet Push" in content
    assert "Jump: (0, 0) -> " in content


def test_create_observer(tmp_path):
    assert isinstance(create_observer(), EfficientObserver)
    assert isinstance(create_observer(GlobalConfig(observer_mode="experiment")), ExperimentObserver)

    observer = create_observer(GlobalConfig(observer_mode="Debug", log_dir=str(tmp_path)))
    assert isinstance(observer, DebugObserver)
    observer.close()

    with pytest.raises(ValueError):
        create_observer(GlobalConfig(observer_mode="verbose"))
