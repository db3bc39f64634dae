# 绘图逻辑 (Matplotlib)

import os
from typing import Optional

import matplotlib.pyplot as plt
import numpy as np

from jps_lab.map.base import CostGridBase
from jps_lab.planning.planners.jump_point_search import SearchResult
from jps_lab.types import Cell


def plot_plan(cost_grid: CostGridBase, result: SearchResult, start: Cell, goal: Cell,
              ax=None, title: Optional[str] = None):
    """
    在 ax 上画出：代价地图、扩展轨迹、跳点、最终路径、起终点。
    坐标单位为格子，origin='lower' 使 y 轴向上。
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 8))

    # A. 代价底图 (障碍物为黑色)
    ax.imshow(cost_grid.data, cmap='Greys', origin='lower', vmin=0, vmax=255,
              extent=[-0.5, cost_grid.nx - 0.5, -0.5, cost_grid.ny - 0.5],
              alpha=0.7)

    # B. 扩展轨迹 (所有入队节点) - 红色小点
    if result.expand:
        ex = np.array([(n.x, n.y) for n in result.expand])
        ax.scatter(ex[:, 0], ex[:, 1], c='red', s=6, alpha=0.4, label='Expansion Trace')

    # C. 最终路径 - 蓝色实线 + 跳点
    if result.path:
        path = np.array(result.path)
        ax.plot(path[:, 0], path[:, 1], 'b-', linewidth=2.0, label='Path')
    if result.jump_points:
        jp = np.array([(n.x, n.y) for n in result.jump_points])
        ax.scatter(jp[:, 0], jp[:, 1], c='blue', s=25, zorder=5, label='Jump Points')

    # D. 起点和终点
    ax.plot(start[0], start[1], 'go', markersize=10, label='Start')
    ax.plot(goal[0], goal[1], 'rx', markersize=10, label='Goal')

    status = "found" if result.found else "not found"
    ax.set_title(title or f"JPS ({status}, expanded={result.num_expanded})")
    ax.set_xlabel("X [cell]")
    ax.set_ylabel("Y [cell]")
    ax.legend(loc='upper left', fontsize='small')
    ax.set_aspect('equal')
    return ax


def save_plan_figure(cost_grid: CostGridBase, result: SearchResult, start: Cell, goal: Cell,
                     output_path: str, title: Optional[str] = None) -> str:
    """画图并保存到文件，返回文件路径"""
    out_dir = os.path.dirname(output_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    fig, ax = plt.subplots(figsize=(8, 8))
    plot_plan(cost_grid, result, start, goal, ax=ax, title=title)
    fig.tight_layout()
    fig.savefig(output_path, dpi=120)
    plt.close(fig)
    return output_path
