import sys
import os
import time
import argparse
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

# --- 路径设置 ---
# 确保能找到 jps_lab 包
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from jps_lab.map.cost_grid import CostGrid
from jps_lab.map.generator import MapGenerator
from jps_lab.planning.planners import JumpPointSearchPlanner
from jps_lab.planning.path import path_length
from jps_lab.visualization.plotter import save_plan_figure
from experiments.benchmark_config import BenchmarkConfig as cfg


def build_map(density, seed, width=cfg.MAP_WIDTH, height=cfg.MAP_HEIGHT,
              start=cfg.START_CELL, goal=cfg.GOAL_CELL):
    """生成一张保证起终点连通的代价地图 (只读 snapshot)"""
    grid = CostGrid.from_config(width, height, cfg.GLOBAL_CONFIG)
    generator = MapGenerator(obstacle_density=density,
                             clear_radius=cfg.CLEAR_RADIUS,
                             num_waypoints=cfg.NUM_WAYPOINTS,
                             walls=cfg.GLOBAL_CONFIG.outline_map,
                             seed=seed)
    generator.generate(grid, start, goal, extra_paths=cfg.EXTRA_PATHS, dead_ends=cfg.DEAD_ENDS)
    grid.inflate(**cfg.INFLATION_PARAMS)
    return grid.snapshot()


def run_benchmark(densities=None, num_trials=None, heuristics=None,
                  width=cfg.MAP_WIDTH, height=cfg.MAP_HEIGHT,
                  start=cfg.START_CELL, goal=cfg.GOAL_CELL,
                  save_failures=False, verbose=True):
    densities = cfg.DENSITIES if densities is None else densities
    num_trials = cfg.NUM_TRIALS if num_trials is None else num_trials
    heuristics = cfg.HEURISTICS if heuristics is None else heuristics

    results = []
    if verbose:
        print(f"{'Density':<8} | {'Heuristic':<12} | {'Succ%':<6} | {'Time(ms)':<8} | {'Nodes':<8} | {'Len':<8}")
        print("-" * 70)

    for density in densities:
        stats = {name: {'success': 0, 'time': [], 'nodes': [], 'length': []}
                 for name in heuristics.keys()}

        for i in range(num_trials):
            # A. 生成环境 (固定种子，确保所有启发式在同一张地图上跑)
            seed = cfg.RANDOM_SEED_BASE + int(density * 100) * 1000 + i
            grid = build_map(density, seed, width, height, start, goal)

            # B. 遍历所有启发式进行规划
            for h_name, h_func in heuristics.items():
                planner = JumpPointSearchPlanner(heuristic=h_func)
                t0 = time.perf_counter()
                result = planner.search(grid, start, goal)
                t1 = time.perf_counter()

                if result.found:
                    stats[h_name]['success'] += 1
                    stats[h_name]['time'].append((t1 - t0) * 1000)
                    stats[h_name]['nodes'].append(result.num_expanded)
                    stats[h_name]['length'].append(path_length(result.path))
                elif save_failures and i < 2:
                    # 仅保存少量截图防止刷屏
                    filename = f"fail_{h_name}_d{density}_t{i}.png"
                    save_plan_figure(grid, result, start, goal,
                                     os.path.join(cfg.LOG_DIR, filename),
                                     title=f"FAIL: {h_name} | D={density} | T={i}")

        for h_name, s_data in stats.items():
            succ_rate = (s_data['success'] / num_trials) * 100 if num_trials else 0.0
            avg_time = np.mean(s_data['time']) if s_data['time'] else 0.0
            avg_nodes = np.mean(s_data['nodes']) if s_data['nodes'] else 0.0
            avg_len = np.mean(s_data['length']) if s_data['length'] else 0.0

            if verbose:
                print(f"{density:<8.2f} | {h_name:<12} | {succ_rate:<6.0f} | {avg_time:<8.2f} | {avg_nodes:<8.1f} | {avg_len:<8.2f}")

            results.append({
                'Density': density,
                'Heuristic': h_name,
                'SuccessRate': succ_rate,
                'TimeMean': avg_time,
                'NodesMean': avg_nodes,
                'LengthMean': avg_len
            })

    return pd.DataFrame(results)


def plot_comparisons(df, output_path=None, show=True):
    """可视化对比图表"""
    fig, axes = plt.subplots(1, 4, figsize=(24, 5))

    metrics = [
        ('SuccessRate', 'Success Rate (%)', 'Reliability'),
        ('TimeMean', 'Computation Time (ms)', 'Time Complexity'),
        ('NodesMean', 'Expanded Jump Points', 'Search Effort'),
        ('LengthMean', 'Path Length (cells)', 'Path Quality')
    ]
    markers = ['o', 's', '^', 'D']

    for i, (metric, ylabel, title) in enumerate(metrics):
        ax = axes[i]
        for idx, h_name in enumerate(df['Heuristic'].unique()):
            data = df[df['Heuristic'] == h_name]
            ax.plot(data['Density'], data[metric], marker=markers[idx % len(markers)],
                    label=h_name, linewidth=2, alpha=0.8)

        ax.set_xlabel('Obstacle Density')
        ax.set_ylabel(ylabel)
        ax.set_title(title)
        ax.grid(True, linestyle=':', alpha=0.6)

        # 仅在第一个图显示图例，避免遮挡
        if i == 0:
            ax.legend()

    plt.suptitle("Jump Point Search: heuristic comparison", fontsize=14)
    plt.tight_layout()

    if output_path:
        os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
        print(f"Saving plot to {output_path}...")
        plt.savefig(output_path, dpi=150)
    if show:
        plt.show()
    plt.close(fig)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="JPS benchmark over random cost grids")
    parser.add_argument("--trials", type=int, default=cfg.NUM_TRIALS, help="Trials per density")
    parser.add_argument("--densities", type=float, nargs="+", default=cfg.DENSITIES)
    parser.add_argument("--save-failures", action="store_true", help="Save snapshots of failed runs")
    parser.add_argument("--no-show", action="store_true", help="Do not open a plot window")
    args = parser.parse_args()

    print("=== JPS 启发式对比实验 ===")
    df_results = run_benchmark(densities=args.densities, num_trials=args.trials,
                               save_failures=args.save_failures)

    print("\n实验结束，正在绘图...")
    plot_comparisons(df_results, output_path=os.path.join(cfg.LOG_DIR, "jps_benchmark.png"),
                     show=not args.no_show)
