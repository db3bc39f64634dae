import os
import sys
import time
import argparse

# --- Path Setup ---
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from jps_lab.config import GlobalConfig
from jps_lab.planning.planners import JumpPointSearchPlanner
from jps_lab.visualization.observers import DebugObserver, create_observer
from jps_lab.visualization.plotter import save_plan_figure
from experiments.benchmark_config import BenchmarkConfig as cfg
from experiments.benchmark_runner import build_map


def run_experiment(density=0.1, seed=42, mode="debug", output_dir="logs/planning_debug"):
    print(f"=== Running JPS Experiment (Density={density}, Seed={seed}, Mode={mode}) ===")

    # 1. Setup Environment
    grid = build_map(density, seed)
    grid.validate_endpoint(cfg.START_CELL, "start")
    grid.validate_endpoint(cfg.GOAL_CELL, "goal")

    # 2. Setup Planner & Observer
    planner = JumpPointSearchPlanner()
    observer = create_observer(GlobalConfig(observer_mode=mode, log_dir=output_dir))

    print("Starting planner...")
    try:
        t0 = time.perf_counter()
        result = planner.search(grid, cfg.START_CELL, cfg.GOAL_CELL, debugger=observer)
        t1 = time.perf_counter()
    finally:
        # Debug 模式持有日志文件句柄
        if isinstance(observer, DebugObserver):
            observer.close()

    duration_ms = (t1 - t0) * 1000
    print(f"Planning Finished. Success: {result.found}, Time: {duration_ms:.2f} ms, "
          f"Jump points: {len(result.jump_points)}, Expanded: {result.num_expanded}")

    # 3. Save Visualization
    filename = f"jps_d{density}_s{seed}_{'success' if result.found else 'fail'}.png"
    out = save_plan_figure(grid, result, cfg.START_CELL, cfg.GOAL_CELL,
                           os.path.join(output_dir, filename))
    print(f"Saved visualization to {out}")
    return result


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run a single JPS planning experiment")
    parser.add_argument("--density", type=float, default=0.1)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--mode", choices=["efficient", "experiment", "debug"], default="debug")
    parser.add_argument("--output-dir", default="logs/planning_debug")
    args = parser.parse_args()

    run_experiment(density=args.density, seed=args.seed, mode=args.mode, output_dir=args.output_dir)
