import sys
import os

# Ensure jps_lab can be imported if this config is used standalone or imported from elsewhere
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from jps_lab.config import GlobalConfig
from jps_lab.planning.heuristics import EuclideanHeuristic, OctileHeuristic, ManhattanHeuristic

class BenchmarkConfig:
    # --- Experiment Settings ---
    DENSITIES = [0.0, 0.05, 0.10, 0.15, 0.20, 0.25]   # Obstacle densities to test
    NUM_TRIALS = 20                 # Number of trials per density
    RANDOM_SEED_BASE = 1000         # Base seed for reproducibility

    # --- Output Paths ---
    _BASE_DIR = os.path.dirname(os.path.abspath(__file__))
    _PROJECT_DIR = os.path.dirname(_BASE_DIR)
    LOG_DIR = os.path.join(_PROJECT_DIR, "logs", "experiments_jps")

    # --- Map Parameters ---
    MAP_WIDTH = 100                 # cells
    MAP_HEIGHT = 100                # cells
    GLOBAL_CONFIG = GlobalConfig(lethal_cost=253, inflation_factor=0.5, map_resolution=1.0)

    # --- Start & Goal (grid cells, inside the outer wall) ---
    START_CELL = (2, 2)
    GOAL_CELL = (97, 97)

    # --- Map Generation (Bulldozer) ---
    CLEAR_RADIUS = 1                # cells
    NUM_WAYPOINTS = 3
    EXTRA_PATHS = 1
    DEAD_ENDS = 3

    # --- Costmap Inflation ---
    INFLATION_PARAMS = {
        'inscribed_radius': 0.0,    # 0 -> 只有障碍本身是 lethal
        'inflation_radius': 2.0,
        'cost_scaling_factor': 3.0
    }

    # --- Heuristics to compare ---
    HEURISTICS = {
        'Euclidean': EuclideanHeuristic(),
        'Octile': OctileHeuristic(),
        'Manhattan': ManhattanHeuristic(),
    }
