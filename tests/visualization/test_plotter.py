# tests/visualization/test_plotter.py
import sys
import os

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from jps_lab.map.cost_grid import CostGrid
from jps_lab.planning.planners import JumpPointSearchPlanner
from jps_lab.visualization.plotter import plot_plan, save_plan_figure


def _wall_case():
    grid = CostGrid(5, 5)
    for y in range(4):
        grid.set_obstacle(2, y)
    return grid, (0, 0), (4, 0)


def test_plot_plan_draws_path_and_trace():
    grid, start, goal = _wall_case()
    result = JumpPointSearchPlanner().search(grid, start, goal)

    fig, ax = plt.subplots()
    plot_plan(grid, result, start, goal, ax=ax)

    labels = [t.get_text() for t in ax.get_legend().get_texts()]
    assert 'Path' in labels
    assert 'Expansion Trace' in labels
    assert 'found' in ax.get_title()
    plt.close(fig)


def test_save_failed_plan(tmp_path):
    grid, start, goal = _wall_case()
    grid.set_obstacle(2, 4)
    result = JumpPointSearchPlanner().search(grid, start, goal)
    assert not result.found

    out = save_plan_figure(grid, result, start, goal, str(tmp_path / "fig" / "fail.png"))
    assert os.path.exists(out)
    assert os.path.getsize(out) > 0
