# tests/heuristics/test_heuristics.py
import sys
import os
import math

import pytest

sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from jps_lab.map.cost_grid import CostGrid
from jps_lab.planning.heuristics import (EuclideanHeuristic, OctileHeuristic,
                                         ManhattanHeuristic)
from jps_lab.planning.planners import JumpPointSearchPlanner


@pytest.mark.parametrize("heuristic, expected", [
    (EuclideanHeuristic(), 5.0),
    (ManhattanHeuristic(), 7.0),
    (OctileHeuristic(), 3 * (math.sqrt(2) - 1) + 4),
])
def test_estimate(heuristic, expected):
    assert heuristic.estimate((1, 2), (4, 6)) == pytest.approx(expected, abs=1e-6)
    assert heuristic.estimate((4, 6), (4, 6)) == 0.0


@pytest.mark.parametrize("heuristic", [EuclideanHeuristic(), OctileHeuristic(), ManhattanHeuristic()])
def test_planner_accepts_any_heuristic(heuristic):
    grid = CostGrid(5, 5)
    for y in range(4):
        grid.set_obstacle(2, y)

    result = JumpPointSearchPlanner(heuristic=heuristic).search(grid, (0, 0), (4, 0))
    assert result.found
    assert (2, 4) in result.path
    assert result.expand[0].cost == pytest.approx(heuristic.estimate((0, 0), (4, 0)))
