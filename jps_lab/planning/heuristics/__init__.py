# jps_lab/planning/heuristics/__init__.py

from .base import Heuristic
from .euclidean import EuclideanHeuristic
from .octile import OctileHeuristic
from .manhattan import ManhattanHeuristic


__all__ = [
    "Heuristic",
    "EuclideanHeuristic",
    "OctileHeuristic",
    "ManhattanHeuristic",
]
