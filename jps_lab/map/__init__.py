# jps_lab/map/__init__.py

from .base import (CostGridBase, FREE_SPACE, INSCRIBED_INFLATED_OBSTACLE,
                   LETHAL_OBSTACLE, NO_INFORMATION)
from .cost_grid import CostGrid
from .generator import MapGenerator

__all__ = [
    "CostGridBase",
    "CostGrid",
    "MapGenerator",
    "FREE_SPACE",
    "INSCRIBED_INFLATED_OBSTACLE",
    "LETHAL_OBSTACLE",
    "NO_INFORMATION",
]
