"""Static occupancy grid generator with latched publication."""

from .config import (
    AreaMapParams,
    CircleObstacle,
    GridConfig,
    ObstacleKind,
    SquareObstacle,
)
from .node import AreaMapNode
from .sim.map_gen import generate_grid
from .transport.latched import MessageBus, default_bus
from .types import OccupancyGrid

__all__ = [
    "AreaMapNode",
    "AreaMapParams",
    "CircleObstacle",
    "GridConfig",
    "MessageBus",
    "ObstacleKind",
    "OccupancyGrid",
    "SquareObstacle",
    "default_bus",
    "generate_grid",
]
