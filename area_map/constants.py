from __future__ import annotations

# Parameter defaults
DEFAULT_TOPIC: str = "grid"
DEFAULT_FRAME_ID: str = "map"
DEFAULT_MAP_WIDTH: int = 10
DEFAULT_MAP_HEIGHT: int = 10
DEFAULT_MAP_RESOLUTION: float = 0.1
DEFAULT_MAP_BORDER: bool = False
DEFAULT_NUM_OBSTACLES: int = 0

# Cell values (nav_msgs/OccupancyGrid convention, no unknown state produced)
CELL_FREE: int = 0
CELL_OCCUPIED: int = 100

# Circle membership bias: dx^2 + dy^2 <= r^2 + r * CIRCLE_BIAS
CIRCLE_BIAS: float = 0.25
