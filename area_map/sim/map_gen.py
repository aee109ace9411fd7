"""Map generation utilities.

Responsibilities:
- Allocate a flat, row-major cell buffer for a GridConfig (index = x + y * width).
- Draw the optional one-cell border ring.
- Rasterize square and circle obstacles, clipping anything outside the grid.
- Package the finished buffer into a single read-only OccupancyGrid snapshot.
"""

from __future__ import annotations

import time
import warnings
from typing import Iterable, Iterator, Optional, Tuple

import numpy as np

from ..config import CircleObstacle, GridConfig, Obstacle, SquareObstacle
from ..constants import CELL_FREE, CELL_OCCUPIED, CIRCLE_BIAS
from ..types import Header, MapMetaData, OccupancyGrid, Point, Pose, Quaternion


def compute_origin(cfg: GridConfig) -> Pose:
    """World pose of cell (0, 0) so that the grid is centred on (0, 0).

    Uses integer division on the cell counts: odd sizes are biased toward the
    lower-index side.
    """
    x = -cfg.resolution * (cfg.width // 2)
    y = -cfg.resolution * (cfg.height // 2)
    return Pose(position=Point(x, y, 0.0), orientation=Quaternion(0.0, 0.0, 0.0, 1.0))


def empty_cells(cfg: GridConfig) -> np.ndarray:
    return np.full(cfg.num_cells, CELL_FREE, dtype=np.int8)


def draw_border(cells: np.ndarray, cfg: GridConfig) -> None:
    view = cells.reshape(cfg.height, cfg.width)
    view[0, :] = CELL_OCCUPIED
    view[-1, :] = CELL_OCCUPIED
    view[:, 0] = CELL_OCCUPIED
    view[:, -1] = CELL_OCCUPIED


def obstacle_offsets(obstacle: Obstacle) -> Iterator[Tuple[int, int]]:
    """Yield (dx, dy) cell offsets covered by an obstacle, bounding box row by row."""
    r = obstacle.size
    limit = r * r + r * CIRCLE_BIAS
    circle = isinstance(obstacle, CircleObstacle)
    for dy in range(-r, r + 1):
        for dx in range(-r, r + 1):
            if circle and dx * dx + dy * dy > limit:
                continue
            yield dx, dy


def rasterize_obstacle(
    cells: np.ndarray, cfg: GridConfig, obstacle: Obstacle, index: int
) -> int:
    """Mark the cells of one obstacle as occupied.

    Returns the number of in-bounds cells written. Objects that are not a
    supported obstacle variant are reported and leave the buffer untouched.
    """
    if not isinstance(obstacle, (SquareObstacle, CircleObstacle)):
        warnings.warn(
            f"Cannot load obstacle: {index} (unsupported type {type(obstacle).__name__})",
            RuntimeWarning,
            stacklevel=3,
        )
        return 0

    written = 0
    for dx, dy in obstacle_offsets(obstacle):
        tx = obstacle.x + dx
        ty = obstacle.y + dy
        if cfg.in_bounds(tx, ty):
            cells[tx + ty * cfg.width] = CELL_OCCUPIED
            written += 1
    return written


def rasterize(cfg: GridConfig, obstacles: Iterable[Obstacle]) -> np.ndarray:
    """Border plus obstacles, in list order, onto a fresh buffer."""
    cells = empty_cells(cfg)
    if cfg.border:
        draw_border(cells, cfg)
    for k, obstacle in enumerate(obstacles):
        rasterize_obstacle(cells, cfg, obstacle, k)
    return cells


def generate_grid(
    cfg: GridConfig,
    obstacles: Iterable[Obstacle] = (),
    stamp: Optional[float] = None,
) -> OccupancyGrid:
    """Run one generation pass and return the finished snapshot.

    The cell buffer depends only on (cfg, obstacles); `stamp` (seconds, default
    now) only fills the header and map_load_time.
    """
    t = time.time() if stamp is None else float(stamp)
    cells = rasterize(cfg, obstacles)
    info = MapMetaData(
        map_load_time=t,
        resolution=float(cfg.resolution),
        width=int(cfg.width),
        height=int(cfg.height),
        origin=compute_origin(cfg),
    )
    return OccupancyGrid(header=Header(frame_id=cfg.frame_id, stamp=t), info=info, data=cells)
