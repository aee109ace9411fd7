from __future__ import annotations

import numpy as np
import matplotlib.pyplot as plt

from ..types import OccupancyGrid


def grid_extent(grid: OccupancyGrid) -> list[float]:
    """[xmin, xmax, ymin, ymax] in world meters."""
    info = grid.info
    x0 = info.origin.position.x
    y0 = info.origin.position.y
    return [x0, x0 + info.width * info.resolution, y0, y0 + info.height * info.resolution]


def draw_grid(grid: OccupancyGrid, ax=None, title: str | None = None):
    if ax is None:
        _, ax = plt.subplots(figsize=(5, 5))
    ax.clear()
    img = np.asarray(grid.as_array(), dtype=np.float32) / 100.0
    extent = grid_extent(grid)
    ax.imshow(img, origin="lower", cmap="Greys", vmin=0.0, vmax=1.0, extent=extent)
    ax.plot(0.0, 0.0, "r+", markersize=8)
    ax.set_aspect("equal")
    ax.set_xlim(extent[0], extent[1])
    ax.set_ylim(extent[2], extent[3])
    ax.set_xlabel("x [m]")
    ax.set_ylabel("y [m]")
    if title is None:
        title = f"{grid.header.frame_id}: {grid.info.width}x{grid.info.height} @ {grid.info.resolution:g} m"
    ax.set_title(title)
    return ax
