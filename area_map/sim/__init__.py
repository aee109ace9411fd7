from .map_gen import (
    compute_origin,
    draw_border,
    empty_cells,
    generate_grid,
    obstacle_offsets,
    rasterize,
    rasterize_obstacle,
)

__all__ = [
    "compute_origin",
    "draw_border",
    "empty_cells",
    "generate_grid",
    "obstacle_offsets",
    "rasterize",
    "rasterize_obstacle",
]
