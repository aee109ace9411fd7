import pytest

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")

from area_map.config import CircleObstacle, GridConfig  # noqa: E402
from area_map.sim.map_gen import generate_grid  # noqa: E402
from area_map.viz.plotting import draw_grid, grid_extent  # noqa: E402


def test_extent_centered_on_origin() -> None:
    grid = generate_grid(GridConfig(width=10, height=6, resolution=0.5), [])
    assert grid_extent(grid) == pytest.approx([-2.5, 2.5, -1.5, 1.5])


def test_draw_grid_smoke() -> None:
    import matplotlib.pyplot as plt

    grid = generate_grid(
        GridConfig(width=20, height=20, border=True), [CircleObstacle(size=3, x=10, y=10)]
    )
    fig, ax = plt.subplots()
    out = draw_grid(grid, ax=ax)
    assert out is ax
    assert "20x20" in ax.get_title()
    plt.close(fig)
