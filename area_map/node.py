"""Area map node: generate the configured grid once and publish it latched."""

from __future__ import annotations

from typing import Optional

from .config import AreaMapParams
from .sim.map_gen import generate_grid
from .transport.latched import MessageBus, default_bus
from .types import OccupancyGrid


class AreaMapNode:
    """Owns one latched publisher and the single grid it carries.

    All work happens in the constructor; afterwards the node only keeps the
    publisher alive so late subscribers still receive the grid.
    """

    def __init__(
        self,
        params: AreaMapParams,
        bus: Optional[MessageBus] = None,
        verbose: bool = False,
    ) -> None:
        self.params = params
        self._bus = bus or default_bus()
        self._verbose = bool(verbose)

        if self._verbose:
            for i, kind in enumerate(params.declared_kinds):
                print(f"[AREA_MAP] Loading obstacle {i} ({kind})")

        self._pub = self._bus.advertise(params.topic, latch=True)
        self.grid: OccupancyGrid = generate_grid(params.grid, params.obstacles)

        if self._verbose:
            print(f"[AREA_MAP] Generated map with {len(params.declared_kinds)} obstacles")

        self._pub.publish(self.grid)

    @property
    def topic(self) -> str:
        return self.params.topic

    def shutdown(self) -> None:
        self._pub.shutdown()
