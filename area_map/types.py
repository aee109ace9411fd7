"""Message types for the published occupancy grid.

Mirrors the layout of nav_msgs/OccupancyGrid so consumers written against a
ROS-style map can read the fields they expect. All types are immutable.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class Quaternion:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0


@dataclass(frozen=True)
class Pose:
    position: Point = field(default_factory=Point)
    orientation: Quaternion = field(default_factory=Quaternion)


@dataclass(frozen=True)
class Header:
    frame_id: str
    stamp: float  # seconds since epoch


@dataclass(frozen=True)
class MapMetaData:
    map_load_time: float
    resolution: float
    width: int
    height: int
    origin: Pose


@dataclass(frozen=True, eq=False)
class OccupancyGrid:
    """Finished grid snapshot.

    - data: flat int8 buffer, row-major, index = x + y * width, read-only
    - info.origin: world pose of cell (0, 0)
    """

    header: Header
    info: MapMetaData
    data: np.ndarray

    def __post_init__(self) -> None:
        expected = self.info.width * self.info.height
        if self.data.ndim != 1 or self.data.size != expected:
            raise ValueError(
                f"data must be a flat buffer of {expected} cells, got shape {self.data.shape}"
            )
        if self.data.flags.writeable:
            self.data.flags.writeable = False

    def as_array(self) -> np.ndarray:
        """Read-only (height, width) view; rows are y, columns are x."""
        return self.data.reshape(self.info.height, self.info.width)

    def cell(self, x: int, y: int) -> int:
        return int(self.data[x + y * self.info.width])
