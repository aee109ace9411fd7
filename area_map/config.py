"""Grid and obstacle configuration.

Parameters arrive as a nested mapping (YAML / OmegaConf), shaped like:

    topic_map: grid
    frame_id: map
    map: {width: 10, height: 10, resolution: 0.1, border: false}
    obstacles:
      number: 1
      obs_0: {type: square, size: 1, position: {x: 5, y: 5}}

and are turned into immutable values once, before generation starts.
"""

from __future__ import annotations

import numbers
import warnings
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, List, Mapping, Optional, Tuple, Union

from .constants import (
    DEFAULT_FRAME_ID,
    DEFAULT_MAP_BORDER,
    DEFAULT_MAP_HEIGHT,
    DEFAULT_MAP_RESOLUTION,
    DEFAULT_MAP_WIDTH,
    DEFAULT_NUM_OBSTACLES,
    DEFAULT_TOPIC,
)


def _require_int(value: Any, what: str) -> None:
    # bool is an Integral subclass; cell geometry must be a real integer
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValueError(f"{what} must be an integer number of cells, got {value!r}")


@dataclass(frozen=True)
class GridConfig:
    """Grid geometry and metadata. Sizes in cells, resolution in meters per cell."""

    width: int = DEFAULT_MAP_WIDTH
    height: int = DEFAULT_MAP_HEIGHT
    resolution: float = DEFAULT_MAP_RESOLUTION
    frame_id: str = DEFAULT_FRAME_ID
    border: bool = DEFAULT_MAP_BORDER

    def __post_init__(self) -> None:
        _require_int(self.width, "map width")
        _require_int(self.height, "map height")
        if isinstance(self.resolution, bool) or not isinstance(self.resolution, numbers.Real):
            raise ValueError(f"map resolution must be a number, got {self.resolution!r}")
        if self.width <= 0:
            raise ValueError(f"map width must be > 0 cells, got {self.width}")
        if self.height <= 0:
            raise ValueError(f"map height must be > 0 cells, got {self.height}")
        if not self.resolution > 0.0:
            raise ValueError(f"map resolution must be > 0, got {self.resolution}")

    @property
    def num_cells(self) -> int:
        return self.width * self.height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height


class ObstacleKind(Enum):
    SQUARE = "square"
    CIRCLE = "circle"

    @classmethod
    def parse(cls, text: Any) -> Optional["ObstacleKind"]:
        """Map a kind string to a member, or None if it is not recognised."""
        if not isinstance(text, str):
            return None
        try:
            return cls(text.strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class _ObstacleBase:
    size: int
    x: int
    y: int

    def __post_init__(self) -> None:
        _require_int(self.size, "obstacle size")
        _require_int(self.x, "obstacle x")
        _require_int(self.y, "obstacle y")
        if self.size < 0:
            raise ValueError(f"obstacle size must be >= 0 cells, got {self.size}")


@dataclass(frozen=True)
class SquareObstacle(_ObstacleBase):
    """Axis-aligned (2*size+1)^2 block centred on (x, y)."""

    kind: ClassVar[ObstacleKind] = ObstacleKind.SQUARE


@dataclass(frozen=True)
class CircleObstacle(_ObstacleBase):
    """Disk of radius `size` cells centred on (x, y)."""

    kind: ClassVar[ObstacleKind] = ObstacleKind.CIRCLE


Obstacle = Union[SquareObstacle, CircleObstacle]

_OBSTACLE_TYPES = {
    ObstacleKind.SQUARE: SquareObstacle,
    ObstacleKind.CIRCLE: CircleObstacle,
}


def make_obstacle(kind: ObstacleKind, size: int, x: int, y: int) -> Obstacle:
    return _OBSTACLE_TYPES[kind](size=size, x=x, y=y)


def _as_int(value: Any, what: str) -> int:
    # bool is an int subclass; reject it along with floats that are not whole
    if isinstance(value, bool) or value is None:
        raise ValueError(f"{what} must be an integer, got {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{what} must be an integer, got {value!r}")
        return int(value)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{what} must be an integer, got {value!r}") from None


def _as_float(value: Any, what: str) -> float:
    if isinstance(value, bool):
        raise ValueError(f"{what} must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{what} must be a number, got {value!r}") from None


def _as_bool(value: Any, what: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    raise ValueError(f"{what} must be a boolean, got {value!r}")


def _section(cfg: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    sec = cfg.get(key)
    if sec is None:
        return {}
    if not isinstance(sec, Mapping):
        raise TypeError(f"Expected mapping under '{key}', got {type(sec)}")
    return sec


def grid_config_from_dict(cfg: Mapping[str, Any]) -> GridConfig:
    map_cfg = _section(cfg, "map")
    # `boarder` is the historical spelling of the key; `border` wins if both are set
    border = map_cfg.get("border", map_cfg.get("boarder", DEFAULT_MAP_BORDER))
    return GridConfig(
        width=_as_int(map_cfg.get("width", DEFAULT_MAP_WIDTH), "map.width"),
        height=_as_int(map_cfg.get("height", DEFAULT_MAP_HEIGHT), "map.height"),
        resolution=_as_float(
            map_cfg.get("resolution", DEFAULT_MAP_RESOLUTION), "map.resolution"
        ),
        frame_id=str(cfg.get("frame_id", DEFAULT_FRAME_ID)),
        border=_as_bool(border, "map.border"),
    )


def obstacles_from_dict(cfg: Mapping[str, Any]) -> List[Obstacle]:
    """Read `obstacles.number` entries named obs_0 .. obs_{n-1}.

    Entries with an unknown or missing type are reported with a RuntimeWarning
    and skipped. Missing or malformed geometry is a configuration error.
    """
    obs_cfg = _section(cfg, "obstacles")
    number = _as_int(obs_cfg.get("number", DEFAULT_NUM_OBSTACLES), "obstacles.number")
    if number < 0:
        raise ValueError(f"obstacles.number must be >= 0, got {number}")

    obstacles: List[Obstacle] = []
    for i in range(number):
        name = f"obs_{i}"
        entry = obs_cfg.get(name) or {}
        if not isinstance(entry, Mapping):
            raise TypeError(f"Expected mapping under 'obstacles.{name}', got {type(entry)}")
        raw_kind = entry.get("type")
        kind = ObstacleKind.parse(raw_kind)
        if kind is None:
            warnings.warn(
                f"Unknown obstacle type: {raw_kind!r} (obstacle {i}); skipping",
                RuntimeWarning,
                stacklevel=2,
            )
            continue
        position = entry.get("position") or {}
        if not isinstance(position, Mapping):
            raise TypeError(
                f"Expected mapping under 'obstacles.{name}.position', got {type(position)}"
            )
        obstacles.append(
            make_obstacle(
                kind,
                size=_as_int(entry.get("size"), f"obstacles.{name}.size"),
                x=_as_int(position.get("x"), f"obstacles.{name}.position.x"),
                y=_as_int(position.get("y"), f"obstacles.{name}.position.y"),
            )
        )
    return obstacles



def declared_obstacle_kinds(cfg: Mapping[str, Any]) -> Tuple[str, ...]:
    """`type` text of each of the `obstacles.number` entries, as configured."""
    obs_cfg = _section(cfg, "obstacles")
    number = _as_int(obs_cfg.get("number", DEFAULT_NUM_OBSTACLES), "obstacles.number")
    kinds = []
    for i in range(max(0, number)):
        entry = obs_cfg.get(f"obs_{i}") or {}
        raw = entry.get("type") if isinstance(entry, Mapping) else None
        kinds.append("" if raw is None else str(raw))
    return tuple(kinds)

@dataclass(frozen=True)
class AreaMapParams:
    """Everything the node needs, loaded once and passed by value."""

    topic: str = DEFAULT_TOPIC
    grid: GridConfig = field(default_factory=GridConfig)
    obstacles: Tuple[Obstacle, ...] = ()
    # raw `type` of every configured entry, skipped ones included
    declared_kinds: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "obstacles", tuple(self.obstacles))
        if self.declared_kinds:
            object.__setattr__(self, "declared_kinds", tuple(self.declared_kinds))
        else:
            object.__setattr__(
                self, "declared_kinds", tuple(o.kind.value for o in self.obstacles)
            )

    @classmethod
    def from_dict(cls, cfg: Mapping[str, Any]) -> "AreaMapParams":
        return cls(
            topic=str(cfg.get("topic_map", DEFAULT_TOPIC)),
            grid=grid_config_from_dict(cfg),
            obstacles=tuple(obstacles_from_dict(cfg)),
            declared_kinds=declared_obstacle_kinds(cfg),
        )
