"""Config loading helpers built around OmegaConf."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from omegaconf import OmegaConf

from ..config import AreaMapParams
from ..constants import (
    DEFAULT_FRAME_ID,
    DEFAULT_MAP_BORDER,
    DEFAULT_MAP_HEIGHT,
    DEFAULT_MAP_RESOLUTION,
    DEFAULT_MAP_WIDTH,
    DEFAULT_NUM_OBSTACLES,
    DEFAULT_TOPIC,
)


def default_config_dict() -> Dict[str, Any]:
    return {
        "topic_map": DEFAULT_TOPIC,
        "frame_id": DEFAULT_FRAME_ID,
        "map": {
            "width": DEFAULT_MAP_WIDTH,
            "height": DEFAULT_MAP_HEIGHT,
            "resolution": DEFAULT_MAP_RESOLUTION,
        },
        "obstacles": {"number": DEFAULT_NUM_OBSTACLES},
    }


def load_config_any(path: str) -> Any:
    """Load a YAML/OMEGACONF file and return the resolved Python object."""
    if not Path(path).is_file():
        raise FileNotFoundError(f"Config file not found: {path}")
    return OmegaConf.to_container(OmegaConf.load(path), resolve=True)


def load_config_dict(path: str) -> Dict[str, Any]:
    """Load a config file and guarantee a `dict` result."""
    cfg = load_config_any(path)
    if not isinstance(cfg, dict):
        raise TypeError(f"Expected mapping at {path}, got {type(cfg)}")
    return cfg


def merge_config(
    path: Optional[str] = None, overrides: Iterable[str] = ()
) -> Dict[str, Any]:
    """Defaults <- file <- dotlist overrides (e.g. "map.width=20")."""
    layers = [OmegaConf.create(default_config_dict())]
    if path is not None:
        layers.append(OmegaConf.create(load_config_dict(path)))
    dotlist = list(overrides)
    if dotlist:
        layers.append(OmegaConf.from_dotlist(dotlist))
    merged = OmegaConf.to_container(OmegaConf.merge(*layers), resolve=True)
    if not isinstance(merged, dict):
        raise TypeError(f"Expected mapping after merge, got {type(merged)}")
    return merged


def load_params(path: Optional[str] = None, overrides: Iterable[str] = ()) -> AreaMapParams:
    return AreaMapParams.from_dict(merge_config(path, overrides))
