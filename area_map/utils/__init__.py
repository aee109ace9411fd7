"""Utility helpers shared by the node, scripts and tests."""

from .config import (
    default_config_dict,
    load_config_any,
    load_config_dict,
    load_params,
    merge_config,
)

__all__ = [
    "default_config_dict",
    "load_config_any",
    "load_config_dict",
    "load_params",
    "merge_config",
]
