import pytest

from area_map.config import SquareObstacle
from area_map.utils import load_config_dict, load_params, merge_config


YAML = """
topic_map: arena
map:
  width: 16
  height: 8
  resolution: 0.25
  border: true
obstacles:
  number: 1
  obs_0:
    type: square
    size: 1
    position: {x: 3, y: 4}
"""


def test_load_yaml(tmp_path) -> None:
    path = tmp_path / "area.yaml"
    path.write_text(YAML)
    cfg = load_config_dict(str(path))
    assert cfg["map"]["width"] == 16
    p = load_params(str(path))
    assert p.topic == "arena"
    assert (p.grid.width, p.grid.height, p.grid.border) == (16, 8, True)
    assert p.grid.frame_id == "map"
    assert p.obstacles == (SquareObstacle(size=1, x=3, y=4),)


def test_dotlist_overrides_win(tmp_path) -> None:
    path = tmp_path / "area.yaml"
    path.write_text(YAML)
    p = load_params(str(path), ["map.width=30", "map.border=false", "frame_id=odom"])
    assert p.grid.width == 30
    assert p.grid.border is False
    assert p.grid.frame_id == "odom"


def test_defaults_without_file() -> None:
    cfg = merge_config(None, [])
    assert cfg["topic_map"] == "grid"
    assert cfg["map"]["width"] == 10
    p = load_params(overrides=["map.border=true"])
    assert p.grid.border is True


def test_missing_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config_dict(str(tmp_path / "nope.yaml"))


def test_non_mapping_root(tmp_path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(TypeError):
        load_config_dict(str(path))


def test_invalid_override_fails_fast() -> None:
    with pytest.raises(ValueError):
        load_params(overrides=["map.height=0"])
