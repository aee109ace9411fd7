import importlib.util
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "generate_map.py"


@pytest.fixture(scope="module")
def cli():
    spec = importlib.util.spec_from_file_location("generate_map", SCRIPT)
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


def test_defaults_with_border(cli, capsys) -> None:
    assert cli.main(["--no-config", "--quiet", "map.border=true"]) == 0
    out = capsys.readouterr().out
    assert "size=10x10" in out
    assert "origin=(-0.500, -0.500)" in out
    assert "occupied=36/100" in out
    assert "delivered=1" in out


def test_bundled_config(cli, capsys) -> None:
    assert cli.main([]) == 0
    out = capsys.readouterr().out
    assert "Generated map with 4 obstacles" in out
    assert "size=120x80" in out


def test_bad_config_exits_2(cli, capsys) -> None:
    assert cli.main(["--no-config", "map.width=0"]) == 2
    assert "Invalid configuration" in capsys.readouterr().err
