from __future__ import annotations

import argparse
import sys
from pathlib import Path

import numpy as np

from area_map.constants import CELL_OCCUPIED
from area_map.node import AreaMapNode
from area_map.transport.latched import MessageBus
from area_map.utils import load_params


REPO_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG = REPO_ROOT / "configs" / "area_map.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate a static occupancy grid and publish it once (latched)"
    )
    parser.add_argument("--config", type=str, default=str(DEFAULT_CONFIG))
    parser.add_argument("--no-config", action="store_true", help="Use built-in defaults only")
    parser.add_argument("--show", action="store_true", help="Plot the grid with matplotlib")
    parser.add_argument("--quiet", action="store_true")
    parser.add_argument(
        "overrides",
        nargs="*",
        help="OmegaConf dotlist overrides, e.g. map.width=20 map.border=true",
    )
    args = parser.parse_args(argv)

    try:
        params = load_params(None if args.no_config else args.config, args.overrides)
    except (FileNotFoundError, TypeError, ValueError) as e:
        print(f"[AREA_MAP] Invalid configuration: {e}", file=sys.stderr)
        return 2

    bus = MessageBus()
    received = []
    bus.subscribe(params.topic, received.append)
    node = AreaMapNode(params, bus=bus, verbose=not args.quiet)
    grid = node.grid

    occupied = int(np.count_nonzero(grid.data == CELL_OCCUPIED))
    o = grid.info.origin.position
    print(
        f"[AREA_MAP] topic={params.topic} frame={grid.header.frame_id} "
        f"size={grid.info.width}x{grid.info.height} res={grid.info.resolution:g} "
        f"origin=({o.x:.3f}, {o.y:.3f}) occupied={occupied}/{grid.data.size} "
        f"delivered={len(received)}"
    )

    if args.show:
        import matplotlib.pyplot as plt

        from area_map.viz.plotting import draw_grid

        draw_grid(grid)
        plt.show()

    node.shutdown()
    return 0


if __name__ == "__main__":
    sys.exit(main())
