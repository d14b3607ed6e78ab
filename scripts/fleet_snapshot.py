#!/usr/bin/env python3
"""Fetch the vessel list once and print the map view model.

Mounts the view on an in-memory map surface, waits for the first fetch and
prints the side-list records (and optionally the recorded map scene) as
JSON. Configuration comes from ``FLEETMAP_*`` environment variables.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from fleetmap import FleetMapConfig, HttpVesselSource, MapViewController, SceneMapSurface  # noqa: E402
from fleetmap.selection import SelectionChannel, build_location  # noqa: E402


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--base-url", help="Vessel API root (overrides FLEETMAP_BASE_URL)")
    parser.add_argument("--selected", type=int, help="Vessel id to focus")
    parser.add_argument("--scene", action="store_true", help="Also print the recorded map scene")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args()


async def _run(args: argparse.Namespace) -> int:
    overrides = {"base_url": args.base_url} if args.base_url else {}
    config = FleetMapConfig.from_env(**overrides)
    channel = SelectionChannel(config.map_route, build_location(config.map_route, args.selected))

    async with HttpVesselSource(config) as source:
        async with MapViewController(config, source, SceneMapSurface, channel=channel) as view:
            await view.wait_for_first_fetch()
            output: dict[str, object] = {"view": view.get_view_model().model_dump()}
            if args.scene and isinstance(view.surface, SceneMapSurface):
                output["scene"] = view.surface.to_dict()

    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


def main() -> int:
    args = _parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    return asyncio.run(_run(args))


if __name__ == "__main__":
    raise SystemExit(main())
