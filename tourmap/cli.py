"""Command line for creating, inspecting and routing on tourist maps."""

from __future__ import annotations

import argparse
import math
import sys

from .mapfile import MapFormatError
from .models import Spot
from .touristmap import TouristMap

_SCALE_MIN = 0.0
_SCALE_MAX = 99.99


def _scale(text: str) -> float:
    try:
        value = round(float(text), 3)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid scale: {text!r}") from exc
    if not _SCALE_MIN <= value <= _SCALE_MAX:
        raise argparse.ArgumentTypeError(
            f"scale must lie between {_SCALE_MIN} and {_SCALE_MAX}"
        )
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tourmap", description="Tourist map tool.")
    commands = parser.add_subparsers(dest="command", required=True)

    new = commands.add_parser("new", help="create a map over a reference image")
    new.add_argument("image", help="reference image file")
    new.add_argument("name", help="map name")
    new.add_argument("output", help="map file to write")
    new.add_argument(
        "--scale", type=_scale, default=1.0, help="metres per pixel (default 1.0)"
    )

    info = commands.add_parser("info", help="describe a map file")
    info.add_argument("map", help="map file")

    route = commands.add_parser("route", help="shortest route between two nodes")
    route.add_argument("map", help="map file")
    route.add_argument("source", type=int, help="index of the start node")
    route.add_argument("destination", type=int, help="index of the end node")
    return parser


def _open(path: str) -> TouristMap | None:
    try:
        return TouristMap.from_file(path)
    except (OSError, MapFormatError) as exc:
        print(f"error: failed to open map: {exc}", file=sys.stderr)
        return None


def _new(args: argparse.Namespace) -> int:
    try:
        tourist_map = TouristMap.from_image(args.image, args.name, args.scale)
    except (OSError, ValueError) as exc:
        print(f"error: failed to read image: {exc}", file=sys.stderr)
        return 1
    try:
        tourist_map.save_file(args.output)
    except OSError as exc:
        print(f"error: failed to save: {exc}", file=sys.stderr)
        return 1
    return 0


def _info(args: argparse.Namespace) -> int:
    tourist_map = _open(args.map)
    if tourist_map is None:
        return 1
    spots = [node for node in tourist_map.nodes if isinstance(node, Spot)]
    print(f"name: {tourist_map.name}")
    print(f"scale: {tourist_map.scale}")
    print(f"junctions: {len(tourist_map.nodes) - len(spots)}")
    print(f"spots: {len(spots)}")
    print(f"roads: {len(tourist_map.roads)}")
    for spot in spots:
        print(f"  [{spot.index}] {spot.name}: {spot.description}")
    return 0


def _route(args: argparse.Namespace) -> int:
    tourist_map = _open(args.map)
    if tourist_map is None:
        return 1
    count = len(tourist_map.nodes)
    for index in (args.source, args.destination):
        if not 0 <= index < count:
            print(f"error: no node with index {index}", file=sys.stderr)
            return 1
    source = tourist_map.nodes[args.source]
    destination = tourist_map.nodes[args.destination]
    tourist_map.press_node(source)
    distance = tourist_map.shortest_distance(destination)
    if math.isinf(distance):
        print("unreachable")
        return 1
    metres = math.floor(distance * tourist_map.scale + 0.5)
    print(f"distance: {metres} m")
    print(f"roads: {len(tourist_map.path_to(destination))}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the tool and return its exit status."""
    args = _build_parser().parse_args(argv)
    handlers = {"new": _new, "info": _info, "route": _route}
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())