"""Reading and writing the binary tourist map file format.

All numbers are big-endian. A file holds, in order:

* the 12 bytes ``TOURIST MAP\\0`` and the magic number ``0x52391391`` (u32);
* the image size (u64), the map scale (f64) and the numbers of junctions,
  spots and roads (u64 each);
* the title as a string;
* every junction as a coordinate pair;
* every spot as a coordinate pair, a name string and a description string;
* every road as two node indices (u64), a point count (u64) and the points;
* the raw bytes of the reference image.

A string is a u64 byte length followed by that many bytes of UTF-8; a
coordinate pair is two f64 values.
"""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass, field
from typing import BinaryIO

FORMAT_NAME = b"TOURIST MAP\0"
MAGIC_NUMBER = 0x52391391

_PREAMBLE = struct.Struct(">12sI")
_COUNTS = struct.Struct(">QdQQQ")
_U64 = struct.Struct(">Q")
_POINT = struct.Struct(">dd")
_ROAD_HEAD = struct.Struct(">QQQ")
_CHUNK = 1 << 20

Point = tuple[float, float]
SpotRecord = tuple[float, float, str, str]


class MapFormatError(ValueError):
    """The data is not a valid tourist map file."""


@dataclass
class RoadRecord:
    """A road as stored in a file: the indices of its end nodes and its points."""

    node1: int
    node2: int
    points: list[Point] = field(default_factory=list)


@dataclass
class MapData:
    """Everything a tourist map file holds.

    Nodes are indexed junctions first, then spots, in the order given here.
    """

    name: str = ""
    scale: float = 1.0
    nodes: list[Point] = field(default_factory=list)
    spots: list[SpotRecord] = field(default_factory=list)
    roads: list[RoadRecord] = field(default_factory=list)
    image: bytes = b""


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    parts = []
    remaining = size
    while remaining > 0:
        chunk = stream.read(min(remaining, _CHUNK))
        if not chunk:
            raise MapFormatError("unexpected end of map data")
        parts.append(chunk)
        remaining -= len(chunk)
    return b"".join(parts)


def _unpack(stream: BinaryIO, layout: struct.Struct) -> tuple:
    return layout.unpack(_read_exact(stream, layout.size))


def _read_string(stream: BinaryIO) -> str:
    (length,) = _unpack(stream, _U64)
    raw = _read_exact(stream, length)
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MapFormatError("string is not valid UTF-8") from exc


def _read_point(stream: BinaryIO) -> Point:
    x, y = _unpack(stream, _POINT)
    return (x, y)


def read_map(stream: BinaryIO) -> MapData:
    """Read a map from a binary stream, raising MapFormatError if it is invalid."""
    format_name, magic = _unpack(stream, _PREAMBLE)
    if format_name != FORMAT_NAME:
        raise MapFormatError("not a tourist map file")
    if magic != MAGIC_NUMBER:
        raise MapFormatError(f"bad magic number {magic:#010x}")

    image_size, scale, num_node, num_spot, num_road = _unpack(stream, _COUNTS)
    name = _read_string(stream)

    nodes = [_read_point(stream) for _ in range(num_node)]
    spots = []
    for _ in range(num_spot):
        x, y = _read_point(stream)
        spot_name = _read_string(stream)
        description = _read_string(stream)
        spots.append((x, y, spot_name, description))

    total = num_node + num_spot
    roads = []
    for _ in range(num_road):
        index1, index2, count = _unpack(stream, _ROAD_HEAD)
        if index1 >= total or index2 >= total:
            raise MapFormatError("road refers to a node that does not exist")
        # The first point is always stored, whatever the count says.
        points = [_read_point(stream)]
        points.extend(_read_point(stream) for _ in range(max(count, 1) - 1))
        roads.append(RoadRecord(index1, index2, points))

    image = _read_exact(stream, image_size)
    return MapData(name, scale, nodes, spots, roads, image)


def _string_bytes(text: str) -> bytes:
    raw = text.encode("utf-8")
    return _U64.pack(len(raw)) + raw


def write_map(stream: BinaryIO, data: MapData) -> None:
    """Write a map to a binary stream."""
    stream.write(_PREAMBLE.pack(FORMAT_NAME, MAGIC_NUMBER))
    stream.write(
        _COUNTS.pack(
            len(data.image),
            data.scale,
            len(data.nodes),
            len(data.spots),
            len(data.roads),
        )
    )
    stream.write(_string_bytes(data.name))
    for x, y in data.nodes:
        stream.write(_POINT.pack(x, y))
    for x, y, spot_name, description in data.spots:
        stream.write(_POINT.pack(x, y))
        stream.write(_string_bytes(spot_name))
        stream.write(_string_bytes(description))
    for road in data.roads:
        if not road.points:
            raise ValueError("a road must have at least one point")
        stream.write(_ROAD_HEAD.pack(road.node1, road.node2, len(road.points)))
        for x, y in road.points:
            stream.write(_POINT.pack(x, y))
    stream.write(data.image)


def load_map(path: str | os.PathLike) -> MapData:
    """Read a map file from disk."""
    with open(path, "rb") as stream:
        return read_map(stream)


def dump_map(path: str | os.PathLike, data: MapData) -> None:
    """Write a map file to disk."""
    with open(path, "wb") as stream:
        write_map(stream, data)