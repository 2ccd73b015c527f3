"""Map items: road junctions, named spots and the roads between them."""

from __future__ import annotations

import math

Color = tuple[int, int, int, int]

NODE_COLOR: Color = (255, 255, 255, 100)
NODE_CHECKED_COLOR: Color = (0, 0, 0, 255)
SPOT_COLOR: Color = (255, 215, 0, 255)
SPOT_CHECKED_COLOR: Color = (0, 255, 127, 255)
ROAD_COLOR: Color = (255, 255, 255, 100)
ROAD_CHECKED_COLOR: Color = (0x41, 0x69, 0xE1, 255)

_USER_TYPE = 65536


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class Node:
    """A junction drawn as a circle at a fixed position."""

    TYPE = _USER_TYPE + 1
    RADIUS = 10
    Z_VALUE = 2

    def __init__(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)
        self.index = 0
        self.checked = False
        self.color: Color = NODE_COLOR

    def set_checked(self, checked: bool) -> None:
        """Mark the node as selected or not and update its colour."""
        self.checked = checked
        self.color = NODE_CHECKED_COLOR if checked else NODE_COLOR

    def contains(self, px: float, py: float) -> bool:
        """Whether the point lies inside the node's circle."""
        return math.hypot(px - self.x, py - self.y) <= self.RADIUS

    def bounding_rect(self) -> tuple[float, float, float, float]:
        """The rectangle (left, top, width, height) around the circle."""
        r = self.RADIUS
        return (self.x - r, self.y - r, 2.0 * r, 2.0 * r)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self.x!r}, y={self.y!r}, index={self.index!r})"


class Spot(Node):
    """A named place with a description."""

    TYPE = _USER_TYPE + 2

    def __init__(self, x: float, y: float, name: str, description: str) -> None:
        super().__init__(x, y)
        self.name = name
        self.description = description
        self.set_checked(False)

    def set_checked(self, checked: bool) -> None:
        """Mark the spot as selected or not and update its colour."""
        self.checked = checked
        self.color = SPOT_CHECKED_COLOR if checked else SPOT_COLOR

    def tip_text(self) -> str:
        """The text shown while the pointer hovers over the spot."""
        return f"{self.name}<br><br>{self.description}"


class Road:
    """A polyline between two nodes, with its accumulated length."""

    TYPE = _USER_TYPE + 3
    WIDTH = 10
    Z_VALUE = 1

    def __init__(self, x: float, y: float) -> None:
        self._points: list[tuple[float, float]] = [(float(x), float(y))]
        self.distance = 0.0
        self.node1: Node | None = None
        self.node2: Node | None = None
        self.checked = False
        self.color: Color = ROAD_COLOR

    def line_to(self, x: float, y: float) -> None:
        """Extend the road from its last point to (x, y)."""
        last_x, last_y = self._points[-1]
        self.distance += math.hypot(x - last_x, y - last_y)
        self._points.append((float(x), float(y)))

    def set_checked(self, checked: bool) -> None:
        """Mark the road as highlighted or not and update its colour."""
        self.checked = checked
        self.color = ROAD_CHECKED_COLOR if checked else ROAD_COLOR

    def points(self) -> list[tuple[float, float]]:
        """All points the road passes through, in order."""
        return list(self._points)

    def tip_text(self, scale: float) -> str:
        """The road length in metres for a map scale of metres per pixel."""
        return f"{_round_half_away(self.distance * scale)} m"

    def __repr__(self) -> str:
        return f"Road(points={self._points!r}, distance={self.distance!r})"