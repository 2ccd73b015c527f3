"""Interactive editing of a tourist map: modes, clicks, hovering and zoom."""

from __future__ import annotations

import math
from enum import Enum, auto

from .models import Node, Road, Spot
from .touristmap import TouristMap


class Mode(Enum):
    """What a left click on the map does."""

    SELECT = auto()
    NODE = auto()
    SPOT = auto()
    ROAD = auto()
    DEL = auto()


def _segment_distance(
    px: float, py: float, a: tuple[float, float], b: tuple[float, float]
) -> float:
    ax, ay = a
    bx, by = b
    dx, dy = bx - ax, by - ay
    length_sq = dx * dx + dy * dy
    if length_sq == 0.0:
        return math.hypot(px - ax, py - ay)
    t = max(0.0, min(1.0, ((px - ax) * dx + (py - ay) * dy) / length_sq))
    return math.hypot(px - (ax + t * dx), py - (ay + t * dy))


def _road_contains(road: Road, px: float, py: float) -> bool:
    reach = (Road.WIDTH + 2) / 2
    points = road.points()
    if len(points) == 1:
        return math.hypot(px - points[0][0], py - points[0][1]) <= reach
    return any(
        _segment_distance(px, py, a, b) <= reach for a, b in zip(points, points[1:])
    )


class Editor:
    """Applies user actions to a map according to the current mode."""

    SCALING = 1.2

    def __init__(self, tourist_map: TouristMap) -> None:
        self.map = tourist_map
        self.mode = Mode.SELECT
        self.building_road: Road | None = None
        self.pending_spot: tuple[float, float] | None = None
        self.zoom = 1.0
        self._toggled: Mode | None = None

    def toggle(self, mode: Mode) -> Mode:
        """Switch an editing mode on, or back to selection if it is already on."""
        if mode is Mode.SELECT:
            raise ValueError("selection mode cannot be toggled")
        if self.mode is Mode.SELECT:
            self.map.clear()
        self.mode = mode
        if mode is self._toggled:
            self.mode = Mode.SELECT
            self._toggled = None
        else:
            self._toggled = mode
        return self.mode

    def _node_at(self, x: float, y: float) -> Node | None:
        return next(
            (node for node in reversed(self.map.nodes) if node.contains(x, y)), None
        )

    def _road_at(self, x: float, y: float) -> Road | None:
        return next(
            (road for road in reversed(self.map.roads) if _road_contains(road, x, y)),
            None,
        )

    def click(self, x: float, y: float):
        """Handle a left click at scene position (x, y).

        Returns the item created or affected, or None.
        """
        if self.mode is Mode.NODE:
            node = Node(x, y)
            self.map.add_node(node)
            return node
        if self.mode is Mode.SPOT:
            self.pending_spot = (float(x), float(y))
            return None

        node = self._node_at(x, y)
        if self.mode is Mode.ROAD:
            if node is not None:
                return self.click_node(node)
            # Roads ignore clicks while building, so the point extends the road.
            if self.building_road is not None:
                self.building_road.line_to(x, y)
            return self.building_road

        if node is not None:
            self.click_node(node)
            return node
        road = self._road_at(x, y)
        if road is not None:
            self.click_road(road)
            return road
        return None

    def click_node(self, node: Node) -> Road | None:
        """Handle a click on a node; in road mode returns the road being built."""
        if self.mode is Mode.SELECT:
            self.map.press_node(node)
        elif self.mode is Mode.ROAD:
            road = self.building_road
            if road is not None:
                road.line_to(node.x, node.y)
                road.node2 = node
                self.map.add_road(road)
                self.building_road = None
            else:
                road = Road(node.x, node.y)
                road.node1 = node
                self.building_road = road
            return road
        elif self.mode is Mode.DEL:
            self.map.del_node(node)
        return None

    def click_road(self, road: Road) -> bool:
        """Handle a click on a road; returns whether the road took the click."""
        if self.mode is Mode.SELECT:
            road.set_checked(not road.checked)
            return True
        if self.mode is Mode.DEL:
            self.map.del_road(road)
            return True
        return False

    def add_spot(self, x: float, y: float, name: str, description: str) -> Spot | None:
        """Finish entering a spot; nothing is added if both texts are empty."""
        self.pending_spot = None
        if not name and not description:
            return None
        spot = Spot(x, y, name, description)
        self.map.add_node(spot)
        return spot

    def hover_road(self, road: Road, x: float, y: float) -> None:
        """Show the road's length next to the pointer."""
        tip = self.map.info_tip
        tip.show_text(road.tip_text(self.map.scale))
        tip.show_at(x, y)

    def hover_spot(self, spot: Spot, x: float, y: float) -> None:
        """Show the spot's name and description next to the pointer."""
        tip = self.map.info_tip
        tip.show_text(spot.tip_text())
        tip.show_at(x, y)

    def leave(self) -> None:
        """Hide the info tip when the pointer leaves an item."""
        self.map.info_tip.hide()

    def enlarge(self, flag: bool) -> float:
        """Zoom in when flag is true, out otherwise; returns the new zoom."""
        if flag:
            self.zoom *= self.SCALING
        else:
            self.zoom /= self.SCALING
        return self.zoom