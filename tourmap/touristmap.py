"""A tourist map: junctions, spots and roads over a reference image."""

from __future__ import annotations

import heapq
import io
import itertools
import math
import os

from PIL import Image

from .infotip import InfoTip
from .mapfile import MapData, MapFormatError, RoadRecord, dump_map, load_map
from .models import Node, Road, Spot


def _image_size(data: bytes) -> tuple[int, int]:
    """Decode image data and return its (width, height)."""
    try:
        with Image.open(io.BytesIO(data)) as picture:
            picture.load()
            return picture.size
    except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as exc:
        raise ValueError("image data cannot be decoded") from exc


class TouristMap:
    """The graph of a map, its selection state and its reference image.

    Selecting a first node makes it the source; selecting a second one makes
    it the destination and highlights the shortest path between them.
    """

    def __init__(self, name: str, scale: float, image: bytes) -> None:
        self.name = name
        self.scale = float(scale)
        self.file_name: str | os.PathLike | None = None
        self.image = b""
        self.size: tuple[int, int] = (0, 0)
        self.info_tip = InfoTip()
        self.nodes: list[Node] = []
        self.roads: list[Road] = []
        self.source: Node | None = None
        self.destination: Node | None = None
        self._graph: dict[Node, list[tuple[Node, Road]]] = {}
        self._distance: dict[Node, float] = {}
        self._path: dict[Node, tuple[Node, Road]] = {}
        self._next_index = 0
        self._load_image(bytes(image))

    @classmethod
    def from_file(cls, file_name: str | os.PathLike) -> TouristMap:
        """Open a map file, raising MapFormatError if it is invalid."""
        data = load_map(file_name)
        try:
            tourist_map = cls(data.name, data.scale, data.image)
        except ValueError as exc:
            raise MapFormatError("map image cannot be decoded") from exc

        nodes: list[Node] = [Node(x, y) for x, y in data.nodes]
        nodes.extend(Spot(x, y, name, text) for x, y, name, text in data.spots)
        for node in nodes:
            tourist_map.add_node(node)

        for record in data.roads:
            first, *rest = record.points
            road = Road(*first)
            for x, y in rest:
                road.line_to(x, y)
            road.node1 = nodes[record.node1]
            road.node2 = nodes[record.node2]
            tourist_map.add_road(road)

        tourist_map.file_name = file_name
        return tourist_map

    @classmethod
    def from_image(
        cls, image_file_name: str | os.PathLike, name: str, scale: float
    ) -> TouristMap:
        """Create an empty map over the image stored in a file."""
        with open(image_file_name, "rb") as stream:
            return cls(name, scale, stream.read())

    def _load_image(self, data: bytes) -> None:
        self.size = _image_size(data)
        self.image = data

    def set_image(self, image_file_name: str | os.PathLike) -> None:
        """Replace the reference image with the one stored in a file."""
        with open(image_file_name, "rb") as stream:
            data = stream.read()
        self._load_image(data)

    def add_node(self, node: Node) -> None:
        """Add a junction or spot to the map."""
        node.index = self._next_index
        self._next_index += 1
        self.nodes.append(node)
        self._graph[node] = []

    def _link(self, road: Road) -> None:
        self._graph.setdefault(road.node1, []).append((road.node2, road))
        self._graph.setdefault(road.node2, []).append((road.node1, road))

    def add_road(self, road: Road) -> None:
        """Add a road whose two end nodes are already set."""
        if road.node1 is None or road.node2 is None:
            raise ValueError("a road needs both end nodes before it is added")
        self._link(road)
        self.roads.append(road)

    def del_node(self, node: Node) -> None:
        """Remove a node and every road that touches it."""
        for _, road in list(self._graph.get(node, [])):
            self.del_road(road)
        self._graph.pop(node, None)
        if node in self.nodes:
            self.nodes.remove(node)

    def del_road(self, road: Road) -> None:
        """Remove a road from the map."""
        for node, other in ((road.node1, road.node2), (road.node2, road.node1)):
            if node is not None and node in self._graph:
                self._graph[node] = [
                    edge for edge in self._graph[node] if edge != (other, road)
                ]
        if road in self.roads:
            self.roads.remove(road)
        self.info_tip.hide()

    def press_node(self, node: Node) -> None:
        """Toggle the selection of a node and update the shown path."""
        node.set_checked(not node.checked)
        if node.checked:
            if self.source is None:
                self._calculate(node)
            elif self.destination is None:
                self._show_path(node, True)
                self.destination = node
            else:
                self._show_path(self.destination, False)
                self.destination.set_checked(False)
                self._show_path(node, True)
                self.destination = node
        elif node is self.source:
            self.clear()
        else:
            self._show_path(node, False)
            self.destination = None

    def clear(self) -> None:
        """Drop the source and destination and un-highlight the path."""
        if self.source is None:
            return
        self.source.set_checked(False)
        if self.destination is not None:
            self._show_path(self.destination, False)
            self.destination.set_checked(False)
        self.source = None
        self.destination = None

    def _calculate(self, source: Node) -> None:
        self.source = source
        self._distance = {source: 0.0}
        self._path = {}
        counter = itertools.count()
        heap = [(0.0, next(counter), source)]
        while heap:
            distance, _, node = heapq.heappop(heap)
            if distance > self._distance.get(node, math.inf):
                continue
            for next_node, road in self._graph.get(node, []):
                new_distance = distance + road.distance
                if new_distance < self._distance.get(next_node, math.inf):
                    self._distance[next_node] = new_distance
                    self._path[next_node] = (node, road)
                    heapq.heappush(heap, (new_distance, next(counter), next_node))

    def _show_path(self, destination: Node, show: bool) -> None:
        for road in self._walk(destination):
            road.set_checked(show)

    def _walk(self, destination: Node):
        node = destination
        while node in self._path:
            node, road = self._path[node]
            yield road

    def shortest_distance(self, node: Node) -> float:
        """Length of the shortest path from the source, or inf if unreachable."""
        if self.source is None:
            raise ValueError("no source node is selected")
        return self._distance.get(node, math.inf)

    def path_to(self, destination: Node) -> list[Road]:
        """Roads along the shortest path from the source, in travel order.

        Empty when the destination is the source or cannot be reached.
        """
        if self.source is None:
            raise ValueError("no source node is selected")
        return list(reversed(list(self._walk(destination))))

    def save(self, file_name: str | os.PathLike | None = None) -> bool:
        """Save to the map's own file, adopting file_name if it has none.

        Returns False when there is no file name to save to.
        """
        if self.file_name is None:
            self.file_name = file_name
        if self.file_name is None:
            return False
        self.save_file(self.file_name)
        return True

    def save_file(self, file_name: str | os.PathLike) -> None:
        """Write the map to a file and clear the selection."""
        junctions = [node for node in self.nodes if not isinstance(node, Spot)]
        spots = [node for node in self.nodes if isinstance(node, Spot)]
        self.nodes = junctions + spots
        for index, node in enumerate(self.nodes):
            node.index = index
        self._next_index = len(self.nodes)

        self._graph = {node: [] for node in self.nodes}
        for road in self.roads:
            self._link(road)
        if self.source is not None:
            self._calculate(self.source)

        data = MapData(
            name=self.name,
            scale=self.scale,
            nodes=[(node.x, node.y) for node in junctions],
            spots=[(s.x, s.y, s.name, s.description) for s in spots],
            roads=[
                RoadRecord(road.node1.index, road.node2.index, road.points())
                for road in self.roads
            ],
            image=self.image,
        )
        dump_map(file_name, data)
        self.clear()