import pytest

from tourmap.models import (
    NODE_CHECKED_COLOR,
    NODE_COLOR,
    ROAD_CHECKED_COLOR,
    ROAD_COLOR,
    SPOT_CHECKED_COLOR,
    SPOT_COLOR,
    Node,
    Road,
    Spot,
)


def test_node_bounding_rect_surrounds_circle():
    node = Node(40, 70)
    r = Node.RADIUS
    assert node.bounding_rect() == (40 - r, 70 - r, 2 * r, 2 * r)


@pytest.mark.parametrize(
    "dx, dy, inside",
    [(0, 0, True), (Node.RADIUS, 0, True), (0, -Node.RADIUS, True),
     (Node.RADIUS, Node.RADIUS, False), (Node.RADIUS + 1, 0, False)],
)
def test_node_contains(dx, dy, inside):
    node = Node(100, 200)
    assert node.contains(100 + dx, 200 + dy) is inside


def test_node_checked_toggles_color():
    node = Node(1, 2)
    assert node.checked is False
    assert node.color == NODE_COLOR
    node.set_checked(True)
    assert node.checked is True
    assert node.color == NODE_CHECKED_COLOR
    node.set_checked(False)
    assert node.color == NODE_COLOR


def test_spot_uses_own_colors():
    spot = Spot(5, 6, "Lake", "Quiet water")
    assert spot.color == SPOT_COLOR
    assert spot.checked is False
    spot.set_checked(True)
    assert spot.color == SPOT_CHECKED_COLOR
    spot.set_checked(False)
    assert spot.color == SPOT_COLOR


def test_spot_keeps_position_and_text():
    spot = Spot(5, 6, "Lake", "Quiet water")
    assert (spot.x, spot.y) == (5.0, 6.0)
    assert spot.name == "Lake"
    assert spot.description == "Quiet water"
    assert spot.tip_text() == "Lake<br><br>Quiet water"
    assert spot.contains(5, 6)


def test_spot_shares_node_geometry():
    spot = Spot(7, 8, "", "")
    node = Node(7, 8)
    assert spot.bounding_rect() == node.bounding_rect()
    assert spot.contains(7 + Node.RADIUS, 8) is True
    assert spot.contains(7 + Node.RADIUS + 1, 8) is False
    assert spot.TYPE != node.TYPE


def test_road_starts_with_single_point():
    road = Road(3, 4)
    assert road.points() == [(3.0, 4.0)]
    assert road.distance == 0
    assert road.node1 is None and road.node2 is None


def test_road_line_to_appends_points_and_distance():
    road = Road(0, 0)
    road.line_to(3, 4)
    assert road.points() == [(0.0, 0.0), (3.0, 4.0)]
    assert road.distance == pytest.approx(5.0)


def test_road_distance_accumulates():
    there = Road(0, 0)
    there.line_to(3, 4)
    there.line_to(10, 4)
    back = Road(0, 0)
    back.line_to(3, 4)
    back.line_to(10, 4)
    back.line_to(3, 4)
    back.line_to(0, 0)
    assert back.distance == pytest.approx(2 * there.distance)
    assert len(back.points()) == 5


def test_road_points_is_a_copy():
    road = Road(1, 1)
    pts = road.points()
    pts.append((9.0, 9.0))
    assert road.points() == [(1.0, 1.0)]


def test_road_tip_text_scales_distance():
    road = Road(0, 0)
    road.line_to(3, 4)
    assert road.tip_text(2) == "10 m"


def test_road_tip_text_rounds_half_away_from_zero():
    road = Road(0, 0)
    road.line_to(0.5, 0)
    assert road.tip_text(1) == "1 m"


def test_road_checked_toggles_color():
    road = Road(0, 0)
    assert road.color == ROAD_COLOR
    road.set_checked(True)
    assert road.checked is True
    assert road.color == ROAD_CHECKED_COLOR
    road.set_checked(False)
    assert road.checked is False
    assert road.color == ROAD_COLOR


def test_road_connects_nodes():
    a, b = Node(0, 0), Node(10, 0)
    road = Road(a.x, a.y)
    road.node1 = a
    road.line_to(b.x, b.y)
    road.node2 = b
    assert road.node1 is a
    assert road.node2 is b
    assert road.points()[-1] == (b.x, b.y)