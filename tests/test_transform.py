"""Tests for floor rotation."""
from wayfinder.core.transform import floor_center, rotate_floor, rotate_left, rotate_right
from wayfinder.models import Floor, Node, Point
from wayfinder.services.route_service import RouteService


def close(p, x, y):
    return abs(p.x - x) < 1e-9 and abs(p.y - y) < 1e-9


def test_floor_center_uses_room_vertices(corridor_floor):
    # Vertex means of the three squares: (0,0), (10,0), (5,4)
    c = floor_center(corridor_floor)
    assert close(c, 5.0, 4 / 3)


def test_floor_center_falls_back_to_nodes():
    floor = Floor(nodes=[Node(id=1, coordinates=Point(x=2, y=2)), Node(id=2), Node(id=3, coordinates=Point(x=4, y=0))])
    assert close(floor_center(floor), 3, 1)
    assert close(floor_center(Floor()), 0, 0)


def test_rotate_right_quarter_turn(corridor_floor):
    rotated = rotate_floor(corridor_floor, 90, center=Point(x=0, y=0))
    assert close(rotated.nodes[1].coordinates, -1, 10)
    assert close(rotated.rooms[1].centroid, 0, 10)
    assert rotated.nodes[3].coordinates is None
    assert rotated.edges == corridor_floor.edges


def test_rotation_leaves_original_untouched(corridor_floor):
    before = corridor_floor.model_dump()
    rotate_right(corridor_floor)
    rotate_left(corridor_floor)
    assert corridor_floor.model_dump() == before


def test_left_then_right_is_identity(corridor_floor):
    back = rotate_right(rotate_left(corridor_floor))
    for original, turned in zip(corridor_floor.nodes, back.nodes):
        if original.coordinates is not None:
            assert close(turned.coordinates, original.coordinates.x, original.coordinates.y)


def test_rotated_floor_routes_the_same_length(corridor_floor):
    service = RouteService()
    straight = service.route(corridor_floor, "Room A", "Room B")
    turned = service.route(rotate_floor(corridor_floor, 90), "Room A", "Room B")
    assert abs(turned.length - straight.length) < 1e-9
