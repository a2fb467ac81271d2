"""Tests for representative points and nearest-edge projection."""
from wayfinder.core.locator import representative_point
from wayfinder.core.projector import parallel_point, project_onto_graph
from wayfinder.core.resolver import resolve
from wayfinder.models import Edge, EntityKind, Located, Node, Point, Room


def P(x, y):
    return Point(x=x, y=y)


# --- representative_point ---

def test_room_centroid_is_vertex_mean():
    room = Room(name="L", coordinates=[P(0, 0), P(4, 0), P(4, 1), P(1, 1), P(1, 4), P(0, 4)])
    point = representative_point(Located(kind=EntityKind.ROOM, data=room))
    assert abs(point.x - 10 / 6) < 1e-12
    assert abs(point.y - 10 / 6) < 1e-12


def test_node_point_is_its_coordinates():
    node = Node(id=7, coordinates=P(3, 4))
    assert representative_point(Located(kind=EntityKind.NODE, data=node)) == P(3, 4)


def test_missing_coordinates_give_none():
    assert representative_point(Located(kind=EntityKind.NODE, data=Node(id=7))) is None
    assert representative_point(Located(kind=EntityKind.ROOM, data=Room(name="Void"))) is None


def test_alias_and_name_give_same_point(corridor_floor):
    by_name = resolve("Room B", corridor_floor.rooms, corridor_floor.nodes)
    by_alias = resolve("B-WING", corridor_floor.rooms, corridor_floor.nodes)
    assert representative_point(by_name) == representative_point(by_alias) == P(10, 0)


# --- parallel_point ---

def test_horizontal_inside_span():
    assert parallel_point(P(3, 7), P(0, 1), P(10, 1)) == P(3, 1)


def test_horizontal_outside_span_takes_nearer_end():
    assert parallel_point(P(-4, 7), P(0, 1), P(10, 1)) == P(0, 1)
    assert parallel_point(P(12, -3), P(0, 1), P(10, 1)) == P(10, 1)


def test_vertical_inside_and_outside():
    assert parallel_point(P(5, 2), P(1, 0), P(1, 10)) == P(1, 2)
    assert parallel_point(P(5, 20), P(1, 0), P(1, 10)) == P(1, 10)


def test_nearly_horizontal_snaps_to_axis():
    assert parallel_point(P(5, 3), P(0, 1), P(10, 1 + 1e-9)) == P(5, 1)


def test_diagonal_uses_parametric_projection():
    q = parallel_point(P(0, 4), P(0, 0), P(4, 4))
    assert abs(q.x - 2.0) < 1e-12
    assert abs(q.y - 2.0) < 1e-12


# --- project_onto_graph ---

def test_projection_picks_nearest_edge(square_nodes, open_square_edges):
    result = project_onto_graph(P(1.5, 0.5), open_square_edges, square_nodes)
    assert result.edge.source_node_id == "b"
    assert abs(result.distance - 0.5) < 1e-12
    assert result.parallel_point == P(1, 0.5)
    assert (result.nodes.source.id, result.nodes.target.id) == ("b", "c")


def test_projection_tie_keeps_first_edge(square_nodes, open_square_edges):
    # (1, -1) is 1 from a-b and 1 from b-c; a-b comes first
    result = project_onto_graph(P(1, -1), open_square_edges, square_nodes)
    assert result.edge.source_node_id == "a"


def test_projection_is_deterministic(square_nodes, open_square_edges):
    first = project_onto_graph(P(0.3, 0.6), open_square_edges, square_nodes)
    second = project_onto_graph(P(0.3, 0.6), open_square_edges, square_nodes)
    assert first == second


def test_projection_skips_unusable_edges(square_nodes):
    nodes = square_nodes + [Node(id="ghost")]
    edges = [
        Edge(sourceNodeId="a", targetNodeId="missing"),
        Edge(sourceNodeId="a", targetNodeId="ghost"),
        Edge(sourceNodeId="c", targetNodeId="d"),
    ]
    result = project_onto_graph(P(0, 0), edges, nodes)
    assert result.edge.source_node_id == "c"


def test_projection_without_edges_is_none(square_nodes):
    assert project_onto_graph(P(0, 0), [], square_nodes) is None


def test_projection_with_only_unplaced_nodes_is_none():
    nodes = [Node(id=1), Node(id=2)]
    assert project_onto_graph(P(0, 0), [Edge(sourceNodeId=1, targetNodeId=2)], nodes) is None
