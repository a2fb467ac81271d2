"""Shared floorplan fixtures for routing tests."""
import pytest
from wayfinder.models import Building, Edge, Floor, Node, Point, Room


def square(cx, cy, half=1.0):
    """Axis-aligned square room outline centered on (cx, cy)."""
    return [
        Point(x=cx - half, y=cy - half), Point(x=cx + half, y=cy - half),
        Point(x=cx + half, y=cy + half), Point(x=cx - half, y=cy + half),
    ]


@pytest.fixture
def corridor_floor():
    """Two rooms below a straight corridor N1(0,1) - N2(10,1)."""
    return Floor(
        name="Ground Floor",
        rooms=[
            Room(name="Room A", coordinates=square(0, 0)),
            Room(name="Room B", alias=["B-Wing"], coordinates=square(10, 0)),
            Room(name="Lobby", alias=["Entrance"], coordinates=square(5, 4)),
        ],
        nodes=[
            Node(id="N1", coordinates=Point(x=0, y=1)),
            Node(id="N2", coordinates=Point(x=10, y=1)),
            Node(id="L1", name="Lift", alias=["Elevator"], coordinates=Point(x=5, y=1)),
            Node(id="K1", name="Kiosk"),
            Node(id="X1", name="Lobby", coordinates=Point(x=5, y=1)),
        ],
        edges=[Edge(sourceNodeId="N1", targetNodeId="N2")],
    )


@pytest.fixture
def square_nodes():
    """Unit square a(0,0) b(1,0) c(1,1) d(0,1)."""
    return [
        Node(id="a", coordinates=Point(x=0, y=0)),
        Node(id="b", coordinates=Point(x=1, y=0)),
        Node(id="c", coordinates=Point(x=1, y=1)),
        Node(id="d", coordinates=Point(x=0, y=1)),
    ]


@pytest.fixture
def open_square_edges():
    """Three sides of the unit square; a and d are only joined through b and c."""
    return [
        Edge(sourceNodeId="a", targetNodeId="b", weight=1.0),
        Edge(sourceNodeId="b", targetNodeId="c", weight=1.0),
        Edge(sourceNodeId="c", targetNodeId="d", weight=1.0),
    ]


@pytest.fixture
def split_floor():
    """Two corridors with no connection between them."""
    return Floor(
        name="Annex",
        rooms=[
            Room(name="West", coordinates=square(0, -2)),
            Room(name="East", coordinates=square(20, -2)),
        ],
        nodes=[
            Node(id=1, coordinates=Point(x=-2, y=0)),
            Node(id=2, coordinates=Point(x=2, y=0)),
            Node(id=3, coordinates=Point(x=18, y=0)),
            Node(id=4, coordinates=Point(x=22, y=0)),
        ],
        edges=[
            Edge(sourceNodeId=1, targetNodeId=2),
            Edge(sourceNodeId=3, targetNodeId=4),
        ],
    )


@pytest.fixture
def upper_floor():
    return Floor(
        name="Second Floor",
        rooms=[Room(name="Room 201", coordinates=square(0, 0))],
        nodes=[
            Node(id="S1", coordinates=Point(x=-5, y=2)),
            Node(id="S2", coordinates=Point(x=5, y=2)),
        ],
        edges=[Edge(sourceNodeId="S1", targetNodeId="S2")],
    )


@pytest.fixture
def building(corridor_floor, upper_floor):
    return Building(floors=[corridor_floor, upper_floor])


def corridor(prefix):
    """Nodes and edge of a straight corridor from (0,1) to (10,1)."""
    nodes = [
        Node(id=f"{prefix}1", coordinates=Point(x=0, y=1)),
        Node(id=f"{prefix}2", coordinates=Point(x=10, y=1)),
    ]
    return nodes, [Edge(sourceNodeId=f"{prefix}1", targetNodeId=f"{prefix}2")]


@pytest.fixture
def stacked_building():
    """Two floors that both have a room called Entrance."""
    ground_nodes, ground_edges = corridor("G")
    upper_nodes, upper_edges = corridor("U")
    return Building(floors=[
        Floor(
            name="Ground",
            rooms=[
                Room(name="Entrance", coordinates=square(0, 0)),
                Room(name="Room 101", coordinates=square(10, 0)),
            ],
            nodes=ground_nodes, edges=ground_edges,
        ),
        Floor(
            name="Upper",
            rooms=[
                Room(name="Entrance", coordinates=square(0, 0)),
                Room(name="Room 201", coordinates=square(10, 0)),
            ],
            nodes=upper_nodes, edges=upper_edges,
        ),
    ])
