"""Floor transforms. Every transform returns a new Floor."""

from __future__ import annotations
import math

from wayfinder.models import Floor, Point
from wayfinder.models.geometry import mean_point, rotate_point


def floor_center(floor: Floor) -> Point:
    """Mean of all room vertices; node coordinates if there are no rooms."""
    center = mean_point([p for room in floor.rooms for p in room.coordinates])
    if center is None:
        center = mean_point([n.coordinates for n in floor.nodes if n.coordinates is not None])
    return center or Point(x=0.0, y=0.0)


def rotate_floor(floor: Floor, degrees: float, center: Point | None = None) -> Floor:
    """Rotate rooms and node coordinates counterclockwise around *center*."""
    if center is None:
        center = floor_center(floor)
    angle = math.radians(degrees)

    rooms = [
        room.model_copy(update={
            "coordinates": [rotate_point(p, center, angle) for p in room.coordinates],
        })
        for room in floor.rooms
    ]
    nodes = [
        node.model_copy(update={
            "coordinates": (
                rotate_point(node.coordinates, center, angle)
                if node.coordinates is not None else None
            ),
        })
        for node in floor.nodes
    ]
    edges = [edge.model_copy() for edge in floor.edges]
    return floor.model_copy(update={"rooms": rooms, "nodes": nodes, "edges": edges})


def rotate_left(floor: Floor) -> Floor:
    return rotate_floor(floor, -90)


def rotate_right(floor: Floor) -> Floor:
    return rotate_floor(floor, 90)
