"""Geometric primitives used throughout the router."""

from __future__ import annotations
import math
from pydantic import BaseModel


class Point(BaseModel):
    """Point on the floorplan, in floorplan-local units."""
    x: float
    y: float

    def lerp(self, other: Point, t: float) -> Point:
        return Point(
            x=self.x + (other.x - self.x) * t,
            y=self.y + (other.y - self.y) * t,
        )

    def __sub__(self, other: Point) -> Point:
        return Point(x=self.x - other.x, y=self.y - other.y)

    def dot(self, other: Point) -> float:
        return self.x * other.x + self.y * other.y


def distance_sq(a: Point, b: Point) -> float:
    return (a.x - b.x) ** 2 + (a.y - b.y) ** 2


def distance(a: Point, b: Point) -> float:
    return math.sqrt(distance_sq(a, b))


def segment_parameter(point: Point, a: Point, b: Point) -> float:
    """Clamped parameter t in [0, 1] of the projection of point onto a→b.

    A zero-length segment returns 0.
    """
    l2 = distance_sq(a, b)
    if l2 == 0:
        return 0.0
    t = (point - a).dot(b - a) / l2
    return max(0.0, min(1.0, t))


def project_onto_segment(point: Point, a: Point, b: Point) -> Point:
    """Closest point to *point* on segment a→b."""
    return a.lerp(b, segment_parameter(point, a, b))


def point_to_segment_distance_sq(point: Point, a: Point, b: Point) -> float:
    if distance_sq(a, b) == 0:
        return distance_sq(point, a)
    return distance_sq(point, project_onto_segment(point, a, b))


def point_to_segment_distance(point: Point, a: Point, b: Point) -> float:
    return math.sqrt(point_to_segment_distance_sq(point, a, b))


def mean_point(points: list[Point]) -> Point | None:
    """Arithmetic mean of the points, or None for an empty list."""
    if not points:
        return None
    return Point(
        x=sum(p.x for p in points) / len(points),
        y=sum(p.y for p in points) / len(points),
    )


def rotate_point(point: Point, center: Point, angle: float) -> Point:
    """Rotate *point* counterclockwise around *center* by *angle* radians."""
    s = math.sin(angle)
    c = math.cos(angle)
    px = point.x - center.x
    py = point.y - center.y
    return Point(x=px * c - py * s + center.x, y=px * s + py * c + center.y)
