"""Nearest-edge projection of off-graph points."""

from __future__ import annotations
import logging
import math

from wayfinder.models import EdgeEndpoints, Edge, Node, Point, ProjectionResult
from wayfinder.models.floorplan import NodeId, build_node_lookup
from wayfinder.models.geometry import point_to_segment_distance, project_onto_segment

logger = logging.getLogger(__name__)

AXIS_TOLERANCE = 1e-6


def edge_endpoints(edge: Edge, lookup: dict[NodeId, Node]) -> tuple[Node, Node] | None:
    """Both endpoint nodes of an edge, or None if either is missing or unplaced."""
    a = lookup.get(edge.source_node_id)
    b = lookup.get(edge.target_node_id)
    if a is None or b is None or a.coordinates is None or b.coordinates is None:
        return None
    return a, b


def _clamp_axis(value: float, lo_end: float, hi_end: float) -> float | None:
    """value if it lies between the two ends, otherwise None."""
    if min(lo_end, hi_end) <= value <= max(lo_end, hi_end):
        return value
    return None


def parallel_point(point: Point, a: Point, b: Point, tolerance: float = AXIS_TOLERANCE) -> Point:
    """
    Closest point to *point* on segment a→b.

    Horizontal and vertical segments are handled along their axis so the
    result keeps the segment's exact coordinate on the other axis.
    """
    if abs(a.y - b.y) < tolerance:
        x = _clamp_axis(point.x, a.x, b.x)
        if x is not None:
            return Point(x=x, y=a.y)
        return a if abs(point.x - a.x) < abs(point.x - b.x) else b
    if abs(a.x - b.x) < tolerance:
        y = _clamp_axis(point.y, a.y, b.y)
        if y is not None:
            return Point(x=a.x, y=y)
        return a if abs(point.y - a.y) < abs(point.y - b.y) else b
    return project_onto_segment(point, a, b)


def project_onto_graph(
    point: Point,
    edges: list[Edge],
    nodes: list[Node],
    tolerance: float = AXIS_TOLERANCE,
) -> ProjectionResult | None:
    """
    Find the edge nearest to *point* and the closest point on it.

    Edges whose endpoints are unknown or have no coordinates are skipped.
    On equal distances the edge seen first wins. Returns None when no
    edge is usable.
    """
    lookup = build_node_lookup(nodes)
    best: tuple[Edge, Node, Node] | None = None
    min_distance = math.inf

    for edge in edges:
        ends = edge_endpoints(edge, lookup)
        if ends is None:
            continue
        a, b = ends
        d = point_to_segment_distance(point, a.coordinates, b.coordinates)
        if d < min_distance:
            min_distance = d
            best = (edge, a, b)

    if best is None:
        logger.debug("No usable edge among %d edges", len(edges))
        return None

    edge, a, b = best
    projected = parallel_point(point, a.coordinates, b.coordinates, tolerance)
    logger.debug(
        "Projected (%.3f, %.3f) onto edge %s-%s at (%.3f, %.3f), distance %.3f",
        point.x, point.y, a.id, b.id, projected.x, projected.y, min_distance,
    )
    return ProjectionResult(
        edge=edge,
        distance=min_distance,
        parallel_point=projected,
        nodes=EdgeEndpoints(source=a, target=b),
    )
