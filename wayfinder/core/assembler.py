"""Stitches projections and graph nodes into one polyline."""

from __future__ import annotations
from collections.abc import Mapping

from wayfinder.models import Node, NodeId, Point
from wayfinder.models.geometry import distance


def assemble_path(
    start_point: Point,
    start_node: Node,
    path_node_ids: list[NodeId],
    end_node: Node,
    end_point: Point,
    node_lookup: Mapping[NodeId, Node],
) -> list[Point]:
    """
    Concatenate projection, attachment node, path nodes, attachment node,
    projection. Ids without coordinates are skipped; repeated points are
    kept as they are.
    """
    points = [start_point, start_node.coordinates]
    for node_id in path_node_ids:
        node = node_lookup.get(node_id)
        if node is not None and node.coordinates is not None:
            points.append(node.coordinates)
    points.append(end_node.coordinates)
    points.append(end_point)
    return points


def anchor_route(source: Point, path: list[Point], destination: Point) -> list[Point]:
    """Prefix/suffix the query points and drop consecutive duplicates."""
    route: list[Point] = []
    for p in [source, *path, destination]:
        if route and route[-1] == p:
            continue
        route.append(p)
    return route


def polyline_length(points: list[Point]) -> float:
    return sum(distance(a, b) for a, b in zip(points, points[1:]))
