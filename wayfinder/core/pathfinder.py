"""Shortest-path engine — Dijkstra between two edge projections."""

from __future__ import annotations
import heapq
import itertools
import logging
import math

from wayfinder.core.projector import edge_endpoints
from wayfinder.models import Edge, Node, PathResult, ProjectionResult
from wayfinder.models.floorplan import NodeId, build_node_lookup
from wayfinder.models.geometry import distance

logger = logging.getLogger(__name__)

Adjacency = dict[NodeId, list[tuple[NodeId, float]]]


def edge_weight(edge: Edge, a: Node, b: Node) -> float:
    """Explicit weight if given, else the Euclidean length of the edge."""
    if edge.weight is not None:
        return edge.weight
    return distance(a.coordinates, b.coordinates)


def build_adjacency(nodes: list[Node], edges: list[Edge]) -> Adjacency:
    """Undirected adjacency list. Edges with unplaced endpoints contribute nothing."""
    lookup = build_node_lookup(nodes)
    adjacency: Adjacency = {node_id: [] for node_id in lookup}
    for edge in edges:
        ends = edge_endpoints(edge, lookup)
        if ends is None:
            continue
        a, b = ends
        w = edge_weight(edge, a, b)
        adjacency[a.id].append((b.id, w))
        adjacency[b.id].append((a.id, w))
    return adjacency


def dijkstra(
    adjacency: Adjacency, start: NodeId, target: NodeId,
) -> tuple[float, list[NodeId]]:
    """
    Distance and node path from start to target.

    Stops as soon as the target is popped. Returns (inf, []) when the
    target cannot be reached.
    """
    if start not in adjacency or target not in adjacency:
        return math.inf, []

    distances: dict[NodeId, float] = {start: 0.0}
    predecessors: dict[NodeId, NodeId] = {}
    # Counter keeps heap entries comparable when ids mix str and int
    counter = itertools.count()
    queue: list[tuple[float, int, NodeId]] = [(0.0, next(counter), start)]
    done: set[NodeId] = set()

    while queue:
        d, _, current = heapq.heappop(queue)
        if current in done:
            continue
        done.add(current)
        if current == target:
            break
        for neighbor, weight in adjacency[current]:
            nd = d + weight
            if nd < distances.get(neighbor, math.inf):
                distances[neighbor] = nd
                predecessors[neighbor] = current
                heapq.heappush(queue, (nd, next(counter), neighbor))

    if target not in done:
        return math.inf, []

    path = [target]
    while path[-1] != start:
        path.append(predecessors[path[-1]])
    path.reverse()
    return distances[target], path


def _candidates(projection: ProjectionResult, lookup: dict[NodeId, Node]) -> list[Node]:
    found = []
    for node in (projection.nodes.source, projection.nodes.target):
        known = lookup.get(node.id)
        if known is not None and known.coordinates is not None:
            found.append(known)
    return found


def shortest_path(
    nodes: list[Node],
    edges: list[Edge],
    start_proj: ProjectionResult,
    end_proj: ProjectionResult,
) -> PathResult | None:
    """
    Cheapest way from one projected point to the other through the graph.

    Each projection offers the two endpoints of its edge as attachment
    nodes; all four pairings are searched and the one with the lowest
    graph distance plus both attachment legs wins (first on ties).
    Returns None when every pairing is unreachable.
    """
    lookup = build_node_lookup(nodes)
    adjacency = build_adjacency(nodes, edges)
    start_point = start_proj.parallel_point
    end_point = end_proj.parallel_point

    best: PathResult | None = None
    for start_node in _candidates(start_proj, lookup):
        for end_node in _candidates(end_proj, lookup):
            graph_distance, path = dijkstra(adjacency, start_node.id, end_node.id)
            if math.isinf(graph_distance):
                logger.debug("No connection between %s and %s", start_node.id, end_node.id)
                continue
            cost = (
                graph_distance
                + distance(start_point, start_node.coordinates)
                + distance(end_point, end_node.coordinates)
            )
            if best is None or cost < best.cost:
                best = PathResult(
                    path=path,
                    start_node=start_node,
                    end_node=end_node,
                    graph_distance=graph_distance,
                    cost=cost,
                )
    return best
