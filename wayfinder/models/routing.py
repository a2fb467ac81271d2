"""Routing output models."""

from __future__ import annotations
from enum import Enum
from typing import Annotated, Any, Union

from pydantic import BaseModel, Discriminator, Tag

from .geometry import Point
from .floorplan import Edge, Node, NodeId, Room


class EntityKind(str, Enum):
    ROOM = "room"
    NODE = "node"


def _entity_tag(value: Any) -> str:
    if isinstance(value, Node) or (isinstance(value, dict) and "id" in value):
        return EntityKind.NODE.value
    return EntityKind.ROOM.value


Entity = Annotated[
    Union[Annotated[Room, Tag("room")], Annotated[Node, Tag("node")]],
    Discriminator(_entity_tag),
]


class Located(BaseModel):
    """A resolved query: either a room or a node."""
    kind: EntityKind
    data: Entity


class EdgeEndpoints(BaseModel):
    source: Node
    target: Node


class ProjectionResult(BaseModel):
    """Nearest graph edge to a query point and the closest point on it."""
    edge: Edge
    distance: float
    parallel_point: Point
    nodes: EdgeEndpoints


class PathResult(BaseModel):
    """Best node path between two projections."""
    path: list[NodeId]
    start_node: Node
    end_node: Node
    graph_distance: float
    cost: float  # graph distance plus both projection-to-node legs


class RouteResult(BaseModel):
    """Complete answer to a source → destination query on one floor."""
    floor: str
    source: Located
    destination: Located
    source_point: Point
    destination_point: Point
    source_projection: ProjectionResult
    destination_projection: ProjectionResult
    node_ids: list[NodeId]
    path: list[Point]       # projection → nodes → projection, unmodified
    route: list[Point]      # path anchored at both query points
    cost: float
    length: float
