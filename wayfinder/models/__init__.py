from .geometry import Point, distance, point_to_segment_distance
from .floorplan import Room, Node, NodeId, Edge, Floor, Building
from .routing import (
    EntityKind, Located, EdgeEndpoints, ProjectionResult, PathResult, RouteResult,
)
from .parameters import RoutingParams, ResolutionConfig
from .context import ResolutionContext

__all__ = [
    "Point", "distance", "point_to_segment_distance",
    "Room", "Node", "NodeId", "Edge", "Floor", "Building",
    "EntityKind", "Located", "EdgeEndpoints", "ProjectionResult", "PathResult", "RouteResult",
    "RoutingParams", "ResolutionConfig",
    "ResolutionContext",
]
