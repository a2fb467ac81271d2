"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel

from wayfinder.models import (
    Floor, NodeId, ResolutionConfig, RouteResult, RoutingParams,
)


class RouteRequest(BaseModel):
    """Request body for the /route endpoint."""
    floor: Floor
    source: str
    destination: str
    params: RoutingParams = RoutingParams()
    config: ResolutionConfig = ResolutionConfig()


class BuildingRouteRequest(BaseModel):
    """Request body for the /building/route endpoint."""
    floors: list[Floor]
    source: str
    destination: str
    floor_name: str | None = None
    params: RoutingParams = RoutingParams()
    config: ResolutionConfig = ResolutionConfig()


class RouteResponse(BaseModel):
    """Response from the route endpoints."""
    result: RouteResult
    node_count: int


class RotateRequest(BaseModel):
    floor: Floor
    degrees: float = 90.0


class FloorRequest(BaseModel):
    floor: Floor


class EntityInfo(BaseModel):
    kind: str
    name: str
    alias: list[str]
    id: NodeId | None = None
    entrance: bool = False


class MatcherInfo(BaseModel):
    id: str
    name: str
    priority: int


class ErrorDetail(BaseModel):
    kind: str
    message: str
