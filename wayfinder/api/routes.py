"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from wayfinder.errors import ErrorKind, RoutingError
from wayfinder.models import Building, Floor
from wayfinder.core.transform import rotate_floor
from wayfinder.services.route_service import RouteService
from wayfinder.api.schemas import (
    BuildingRouteRequest, EntityInfo, ErrorDetail, FloorRequest, MatcherInfo,
    RotateRequest, RouteRequest, RouteResponse,
)

router = APIRouter()

# Shared service instance
_service = RouteService()

_STATUS = {
    ErrorKind.NAME_NOT_FOUND: 404,
    ErrorKind.UNREACHABLE: 404,
    ErrorKind.FLOOR_MISMATCH: 409,
}


def _http_error(exc: RoutingError) -> HTTPException:
    detail = ErrorDetail(kind=exc.kind.value, message=exc.message)
    return HTTPException(status_code=_STATUS.get(exc.kind, 422), detail=detail.model_dump())


@router.post("/route", response_model=RouteResponse)
async def route(request: RouteRequest) -> RouteResponse:
    """Shortest walkable route between two rooms or points on one floor."""
    try:
        result = _service.route(
            request.floor, request.source, request.destination,
            request.params, request.config,
        )
    except RoutingError as exc:
        raise _http_error(exc) from exc
    return RouteResponse(result=result, node_count=len(result.node_ids))


@router.post("/building/route", response_model=RouteResponse)
async def route_in_building(request: BuildingRouteRequest) -> RouteResponse:
    """Route between two names on whichever floor holds both of them."""
    try:
        result = _service.route_in_building(
            Building(floors=request.floors), request.source, request.destination,
            request.floor_name, request.params, request.config,
        )
    except RoutingError as exc:
        raise _http_error(exc) from exc
    return RouteResponse(result=result, node_count=len(result.node_ids))


@router.post("/floor/rotate", response_model=Floor)
async def rotate(request: RotateRequest) -> Floor:
    """Rotate a floor around its center; the input floor is left untouched."""
    return rotate_floor(request.floor, request.degrees)


@router.post("/floor/entities", response_model=list[EntityInfo])
async def list_entities(request: FloorRequest) -> list[EntityInfo]:
    """Everything on a floor that a query can resolve to."""
    floor = request.floor
    entities = [
        EntityInfo(kind="room", name=r.name, alias=r.alias, entrance=r.is_entrance)
        for r in floor.rooms
    ]
    entities.extend(
        EntityInfo(kind="node", name=n.name or "", alias=n.alias, id=n.id, entrance=n.is_entrance)
        for n in floor.nodes
        if n.name or n.alias
    )
    return entities


@router.get("/matchers", response_model=list[MatcherInfo])
async def list_matchers() -> list[MatcherInfo]:
    """List the name-matching rules in the order they are tried."""
    return [MatcherInfo(**m) for m in _service.list_matchers()]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
