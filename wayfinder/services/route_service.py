"""High-level routing service — facade for the API layer."""

from __future__ import annotations
import logging

from wayfinder.errors import (
    FloorMismatch, NameNotFound, NoCoordinates, NoUsableEdge, Unreachable,
)
from wayfinder.models import (
    Building, Floor, Located, Point, ResolutionConfig, RouteResult, RoutingParams,
)
from wayfinder.core.assembler import anchor_route, assemble_path, polyline_length
from wayfinder.core.locator import representative_point
from wayfinder.core.pathfinder import shortest_path
from wayfinder.core.projector import project_onto_graph
from wayfinder.core.registry import MatcherRegistry, create_default_registry
from wayfinder.core.resolver import NameResolver

logger = logging.getLogger(__name__)


class RouteService:
    """Validates queries, runs the routing pipeline, raises typed errors."""

    def __init__(self, registry: MatcherRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()
        self.resolver = NameResolver(self.registry)

    def route(
        self,
        floor: Floor,
        source: str,
        destination: str,
        params: RoutingParams | None = None,
        config: ResolutionConfig | None = None,
    ) -> RouteResult:
        """Route between two names on one floor."""
        if params is None:
            params = RoutingParams()
        if config is None:
            config = ResolutionConfig()

        src = self._locate(source, floor, config)
        dst = self._locate(destination, floor, config)
        src_point = self._point(source, src)
        dst_point = self._point(destination, dst)

        src_proj = project_onto_graph(src_point, floor.edges, floor.nodes, params.axis_tolerance)
        dst_proj = project_onto_graph(dst_point, floor.edges, floor.nodes, params.axis_tolerance)
        if src_proj is None or dst_proj is None:
            logger.info("No usable edge on floor %r", floor.name)
            raise NoUsableEdge(floor.name)

        found = shortest_path(floor.nodes, floor.edges, src_proj, dst_proj)
        if found is None:
            logger.info("No path between %r and %r on floor %r", source, destination, floor.name)
            raise Unreachable(source, destination)

        path = assemble_path(
            src_proj.parallel_point, found.start_node, found.path,
            found.end_node, dst_proj.parallel_point, floor.node_lookup(),
        )
        route = anchor_route(src_point, path, dst_point) if params.anchor_route else path
        length = polyline_length(route)
        logger.info(
            "Routed %r -> %r on floor %r: %d nodes, length %.2f",
            source, destination, floor.name, len(found.path), length,
        )
        return RouteResult(
            floor=floor.name,
            source=src,
            destination=dst,
            source_point=src_point,
            destination_point=dst_point,
            source_projection=src_proj,
            destination_projection=dst_proj,
            node_ids=found.path,
            path=path,
            route=route,
            cost=found.cost,
            length=length,
        )

    def route_in_building(
        self,
        building: Building,
        source: str,
        destination: str,
        floor_name: str | None = None,
        params: RoutingParams | None = None,
        config: ResolutionConfig | None = None,
    ) -> RouteResult:
        """
        Route between two names anywhere in a building.

        With *floor_name* both names are looked up on that floor; without
        it the first floor holding both is used. Names that appear on
        several floors (entrances, lifts) count as being on each of them.
        When no single floor fits, FloorMismatch tells the caller where
        each name is.
        """
        self._require(source)
        self._require(destination)

        if floor_name is not None:
            floor = building.get_floor(floor_name)
            if floor is None:
                raise NameNotFound(floor_name, what="Floor")
            src_here = self.resolver.resolve_on_floor(source, floor, config) is not None
            dst_here = self.resolver.resolve_on_floor(destination, floor, config) is not None
            if not (src_here and dst_here):
                src_floor = floor.name if src_here else self._home_floor(source, building, config)
                dst_floor = floor.name if dst_here else self._home_floor(destination, building, config)
                raise FloorMismatch(source, src_floor, destination, dst_floor, floor=floor.name)
        else:
            floor = self.resolver.find_shared_floor(source, destination, building, config)
            if floor is None:
                raise FloorMismatch(
                    source, self._home_floor(source, building, config),
                    destination, self._home_floor(destination, building, config),
                )

        return self.route(floor, source, destination, params, config)

    def list_matchers(self) -> list[dict[str, str | int]]:
        return [
            {"id": r.get_id(), "name": r.get_name(), "priority": r.priority}
            for r in self.registry.list_rules()
        ]

    def _require(self, query: str) -> None:
        if not query or not query.strip():
            raise NameNotFound(query or "")

    def _home_floor(
        self, query: str, building: Building, config: ResolutionConfig | None,
    ) -> str:
        floor = self.resolver.find_floor(query, building, config)
        if floor is None:
            raise NameNotFound(query)
        return floor.name

    def _locate(self, query: str, floor: Floor, config: ResolutionConfig) -> Located:
        self._require(query)
        located = self.resolver.resolve_on_floor(query, floor, config)
        if located is None:
            logger.info("No room or node named %r on floor %r", query, floor.name)
            raise NameNotFound(query, floor.name)
        return located

    def _point(self, query: str, located: Located) -> Point:
        point = representative_point(located)
        if point is None:
            logger.info("%s %r has no coordinates", located.kind.value, query)
            raise NoCoordinates(query)
        return point
