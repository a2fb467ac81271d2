"""Name resolver — turns a free-text query into a room or node."""

from __future__ import annotations

from wayfinder.core.names import normalize
from wayfinder.core.registry import MatcherRegistry, create_default_registry
from wayfinder.models import (
    Building, Floor, Located, Node, ResolutionConfig, ResolutionContext, Room,
)


class NameResolver:
    """
    Stateless resolver.

    Builds a context for the query and asks the applicable match rules,
    in priority order, for the first hit. Matching is exact equality of
    normalized strings; there is no fuzzy or partial matching.
    """

    def __init__(self, registry: MatcherRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()

    def resolve(
        self,
        query: str,
        rooms: list[Room],
        nodes: list[Node],
        config: ResolutionConfig | None = None,
    ) -> Located | None:
        if config is None:
            config = ResolutionConfig()

        context = ResolutionContext(
            query=query or "",
            normalized=normalize(query),
            rooms=rooms,
            nodes=nodes,
            config=config,
        )

        for rule in self.registry.get_applicable_rules(context):
            located = rule.match(context)
            if located is not None:
                return located
        return None

    def resolve_on_floor(
        self, query: str, floor: Floor, config: ResolutionConfig | None = None,
    ) -> Located | None:
        return self.resolve(query, floor.rooms, floor.nodes, config)

    def find_floor(
        self, query: str, building: Building, config: ResolutionConfig | None = None,
    ) -> Floor | None:
        """First floor, in load order, on which the query resolves."""
        for floor in building.floors:
            if self.resolve_on_floor(query, floor, config) is not None:
                return floor
        return None

    def find_shared_floor(
        self,
        source: str,
        destination: str,
        building: Building,
        config: ResolutionConfig | None = None,
    ) -> Floor | None:
        """First floor, in load order, on which both queries resolve."""
        for floor in building.floors:
            if (
                self.resolve_on_floor(source, floor, config) is not None
                and self.resolve_on_floor(destination, floor, config) is not None
            ):
                return floor
        return None


_default = NameResolver()


def resolve(query: str, rooms: list[Room], nodes: list[Node]) -> Located | None:
    """Resolve with the default rules: rooms first, then nodes."""
    return _default.resolve(query, rooms, nodes)
