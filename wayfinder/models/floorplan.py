"""Floorplan models: rooms, graph nodes, graph edges, floors."""

from __future__ import annotations
import logging
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .geometry import Point, mean_point

logger = logging.getLogger(__name__)

NodeId = Union[str, int]

ENTRANCE = "entrance"


def _as_list(value: Any) -> list:
    """Missing or wrongly-typed collections degrade to an empty list."""
    if isinstance(value, list):
        return value
    return []


def _as_label(value: Any) -> str | None:
    """Strings pass through, numbers become their text, anything else is None."""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def _as_aliases(value: Any) -> list[str]:
    """Alias list with numeric entries stringified and other entries dropped."""
    labels = (_as_label(v) for v in _as_list(value))
    return [label for label in labels if label is not None]


def _is_entrance(name: str | None, aliases: list[str]) -> bool:
    if any(a.lower() == ENTRANCE for a in aliases):
        return True
    return bool(name) and ENTRANCE in name.lower()


class Room(BaseModel):
    """A named polygonal area. Vertices are ordered and need not be closed."""
    name: str = ""
    alias: list[str] = []
    coordinates: list[Point] = []

    @field_validator("coordinates", mode="before")
    @classmethod
    def coerce_coordinates(cls, value: Any) -> list:
        return _as_list(value)

    @field_validator("alias", mode="before")
    @classmethod
    def coerce_alias(cls, value: Any) -> list[str]:
        return _as_aliases(value)

    @field_validator("name", mode="before")
    @classmethod
    def coerce_name(cls, value: Any) -> str:
        return _as_label(value) or ""

    @property
    def centroid(self) -> Point | None:
        """Mean of the vertices; an approximation of the area centroid."""
        return mean_point(self.coordinates)

    @property
    def is_entrance(self) -> bool:
        return _is_entrance(self.name, self.alias)


class Node(BaseModel):
    """A routable graph vertex. Without coordinates it only counts for topology."""
    id: NodeId
    name: str | None = None
    alias: list[str] = []
    coordinates: Point | None = None

    @field_validator("alias", mode="before")
    @classmethod
    def coerce_alias(cls, value: Any) -> list[str]:
        return _as_aliases(value)

    @field_validator("name", mode="before")
    @classmethod
    def coerce_name(cls, value: Any) -> str | None:
        return _as_label(value)

    @field_validator("coordinates", mode="before")
    @classmethod
    def coerce_coordinates(cls, value: Any) -> Point | None:
        if value is None or isinstance(value, Point):
            return value
        try:
            return Point.model_validate(value)
        except ValidationError:
            logger.warning("Ignoring malformed node coordinates: %r", value)
            return None

    @property
    def is_entrance(self) -> bool:
        return _is_entrance(self.name, self.alias)


class Edge(BaseModel):
    """Undirected connection between two nodes."""
    model_config = ConfigDict(populate_by_name=True)

    source_node_id: NodeId = Field(alias="sourceNodeId")
    target_node_id: NodeId = Field(alias="targetNodeId")
    weight: float | None = None  # None = Euclidean length


def _parse_items(model: type[BaseModel], value: Any, what: str) -> list:
    items = []
    for raw in _as_list(value):
        if isinstance(raw, model):
            items.append(raw)
            continue
        try:
            items.append(model.model_validate(raw))
        except ValidationError as exc:
            logger.warning("Dropping malformed %s entry: %s", what, exc.errors()[0]["msg"])
    return items


class Floor(BaseModel):
    """One independently routable floor: room polygons plus its graph."""
    name: str = "Floorplan"
    rooms: list[Room] = []
    nodes: list[Node] = []
    edges: list[Edge] = []

    @field_validator("rooms", mode="before")
    @classmethod
    def parse_rooms(cls, value: Any) -> list:
        return _parse_items(Room, value, "room")

    @field_validator("nodes", mode="before")
    @classmethod
    def parse_nodes(cls, value: Any) -> list:
        return _parse_items(Node, value, "node")

    @field_validator("edges", mode="before")
    @classmethod
    def parse_edges(cls, value: Any) -> list:
        return _parse_items(Edge, value, "edge")

    @field_validator("name", mode="before")
    @classmethod
    def coerce_name(cls, value: Any) -> str:
        return value if isinstance(value, str) and value else "Floorplan"

    def node_lookup(self) -> dict[NodeId, Node]:
        return build_node_lookup(self.nodes)


class Building(BaseModel):
    """All loaded floors, in load order. Floors share no edges."""
    floors: list[Floor] = []

    def get_floor(self, name: str) -> Floor | None:
        for f in self.floors:
            if f.name == name:
                return f
        return None


def build_node_lookup(nodes: list[Node]) -> dict[NodeId, Node]:
    """Map node id to node. The first node with a given id wins."""
    lookup: dict[NodeId, Node] = {}
    for node in nodes:
        lookup.setdefault(node.id, node)
    return lookup
