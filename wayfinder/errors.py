"""Typed routing failures.

Every failure a query can run into is recoverable at the query boundary:
the service raises one of these, the API layer turns it into a response.
"""

from __future__ import annotations
from enum import Enum


class ErrorKind(str, Enum):
    NAME_NOT_FOUND = "name_not_found"
    NO_COORDINATES = "no_coordinates"
    NO_USABLE_EDGE = "no_usable_edge"
    UNREACHABLE = "unreachable"
    FLOOR_MISMATCH = "floor_mismatch"


class RoutingError(Exception):
    """Base class for all routing failures."""
    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NameNotFound(RoutingError):
    """The query matches no room or node name or alias."""
    kind = ErrorKind.NAME_NOT_FOUND

    def __init__(self, query: str, floor: str | None = None, what: str = "Room") -> None:
        if not query.strip():
            message = "Please enter both source and destination room names."
        elif floor is None:
            message = f'{what} "{query}" not found in the loaded floor plans.'
        else:
            message = f'{what} "{query}" not found on floor "{floor}".'
        super().__init__(message)
        self.query = query
        self.floor = floor


class NoCoordinates(RoutingError):
    """The matched entity has no usable coordinate."""
    kind = ErrorKind.NO_COORDINATES

    def __init__(self, query: str) -> None:
        super().__init__(f'"{query}" has no location on the floor plan.')
        self.query = query


class NoUsableEdge(RoutingError):
    """The floor has no edge with two coordinate-bearing endpoints."""
    kind = ErrorKind.NO_USABLE_EDGE

    def __init__(self, floor: str) -> None:
        super().__init__(f'Floor "{floor}" has no walkable edges.')
        self.floor = floor


class Unreachable(RoutingError):
    """No combination of attachment nodes is connected."""
    kind = ErrorKind.UNREACHABLE

    def __init__(self, source: str, destination: str) -> None:
        super().__init__(f'No path found between "{source}" and "{destination}".')
        self.source = source
        self.destination = destination


class FloorMismatch(RoutingError):
    """Source and destination are not both on the floor being routed."""
    kind = ErrorKind.FLOOR_MISMATCH

    def __init__(
        self,
        source: str, source_floor: str,
        destination: str, destination_floor: str,
        floor: str | None = None,
    ) -> None:
        if floor is None:
            message = (
                f'"{source}" is on floor "{source_floor}" but "{destination}" is on '
                f'floor "{destination_floor}". Routing between floors is not supported.'
            )
        else:
            off = []
            if source_floor != floor:
                off.append(f'source "{source}" is on floor "{source_floor}"')
            if destination_floor != floor:
                off.append(f'destination "{destination}" is on floor "{destination_floor}"')
            message = f'Please switch floors: {" and ".join(off)}.'
        super().__init__(message)
        self.source_floor = source_floor
        self.destination_floor = destination_floor
        self.floor = floor
