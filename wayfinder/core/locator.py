"""Representative point of a resolved room or node."""

from __future__ import annotations

from wayfinder.models import EntityKind, Located, Point


def representative_point(located: Located) -> Point | None:
    """
    Room: mean of its polygon vertices. Node: its own coordinates.

    None means the entity cannot be placed on the floor (empty polygon,
    node without coordinates), so no route can start or end there.
    """
    if located.kind == EntityKind.ROOM:
        return located.data.centroid
    return located.data.coordinates
