"""Room lookup by primary name or any alias."""

from __future__ import annotations

from wayfinder.core.names import matches
from wayfinder.rules.base import MatchRule
from wayfinder.models import EntityKind, Located, ResolutionContext


class RoomMatchRule(MatchRule):
    """Scan rooms in input order; a room matches on its name or an alias."""

    priority = 10  # Rooms win over nodes sharing a name

    def get_id(self) -> str:
        return "room.name_or_alias"

    def get_name(self) -> str:
        return "Room name or alias"

    def applies(self, context: ResolutionContext) -> bool:
        return len(context.rooms) > 0 and bool(context.normalized)

    def match(self, context: ResolutionContext) -> Located | None:
        for room in context.rooms:
            if matches(context.normalized, room.name, room.alias):
                return Located(kind=EntityKind.ROOM, data=room)
        return None
