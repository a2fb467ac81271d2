"""Point-of-interest lookup among graph nodes."""

from __future__ import annotations

from wayfinder.core.names import matches
from wayfinder.rules.base import MatchRule
from wayfinder.models import EntityKind, Located, ResolutionContext


class NodeMatchRule(MatchRule):
    """Scan nodes in input order; unnamed nodes only match through an alias."""

    priority = 20

    def get_id(self) -> str:
        return "node.name_or_alias"

    def get_name(self) -> str:
        return "Node name or alias"

    def applies(self, context: ResolutionContext) -> bool:
        return len(context.nodes) > 0 and bool(context.normalized)

    def match(self, context: ResolutionContext) -> Located | None:
        for node in context.nodes:
            if matches(context.normalized, node.name, node.alias):
                return Located(kind=EntityKind.NODE, data=node)
        return None
