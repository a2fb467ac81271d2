"""Match-rule registry — stores and orders the name-matching rules."""

from __future__ import annotations

from wayfinder.models.context import ResolutionContext
from wayfinder.rules.base import MatchRule


class MatcherRegistry:
    """
    Central registry for all match rules.

    Rules are registered at startup. During resolution, the registry
    returns the applicable rules sorted by priority.
    """

    def __init__(self) -> None:
        self._rules: dict[str, MatchRule] = {}

    def register(self, rule: MatchRule) -> None:
        """Register a match rule."""
        self._rules[rule.get_id()] = rule

    def list_rules(self) -> list[MatchRule]:
        """Return all registered rules, tried-first first."""
        return sorted(self._rules.values(), key=lambda r: r.priority)

    def get_applicable_rules(self, context: ResolutionContext) -> list[MatchRule]:
        """
        Return rules that apply to the given context, sorted by priority.

        Respects ResolutionConfig.enabled_matchers and disabled_matchers.
        """
        config = context.config
        candidates = list(self._rules.values())

        # If enabled_matchers is specified, only use those
        if config.enabled_matchers:
            candidates = [r for r in candidates if r.get_id() in config.enabled_matchers]

        # Remove explicitly disabled rules
        if config.disabled_matchers:
            candidates = [r for r in candidates if r.get_id() not in config.disabled_matchers]

        applicable = [r for r in candidates if r.applies(context)]

        # Stable sort: equal priorities keep registration order
        applicable.sort(key=lambda r: r.priority)
        return applicable


def create_default_registry() -> MatcherRegistry:
    """Create a registry with the room and node matchers."""
    from wayfinder.rules.entity.rooms import RoomMatchRule
    from wayfinder.rules.entity.nodes import NodeMatchRule

    registry = MatcherRegistry()
    registry.register(RoomMatchRule())
    registry.register(NodeMatchRule())
    return registry
