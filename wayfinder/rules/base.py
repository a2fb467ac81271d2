"""Abstract base class for all name-matching rules.

Every rule in the system implements this interface. Rules are:
- Self-contained: each looks up one kind of entity
- Composable: the registry runs several of them in priority order
- Conditional: each rule decides if it applies to the current context
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from wayfinder.models.context import ResolutionContext
from wayfinder.models.routing import Located


class MatchRule(ABC):
    """
    Base class for all match rules.

    Subclasses implement `applies()` and `match()`.
    The resolver queries the registry, filters by `applies()`,
    sorts by `priority`, and returns the first non-None `match()`.
    """

    # Lower priority = tried first. Default 100.
    priority: int = 100

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier for this rule (e.g., 'room.name_or_alias')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable name (e.g., 'Room name or alias')."""
        ...

    @abstractmethod
    def applies(self, context: ResolutionContext) -> bool:
        """Return True if this rule should run for the given context."""
        ...

    @abstractmethod
    def match(self, context: ResolutionContext) -> Located | None:
        """Return the first entity matching the normalized query, if any."""
        ...
