"""Routing parameters and resolution configuration."""

from __future__ import annotations
from pydantic import BaseModel


class RoutingParams(BaseModel):
    """Caller-adjustable parameters for a routing query."""
    axis_tolerance: float = 1e-6   # Edges flatter than this snap to an axis
    anchor_route: bool = True      # Wrap the path with the query points


class ResolutionConfig(BaseModel):
    """Controls which match rules take part in name resolution."""
    enabled_matchers: list[str] = []     # Empty = use all registered defaults
    disabled_matchers: list[str] = []    # Explicitly disable specific matchers
