"""State that one name lookup works against."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .floorplan import Node, Room
from .parameters import ResolutionConfig


class ResolutionContext(BaseModel):
    """
    Holds everything a match rule needs for a single lookup.

    The resolver builds one context per query and hands it to each
    applicable rule in priority order until one of them matches.
    """
    query: str
    normalized: str
    rooms: list[Room] = []
    nodes: list[Node] = []
    config: ResolutionConfig = Field(default_factory=ResolutionConfig)
