"""Floorplan JSON loading."""

from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any

from wayfinder.models import Building, Floor

logger = logging.getLogger(__name__)


def parse_floor(document: Any) -> Floor:
    """
    Build a Floor from a decoded JSON document.

    Missing or non-list rooms/nodes/edges become empty lists and malformed
    entries are dropped, so any dict yields a Floor.
    """
    if not isinstance(document, dict):
        logger.warning("Floor document is %s, not an object; using an empty floor",
                       type(document).__name__)
        document = {}
    return Floor.model_validate(document)


def load_floor(path: str | Path) -> Floor:
    """Read and parse one floor JSON file."""
    with open(path, encoding="utf-8") as f:
        document = json.load(f)
    floor = parse_floor(document)
    logger.info(
        "Loaded floor %r from %s: %d rooms, %d nodes, %d edges",
        floor.name, path, len(floor.rooms), len(floor.nodes), len(floor.edges),
    )
    return floor


def load_building(paths: list[str | Path]) -> Building:
    """Load several floor files. A later file with the same floor name replaces the earlier one."""
    floors: dict[str, Floor] = {}
    for path in paths:
        floor = load_floor(path)
        if floor.name in floors:
            logger.warning("Floor %r loaded twice; keeping %s", floor.name, path)
        floors[floor.name] = floor
    return Building(floors=list(floors.values()))
