"""Name normalization for room and node lookup."""

from __future__ import annotations
import re

_STRIP = re.compile(r"[\s-]")


def normalize(name: str | None) -> str:
    """
    Canonical form of a room or node name.

    Anything from the first "(" on is dropped, then the rest is uppercased
    with whitespace and hyphens removed, so "Room 101", "ROOM101",
    "room-101" and "Room 101 (Lab)" all become "ROOM101".
    """
    if not name:
        return ""
    base = name.split("(", 1)[0]
    return _STRIP.sub("", base.upper())


def matches(normalized: str, name: str | None, aliases: list[str]) -> bool:
    """True if the entity's name or any alias normalizes to *normalized*."""
    if not normalized:
        return False
    if normalize(name) == normalized:
        return True
    return any(normalize(a) == normalized for a in aliases)
