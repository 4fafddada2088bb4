"""Flakes (tiles) and the queries that decide their display order.

Layout only reads ``Tile.id``; everything else is what the pile file stores
for display, search and sorting.
"""

from __future__ import annotations

from dataclasses import dataclass
from operator import attrgetter
from typing import Iterable, List, Tuple

SORT_KEYS = ("name", "created_at", "modified_at")
SORT_ORDERS = ("asc", "desc")


@dataclass(frozen=True)
class Tile:
    id: str
    name: str = ""
    kind: str = "text"  # text | image | code
    content: str = ""
    created_at: int = 0
    modified_at: int = 0
    theme: str = ""
    labels: Tuple[str, ...] = ()


def search_tiles(tiles: Iterable[Tile], query: str) -> List[Tile]:
    """Filter tiles by a case-insensitive substring query.

    - Blank query -> every tile, order kept
    - Name match always wins
    - Content is searched too, except for image tiles (their content is a path)
    """
    needle = query.strip().casefold()
    if not needle:
        return list(tiles)

    matched: List[Tile] = []
    for tile in tiles:
        if needle in tile.name.casefold():
            matched.append(tile)
        elif tile.kind != "image" and needle in tile.content.casefold():
            matched.append(tile)
    return matched


def sort_tiles(tiles: Iterable[Tile], by: str = "name", order: str = "asc") -> List[Tile]:
    """Return a new list sorted by ``by``; equal keys keep their input order."""

    if by not in SORT_KEYS:
        raise ValueError(f"unknown sort key: {by}")
    if order not in SORT_ORDERS:
        raise ValueError(f"unknown sort order: {order}")

    reverse = order == "desc"
    if by == "name":
        return sorted(tiles, key=lambda t: t.name.casefold(), reverse=reverse)
    return sorted(tiles, key=attrgetter(by), reverse=reverse)
