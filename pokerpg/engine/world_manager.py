"""World state: the generated tiles and their explored / cleared flags."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable

from pokerpg.core.models import HexTile
from pokerpg.core.snapshot import HexTileView, WorldSnapshot

logger = logging.getLogger(__name__)


class WorldManager:
    """Owns the tile set. Flags only ever go from False to True."""

    __slots__ = ("_tiles",)

    def __init__(self, tiles: Iterable[HexTile]) -> None:
        # Private copies; the generation result stays untouched
        self._tiles: dict[str, HexTile] = {t.id: replace(t) for t in tiles}

    def __len__(self) -> int:
        return len(self._tiles)

    def __contains__(self, hex_id: object) -> bool:
        return hex_id in self._tiles

    def explore(self, hex_id: str) -> bool:
        """Mark a tile explored. Returns True only if it changed."""
        tile = self._tiles.get(hex_id)
        if tile is None or tile.explored:
            return False
        tile.explored = True
        return True

    def mark_cleared(self, hex_id: str) -> bool:
        """Mark a tile cleared (and explored). Returns True only if it changed."""
        tile = self._tiles.get(hex_id)
        if tile is None or tile.cleared:
            return False
        tile.cleared = True
        tile.explored = True
        logger.debug("Tile %s cleared", hex_id)
        return True

    def get_biome(self, hex_id: str) -> str | None:
        tile = self._tiles.get(hex_id)
        return tile.biome if tile else None

    def get_tile(self, hex_id: str) -> HexTileView | None:
        tile = self._tiles.get(hex_id)
        return HexTileView.from_tile(tile) if tile else None

    def get_snapshot(self) -> WorldSnapshot:
        return WorldSnapshot.from_tiles(self._tiles.values())
