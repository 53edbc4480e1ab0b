"""
Hands and the face-down stock.
"""

import random
from typing import Iterator, List, Optional, Sequence, Tuple

from dominoes.game.tiles import Side, Tile


class Hand:
    """Tiles held by one side. Order only matters for display indexing."""

    def __init__(self, side: Side, tiles: Optional[Sequence[Tile]] = None):
        self.side = side
        self._tiles: List[Tile] = list(tiles or [])

    @property
    def tiles(self) -> Tuple[Tile, ...]:
        return tuple(self._tiles)

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(tuple(self._tiles))

    def __getitem__(self, index: int) -> Tile:
        return self._tiles[index]

    def is_empty(self) -> bool:
        return not self._tiles

    def add(self, tile: Tile) -> None:
        self._tiles.append(tile)

    def pop(self, index: int) -> Tile:
        return self._tiles.pop(index)

    def take_all(self) -> List[Tile]:
        """Empty the hand and return what it held."""
        tiles = self._tiles
        self._tiles = []
        return tiles

    def __repr__(self) -> str:
        return f"Hand({self.side.value}, {' '.join(str(t) for t in self._tiles)})"


class Stock:
    """The undealt tiles, drawn from the front."""

    def __init__(self, tiles: Sequence[Tile], rng: random.Random, shuffle: bool = True):
        self.tiles: List[Tile] = list(tiles)
        self.rng = rng
        if shuffle:
            self.shuffle()

    def __len__(self) -> int:
        return len(self.tiles)

    def is_empty(self) -> bool:
        return not self.tiles

    def shuffle(self) -> None:
        """Shuffle the stock."""
        self.rng.shuffle(self.tiles)

    def draw(self) -> Optional[Tile]:
        """Take the front tile, or None if the stock is empty."""
        if not self.tiles:
            return None
        return self.tiles.pop(0)

    def deal(self, count: int) -> List[Tile]:
        """Take up to `count` tiles from the front."""
        dealt = self.tiles[:count]
        del self.tiles[:count]
        return dealt

    def refill(self, tiles: Sequence[Tile]) -> None:
        """Return tiles to the stock and reshuffle everything."""
        self.tiles.extend(tiles)
        self.shuffle()
