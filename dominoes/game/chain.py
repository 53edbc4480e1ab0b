"""
The line of played tiles.
"""

from typing import Iterator, List, Optional, Tuple

from dominoes.exceptions import InvalidPlacementError
from dominoes.game.tiles import Tile

LEFT = "left"
RIGHT = "right"


class Chain:
    """
    Ordered, oriented tiles with two exposed ends.

    Adjacent tiles always meet: tiles[i].right == tiles[i + 1].left.
    The chain only grows.
    """

    def __init__(self) -> None:
        self._tiles: List[Tile] = []

    @property
    def tiles(self) -> Tuple[Tile, ...]:
        return tuple(self._tiles)

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(tuple(self._tiles))

    def is_empty(self) -> bool:
        return not self._tiles

    def endpoints(self) -> Optional[Tuple[int, int]]:
        """(left end, right end), or None while the chain is empty."""
        if not self._tiles:
            return None
        return (self._tiles[0].left, self._tiles[-1].right)

    def contains(self, tile: Tile) -> bool:
        return any(t.same_as(tile) for t in self._tiles)

    def accepts(self, tile: Tile) -> bool:
        ends = self.endpoints()
        if ends is None:
            return True
        left_end, right_end = ends
        return tile.matches(left_end) or tile.matches(right_end)

    def first_play(self, tile: Tile) -> None:
        if self._tiles:
            raise InvalidPlacementError(f"Chain is not empty, cannot open with {tile}")
        self._tiles.append(tile)

    def append_left(self, tile: Tile) -> None:
        ends = self.endpoints()
        if ends is None or tile.right != ends[0]:
            raise InvalidPlacementError(f"{tile} does not meet left end {ends and ends[0]}")
        self._tiles.insert(0, tile)

    def append_right(self, tile: Tile) -> None:
        ends = self.endpoints()
        if ends is None or tile.left != ends[1]:
            raise InvalidPlacementError(f"{tile} does not meet right end {ends and ends[1]}")
        self._tiles.append(tile)

    def place(self, tile: Tile) -> Tuple[Tile, str]:
        """
        Attach a tile using the placement policy and return (oriented tile, end).

        Rows are tried in order and the first match wins:
          - empty chain: opens with the tile as given
          - right pip meets the left end: prepend as is
          - left pip meets the left end: prepend flipped
          - left pip meets the right end: append as is
          - right pip meets the right end: append flipped

        The left end is preferred when both ends match.
        """
        ends = self.endpoints()
        if ends is None:
            self.first_play(tile)
            return tile, RIGHT

        left_end, right_end = ends
        if tile.right == left_end:
            self.append_left(tile)
            return tile, LEFT
        if tile.left == left_end:
            placed = tile.flipped()
            self.append_left(placed)
            return placed, LEFT
        if tile.left == right_end:
            self.append_right(tile)
            return tile, RIGHT
        if tile.right == right_end:
            placed = tile.flipped()
            self.append_right(placed)
            return placed, RIGHT

        raise InvalidPlacementError(f"{tile} matches neither end {left_end}/{right_end}")

    def is_connected(self) -> bool:
        return all(a.right == b.left for a, b in zip(self._tiles, self._tiles[1:]))

    def __repr__(self) -> str:
        return "Chain(" + "".join(str(t) for t in self._tiles) + ")"
