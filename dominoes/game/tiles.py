"""
Tiles of the double-six set and the side tag.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from dominoes.exceptions import InvalidTileError

MAX_PIP = 6
SET_SIZE = 28


class Side(Enum):
    """Which hand an operation applies to."""

    PLAYER = "player"
    OPPONENT = "opponent"

    @property
    def other(self) -> "Side":
        return Side.OPPONENT if self is Side.PLAYER else Side.PLAYER


@dataclass(frozen=True)
class Tile:
    """
    A domino tile.

    Stored oriented: `left` and `right` are only meaningful once the tile sits
    on the chain. Dataclass equality compares the oriented pair; use `key` or
    `same_as` for unordered identity (deck and hand membership).
    """

    left: int
    right: int

    def __post_init__(self) -> None:
        for pip in (self.left, self.right):
            if isinstance(pip, bool) or not isinstance(pip, int) or not 0 <= pip <= MAX_PIP:
                raise InvalidTileError(f"Pip out of range: {self.left}-{self.right}")

    @property
    def key(self) -> Tuple[int, int]:
        """Canonical unordered identity, low pip first."""
        return (min(self.left, self.right), max(self.left, self.right))

    @property
    def pips(self) -> int:
        return self.left + self.right

    def ends(self) -> Tuple[int, int]:
        return (self.left, self.right)

    def is_double(self) -> bool:
        return self.left == self.right

    def flipped(self) -> "Tile":
        """Same tile with the pips swapped."""
        return Tile(self.right, self.left)

    def matches(self, value: int) -> bool:
        return self.left == value or self.right == value

    def same_as(self, other: "Tile") -> bool:
        return self.key == other.key

    def __str__(self) -> str:
        return f"[{self.left}|{self.right}]"


def make_tile(a: int, b: int) -> Tile:
    return Tile(a, b)


def parse_tile(text: str) -> Tile:
    """Parse `3-5`, `3|5`, `[3|5]` or `35` into a tile."""
    s = (text or "").strip().replace("[", "").replace("]", "").replace(" ", "")
    s = s.replace("|", "-").replace(",", "-")
    try:
        if "-" in s:
            a, b = s.split("-", 1)
            return Tile(int(a), int(b))
        if len(s) == 2 and s.isdigit():
            return Tile(int(s[0]), int(s[1]))
    except ValueError as e:
        raise InvalidTileError(f"Cannot parse tile: {text!r}") from e
    raise InvalidTileError(f"Cannot parse tile: {text!r}")


def tile_str(tile: Tile) -> str:
    return f"{tile.left}-{tile.right}"


def double_six_set() -> List[Tile]:
    """All 28 tiles {(i, j) | 0 <= i <= j <= 6}, in ascending order."""
    return [Tile(i, j) for i in range(MAX_PIP + 1) for j in range(i, MAX_PIP + 1)]
