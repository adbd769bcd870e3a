"""Board coordinates.

Layout::

    (0,0) ... (7,0)    black back rank
    (0,1) ... (7,1)    black pawns
      ...
    (0,6) ... (7,6)    white pawns
    (0,7) ... (7,7)    white back rank
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8


def in_bounds(x: int, y: int) -> bool:
    """Whether ``(x, y)`` lies on the 8x8 board."""
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


@dataclass(frozen=True, slots=True)
class Position:
    """Immutable ``(x, y)`` coordinate pair.

    Off-board values are representable (raw input can produce them); callers
    check :attr:`in_bounds` before touching the board.
    """

    x: int
    y: int

    @property
    def in_bounds(self) -> bool:
        return in_bounds(self.x, self.y)

    @property
    def index(self) -> int:
        """Flat square index ``y * 8 + x``."""
        return self.y * BOARD_SIZE + self.x

    @classmethod
    def from_index(cls, index: int) -> Position:
        return cls(index % BOARD_SIZE, index // BOARD_SIZE)

    def offset(self, dx: int, dy: int) -> Position:
        return Position(self.x + dx, self.y + dy)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
