"""Module defining word directions and the cells a word covers on the grid."""

from enum import IntEnum
from typing import NamedTuple


class Axis(IntEnum):
    """Enumeration for the geometric axes a word can follow."""

    HORIZONTAL = 0
    VERTICAL = 1
    DIAGONAL_DOWN_RIGHT = 2
    DIAGONAL_DOWN_LEFT = 3

    @property
    def step(self) -> tuple[int, int]:
        """The (row, col) offset between consecutive letters."""
        return _STEPS[self]

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")


_STEPS: dict[Axis, tuple[int, int]] = {
    Axis.HORIZONTAL: (0, 1),
    Axis.VERTICAL: (1, 0),
    Axis.DIAGONAL_DOWN_RIGHT: (1, 1),
    Axis.DIAGONAL_DOWN_LEFT: (1, -1),
}


class Direction(NamedTuple):
    """Datatype representing one of the eight word orientations.

    A reversed direction steps across the grid exactly like its forward counterpart; only the
    letter order of the word is reversed.
    """

    axis: Axis
    reversed: bool = False

    @property
    def name(self) -> str:
        """Human-readable name, e.g. "vertical-reversed"."""
        return f"{self.axis.label}-reversed" if self.reversed else self.axis.label

    def orient(self, letters: str) -> str:
        """Return the letters in the order they are laid along the axis."""
        return letters[::-1] if self.reversed else letters


DIRECTIONS: tuple[Direction, ...] = tuple(
    Direction(axis, rev) for axis in Axis for rev in (False, True)
)
"""All eight directions, each axis followed by its reversed variant."""


def coordinates(
    direction: Direction, row: int, col: int, length: int, size: int
) -> tuple[tuple[int, int], ...] | None:
    """Get the cells covered by a word of `length` anchored at (row, col).

    Args:
        direction: The direction the word is laid in.
        row: Anchor row.
        col: Anchor column.
        length: Number of letters in the word.
        size: Height and width of the grid.

    Returns:
        The (row, col) coordinates in order from the anchor, or None if any of them would fall
        outside the grid.
    """
    d_row, d_col = direction.axis.step
    end_row = row + d_row * (length - 1)
    end_col = col + d_col * (length - 1)
    for r, c in ((row, col), (end_row, end_col)):
        if not (0 <= r < size and 0 <= c < size):
            return None
    return tuple((row + i * d_row, col + i * d_col) for i in range(length))
