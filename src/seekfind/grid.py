"""Classes and functions for representing the word search grid."""

from typing import Protocol


class RandomSource(Protocol):
    """Source of random integers, e.g. `random.Random`."""

    def randrange(self, stop: int, /) -> int:
        """Return a random integer in `[0, stop)`."""
        ...


Cell = str | None
"""Content of a grid cell: a single letter, or None if the cell is empty."""


class Grid:
    """Store a square 2D matrix of letters as a 1D list.

    Cells are indexed by (row, col).  Empty cells hold None.
    """

    def __init__(self, size: int, cells: list[Cell] | None = None) -> None:
        if size < 1:
            raise ValueError(f"Grid size must be positive, got {size}.")
        if cells is None:
            cells = [None] * (size * size)
        elif len(cells) != size * size:
            raise ValueError("Cell count does not match grid size.")
        self.cells: list[Cell] = cells
        self.size = size

    def copy(self) -> "Grid":
        """Generate a copy of the grid, with independent storage."""
        return Grid(self.size, list(self.cells))

    def __str__(self) -> str:
        """Returns a string representation of the grid."""
        return self.to_text()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.size == other.size and self.cells == other.cells

    def to_text(self) -> str:
        """Render the grid as one line per row, with empty cells shown as a space."""
        return "\n".join("".join(cell or " " for cell in row) for row in self.rows())

    def print(self) -> None:
        """Print the grid to the console."""
        print(self.to_text())

    def _idx(self, idx: tuple[int, int]) -> int:
        """Convert a (row, col) tuple to a position in `cells`."""
        if not (isinstance(idx, tuple) and len(idx) == 2):
            raise IndexError("Invalid index type for Grid.")
        row, col = idx
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError(f"Cell ({row}, {col}) is outside a {self.size}x{self.size} grid.")
        return row * self.size + col

    def __getitem__(self, idx: tuple[int, int]) -> Cell:
        """Get cell content by (row, col)."""
        return self.cells[self._idx(idx)]

    def __setitem__(self, idx: tuple[int, int], value: Cell) -> None:
        """Set cell content by (row, col)."""
        self.cells[self._idx(idx)] = value

    def is_empty(self, row: int, col: int) -> bool:
        """Whether the cell at (row, col) holds no letter yet."""
        return self[row, col] is None

    def is_full(self) -> bool:
        """Whether every cell holds a letter."""
        return all(cell is not None for cell in self.cells)

    def rows(self) -> list[list[Cell]]:
        """Get the grid contents as a list of rows."""
        n = self.size
        return [self.cells[start : start + n] for start in range(0, len(self.cells), n)]

    def fill(self, rng: RandomSource, alphabet: str) -> None:
        """Assign a random letter from `alphabet` to every empty cell.

        Args:
            rng: Random source used to pick letters.
            alphabet: The letters to draw from, each with equal probability.
        """
        if not alphabet:
            raise ValueError("Alphabet must not be empty.")
        for idx, cell in enumerate(self.cells):
            if cell is None:
                self.cells[idx] = alphabet[rng.randrange(len(alphabet))]
