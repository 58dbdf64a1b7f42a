"""Randomized word placement: fitting single words and building whole boards."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from string import ascii_uppercase
from time import time
from typing import NamedTuple

from seekfind.direction import DIRECTIONS, Direction, coordinates
from seekfind.grid import Grid, RandomSource
from seekfind.wordlist import Word

FIT_WORD_ATTEMPTS = 10_000
"""Default number of random placements tried for each word before giving up."""


class Placement(NamedTuple):
    """Where the letters of one word land on the grid."""

    word: Word
    direction: Direction
    anchor: tuple[int, int]
    """(row, col) of the first cell along the axis."""

    cells: tuple[tuple[int, int, str], ...]
    """(row, col, letter) for each letter, in order from the anchor."""

    def fits(self, grid: Grid) -> bool:
        """Whether every cell is empty or already holds the same letter."""
        return all(grid[row, col] in (None, letter) for row, col, letter in self.cells)

    def apply(self, grid: Grid) -> None:
        """Write the letters onto the grid."""
        for row, col, letter in self.cells:
            grid[row, col] = letter

    def read(self, grid: Grid) -> str:
        """Read the word back from the grid, in the word's own letter order."""
        return self.direction.orient("".join(grid[row, col] or " " for row, col, _ in self.cells))


@dataclass
class BuildStats:
    """Statistics collected while building a board."""

    attempts: int = 0
    """Number of placement attempts made, over all words."""

    start_time: float = field(default_factory=time)
    """Timestamp when the build started."""

    end_time: float | None = None
    """Timestamp when the build finished."""

    @property
    def elapsed(self) -> float:
        return (self.end_time or time()) - self.start_time

    def summary(self) -> str:
        """Attempts and elapsed time, e.g. "12,345 attempts in 00:00:01.25"."""
        hours, rem = divmod(self.elapsed, 3600)
        minutes, secs = divmod(rem, 60)
        return f"{self.attempts:,} attempts in {int(hours):02}:{int(minutes):02}:{secs:05.2f}"


@dataclass
class Puzzle:
    """A completed word search."""

    grid: Grid
    """The filled grid."""

    words: list[Word]
    """The hidden words, in the order they were placed."""

    placements: list[Placement]
    """The placement of each word, parallel to `words`."""

    stats: BuildStats = field(default_factory=BuildStats)

    @property
    def size(self) -> int:
        return self.grid.size


def make_placement(
    word: Word, direction: Direction, row: int, col: int, size: int
) -> Placement | None:
    """Lay `word` out from (row, col), or return None if it runs off the grid."""
    coords = coordinates(direction, row, col, len(word.letters), size)
    if coords is None:
        return None
    letters = direction.orient(word.letters)
    cells = tuple((r, c, ch) for (r, c), ch in zip(coords, letters))
    return Placement(word=word, direction=direction, anchor=(row, col), cells=cells)


def fit_word(
    grid: Grid,
    word: Word,
    rng: RandomSource,
    *,
    attempts: int = FIT_WORD_ATTEMPTS,
) -> tuple[Placement | None, int]:
    """Try random placements of a word until one fits.

    Each attempt draws a direction, then an anchor row, then an anchor column.  The grid is only
    written to when a placement fits.

    Args:
        grid: The grid to place the word on.  Modified in place on success.
        word: The word to place.
        rng: Random source for direction and anchor choices.
        attempts: Maximum number of attempts.

    Returns:
        A tuple (placement, attempts_used).  The placement is None if no attempt succeeded.
    """
    size = grid.size
    for attempt in range(1, attempts + 1):
        direction = DIRECTIONS[rng.randrange(len(DIRECTIONS))]
        row = rng.randrange(size)
        col = rng.randrange(size)
        placement = make_placement(word, direction, row, col, size)
        if placement is None or not placement.fits(grid):
            continue
        placement.apply(grid)
        return placement, attempt
    return None, attempts


def _as_words(words: Iterable[Word | str]) -> list[Word]:
    return [w if isinstance(w, Word) else Word.from_text(w) for w in words]


def build_board(
    size: int,
    words: Iterable[Word | str],
    rng: RandomSource,
    *,
    attempts: int = FIT_WORD_ATTEMPTS,
    alphabet: str = ascii_uppercase,
    stats: BuildStats | None = None,
) -> Puzzle | None:
    """Place all words on a new board of the given size, then fill the remaining cells.

    Words are placed in order.  Each word is tried against its own copy of the board, which only
    replaces the board once the word has been placed.

    Args:
        size: Height and width of the board.
        words: Words to place; strings are converted with `Word.from_text`.
        rng: Random source for placement and fill.
        attempts: Maximum number of attempts per word.
        alphabet: Letters used to fill empty cells.
        stats: Statistics to add to, e.g. across several builds.  A new BuildStats if None.

    Returns:
        The finished Puzzle, or None if some word could not be placed.
    """
    words = _as_words(words)
    if stats is None:
        stats = BuildStats()
    board = Grid(size)
    placements: list[Placement] = []

    for word in words:
        state_before_word = board.copy()
        placement, used = fit_word(state_before_word, word, rng, attempts=attempts)
        stats.attempts += used
        if placement is None:
            stats.end_time = time()
            return None
        board = state_before_word
        placements.append(placement)

    board.fill(rng, alphabet)
    stats.end_time = time()
    return Puzzle(grid=board, words=words, placements=placements, stats=stats)


def board_sizes(start_size: int, max_size: int, step: int) -> Sequence[int]:
    """Board sizes tried by `build_growing_board`, smallest first."""
    if step < 1:
        raise ValueError("Board size step must be positive.")
    return range(start_size, max(start_size, max_size) + 1, step)


def build_growing_board(
    words: Iterable[Word | str],
    rng: RandomSource,
    *,
    start_size: int,
    max_size: int,
    step: int = 5,
    attempts: int = FIT_WORD_ATTEMPTS,
    alphabet: str = ascii_uppercase,
    stats: BuildStats | None = None,
) -> Puzzle | None:
    """Build a board, moving to a larger size each time the words do not fit.

    Attempts from every size tried are added to `stats` (a new BuildStats if None).

    Returns:
        The first Puzzle built, or None if the words do not fit even on the largest board.
    """
    words = _as_words(words)
    if stats is None:
        stats = BuildStats()
    for size in board_sizes(start_size, max_size, step):
        puzzle = build_board(size, words, rng, attempts=attempts, alphabet=alphabet, stats=stats)
        if puzzle is not None:
            return puzzle
    return None
