"""Module for word list management."""

from os import PathLike
from pathlib import Path
from typing import NamedTuple


def normalize_word(text: str) -> str:
    """Return the form of a word that is laid on the grid: uppercase, without spaces."""
    return text.replace(" ", "").upper()


class Word(NamedTuple):
    """A word to hide in the puzzle."""

    display: str
    """The word as shown in the legend (original case and spacing)."""

    letters: str
    """The letters placed on the grid."""

    @classmethod
    def from_text(cls, text: str) -> "Word":
        """Create a Word from a line of the word list."""
        display = text.strip()
        letters = normalize_word(display)
        if not letters:
            raise ValueError(f"Word {text!r} has no letters to place.")
        return cls(display=display, letters=letters)


def read_word_list(path: str | PathLike) -> list[Word]:
    """Load words from a file, one word or phrase per line.

    Args:
        path: Path to the word list file.

    Returns:
        The words in file order.  Blank lines are skipped.
    """
    word_list_path = Path(path)
    if not word_list_path.is_file():
        raise FileNotFoundError(f"Word list file not found: {word_list_path}")

    with word_list_path.open("r", encoding="utf-8") as f:
        return [Word.from_text(line) for line in f if line.strip()]
