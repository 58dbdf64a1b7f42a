"""Text and HTML renderings of a word search."""

from collections.abc import Iterable
from html import escape
from os import PathLike
from pathlib import Path

from seekfind.grid import Grid
from seekfind.wordlist import Word

CELL_STYLE = "padding: 0; margin: 0; height: 20px; width: 20px"
ROW_STYLE = "padding: 0; margin: 0"
TABLE_STYLE = "font-family:'Lucida Console', monospace"


def board_to_text(grid: Grid) -> str:
    """Render the grid as text, one line per row.  Empty cells are rendered as a space."""
    return grid.to_text()


def board_to_html(grid: Grid, words: Iterable[Word | str]) -> str:
    """Render the grid as an HTML table, followed by a list of the words to find.

    Args:
        grid: The (filled) grid.
        words: The words for the legend.  Words are shown in their display form.
    """
    lines = ['<div style="float:left">', f'<table style="{TABLE_STYLE}">']
    for row in grid.rows():
        lines.append(f'<tr style="{ROW_STYLE}">')
        cells = (f'<td style="{CELL_STYLE}">{escape(cell or " ")}</td>' for cell in row)
        lines.append("".join(cells))
        lines.append("</tr>")
    lines += ["</table>", "</div>", '<div style="float:left">', '<ul style="list-style: none;">']
    for word in words:
        text = word.display if isinstance(word, Word) else word
        lines.append(f"<li>{escape(text)}</li>")
    lines += ["</ul>", "</div>"]
    return "\n".join(lines) + "\n"


def write_html(path: str | PathLike, grid: Grid, words: Iterable[Word | str]) -> Path:
    """Write the HTML rendering of the puzzle to `path`.

    Returns:
        The path written to.
    """
    out = Path(path)
    out.write_text(board_to_html(grid, words), encoding="utf-8")
    return out
