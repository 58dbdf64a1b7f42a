"""Word Search Puzzle Generator.

Places a list of words onto a square board, each along one of eight directions (horizontal,
vertical or diagonal, forwards or backwards), then fills the remaining cells with random letters.
Words that share a letter may cross.  The result is printed as text and saved as an HTML page
with the word list as a legend.
"""

import argparse
import random
from collections.abc import Sequence
from time import time_ns

from .config import config
from .placer import Puzzle, build_board, build_growing_board
from .render import write_html
from .wordlist import read_word_list


def positive_int(value: str) -> int:
    """Argument type for sizes and counts, which must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def get_parser() -> argparse.ArgumentParser:
    """Command-line parser.  Defaults come from the generator configuration."""
    parser = argparse.ArgumentParser(prog="seekfind", description="Word search puzzle generator")
    parser.add_argument(
        "word_list",
        nargs="?",
        default=config.word_list_path,
        help=f"Word list file, one word per line (default: {config.word_list_path})",
    )
    parser.add_argument("--size", type=positive_int, default=config.board_size, help="Board size")
    parser.add_argument("--output", default=config.output_path, help="HTML output file")
    parser.add_argument("--seed", default=config.seed, help="Random seed (default: current time)")
    parser.add_argument(
        "--attempts",
        type=positive_int,
        default=config.fit_word_attempts,
        help="Placement attempts per word",
    )
    parser.add_argument(
        "--grow",
        action=argparse.BooleanOptionalAction,
        default=config.grow_board,
        help="Retry on larger boards if the words do not fit",
    )
    parser.add_argument("--max-size", type=positive_int, default=config.max_board_size)
    parser.add_argument("--step", type=positive_int, default=config.grow_step)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the word search generator.

    Returns:
        The process exit status.
    """
    args = get_parser().parse_args(argv)

    try:
        words = read_word_list(args.word_list)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}")
        return 1
    print([word.display for word in words])

    rng = random.Random(args.seed if args.seed is not None else time_ns())

    puzzle: Puzzle | None
    if args.grow:
        puzzle = build_growing_board(
            words,
            rng,
            start_size=args.size,
            max_size=args.max_size,
            step=args.step,
            attempts=args.attempts,
            alphabet=config.alphabet,
        )
    else:
        puzzle = build_board(
            args.size, words, rng, attempts=args.attempts, alphabet=config.alphabet
        )

    if puzzle is None:
        print("Error: couldn't fit words")
        return 1

    puzzle.grid.print()
    try:
        write_html(args.output, puzzle.grid, puzzle.words)
    except OSError as e:
        print(f"Error: {e}")
        return 1
    print(f"{args.output} saved with board size: {puzzle.size}")
    print(f"Placed {len(puzzle.words)} words: {puzzle.stats.summary()}")
    return 0
