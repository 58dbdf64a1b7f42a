"""Word search generator configuration."""

from string import ascii_uppercase

from dotenv import find_dotenv
from pydantic import PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv(usecwd=True) or None


class GeneratorConfig(BaseSettings):
    """Configuration settings for the word search generator.

    Every field can be set through a `SEEKFIND_`-prefixed environment variable or a `.env` file.
    """

    word_list_path: str = "wordlist.txt"
    """Path to the word list file, one word or phrase per line. Default: "wordlist.txt"."""

    output_path: str = "output.html"
    """Path of the HTML file to write. Default: "output.html"."""

    board_size: PositiveInt = 25
    """Height and width of the (square) board. Default: 25."""

    fit_word_attempts: PositiveInt = 10_000
    """Maximum number of random placements tried for a single word. Default: 10,000."""

    alphabet: str = ascii_uppercase
    """Letters drawn from when filling empty cells. Default: A-Z."""

    seed: str | None = None
    """Seed for the random number generator. If None (default), seeded from the current time."""

    grow_board: bool = False
    """Whether to retry on larger boards when the words do not fit. Default: False."""

    max_board_size: PositiveInt = 35
    """Largest board size tried when `grow_board` is set. Default: 35."""

    grow_step: PositiveInt = 5
    """Board size increment between attempts when `grow_board` is set. Default: 5."""

    model_config = SettingsConfigDict(
        env_prefix="SEEKFIND_",
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="forbid",
    )


config = GeneratorConfig()
