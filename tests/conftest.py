"""Shared fixtures for the seekfind tests."""

import random
from collections.abc import Iterable

import pytest


class ScriptedRandom:
    """Random source that replays a fixed sequence of values.

    Each value is reduced modulo `stop`, so scripts can be written without knowing the grid size.
    Once the script runs out, every further draw returns `default`.
    """

    def __init__(self, values: Iterable[int], default: int | None = None) -> None:
        self.values = list(values)
        self.default = default
        self.calls: list[int] = []

    def randrange(self, stop: int, /) -> int:
        self.calls.append(stop)
        if self.values:
            return self.values.pop(0) % stop
        if self.default is None:
            raise AssertionError("Scripted random source exhausted.")
        return self.default % stop


@pytest.fixture
def scripted():
    """Factory for ScriptedRandom sources."""
    return ScriptedRandom


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "wordlist.txt"
    path.write_text("cat\nDog\n\nsea lion\n", encoding="utf-8")
    return path
