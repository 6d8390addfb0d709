from __future__ import annotations

import os

import pytest

# window tests run headless
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


class ScriptedRandom:
    """RandomSource that replays fixed draws and records the ranges asked for."""

    def __init__(self, draws: list[int]) -> None:
        self.draws = list(draws)
        self.calls: list[tuple[int, int]] = []

    def randrange(self, start: int, stop: int) -> int:
        self.calls.append((start, stop))
        value = self.draws.pop(0)
        assert start <= value < stop, f"scripted draw {value} outside [{start}, {stop})"
        return value


@pytest.fixture()
def scripted_random():
    return ScriptedRandom
