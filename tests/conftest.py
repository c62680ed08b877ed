"""
Pytest fixtures for building board snapshots and request payloads.
"""

import random

import pytest

from geometry import Coord
from snapshot import Board, Snake


class LastChoice:
    """Stands in for random.Random, always picks the last option."""

    def choice(self, seq):
        return seq[-1]


@pytest.fixture
def make_snake():
    def _make(snake_id, *cells, name=None):
        return Snake(id=snake_id, body=tuple(Coord(x, y) for x, y in cells), name=name or snake_id)
    return _make


@pytest.fixture
def make_board():
    def _make(*snakes, food=(), width=11, height=11):
        return Board(
            width=width,
            height=height,
            food=tuple(Coord(x, y) for x, y in food),
            snakes=tuple(snakes),
        )
    return _make


@pytest.fixture
def make_payload():
    """Build a /move style request body from (id, cells) pairs, first one is you."""
    def _make(you, *others, food=(), width=11, height=11, turn=3):
        def snake_json(snake_id, cells):
            body = [{"x": x, "y": y} for x, y in cells]
            return {"id": snake_id, "name": snake_id, "health": 90, "body": body, "head": body[0]}

        you_json = snake_json(*you)
        return {
            "game": {"id": "game-1", "timeout": 500, "ruleset": {"name": "standard"}},
            "turn": turn,
            "board": {
                "width": width,
                "height": height,
                "food": [{"x": x, "y": y} for x, y in food],
                "snakes": [you_json] + [snake_json(*o) for o in others],
            },
            "you": you_json,
        }
    return _make


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def last_choice():
    return LastChoice()
