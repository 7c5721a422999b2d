"""Shared fixtures for the unscramble test suite."""

import os
import random
import tempfile

# Keep test logs out of the working tree; must happen before the package is imported
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="unscramble-logs-"))

import pytest

from unscramble.models.puzzle import PuzzleEntry
from unscramble.services.scheduler import ScheduledCall
from unscramble.services.tiles import reorder


class FakeScheduler:
    """Scheduler driven by a manual clock."""

    def __init__(self):
        self.now = 0.0
        self.pending = []  # (due, call, raw callback)

    def schedule(self, delay_seconds, callback):
        call = ScheduledCall(callback)
        self.pending.append((self.now + delay_seconds, call, callback))
        return call

    def advance(self, seconds):
        self.now += seconds
        due = [item for item in self.pending if item[0] <= self.now]
        self.pending = [item for item in self.pending if item[0] > self.now]
        for _, call, _ in sorted(due, key=lambda item: item[0]):
            call.fire()

    def live_calls(self):
        return [call for _, call, _ in self.pending if not call.cancelled]


class StubGenerator:
    """Hands out predefined puzzles, one per round."""

    def __init__(self, *puzzles, count=None):
        self.puzzles = [[PuzzleEntry(word, scrambled) for word, scrambled in puzzle] for puzzle in puzzles]
        self.count = count if count is not None else len(self.puzzles[0])
        self.rounds = 0

    def generate(self):
        puzzle = self.puzzles[min(self.rounds, len(self.puzzles) - 1)]
        self.rounds += 1
        return list(puzzle)


def moves_to_solve(tiles, target):
    """
    Returns (source_tile_id, target_tile_id) drops that spell `target`.

    `tiles` is a list of {'id', 'letter'} dicts as found in snapshots.
    """
    current = list(tiles)
    moves = []
    for i, letter in enumerate(target):
        j = next(k for k in range(i, len(current)) if current[k]['letter'] == letter)
        if j != i:
            moves.append((current[j]['id'], current[i]['id']))
            current = reorder(current, j, i)
    return moves


ROUND_PUZZLE = [
    ("HTML", "THML"),
    ("CSS", "SCS"),
    ("NODE", "EDON"),
    ("VITE", "ETIV"),
    ("ASSESS", "SSESAS"),
]

SECOND_PUZZLE = [
    ("REACT", "TCAER"),
    ("APPLE", "PPLEA"),
    ("BANANA", "NABANA"),
    ("PYTHON", "NOHTYP"),
    ("GITHUB", "BUHTIG"),
]


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def stub_generator():
    return StubGenerator(ROUND_PUZZLE, SECOND_PUZZLE)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def game_service(scheduler):
    """Global game service with a single-word vocabulary so answers are known."""
    from unscramble.services.game_service import initialize_game_service

    service = initialize_game_service(
        word_list=["HTML"],
        words_per_round=1,
        scheduler=scheduler,
        rng=random.Random(42),
        reshuffle_solved=True,
    )
    yield service
    for controller in list(service.games.values()):
        controller.close()


@pytest.fixture
def app(game_service):
    from unscramble import create_app
    from unscramble.config import TestingConfig

    app, socketio = create_app(TestingConfig)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app):
    client = app.socketio.test_client(app)
    yield client
    if client.is_connected():
        client.disconnect()
