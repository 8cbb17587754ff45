# tests/conftest.py
import random

import pytest


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for deterministic generation."""
    return random.Random(1234)


@pytest.fixture
def sample_products() -> list[dict]:
    """Small product master with mixed stock levels."""
    return [
        {"code": "A001", "name": "ミネラルウォーター", "location": "1-01", "stock": 5},
        {"code": "A002", "name": "緑茶 500ml", "location": "1-02", "stock": 1},
        {"code": "B001", "name": "ポテトチップス", "location": "2-01"},
        {"code": "B002", "name": "チョコレート", "location": "2-02", "stock": 0},
        {"code": "C001", "name": "カップラーメン", "location": "3-01", "stock": 2},
    ]


@pytest.fixture
def sample_history() -> list[dict]:
    """History entries for two users, including a pre-migration entry."""
    return [
        {"userId": "u1", "score": 70, "totalAnswered": 10},
        {"userId": "u1", "mode": "normal", "score": 90, "totalAnswered": 10},
        {"userId": "u1", "mode": "slip", "score": 60, "totalAnswered": 15},
        {"userId": "u1", "mode": "timeAttack", "score": 50, "totalAnswered": 12, "timeLimit": 60},
        {"userId": "u1", "mode": "timeAttack", "score": 80, "totalAnswered": 9, "timeLimit": 60},
        {"userId": "u1", "mode": "timeAttack", "score": 40, "totalAnswered": 20, "timeLimit": 120},
        {"userId": "u2", "mode": "normal", "score": 100, "totalAnswered": 10},
    ]


class SequenceRng:
    """Stub rng: choice picks by index, randint returns queued values."""

    def __init__(self, choices=None, ints=None):
        self.choices = list(choices or [])
        self.ints = list(ints or [])

    def choice(self, seq):
        index = self.choices.pop(0) if self.choices else 0
        return seq[index]

    def randint(self, a, b):
        value = self.ints.pop(0) if self.ints else b
        assert a <= value <= b
        return value


@pytest.fixture
def sequence_rng():
    return SequenceRng
