"""Pytest configuration and fixtures for donkey bot tests."""

import random

import pytest

from donkey.player import Player
from tests.fakes.fake_services import FakeOracle


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def oracle():
    """Oracle that is unavailable until a test sets ``rank_value``."""
    return FakeOracle()


@pytest.fixture
def player(oracle, seeded_rng):
    """Player wired to the fake oracle with no log source."""
    return Player(oracle=oracle, rng=seeded_rng)
