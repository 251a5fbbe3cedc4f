"""
Shared fixtures for boxcrypt tests.
"""

import random

import pytest

from boxcrypt import BoxcryptConfig, generate_key_pair, generate_shared_key


class SeededEntropy:
    """Reproducible entropy source for tests. Never use outside tests."""

    def __init__(self, seed: int):
        self._rng = random.Random(seed)

    def __call__(self, length: int) -> bytes:
        return bytes(self._rng.getrandbits(8) for _ in range(length))


@pytest.fixture
def seeded_entropy():
    """Factory for seeded entropy sources."""
    return SeededEntropy


@pytest.fixture
def alice():
    return generate_key_pair()


@pytest.fixture
def bob():
    return generate_key_pair()


@pytest.fixture
def shared_key():
    return generate_shared_key()


@pytest.fixture
def default_config():
    """Default symmetric configuration, independent of the environment."""
    return BoxcryptConfig()
