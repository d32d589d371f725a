"""
Pytest will auto-discover / import this file called 'conftest.py'.
Fixtures shared by every test layer live here; shared positions live in
tests/positions.py.
"""

import random

import pytest


@pytest.fixture
def rng() -> random.Random:
    """Deterministic random source."""
    return random.Random(1234)
