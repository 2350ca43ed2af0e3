"""
Shared fixtures for the suji test suite.
"""

import random

import pytest


@pytest.fixture
def rng():
    """Seeded random generator so sampled cases are reproducible."""
    return random.Random(20241018)


@pytest.fixture
def spread_values(rng):
    """
    Values spread over every magnitude of the domain: for each digit count
    1-15, a handful of uniform draws of that length.
    """
    values = []
    for digits in range(1, 16):
        low = 0 if digits == 1 else 10 ** (digits - 1)
        high = 10 ** digits - 1
        values.extend(rng.randint(low, high) for _ in range(40))
    return values
