"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture
def accumulator():
    """Provide a fresh Accumulator instance."""
    from advcalc import Accumulator

    return Accumulator()


@pytest.fixture
def extended():
    """Provide a fresh ExtendedAccumulator instance."""
    from advcalc import ExtendedAccumulator

    return ExtendedAccumulator()


@pytest.fixture
def perfect_numbers():
    """The perfect numbers small enough for trial division in tests."""
    return [6, 28, 496, 8128]


@pytest.fixture
def armstrong_numbers():
    """Armstrong numbers with up to four digits."""
    return [1, 2, 3, 4, 5, 6, 7, 8, 9, 153, 370, 371, 407, 1634, 8208, 9474]
