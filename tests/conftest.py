"""
Pytest configuration and shared fixtures for all tests.
"""

import pytest

from cube_kitchen.chef import chef
from cube_kitchen.clock import FakeClock
from cube_kitchen.cube import Cube


@pytest.fixture
def fake_clock():
    """A clock that only moves when the test ticks it."""
    return FakeClock()


@pytest.fixture
def my_cube(fake_clock):
    """The edge-length-2 cube most unit tests work with."""
    return Cube(2, clock=fake_clock)


@pytest.fixture
def kitchen_chef():
    """The shared chef instance (already constructed, like the app exports it)."""
    return chef
