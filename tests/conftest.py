"""Shared pytest fixtures for vect tests."""

import pytest

from vect import Vec2, reset_config


@pytest.fixture(autouse=True)
def fresh_config():
    """Reread configuration from the environment for every test."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def sample_vectors() -> list[Vec2]:
    """A spread of finite vectors covering signs, zeros and magnitudes."""
    return [
        Vec2(0, 0),
        Vec2(1, 2),
        Vec2(-3.5, 4.25),
        Vec2(1e-12, -7),
        Vec2(123456.789, -0.001),
        Vec2(-1, -1),
    ]
