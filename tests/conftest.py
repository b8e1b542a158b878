"""Shared pytest fixtures for the passgen tests."""

import random

import pytest

from passgen.core.password_generator import PasswordEngine


@pytest.fixture
def seeded_engine():
    """Engine drawing from one seeded generator, so runs are repeatable."""
    rng = random.Random(20240611)
    return PasswordEngine(rng_factory=lambda: rng)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv('PASSGEN_LOG_LEVEL', raising=False)
    monkeypatch.delenv('PASSGEN_DEFAULT_LENGTH', raising=False)
