"""Shared fixtures and markers for pqid tests."""

import pytest

from pqid.core.words import reset_word_table


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: sweeps the full 0-65535 word domain")


@pytest.fixture
def fresh_word_table():
    """Start and finish the test without a built word table."""
    reset_word_table()
    yield
    reset_word_table()
