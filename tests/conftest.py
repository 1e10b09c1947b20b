"""Pytest configuration and fixtures."""

import pytest

from cryptopan import CryptoPAn


@pytest.fixture(scope="session")
def key():
    """Reference key: the ASCII byte 'a' repeated 64 times."""
    return b"a" * 64


@pytest.fixture(scope="session")
def engine(key):
    """Engine built from the reference key."""
    return CryptoPAn(key)
