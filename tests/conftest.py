"""
Shared test configuration and fixtures for resolver tests.

Provides resolver options backed by a small in-memory display-name table.
"""

from types import MappingProxyType

import pytest

from network.planq.join.resolve.engine import ResolveOptions
from tests.test_helpers import CHAT_NAME, FINGERPRINT


@pytest.fixture
def display_names():
    """Display-name table with the fixture key and one ENS name."""
    return MappingProxyType({FINGERPRINT: CHAT_NAME, "vitalik.eth": "Vitalik"})


@pytest.fixture
def options(display_names):
    """Resolver options using the test display-name table."""
    return ResolveOptions(display_names=display_names)
