"""
pytest configuration for the standard_deck test suite.

Provides shared fixtures and registers the custom markers.
"""

import random
from typing import List

import pytest

from standard_deck import Card, Deck, Rank, Suit


@pytest.fixture
def fresh_deck() -> Deck:
    """An unshuffled deck in canonical order."""
    return Deck()


@pytest.fixture
def seeded_deck() -> Deck:
    """A deck with a fixed random source, for reproducible shuffles."""
    return Deck(rng=random.Random(20240601))


@pytest.fixture
def canonical_cards() -> List[Card]:
    """The 52 cards in canonical order, built independently of Deck."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "property_test: hypothesis-based property tests"
    )
    config.addinivalue_line(
        "markers", "statistical: tests that assert on the distribution of shuffles"
    )
