"""
Card deck package.

Provides the Card value type, the Rank and Suit enums and the Deck.
"""

from .card import Card
from .deck import Deck
from .types import Rank, Suit, get_all_ranks, get_all_suits

__all__ = ['Card', 'Deck', 'Rank', 'Suit', 'get_all_ranks', 'get_all_suits']
