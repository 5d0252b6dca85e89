"""
standard_deck - a standard 52-card deck for card-game logic.

Example:
    >>> from standard_deck import Deck
    >>> deck = Deck()
    >>> deck.shuffle()
    >>> card = deck.deal_one()
"""

from .core.config import DeckConfig, configure_logging
from .core.deck import Card, Deck, Rank, Suit
from .core.exceptions import CardDeckError, ConfigError, InvalidArgumentError

__version__ = "1.0.0"

__all__ = [
    'Card',
    'Deck',
    'Rank',
    'Suit',
    'DeckConfig',
    'configure_logging',
    'CardDeckError',
    'ConfigError',
    'InvalidArgumentError',
]
