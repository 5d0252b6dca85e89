"""
Standard 52-card deck.

Defines the Deck class: canonical population, shuffling and dealing from the
front. A deck is never refilled; once empty it stays empty.
"""

import logging
import random
from typing import Iterator, List, Optional

from ..config import DeckConfig
from .card import Card
from .types import get_all_ranks, get_all_suits


logger = logging.getLogger(__name__)


class Deck:
    """
    An ordered deck of unique playing cards.

    A new deck holds the 52 rank/suit combinations in canonical order: all
    thirteen ranks of Hearts (Ace to King), then Diamonds, Clubs and Spades.
    The front of the deck is index 0. Not thread-safe.

    Attributes:
        _cards: cards currently in the deck, front first
        _rng: random source owned by this deck

    Examples:
        >>> deck = Deck()
        >>> deck.deal_one()
        Card(ACE, HEARTS)
        >>> len(deck)
        51
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        """
        Initialize the deck.

        Args:
            rng: random source for shuffling. A new unseeded random.Random is
                created when None
        """
        self._rng = rng or random.Random()
        self._cards: List[Card] = [
            Card(rank, suit)
            for suit in get_all_suits()
            for rank in get_all_ranks()
        ]
        logger.debug(f"Created deck with {len(self._cards)} cards")

    @classmethod
    def from_config(cls, config: DeckConfig) -> "Deck":
        """
        Create a deck whose random source follows the configuration.

        Args:
            config: deck settings; a set random_seed gives reproducible shuffles

        Returns:
            Deck: a new deck in canonical order
        """
        return cls(rng=config.create_rng())

    def shuffle(self) -> None:
        """
        Shuffle the cards currently in the deck.

        Uses the Fisher-Yates shuffle of random.Random, so every permutation
        of the remaining cards is equally likely. No-op on an empty deck.
        """
        if not self._cards:
            logger.debug("Shuffle skipped, deck is empty")
            return
        self._rng.shuffle(self._cards)
        logger.debug(f"Shuffled {len(self._cards)} cards")

    def deal_one(self) -> Optional[Card]:
        """
        Deal the card at the front of the deck.

        The remaining cards keep their relative order.

        Returns:
            Optional[Card]: the dealt card, or None when the deck is empty
        """
        if not self._cards:
            logger.debug("Deal requested from empty deck")
            return None
        card = self._cards.pop(0)
        logger.debug(f"Dealt {card}, {len(self._cards)} cards remaining")
        return card

    def remaining(self) -> List[Card]:
        """
        Get the cards still in the deck.

        Returns:
            List[Card]: a snapshot of the cards, front first. Later shuffles
                and deals do not change it
        """
        return list(self._cards)

    def peek_top(self) -> Optional[Card]:
        """
        Look at the front card without dealing it.

        Returns:
            Optional[Card]: the front card, or None when the deck is empty
        """
        if not self._cards:
            return None
        return self._cards[0]

    @property
    def cards_remaining(self) -> int:
        """Number of cards left in the deck."""
        return len(self._cards)

    @property
    def is_empty(self) -> bool:
        """True when every card has been dealt."""
        return not self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.remaining())

    def __str__(self) -> str:
        return f"Deck({len(self._cards)} cards remaining)"

    def __repr__(self) -> str:
        return f"Deck(cards_remaining={len(self._cards)})"
