"""
Playing card type definitions.

Defines the closed Rank and Suit vocabularies. Declaration order is the
canonical order used to populate a new deck, and each member's value is its
display name.
"""

from enum import Enum
from typing import List


class Suit(Enum):
    """
    Playing card suits.

    Ordered Hearts, Diamonds, Clubs, Spades.
    """

    HEARTS = "Hearts"
    DIAMONDS = "Diamonds"
    CLUBS = "Clubs"
    SPADES = "Spades"

    def __str__(self) -> str:
        return self.value

    @property
    def index(self) -> int:
        """Position of the suit in declaration order."""
        return _SUIT_ORDER[self]

    @classmethod
    def all(cls) -> List["Suit"]:
        return get_all_suits()


class Rank(Enum):
    """
    Playing card ranks.

    Ordered Ace, Two, ..., King. Ace is the first rank; no game-specific
    high/low rule is attached to it here.
    """

    ACE = "Ace"
    TWO = "Two"
    THREE = "Three"
    FOUR = "Four"
    FIVE = "Five"
    SIX = "Six"
    SEVEN = "Seven"
    EIGHT = "Eight"
    NINE = "Nine"
    TEN = "Ten"
    JACK = "Jack"
    QUEEN = "Queen"
    KING = "King"

    def __str__(self) -> str:
        return self.value

    @property
    def index(self) -> int:
        """Position of the rank in declaration order."""
        return _RANK_ORDER[self]

    @classmethod
    def all(cls) -> List["Rank"]:
        return get_all_ranks()


_SUIT_ORDER = {suit: i for i, suit in enumerate(Suit)}
_RANK_ORDER = {rank: i for i, rank in enumerate(Rank)}


def get_all_suits() -> List[Suit]:
    """
    Get every suit.

    Returns:
        List[Suit]: the four suits in declaration order
    """
    return list(Suit)


def get_all_ranks() -> List[Rank]:
    """
    Get every rank.

    Returns:
        List[Rank]: the thirteen ranks in declaration order
    """
    return list(Rank)
