"""
Playing card value.

Defines the immutable Card class. Equality and hashing are structural over
(rank, suit); ordering follows canonical deck position.
"""

from dataclasses import dataclass
from functools import total_ordering
from typing import Dict, Tuple

from ..exceptions import InvalidArgumentError
from .types import Rank, Suit


_RANK_BY_NAME: Dict[str, Rank] = {rank.value.lower(): rank for rank in Rank}
_SUIT_BY_NAME: Dict[str, Suit] = {suit.value.lower(): suit for suit in Suit}


@total_ordering
@dataclass(frozen=True)
class Card:
    """
    A playing card.

    Frozen dataclass holding a rank and a suit. Both are mandatory and must be
    members of their enums.

    Attributes:
        rank: card rank
        suit: card suit

    Examples:
        >>> card = Card(Rank.ACE, Suit.SPADES)
        >>> card.display_text()
        'Ace of Spades'
        >>> card == Card(Rank.ACE, Suit.SPADES)
        True
    """

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        """
        Validate the card fields.

        Raises:
            InvalidArgumentError: when rank or suit is missing or not an enum
                member. Rank is checked first.
        """
        if self.rank is None:
            raise InvalidArgumentError("Card rank is empty!", field="rank")
        if self.suit is None:
            raise InvalidArgumentError("Card suit is empty!", field="suit")
        if not isinstance(self.rank, Rank):
            raise InvalidArgumentError(
                f"Card rank must be a Rank, got {self.rank!r}", field="rank"
            )
        if not isinstance(self.suit, Suit):
            raise InvalidArgumentError(
                f"Card suit must be a Suit, got {self.suit!r}", field="suit"
            )

    def display_text(self) -> str:
        """
        Return the readable name of the card.

        Returns:
            str: "<Rank> of <Suit>", e.g. "Ace of Spades"
        """
        return f"{self.rank.value} of {self.suit.value}"

    @property
    def sort_key(self) -> Tuple[int, int]:
        """Canonical deck position as (suit index, rank index)."""
        return (self.suit.index, self.rank.index)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __str__(self) -> str:
        return self.display_text()

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @classmethod
    def from_display_text(cls, text: str) -> "Card":
        """
        Create a card from its display text.

        Args:
            text: text in the form "<Rank> of <Suit>", names are matched
                case-insensitively

        Returns:
            Card: the matching card

        Raises:
            InvalidArgumentError: when the text is malformed or names an
                unknown rank or suit
        """
        if not isinstance(text, str):
            raise InvalidArgumentError(f"Card text must be a string, got {text!r}")

        parts = text.strip().split()
        if len(parts) != 3 or parts[1].lower() != "of":
            raise InvalidArgumentError(f"Malformed card text: {text!r}")

        rank_name, _, suit_name = parts
        rank = _RANK_BY_NAME.get(rank_name.lower())
        if rank is None:
            raise InvalidArgumentError(f"Unknown rank: {rank_name!r}", field="rank")
        suit = _SUIT_BY_NAME.get(suit_name.lower())
        if suit is None:
            raise InvalidArgumentError(f"Unknown suit: {suit_name!r}", field="suit")

        return cls(rank, suit)
