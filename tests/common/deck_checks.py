"""
Deck consistency checks shared by unit and property tests.

Each check raises AssertionError with a descriptive message on failure.
"""

from typing import List, Optional, Sequence

from standard_deck import Card


class DeckConsistencyChecker:
    """Static assertions over deck snapshots."""

    @staticmethod
    def verify_unique(cards: Sequence[Card]) -> None:
        """
        Verify that no card appears twice.

        Args:
            cards: deck snapshot

        Raises:
            AssertionError: when a duplicate is found
        """
        seen = set()
        for card in cards:
            assert card not in seen, f"Duplicate card in deck: {card}"
            seen.add(card)

    @staticmethod
    def verify_permutation(before: Sequence[Card], after: Sequence[Card]) -> None:
        """
        Verify that after holds exactly the cards of before, in any order.

        Args:
            before: snapshot taken before the operation
            after: snapshot taken after the operation

        Raises:
            AssertionError: when sizes differ or a card was lost or added
        """
        assert len(after) == len(before), \
            f"Deck size changed: {len(before)} -> {len(after)}"
        DeckConsistencyChecker.verify_unique(after)
        assert set(after) == set(before), \
            f"Card set changed: lost {set(before) - set(after)}, gained {set(after) - set(before)}"

    @staticmethod
    def verify_deal(before: Sequence[Card], dealt: Optional[Card], after: Sequence[Card]) -> None:
        """
        Verify a single deal from a non-empty deck.

        Args:
            before: snapshot taken before dealing
            dealt: card returned by deal_one
            after: snapshot taken after dealing

        Raises:
            AssertionError: when the front card was not the one dealt or the
                rest of the deck changed
        """
        assert before, "verify_deal needs a non-empty starting deck"
        assert dealt == before[0], f"Dealt {dealt}, expected front card {before[0]}"
        assert len(after) == len(before) - 1, \
            f"Deal must remove exactly one card: {len(before)} -> {len(after)}"
        assert dealt not in after, f"Dealt card {dealt} is still in the deck"
        assert list(after) == list(before[1:]), "Remaining cards changed order"

    @staticmethod
    def count_fixed_positions(before: Sequence[Card], after: Sequence[Card]) -> int:
        """Count positions holding the same card in both snapshots."""
        return sum(1 for a, b in zip(before, after) if a == b)
