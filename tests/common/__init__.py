"""Shared test helpers."""

from .deck_checks import DeckConsistencyChecker

__all__ = ['DeckConsistencyChecker']
