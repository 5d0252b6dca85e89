"""
Core domain layer.

Modules:
    deck: Card, Deck, Rank and Suit
    config: deck settings and logging setup
    exceptions: library error types
"""
