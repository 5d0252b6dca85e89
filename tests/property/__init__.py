"""
Property tests.

hypothesis-based tests for the deck invariants: shuffles are permutations,
deals remove only the front card and exhaustion is terminal.
"""
