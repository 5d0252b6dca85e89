"""
Card deck exception definitions.

Every error raised by the library derives from CardDeckError. An empty deck
is not an error and has no exception type.
"""

from typing import Optional


class CardDeckError(Exception):
    """Base class for card deck errors."""
    pass


class InvalidArgumentError(CardDeckError, ValueError):
    """
    A constructor argument is missing or outside its closed vocabulary.

    Attributes:
        field: name of the offending argument, e.g. "rank" or "suit"
    """

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class ConfigError(CardDeckError, ValueError):
    """Invalid deck configuration."""
    pass
