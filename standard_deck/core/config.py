"""
Deck configuration.

Holds the random seed and logging settings, and applies the logging settings
to the package logger.
"""

import logging
import os
import random
from dataclasses import dataclass
from typing import Mapping, Optional

from .exceptions import ConfigError


PACKAGE_LOGGER_NAME = "standard_deck"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Environment switches:
#   DECK_RANDOM_SEED=<int> for reproducible shuffles
#   DECK_LOG_LEVEL=DEBUG / INFO / WARNING / ERROR / CRITICAL
ENV_RANDOM_SEED = "DECK_RANDOM_SEED"
ENV_LOG_LEVEL = "DECK_LOG_LEVEL"


@dataclass(frozen=True)
class DeckConfig:
    """
    Deck settings.

    Frozen so that values validated at construction stay valid.

    Attributes:
        random_seed: seed for the deck's random source, None for an unseeded one
        log_level: level applied to the package logger
        log_format: format of records emitted by the package handler
    """
    random_seed: Optional[int] = None
    log_level: str = "INFO"
    log_format: str = DEFAULT_LOG_FORMAT

    def __post_init__(self):
        """Validate and normalize the settings."""
        if self.random_seed is not None and (
            isinstance(self.random_seed, bool) or not isinstance(self.random_seed, int)
        ):
            raise ConfigError(f"random_seed must be an int or None: {self.random_seed!r}")

        if not isinstance(self.log_level, str) or self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ConfigError(
                f"log_level must be one of {', '.join(VALID_LOG_LEVELS)}: {self.log_level!r}"
            )
        object.__setattr__(self, "log_level", self.log_level.upper())

        if not isinstance(self.log_format, str) or not self.log_format:
            raise ConfigError("log_format must be a non-empty string")
        try:
            logging.Formatter(self.log_format)
        except ValueError as e:
            raise ConfigError(f"Invalid log_format {self.log_format!r}: {e}") from e

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DeckConfig":
        """
        Build a configuration from environment variables.

        Args:
            environ: mapping to read from, defaults to os.environ

        Returns:
            DeckConfig: settings with unset variables left at their defaults

        Raises:
            ConfigError: when a variable holds an invalid value
        """
        env = os.environ if environ is None else environ
        kwargs = {}

        seed = env.get(ENV_RANDOM_SEED)
        if seed not in (None, ""):
            try:
                kwargs["random_seed"] = int(seed)
            except ValueError as e:
                raise ConfigError(f"{ENV_RANDOM_SEED} must be an integer: {seed!r}") from e

        level = env.get(ENV_LOG_LEVEL)
        if level:
            kwargs["log_level"] = level

        return cls(**kwargs)

    def create_rng(self) -> random.Random:
        """Return a new random source, seeded when random_seed is set."""
        if self.random_seed is not None:
            return random.Random(self.random_seed)
        return random.Random()


class DeckLogHandler(logging.StreamHandler):
    """Stream handler installed on the package logger by configure_logging."""
    pass


def configure_logging(config: Optional[DeckConfig] = None) -> logging.Logger:
    """
    Apply logging settings to the package logger.

    Attaches a single DeckLogHandler to the "standard_deck" logger. Calling it
    again updates the level and format of that handler instead of adding
    another one. The root logger is left alone.

    Args:
        config: settings to apply, defaults to DeckConfig()

    Returns:
        logging.Logger: the package logger
    """
    config = config or DeckConfig()
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(config.log_level)

    handler = next((h for h in logger.handlers if isinstance(h, DeckLogHandler)), None)
    if handler is None:
        handler = DeckLogHandler()
        logger.addHandler(handler)
    handler.setFormatter(logging.Formatter(config.log_format))

    logger.debug(f"Logging configured at level {config.log_level}")
    return logger
