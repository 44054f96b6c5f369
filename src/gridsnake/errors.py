# errors.py
"""Exceptions raised by gridsnake.

Collisions are not errors: they end the round as ``GAME_OVER``. These
cover misconfiguration, internal misuse and the score store boundary.
"""


class SnakeError(Exception):
    """Base class for every gridsnake error."""


class ConfigError(SnakeError, ValueError):
    """A ``Config`` value is out of range."""


class LifecycleError(SnakeError):
    """A round transition was requested from a state that does not allow it."""


class ScoreStoreError(SnakeError):
    """The best-score store could not be written."""
