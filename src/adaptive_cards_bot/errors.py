"""Exceptions raised by the Adaptive Cards bot."""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "CardBotError",
    "CardLoadError",
    "ConfigurationError",
]


class CardBotError(Exception):
    """Base exception for all Adaptive Cards bot errors."""


class CardLoadError(CardBotError):
    """A card definition could not be read or parsed.

    Attributes:
        path: The card file that failed to load.
    """

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to load card {str(self.path)!r}: {reason}")


class ConfigurationError(CardBotError):
    """Bot configuration is missing or invalid."""
