"""Exception hierarchy for the showdown core.

Every error raised by ``core`` derives from :class:`ShowdownError` (itself a
``ValueError``) so adapters can catch the whole family in one clause and
still discriminate the card-parsing failures from bad call arguments.
"""

from __future__ import annotations


class ShowdownError(ValueError):
    """Base class for all core failures."""


class CardParseError(ShowdownError):
    """A card token could not be decoded.

    Attributes:
        token: The raw token that failed to parse.
    """

    reason = "invalid card"

    def __init__(self, token: str, detail: str | None = None) -> None:
        self.token = token
        super().__init__(f"{self.reason}: {detail if detail is not None else token!r}")


class InvalidFormat(CardParseError):
    reason = "invalid card format"


class InvalidSuit(CardParseError):
    reason = "invalid suit"


class InvalidRank(CardParseError):
    reason = "invalid rank"


class InvalidInput(ShowdownError):
    """Wrong card count, duplicate cards or bad simulation arguments."""
