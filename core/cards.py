"""Card model and two-character card notation.

A token is one suit letter followed by one rank symbol, e.g. ``"HA"``
(Ace of Hearts) or ``"CT"`` (Ten of Clubs).  Parsing is case-insensitive;
the canonical form is upper case.

The 52-card space maps onto ``[0, 51]`` as ``suit_idx * 13 + rank_idx``
where ``SUITS = 'HDCS'`` and ``RANKS = '23456789TJQKA'``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable

from core.errors import InvalidFormat, InvalidRank, InvalidSuit

RANKS = "23456789TJQKA"
"""Ordered rank symbols (``2``–``A``). Index position is the rank id."""

SUITS = "HDCS"
"""Suit letters (hearts, diamonds, clubs, spades)."""

DECK_SIZE = len(SUITS) * len(RANKS)

RANK_VALUES = MappingProxyType({rank: idx + 2 for idx, rank in enumerate(RANKS)})

RANK_NAMES = MappingProxyType(
    {
        2: "Two", 3: "Three", 4: "Four", 5: "Five", 6: "Six", 7: "Seven",
        8: "Eight", 9: "Nine", 10: "Ten", 11: "Jack", 12: "Queen",
        13: "King", 14: "Ace",
    }
)


class Suit(Enum):
    HEARTS = "H"
    DIAMONDS = "D"
    CLUBS = "C"
    SPADES = "S"


@dataclass(frozen=True, slots=True)
class Card:
    """A single playing card. Equal iff suit and rank match."""

    suit: Suit
    rank: str

    @property
    def value(self) -> int:
        """Numeric rank, 2–14 with the Ace high."""
        return RANK_VALUES[self.rank]

    @property
    def index(self) -> int:
        return SUITS.index(self.suit.value) * len(RANKS) + RANKS.index(self.rank)

    @classmethod
    def from_index(cls, index: int) -> Card:
        if not 0 <= index < DECK_SIZE:
            raise ValueError(f"Card index out of range [0, {DECK_SIZE - 1}]: {index}")
        suit_idx, rank_idx = divmod(index, len(RANKS))
        return cls(Suit(SUITS[suit_idx]), RANKS[rank_idx])

    def __str__(self) -> str:
        return f"{self.suit.value}{self.rank}"

    def __repr__(self) -> str:
        return f"Card({self})"


def parse_card(token: str) -> Card:
    """Convert a token such as ``"HA"`` or ``"s7"`` into a :class:`Card`.

    Raises:
        InvalidFormat: *token* is not a two-character ASCII string.
        InvalidSuit:   the first character is not one of ``H D C S``.
        InvalidRank:   the second character is not a rank symbol.
    """
    if not isinstance(token, str) or len(token) != 2 or not token.isascii():
        raise InvalidFormat(str(token))

    suit = token[0].upper()
    rank = token[1].upper()
    if suit not in SUITS:
        raise InvalidSuit(token, repr(suit))
    if rank not in RANK_VALUES:
        raise InvalidRank(token, repr(rank))
    return Card(Suit(suit), rank)


def parse_cards(tokens: Iterable[str]) -> list[Card]:
    """Parse every token in order; the first bad token aborts the whole list."""
    return [parse_card(token) for token in tokens]
