"""Five-card hand classification and best-of-seven selection.

``evaluate_five`` classifies exactly five cards into one of the ten
:class:`HandCategory` values and returns a :class:`HandScore` whose
``tiebreak`` tuple orders hands within the same category.
``evaluate_best`` scores every five-card subset of a 5, 6 or 7 card
holding and keeps the strongest one.

Check order matters: a hand may satisfy several lower patterns at once
and the first positive match decides its category.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from itertools import combinations
from typing import Sequence

from core.cards import RANK_NAMES, Card, parse_cards
from core.comparator import score_key
from core.errors import CardParseError, InvalidInput

WHEEL = (14, 5, 4, 3, 2)
"""A-5-4-3-2 sorted descending: the five-high straight."""

MIN_HAND_SIZE = 5
MAX_HAND_SIZE = 7


class HandCategory(IntEnum):
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    @property
    def label(self) -> str:
        """Display name, e.g. ``"Three of a Kind"``."""
        return _CATEGORY_LABELS[self]

    def __str__(self) -> str:
        return self.label


_CATEGORY_LABELS = (
    "High Card",
    "One Pair",
    "Two Pair",
    "Three of a Kind",
    "Straight",
    "Flush",
    "Full House",
    "Four of a Kind",
    "Straight Flush",
    "Royal Flush",
)


@dataclass(frozen=True, slots=True)
class HandScore:
    """Score of exactly five cards.

    Attributes:
        category: Hand category; higher always wins.
        tiebreak: Values compared within a category, most significant first.
        cards:    The five scored cards, descending by value.
    """

    category: HandCategory
    tiebreak: tuple[int, ...]
    cards: tuple[Card, ...]


@dataclass(frozen=True, slots=True)
class HandEvaluation:
    """Adapter-facing view of an evaluated holding."""

    category_name: str
    description: str
    best_cards: tuple[str, ...]

    def as_tuple(self) -> tuple[str, str, list[str]]:
        return self.category_name, self.description, list(self.best_cards)


def _straight_high(values: Sequence[int]) -> int:
    """High value of the straight formed by *values* (sorted desc), or 0."""
    if tuple(values) == WHEEL:
        return 5
    for higher, lower in zip(values, values[1:]):
        if higher - lower != 1:
            return 0
    return values[0]


def evaluate_five(cards: Sequence[Card]) -> HandScore:
    """Classify exactly five cards."""
    if len(cards) != 5:
        raise InvalidInput(f"evaluate_five needs exactly 5 cards, got {len(cards)}")

    ordered = tuple(sorted(cards, key=lambda card: card.value, reverse=True))
    values = [card.value for card in ordered]

    is_flush = len({card.suit for card in ordered}) == 1
    straight_high = _straight_high(values)

    if is_flush and straight_high:
        category = HandCategory.ROYAL_FLUSH if straight_high == 14 else HandCategory.STRAIGHT_FLUSH
        return HandScore(category, (straight_high,), ordered)

    counts = Counter(values)
    grouped = tuple(sorted(counts, key=lambda value: (counts[value], value), reverse=True))
    top = counts[grouped[0]]
    second = counts[grouped[1]] if len(grouped) > 1 else 0

    if top == 4:
        return HandScore(HandCategory.FOUR_OF_A_KIND, grouped, ordered)
    if top == 3 and second == 2:
        return HandScore(HandCategory.FULL_HOUSE, grouped, ordered)
    if is_flush:
        return HandScore(HandCategory.FLUSH, tuple(values), ordered)
    if straight_high:
        return HandScore(HandCategory.STRAIGHT, (straight_high,), ordered)
    if top == 3:
        return HandScore(HandCategory.THREE_OF_A_KIND, grouped, ordered)
    if top == 2 and second == 2:
        return HandScore(HandCategory.TWO_PAIR, grouped, ordered)
    if top == 2:
        return HandScore(HandCategory.ONE_PAIR, grouped, ordered)
    return HandScore(HandCategory.HIGH_CARD, tuple(values), ordered)


def evaluate_best(cards: Sequence[Card]) -> HandScore:
    """Return the best five-card score from a 5, 6 or 7 card holding.

    When several subsets tie for best, which one ends up in ``cards`` is
    unspecified.
    """
    if not MIN_HAND_SIZE <= len(cards) <= MAX_HAND_SIZE:
        raise InvalidInput(
            f"Must provide between {MIN_HAND_SIZE} and {MAX_HAND_SIZE} cards, got {len(cards)}"
        )
    return max((evaluate_five(combo) for combo in combinations(cards, 5)), key=score_key)


def _plural(value: int) -> str:
    name = RANK_NAMES[value]
    return f"{name}es" if name.endswith("x") else f"{name}s"


def describe_score(score: HandScore) -> str:
    """Human readable summary, e.g. ``"Full House, Kings full of Fives"``."""
    category = score.category
    first = score.tiebreak[0]

    if category is HandCategory.ROYAL_FLUSH:
        return "Royal Flush"
    if category is HandCategory.STRAIGHT_FLUSH:
        return f"Straight Flush, {RANK_NAMES[first]} high"
    if category is HandCategory.FOUR_OF_A_KIND:
        return f"Four {_plural(first)}"
    if category is HandCategory.FULL_HOUSE:
        return f"Full House, {_plural(first)} full of {_plural(score.tiebreak[1])}"
    if category is HandCategory.FLUSH:
        return f"Flush, {RANK_NAMES[first]} high"
    if category is HandCategory.STRAIGHT:
        return f"Straight, {RANK_NAMES[first]} high"
    if category is HandCategory.THREE_OF_A_KIND:
        return f"Three {_plural(first)}"
    if category is HandCategory.TWO_PAIR:
        return f"Two Pair, {_plural(first)} and {_plural(score.tiebreak[1])}"
    if category is HandCategory.ONE_PAIR:
        return f"Pair of {_plural(first)}"
    return f"{RANK_NAMES[first]} high"


def evaluate_hand(tokens: Sequence[str]) -> HandEvaluation:
    """Parse 5–7 card tokens and describe the best hand they make."""
    try:
        cards = parse_cards(tokens)
    except CardParseError as error:
        raise InvalidInput(str(error)) from error

    score = evaluate_best(cards)
    return HandEvaluation(
        category_name=score.category.label,
        description=describe_score(score),
        best_cards=tuple(str(card) for card in score.cards),
    )
