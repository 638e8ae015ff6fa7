"""Total order over :class:`~core.hand_evaluator.HandScore` values."""

from __future__ import annotations

from enum import Enum
from functools import cmp_to_key
from typing import TYPE_CHECKING, Sequence

from core.cards import parse_cards
from core.errors import CardParseError, InvalidInput

if TYPE_CHECKING:
    from core.hand_evaluator import HandScore


class Outcome(str, Enum):
    FIRST_WINS = "Player 1"
    SECOND_WINS = "Player 2"
    TIE = "Tie"

    def __str__(self) -> str:
        return self.value


def compare_scores(first: HandScore, second: HandScore) -> int:
    """Return ``1``, ``0`` or ``-1`` as *first* beats, ties or loses to *second*.

    Category decides first.  Within a category the tiebreak values are
    compared pairwise over their shared length; the first difference wins.
    """
    if first.category != second.category:
        return 1 if first.category > second.category else -1

    for mine, theirs in zip(first.tiebreak, second.tiebreak):
        if mine != theirs:
            return 1 if mine > theirs else -1
    return 0


score_key = cmp_to_key(compare_scores)
"""Sort / ``max`` key consistent with :func:`compare_scores`."""


def compare_hands(cards1: Sequence[str], cards2: Sequence[str]) -> Outcome:
    """Evaluate two holdings (5–7 tokens each, 7 at showdown) and pick the winner."""
    from core.hand_evaluator import evaluate_best

    try:
        first = parse_cards(cards1)
        second = parse_cards(cards2)
    except CardParseError as error:
        raise InvalidInput(str(error)) from error

    verdict = compare_scores(evaluate_best(first), evaluate_best(second))
    if verdict > 0:
        return Outcome.FIRST_WINS
    if verdict < 0:
        return Outcome.SECOND_WINS
    return Outcome.TIE
