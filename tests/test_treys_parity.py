"""Cross-check the evaluator against the ``treys`` reference evaluator.

treys scores are "lower is better"; the two evaluators must agree on who
wins every random heads-up showdown.
"""

from __future__ import annotations

import random

import pytest

from core.cards import DECK_SIZE, Card, parse_cards
from core.comparator import Outcome, compare_hands

treys = pytest.importorskip("treys")


def _to_treys(card: Card) -> int:
    return treys.Card.new(f"{card.rank}{card.suit.value.lower()}")


def _expected(board: list[Card], first: list[Card], second: list[Card]) -> Outcome:
    evaluator = treys.Evaluator()
    board_ints = [_to_treys(card) for card in board]
    first_score = evaluator.evaluate(board_ints, [_to_treys(card) for card in first])
    second_score = evaluator.evaluate(board_ints, [_to_treys(card) for card in second])
    if first_score < second_score:
        return Outcome.FIRST_WINS
    if first_score > second_score:
        return Outcome.SECOND_WINS
    return Outcome.TIE


def test_random_showdowns_match_treys() -> None:
    rng = random.Random(2024)
    for _ in range(400):
        dealt = [Card.from_index(i) for i in rng.sample(range(DECK_SIZE), 9)]
        board, first, second = dealt[:5], dealt[5:7], dealt[7:]

        result = compare_hands(
            [str(card) for card in first + board],
            [str(card) for card in second + board],
        )
        assert result is _expected(board, first, second), (board, first, second)


@pytest.mark.parametrize(
    ("board", "first", "second"),
    [
        (["HA", "D2", "C3", "S4", "H9"], ["C5", "DK"], ["C6", "D5"]),
        (["ST", "SJ", "SQ", "SK", "H2"], ["SA", "D3"], ["S9", "D4"]),
        (["HK", "DK", "CK", "H5", "D5"], ["SK", "C2"], ["S5", "C5"]),
    ],
)
def test_edge_showdowns_match_treys(board: list[str], first: list[str], second: list[str]) -> None:
    board_cards, first_cards, second_cards = parse_cards(board), parse_cards(first), parse_cards(second)
    assert compare_hands(first + board, second + board) is _expected(board_cards, first_cards, second_cards)
