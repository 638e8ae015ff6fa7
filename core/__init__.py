"""Hand evaluation, comparison and Monte-Carlo equity for Texas Hold'em."""

from __future__ import annotations

from core.cards import Card, Suit, parse_card, parse_cards
from core.comparator import Outcome, compare_hands, compare_scores
from core.errors import (
    CardParseError,
    InvalidFormat,
    InvalidInput,
    InvalidRank,
    InvalidSuit,
    ShowdownError,
)
from core.hand_evaluator import (
    HandCategory,
    HandEvaluation,
    HandScore,
    describe_score,
    evaluate_best,
    evaluate_five,
    evaluate_hand,
)
from core.math_engine import EquityResult, MathEngine, SimulationOutcome, run_simulation

__all__ = [
    "Card",
    "CardParseError",
    "EquityResult",
    "HandCategory",
    "HandEvaluation",
    "HandScore",
    "InvalidFormat",
    "InvalidInput",
    "InvalidRank",
    "InvalidSuit",
    "MathEngine",
    "Outcome",
    "ShowdownError",
    "SimulationOutcome",
    "Suit",
    "compare_hands",
    "compare_scores",
    "describe_score",
    "evaluate_best",
    "evaluate_five",
    "evaluate_hand",
    "parse_card",
    "parse_cards",
    "run_simulation",
]
