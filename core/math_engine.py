"""Monte-Carlo equity engine for Texas Hold'em.

Each trial completes the board at random, deals every opponent two random
hole cards and compares the hero's best hand against the strongest
opponent.  Cards are drawn by rejection sampling over the 52-card space:
a suit and a rank are picked uniformly and redrawn while the card is
excluded.  At most nine cards are ever excluded, so redraws are rare.

Exclusion sets are immutable.  A run builds the base set (hero hole +
known board) once; each trial extends it with the drawn board cards; each
opponent's two cards live in a temporary set layered on top of the trial
set and dropped once that opponent is scored.  Opponents in one trial can
therefore be dealt the same cards.

Randomness comes from a :class:`random.Random` owned by the run.  Pass
``seed`` to reproduce a run exactly; without one the seed is taken from
``time.time_ns()``.
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from typing import AbstractSet, Sequence

from core.cards import RANKS, SUITS, Card, Suit, parse_cards
from core.comparator import compare_scores
from core.errors import CardParseError, InvalidInput
from core.hand_evaluator import HandScore, evaluate_best

HOLE_CARDS = 2
BOARD_CARDS = 5


@dataclass(slots=True)
class EquityResult:
    """Result of a Monte-Carlo equity run.

    Attributes:
        win_rate:    Fraction of trials where the hero wins outright.
        tie_rate:    Fraction of trials where the hero ties the best opponent.
        loss_rate:   Fraction of trials lost.
        simulations: Number of trials run.
    """

    win_rate: float
    tie_rate: float
    loss_rate: float
    simulations: int

    def as_tuple(self) -> tuple[float, float, float]:
        return self.win_rate, self.tie_rate, self.loss_rate


@dataclass(slots=True)
class SimulationOutcome:
    """Win / tie / loss counters for one run."""

    wins: int = 0
    ties: int = 0
    losses: int = 0

    @property
    def total(self) -> int:
        return self.wins + self.ties + self.losses

    def record(self, verdict: int) -> None:
        if verdict > 0:
            self.wins += 1
        elif verdict == 0:
            self.ties += 1
        else:
            self.losses += 1

    def to_result(self) -> EquityResult:
        runs = self.total
        if runs == 0:
            return EquityResult(win_rate=0.0, tie_rate=0.0, loss_rate=0.0, simulations=0)
        return EquityResult(
            win_rate=self.wins / runs,
            tie_rate=self.ties / runs,
            loss_rate=self.losses / runs,
            simulations=runs,
        )


class MathEngine:
    """Monte-Carlo equity calculator. Holds no state between runs."""

    @staticmethod
    def _parse(hole_cards: Sequence[str], board_cards: Sequence[str]) -> tuple[list[Card], list[Card]]:
        try:
            hole = parse_cards(hole_cards)
            board = parse_cards(board_cards)
        except CardParseError as error:
            raise InvalidInput(str(error)) from error

        if len(hole) != HOLE_CARDS:
            raise InvalidInput(f"Must provide exactly {HOLE_CARDS} hole cards, got {len(hole)}")
        if len(board) > BOARD_CARDS:
            raise InvalidInput(f"Board cards cannot exceed {BOARD_CARDS} cards, got {len(board)}")
        if len(set(hole + board)) != len(hole) + len(board):
            raise InvalidInput("Duplicate cards between hole and board")
        return hole, board

    @staticmethod
    def draw_card(rng: random.Random, excluded: AbstractSet[Card]) -> Card:
        """Draw a uniformly random card that is not in *excluded*."""
        while True:
            card = Card(Suit(rng.choice(SUITS)), rng.choice(RANKS))
            if card not in excluded:
                return card

    def simulate_trial(
        self,
        rng: random.Random,
        hole: Sequence[Card],
        board: Sequence[Card],
        base_excluded: frozenset[Card],
        opponents: int,
    ) -> int:
        """Play one random runout; return ``1`` win, ``0`` tie, ``-1`` loss."""
        excluded = base_excluded
        full_board = list(board)
        while len(full_board) < BOARD_CARDS:
            card = self.draw_card(rng, excluded)
            full_board.append(card)
            excluded = excluded | {card}

        hero_score = evaluate_best([*hole, *full_board])

        best_opponent: HandScore | None = None
        for _ in range(opponents):
            first = self.draw_card(rng, excluded)
            second = self.draw_card(rng, excluded | {first})
            score = evaluate_best([first, second, *full_board])
            if best_opponent is None or compare_scores(score, best_opponent) > 0:
                best_opponent = score

        if best_opponent is None:
            return 1
        return compare_scores(hero_score, best_opponent)

    def run_simulation(
        self,
        hole_cards: Sequence[str],
        board_cards: Sequence[str],
        num_players: int,
        num_trials: int,
        seed: int | None = None,
    ) -> EquityResult:
        """Estimate the hero's equity against ``num_players - 1`` random hands.

        Args:
            hole_cards:  The hero's two hole card tokens.
            board_cards: Zero to five known community card tokens.
            num_players: Players at the table, hero included (``>= 2``).
            num_trials:  Random runouts to sample (``0`` returns all zeros).
            seed:        Seed for a reproducible run.

        Raises:
            InvalidInput: bad tokens, wrong card counts, duplicate cards,
                fewer than two players or a negative trial count.
        """
        hole, board = self._parse(hole_cards, board_cards)
        if num_players < 2:
            raise InvalidInput(f"Need at least 2 players, got {num_players}")
        if num_trials < 0:
            raise InvalidInput(f"Number of trials cannot be negative, got {num_trials}")

        rng = random.Random(time.time_ns() if seed is None else seed)
        base_excluded = frozenset(hole + board)
        outcome = SimulationOutcome()

        for _ in range(num_trials):
            outcome.record(self.simulate_trial(rng, hole, board, base_excluded, num_players - 1))

        return outcome.to_result()


def run_simulation(
    hole_cards: Sequence[str],
    board_cards: Sequence[str],
    num_players: int,
    num_trials: int,
    seed: int | None = None,
) -> tuple[float, float, float]:
    """Return ``(win, tie, loss)`` probabilities for the hero."""
    return MathEngine().run_simulation(hole_cards, board_cards, num_players, num_trials, seed).as_tuple()
