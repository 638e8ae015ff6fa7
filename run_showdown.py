"""Command line entry point for the showdown engine.

Subcommands::

    showdown serve    [--host HOST] [--port PORT]
    showdown evaluate HA SA DA HT S5 S2 C9
    showdown compare  --p1 SK CA --p2 HA SQ --board D6 S9 H4 S3 C2
    showdown simulate --hole HA HK [--board ...] [--players 6] [--trials 10000] [--seed 7]

Errors are reported on stderr and exit with status ``2``.
"""

from __future__ import annotations

import argparse
import sys

from core.comparator import Outcome, compare_hands
from core.errors import ShowdownError
from core.hand_evaluator import evaluate_hand
from core.math_engine import MathEngine
from server.http_server import run_server
from utils.card_utils import canonical_token, street_from_board
from utils.config import ServerConfig, SimulationLimits
from utils.logger import ShowdownLogger

_log = ShowdownLogger("CLI")

EXIT_USAGE = 2


def _tokens(raw: list[str] | None) -> list[str]:
    return [canonical_token(token) for token in raw or []]


def _cmd_serve(args: argparse.Namespace) -> int:
    config = ServerConfig()
    if args.host:
        config.host = args.host
    if args.port is not None:
        config.port = args.port
    run_server(config)
    return 0


def _cmd_evaluate(args: argparse.Namespace) -> int:
    evaluation = evaluate_hand(_tokens(args.cards))
    ShowdownLogger("Evaluator").highlight(f"{evaluation.category_name}: {evaluation.description}")
    print(" ".join(evaluation.best_cards))
    return 0


def _cmd_compare(args: argparse.Namespace) -> int:
    board = _tokens(args.board)
    cards1 = _tokens(args.p1) + board
    cards2 = _tokens(args.p2) + board

    logger = ShowdownLogger("Compare")
    for label, cards in (("Player 1", cards1), ("Player 2", cards2)):
        evaluation = evaluate_hand(cards)
        logger.info(f"{label}: {evaluation.description} ({' '.join(evaluation.best_cards)})")

    outcome = compare_hands(cards1, cards2)
    logger.highlight("Tie" if outcome is Outcome.TIE else f"{outcome.value} wins")
    return 0


def _cmd_simulate(args: argparse.Namespace) -> int:
    limits = SimulationLimits()
    trials = args.trials if args.trials is not None else limits.default_trials
    for problem in (limits.check_players(args.players), limits.check_trials(trials)):
        if problem is not None:
            _log.error(problem)
            return EXIT_USAGE

    board = _tokens(args.board)
    result = MathEngine().run_simulation(_tokens(args.hole), board, args.players, trials, seed=args.seed)

    logger = ShowdownLogger("Equity")
    logger.status(f"{result.simulations} trials, {args.players} players, {street_from_board(board)}")
    logger.highlight(
        f"win {result.win_rate:.2%}  tie {result.tie_rate:.2%}  loss {result.loss_rate:.2%}"
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="showdown",
        description="Texas Hold'em hand evaluator and Monte-Carlo equity calculator",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    serve = commands.add_parser("serve", help="Run the JSON HTTP API")
    serve.add_argument("--host", type=str, default="", help="Bind address (default: config)")
    serve.add_argument("--port", type=int, default=None, help="Bind port (default: config / $PORT)")
    serve.set_defaults(func=_cmd_serve)

    evaluate = commands.add_parser("evaluate", help="Best hand of 5 to 7 cards")
    evaluate.add_argument("cards", nargs="+", help="Card tokens, suit first (e.g. HA ST)")
    evaluate.set_defaults(func=_cmd_evaluate)

    compare = commands.add_parser("compare", help="Winner between two players")
    compare.add_argument("--p1", nargs=2, required=True, metavar="CARD", help="Player 1 hole cards")
    compare.add_argument("--p2", nargs=2, required=True, metavar="CARD", help="Player 2 hole cards")
    compare.add_argument("--board", nargs=5, required=True, metavar="CARD", help="Community cards")
    compare.set_defaults(func=_cmd_compare)

    simulate = commands.add_parser("simulate", help="Monte-Carlo win/tie/loss equity")
    simulate.add_argument("--hole", nargs=2, required=True, metavar="CARD", help="Hero hole cards")
    simulate.add_argument("--board", nargs="*", default=[], metavar="CARD", help="Known community cards")
    simulate.add_argument("--players", type=int, default=2, help="Players including the hero (default: 2)")
    simulate.add_argument("--trials", type=int, default=None, help="Random runouts (default: config)")
    simulate.add_argument("--seed", type=int, default=None, help="Seed for a reproducible run")
    simulate.set_defaults(func=_cmd_simulate)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except ShowdownError as error:
        _log.error(str(error))
        return EXIT_USAGE


if __name__ == "__main__":
    raise SystemExit(main())
