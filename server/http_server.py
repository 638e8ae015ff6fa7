"""JSON-over-HTTP adapter around the showdown core.

Routes::

    GET  /health          liveness check, independent of the core
    POST /api/evaluate    best hand of 2 hole + 5 board cards
    POST /api/compare     winner between two players sharing a board
    POST /api/montecarlo  win / tie / loss equity by random sampling

Request shapes are validated here; the core only ever sees well-formed
token lists.  Each ``handle_*`` function takes the decoded JSON payload
and returns the response body, raising :class:`RequestError` for anything
that should become a ``400``.
"""

from __future__ import annotations

import json
import logging
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Callable

from core.comparator import compare_hands
from core.errors import ShowdownError
from core.hand_evaluator import evaluate_hand
from core.math_engine import MathEngine
from utils.card_utils import canonical_token, street_from_board
from utils.config import ServerConfig, SimulationLimits
from utils.logger import ShowdownLogger

_log = ShowdownLogger("Server")
_access_log = logging.getLogger("showdown.server.access")


class RequestError(ValueError):
    """Client error reported back as ``400 {"error": ...}``."""


def _card_list(payload: dict[str, Any], key: str) -> list[str]:
    raw = payload.get(key)
    if raw is None:
        return []
    if not isinstance(raw, list) or not all(isinstance(item, str) for item in raw):
        raise RequestError(f"{key} must be a list of card strings")
    return [canonical_token(item) for item in raw]


def _int_field(payload: dict[str, Any], key: str, default: int | None = None) -> int:
    raw = payload.get(key, default)
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise RequestError(f"{key} must be an integer")
    return raw


def _evaluation_body(tokens: list[str]) -> dict[str, Any]:
    evaluation = evaluate_hand(tokens)
    return {
        "bestHand": evaluation.category_name,
        "handValue": evaluation.description,
        "cards": list(evaluation.best_cards),
    }


def handle_health(payload: dict[str, Any] | None = None) -> dict[str, Any]:
    return {"status": "healthy"}


def handle_evaluate(payload: dict[str, Any]) -> dict[str, Any]:
    hole = _card_list(payload, "holeCards")
    board = _card_list(payload, "boardCards")
    if len(hole) != 2 or len(board) != 5:
        raise RequestError("Must provide exactly 2 hole cards and 5 board cards")
    return _evaluation_body(hole + board)


def handle_compare(payload: dict[str, Any]) -> dict[str, Any]:
    player1 = _card_list(payload, "player1HoleCards")
    player2 = _card_list(payload, "player2HoleCards")
    community = _card_list(payload, "communityCards")

    if len(player1) != 2:
        raise RequestError("Player 1: Must provide exactly 2 hole cards")
    if len(player2) != 2:
        raise RequestError("Player 2: Must provide exactly 2 hole cards")
    if len(community) != 5:
        raise RequestError("Must provide exactly 5 community cards")

    cards1 = player1 + community
    cards2 = player2 + community
    return {
        "player1": _evaluation_body(cards1),
        "player2": _evaluation_body(cards2),
        "winner": compare_hands(cards1, cards2).value,
    }


def handle_montecarlo(
    payload: dict[str, Any],
    limits: SimulationLimits | None = None,
    engine: MathEngine | None = None,
) -> dict[str, Any]:
    limits = limits or SimulationLimits()
    hole = _card_list(payload, "holeCards")
    board = _card_list(payload, "boardCards")
    num_players = _int_field(payload, "numPlayers")
    num_simulations = _int_field(payload, "numSimulations", limits.default_trials)

    if len(hole) != 2:
        raise RequestError("Must provide exactly 2 hole cards")
    if len(board) > 5:
        raise RequestError("Board cards cannot exceed 5 cards")
    for problem in (limits.check_players(num_players), limits.check_trials(num_simulations)):
        if problem is not None:
            raise RequestError(problem)

    seed = payload.get("seed")
    if seed is not None:
        seed = _int_field(payload, "seed")

    result = (engine or MathEngine()).run_simulation(hole, board, num_players, num_simulations, seed=seed)
    return {
        "winProbability": result.win_rate,
        "tieProbability": result.tie_rate,
        "lossProbability": result.loss_rate,
        "simulations": result.simulations,
        "street": street_from_board(board),
    }


POST_ROUTES: dict[str, Callable[[dict[str, Any]], dict[str, Any]]] = {
    "/api/evaluate": handle_evaluate,
    "/api/compare": handle_compare,
    "/api/montecarlo": handle_montecarlo,
}


class ShowdownHandler(BaseHTTPRequestHandler):
    server_config: ServerConfig | None = None

    def _send_cors(self) -> None:
        config = self.server_config or ServerConfig()
        self.send_header("Access-Control-Allow-Origin", config.cors_origin)
        self.send_header("Access-Control-Allow-Methods", "POST, GET, OPTIONS")
        self.send_header("Access-Control-Allow-Headers", "Content-Type")

    def _send_json(self, code: int, payload: dict[str, Any]) -> None:
        body = json.dumps(payload).encode("utf-8")
        self.send_response(code)
        self._send_cors()
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: Any) -> None:  # noqa: A002
        _access_log.info("%s - %s", self.address_string(), format % args)

    def do_OPTIONS(self) -> None:  # noqa: N802
        self.send_response(200)
        self._send_cors()
        self.send_header("Content-Length", "0")
        self.end_headers()

    def do_GET(self) -> None:  # noqa: N802
        if self.path == "/health":
            self._send_json(200, handle_health())
            return
        self._send_json(404, {"error": "not_found"})

    def do_POST(self) -> None:  # noqa: N802
        route = POST_ROUTES.get(self.path)
        if route is None:
            self._send_json(404, {"error": "not_found"})
            return

        length = int(self.headers.get("Content-Length", "0") or 0)
        raw = self.rfile.read(length)

        try:
            payload = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as error:
            self._send_json(400, {"error": f"Invalid request: {error}"})
            return
        if not isinstance(payload, dict):
            self._send_json(400, {"error": "Invalid request: expected a JSON object"})
            return

        try:
            response = route(payload)
        except (RequestError, ShowdownError) as error:
            _log.warn(f"{self.path} rejected: {error}")
            self._send_json(400, {"error": str(error)})
            return
        self._send_json(200, response)


def make_server(config: ServerConfig | None = None) -> ThreadingHTTPServer:
    """Bind a server without starting it (``port=0`` picks a free port)."""
    config = config or ServerConfig()
    handler = type("ConfiguredShowdownHandler", (ShowdownHandler,), {"server_config": config})
    return ThreadingHTTPServer((config.host, config.port), handler)


def run_server(config: ServerConfig | None = None) -> None:
    server = make_server(config)
    host, port = server.server_address[:2]
    _log.highlight(f"Listening on http://{host}:{port}")
    _log.status("GET /health | POST /api/evaluate /api/compare /api/montecarlo")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        _log.info("Shutting down")
    finally:
        server.server_close()


if __name__ == "__main__":
    run_server()
