"""Card token helpers for the adapters.

The core parser (:func:`core.cards.parse_card`) is strict: exactly two
characters, suit first.  Front-ends send looser input (``" h10 "``,
``"sk"``), so the HTTP server and the CLI pass tokens through
:func:`canonical_token` before handing them to the core.
"""

from __future__ import annotations

from typing import Any


def canonical_token(card: Any) -> str:
    """Strip, upper-case and rewrite ``10`` as ``T`` without validating.

    Invalid input stays invalid so the core can report what is wrong with it.
    """
    return str(card if card is not None else "").strip().upper().replace("10", "T")


def street_from_board(board_cards: list[str]) -> str:
    """Infer the current street from the number of community cards."""
    count = len(board_cards)
    if count >= 5:
        return "river"
    if count == 4:
        return "turn"
    if count >= 3:
        return "flop"
    return "preflop"
