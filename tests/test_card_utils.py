"""Tests for utils.card_utils: adapter-side card token helpers."""

from __future__ import annotations

import pytest

from core.cards import parse_cards
from core.errors import InvalidRank
from utils.card_utils import canonical_token, street_from_board


# ── canonical_token ───────────────────────────────────────────────


class TestCanonicalToken:
    def test_upper_and_strip(self) -> None:
        assert canonical_token("  ha ") == "HA"

    def test_ten_alias(self) -> None:
        assert canonical_token("h10") == "HT"
        assert canonical_token("s10") == "ST"

    def test_invalid_passes_through(self) -> None:
        assert canonical_token("z1") == "Z1"
        assert canonical_token(None) == ""

    def test_core_still_rejects_bad_tokens(self) -> None:
        tokens = [canonical_token(raw) for raw in (" sk", "h10", "d1")]
        with pytest.raises(InvalidRank):
            parse_cards(tokens)

    def test_duplicates_are_kept(self) -> None:
        tokens = [canonical_token(raw) for raw in ("HA", "ha")]
        assert [str(card) for card in parse_cards(tokens)] == ["HA", "HA"]


# ── street_from_board ─────────────────────────────────────────────


class TestStreetFromBoard:
    def test_preflop(self) -> None:
        assert street_from_board([]) == "preflop"

    def test_flop(self) -> None:
        assert street_from_board(["HA", "C2", "DK"]) == "flop"

    def test_turn(self) -> None:
        assert street_from_board(["HA", "C2", "DK", "ST"]) == "turn"

    def test_river(self) -> None:
        assert street_from_board(["HA", "C2", "DK", "ST", "H7"]) == "river"
