"""Tests for core.cards: card model and two-character notation."""

from __future__ import annotations

import pytest

from core.cards import DECK_SIZE, Card, Suit, parse_card, parse_cards
from core.errors import CardParseError, InvalidFormat, InvalidRank, InvalidSuit


# ── parse_card ────────────────────────────────────────────────────


class TestParseCard:
    @pytest.mark.parametrize("token", ["HA", "SK", "D7", "CT"])
    def test_valid_tokens(self, token: str) -> None:
        assert str(parse_card(token)) == token

    def test_fields(self) -> None:
        card = parse_card("HA")
        assert card.suit is Suit.HEARTS
        assert card.rank == "A"
        assert card.value == 14

    def test_ten_is_t(self) -> None:
        assert parse_card("CT").value == 10

    def test_case_insensitive(self) -> None:
        assert parse_card("sk") == parse_card("SK")
        assert parse_card("dT") == Card(Suit.DIAMONDS, "T")

    @pytest.mark.parametrize(
        ("token", "error"),
        [
            ("H1", InvalidRank),
            ("ZA", InvalidSuit),
            ("XX", InvalidSuit),
            ("", InvalidFormat),
            ("HAA", InvalidFormat),
            ("H", InvalidFormat),
            ("\u017fA", InvalidFormat),
            ("H\u00bd", InvalidFormat),
        ],
    )
    def test_invalid_tokens(self, token: str, error: type[CardParseError]) -> None:
        with pytest.raises(error) as excinfo:
            parse_card(token)
        assert excinfo.value.token == token

    def test_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            parse_card("H1")


# ── parse_cards ───────────────────────────────────────────────────


class TestParseCards:
    def test_preserves_order(self) -> None:
        assert [str(card) for card in parse_cards(["SK", "ca", "D6"])] == ["SK", "CA", "D6"]

    def test_empty(self) -> None:
        assert parse_cards([]) == []

    def test_first_bad_token_wins(self) -> None:
        with pytest.raises(InvalidSuit):
            parse_cards(["HA", "ZZ", "H1"])


# ── Card value semantics ──────────────────────────────────────────


class TestCard:
    def test_equality_and_hash(self) -> None:
        cards = {parse_card("ha"), parse_card("HA"), parse_card("DA")}
        assert len(cards) == 2

    def test_immutable(self) -> None:
        card = parse_card("HA")
        with pytest.raises(AttributeError):
            card.rank = "K"  # type: ignore[misc]

    def test_index_roundtrip_covers_deck(self) -> None:
        cards = [Card.from_index(i) for i in range(DECK_SIZE)]
        assert len(set(cards)) == 52
        assert [card.index for card in cards] == list(range(DECK_SIZE))

    def test_index_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            Card.from_index(52)
        with pytest.raises(ValueError):
            Card.from_index(-1)
