"""Tests for board analyzer."""

import random

import pytest

from setgame.game.analyzer import BoardAnalyzer, third_card_attributes
from setgame.game.validator import is_valid_set
from setgame.models.card import Card, Color, Count, Shading, Symbol, create_full_deck


@pytest.fixture
def analyzer():
    return BoardAnalyzer()


def make_card(symbol, color, shading, count):
    return Card(symbol=symbol, color=color, shading=shading, count=count)


class TestThirdCard:
    """Tests for third_card_attributes."""

    def test_completes_set(self):
        """Test the computed third card forms a set."""
        a = make_card(Symbol.A, Color.RED, Shading.FILLED, Count.ONE)
        b = make_card(Symbol.B, Color.RED, Shading.EMPTY, Count.THREE)

        attrs = third_card_attributes(a, b)

        assert attrs == (Symbol.C, Color.RED, Shading.STRIPED, Count.TWO)
        assert is_valid_set([a, b, make_card(*attrs)])

    def test_every_pair_in_deck(self):
        """Test each pair has exactly one completing card in the full deck."""
        deck = create_full_deck()
        by_attributes = {c.attributes for c in deck}
        for i in range(0, len(deck), 9):
            for j in range(i + 1, len(deck), 7):
                assert third_card_attributes(deck[i], deck[j]) in by_attributes


class TestBoardAnalyzer:
    """Tests for BoardAnalyzer class."""

    def test_no_set(self, analyzer):
        """Test a board without a set."""
        cards = [
            make_card(Symbol.A, Color.RED, Shading.FILLED, Count.ONE),
            make_card(Symbol.A, Color.RED, Shading.FILLED, Count.TWO),
            make_card(Symbol.A, Color.GREEN, Shading.FILLED, Count.ONE),
            make_card(Symbol.A, Color.GREEN, Shading.FILLED, Count.TWO),
        ]
        assert analyzer.find_sets(cards) == []
        assert analyzer.find_first_set(cards) is None
        assert not analyzer.has_set(cards)

    def test_finds_set(self, analyzer):
        """Test a set hidden among other cards is found."""
        extra = make_card(Symbol.A, Color.GREEN, Shading.EMPTY, Count.TWO)
        a = make_card(Symbol.A, Color.RED, Shading.FILLED, Count.ONE)
        b = make_card(Symbol.B, Color.GREEN, Shading.FILLED, Count.ONE)
        c = make_card(Symbol.C, Color.BLUE, Shading.FILLED, Count.ONE)
        cards = [a, extra, b, c]

        assert analyzer.find_sets(cards) == [(a, b, c)]
        assert analyzer.find_first_set(cards) == (a, b, c)
        assert analyzer.has_set(cards)

    def test_find_first_matches_find_sets(self, analyzer):
        """Test both finders agree on random boards."""
        rng = random.Random(3)
        for _ in range(20):
            board = create_full_deck(rng)[:12]
            sets = analyzer.find_sets(board)
            first = analyzer.find_first_set(board)
            if sets:
                assert first == sets[0]
            else:
                assert first is None

    def test_full_deck_set_count(self, analyzer):
        """Test the full deck holds 1080 sets."""
        assert len(analyzer.find_sets(create_full_deck())) == 1080
