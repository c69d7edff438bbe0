"""Tests for the set rule."""

from itertools import permutations

import pytest

from setgame.game.validator import SetValidator, is_valid_set
from setgame.models.card import Card, Color, Count, Shading, Symbol


def make_card(symbol, color, shading, count):
    return Card(symbol=symbol, color=color, shading=shading, count=count)


@pytest.fixture
def valid_set():
    return [
        make_card(Symbol.A, Color.RED, Shading.FILLED, Count.ONE),
        make_card(Symbol.B, Color.GREEN, Shading.FILLED, Count.ONE),
        make_card(Symbol.C, Color.BLUE, Shading.FILLED, Count.ONE),
    ]


@pytest.fixture
def invalid_set():
    return [
        make_card(Symbol.A, Color.RED, Shading.FILLED, Count.ONE),
        make_card(Symbol.B, Color.RED, Shading.FILLED, Count.ONE),
        make_card(Symbol.C, Color.GREEN, Shading.FILLED, Count.ONE),
    ]


class TestIsValidSet:
    """Tests for is_valid_set."""

    def test_mixed_same_and_distinct(self, valid_set):
        """Test distinct symbol/color with same shading/count is a set."""
        assert is_valid_set(valid_set)

    def test_two_same_one_different(self, invalid_set):
        """Test two red and one green is not a set."""
        assert not is_valid_set(invalid_set)

    def test_all_different(self):
        """Test all four attributes distinct is a set."""
        cards = [
            make_card(Symbol.A, Color.RED, Shading.FILLED, Count.ONE),
            make_card(Symbol.B, Color.GREEN, Shading.EMPTY, Count.TWO),
            make_card(Symbol.C, Color.BLUE, Shading.STRIPED, Count.THREE),
        ]
        assert is_valid_set(cards)

    def test_identical_copies(self):
        """Test three copies of one attribute tuple are a set."""
        cards = [make_card(Symbol.B, Color.BLUE, Shading.EMPTY, Count.TWO) for _ in range(3)]
        assert is_valid_set(cards)

    def test_count_attribute_checked(self):
        """Test the count attribute alone can break a set."""
        cards = [
            make_card(Symbol.A, Color.RED, Shading.FILLED, Count.ONE),
            make_card(Symbol.A, Color.RED, Shading.FILLED, Count.ONE),
            make_card(Symbol.A, Color.RED, Shading.FILLED, Count.TWO),
        ]
        assert not is_valid_set(cards)

    def test_permutation_symmetry(self, valid_set, invalid_set):
        """Test the verdict does not depend on card order."""
        for perm in permutations(valid_set):
            assert is_valid_set(list(perm))
        for perm in permutations(invalid_set):
            assert not is_valid_set(list(perm))

    def test_wrong_card_count(self, valid_set):
        """Test anything but three cards is never a set."""
        assert not is_valid_set([])
        assert not is_valid_set(valid_set[:2])
        assert not is_valid_set(valid_set + valid_set[:1])


class TestSetValidator:
    """Tests for SetValidator class."""

    def test_valid(self, valid_set):
        """Test a valid set has no error."""
        result = SetValidator().validate(valid_set)
        assert result.is_valid
        assert result.error_message == ""
        assert result.failed_attribute is None

    def test_reports_failing_attribute(self, invalid_set):
        """Test the failing attribute is named."""
        result = SetValidator().validate(invalid_set)
        assert not result.is_valid
        assert result.failed_attribute == "color"
        assert "two same" in result.error_message

    def test_reports_card_count(self, valid_set):
        """Test a short selection is rejected with a count message."""
        result = SetValidator().validate(valid_set[:2])
        assert not result.is_valid
        assert "exactly 3" in result.error_message
