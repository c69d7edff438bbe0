"""Board analysis: locating sets among dealt cards."""

from itertools import combinations
from typing import Sequence

from setgame.models.card import ATTRIBUTES, Card, Color, Count, Shading, Symbol

from .validator import SET_SIZE, is_valid_set

_DOMAINS = {
    "symbol": Symbol,
    "color": Color,
    "shading": Shading,
    "count": Count,
}


def third_card_attributes(
    first: Card, second: Card
) -> tuple[Symbol, Color, Shading, Count]:
    """Get the attribute tuple completing a set with two cards.

    Per attribute: the shared value if both agree, otherwise the one value
    neither card has.

    Args:
        first: First card
        second: Second card

    Returns:
        Attribute tuple (symbol, color, shading, count) of the third card.
    """
    values = []
    for attr in ATTRIBUTES:
        a = getattr(first, attr)
        b = getattr(second, attr)
        if a == b:
            values.append(a)
        else:
            (missing,) = set(_DOMAINS[attr]) - {a, b}
            values.append(missing)
    return tuple(values)  # type: ignore[return-value]


class BoardAnalyzer:
    """Finds sets among a group of cards.

    Queries only: nothing here changes game state.
    """

    def find_sets(self, cards: Sequence[Card]) -> list[tuple[Card, Card, Card]]:
        """Find every set among the cards.

        Args:
            cards: Cards to search, usually the active board

        Returns:
            List of sets, each in board order.
        """
        return [
            combo
            for combo in combinations(cards, SET_SIZE)
            if is_valid_set(combo)
        ]

    def find_first_set(self, cards: Sequence[Card]) -> tuple[Card, Card, Card] | None:
        """Find one set, using the third-card lookup.

        Args:
            cards: Cards to search

        Returns:
            First set found in board order, or None.
        """
        by_attributes = {c.attributes: i for i, c in enumerate(cards)}
        for i, j in combinations(range(len(cards)), 2):
            k = by_attributes.get(third_card_attributes(cards[i], cards[j]))
            if k is not None and k > j:
                return (cards[i], cards[j], cards[k])
        return None

    def has_set(self, cards: Sequence[Card]) -> bool:
        """Check if at least one set exists among the cards."""
        return self.find_first_set(cards) is not None
