"""Formatters for game log output."""

from typing import Sequence

from setgame.models.card import Card, Color, Shading

# Color codes for log output
COLOR_CODES: dict[Color, str] = {
    Color.RED: "R",
    Color.GREEN: "G",
    Color.BLUE: "B",
}

# Shading codes for log output
SHADING_CODES: dict[Shading, str] = {
    Shading.FILLED: "F",
    Shading.EMPTY: "E",
    Shading.STRIPED: "S",
}


def format_card(card: Card) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.

    Returns:
        Formatted string: count, symbol, color, shading
        (e.g., "2AGS" for two green striped A glyphs).
    """
    return (
        f"{int(card.count)}{card.symbol.value}"
        f"{COLOR_CODES[card.color]}{SHADING_CODES[card.shading]}"
    )


def format_cards(cards: Sequence[Card]) -> str:
    """Format cards to comma-separated string.

    Args:
        cards: Cards to format, in order.

    Returns:
        Comma-separated card strings (e.g., "1ARF,1BGF,1CBF").
        Empty string if no cards.
    """
    return ",".join(format_card(c) for c in cards)
