"""Game models."""

from .card import (
    ATTRIBUTES,
    DECK_SIZE,
    Card,
    Color,
    Count,
    Shading,
    Symbol,
    create_full_deck,
)
from .game_state import GameState, InvariantViolation

__all__ = [
    "ATTRIBUTES",
    "DECK_SIZE",
    "Card",
    "Color",
    "Count",
    "Shading",
    "Symbol",
    "create_full_deck",
    "GameState",
    "InvariantViolation",
]
