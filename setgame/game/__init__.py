"""Game logic."""

from .analyzer import BoardAnalyzer, third_card_attributes
from .engine import GameEngine, MatchResolved, Outcome, SelectionCleared
from .validator import SetValidator, ValidationResult, is_valid_set

__all__ = [
    "BoardAnalyzer",
    "third_card_attributes",
    "GameEngine",
    "MatchResolved",
    "Outcome",
    "SelectionCleared",
    "SetValidator",
    "ValidationResult",
    "is_valid_set",
]
