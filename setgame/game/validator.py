"""Set rule validation."""

from dataclasses import dataclass
from typing import Sequence

from setgame.models.card import ATTRIBUTES, Card

SET_SIZE = 3


@dataclass
class ValidationResult:
    """Result of checking three cards against the set rule."""

    is_valid: bool
    error_message: str = ""
    failed_attribute: str | None = None


def is_valid_set(cards: Sequence[Card]) -> bool:
    """Check whether cards form a set.

    For each attribute the three values must be all the same or all
    different. Exactly two matching and one differing breaks the set.

    Args:
        cards: Cards to check (anything but three is never a set)

    Returns:
        True if the cards form a set.
    """
    if len(cards) != SET_SIZE:
        return False
    return all(
        len({getattr(c, attr) for c in cards}) in (1, SET_SIZE)
        for attr in ATTRIBUTES
    )


class SetValidator:
    """Validates selections and explains why they fail."""

    def validate(self, cards: Sequence[Card]) -> ValidationResult:
        """Validate a selection.

        Args:
            cards: Selected cards

        Returns:
            ValidationResult naming the first failing attribute, if any
        """
        if len(cards) != SET_SIZE:
            return ValidationResult(
                is_valid=False,
                error_message=f"A set needs exactly {SET_SIZE} cards, got {len(cards)}",
            )

        for attr in ATTRIBUTES:
            if len({getattr(c, attr) for c in cards}) == 2:
                return ValidationResult(
                    is_valid=False,
                    error_message=f"{attr}: two same, one different",
                    failed_attribute=attr,
                )

        return ValidationResult(is_valid=True)
