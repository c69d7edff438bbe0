"""Game state models."""

from uuid import UUID

from pydantic import BaseModel, Field

from .card import DECK_SIZE, Card


class InvariantViolation(ValueError):
    """Raised when the three card piles no longer partition the deck."""


class GameState(BaseModel):
    """Cards of one game, split into three disjoint ordered piles."""

    deck: list[Card] = Field(default_factory=list)  # Undealt, in deal order
    active: list[Card] = Field(default_factory=list)  # Dealt and visible
    matched: list[Card] = Field(default_factory=list)  # Removed as sets

    def find_active(self, card_id: UUID) -> int | None:
        """Get the index of an active card.

        Args:
            card_id: Identity of the card

        Returns:
            Index into `active`, or None if the card is not active.
        """
        for i, card in enumerate(self.active):
            if card.id == card_id:
                return i
        return None

    def selected_cards(self) -> list[Card]:
        """Get the selected active cards, in board order."""
        return [c for c in self.active if c.selected]

    def is_deck_empty(self) -> bool:
        """Check if no cards remain to be dealt."""
        return len(self.deck) == 0

    def total_cards(self) -> int:
        """Get number of cards across all piles."""
        return len(self.deck) + len(self.active) + len(self.matched)

    def all_ids(self) -> list[UUID]:
        """Get ids of every card in deck, active and matched order."""
        return [c.id for c in (*self.deck, *self.active, *self.matched)]

    def check_invariants(self) -> None:
        """Verify the piles partition a full deck.

        Raises:
            InvariantViolation: If a card is duplicated or missing.
        """
        total = self.total_cards()
        if total != DECK_SIZE:
            raise InvariantViolation(f"Expected {DECK_SIZE} cards, found {total}")

        ids = self.all_ids()
        if len(set(ids)) != len(ids):
            raise InvariantViolation("Card appears in more than one pile")

        tuples = {c.attributes for c in (*self.deck, *self.active, *self.matched)}
        if len(tuples) != DECK_SIZE:
            raise InvariantViolation("Attribute tuples are not unique")

    def __str__(self) -> str:
        return (
            f"Deck: {len(self.deck)}, Active: {len(self.active)}, "
            f"Matched: {len(self.matched)}"
        )
