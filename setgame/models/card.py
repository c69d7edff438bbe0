"""Card model and deck construction."""

import random
from enum import Enum, IntEnum
from itertools import product
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class Symbol(str, Enum):
    """Glyph drawn on the card (rhombus, rectangle, square in the app)."""

    A = "A"
    B = "B"
    C = "C"


class Color(str, Enum):
    """Color of the glyphs."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"


class Shading(str, Enum):
    """Fill style of the glyphs."""

    FILLED = "filled"
    EMPTY = "empty"
    STRIPED = "striped"


class Count(IntEnum):
    """Number of glyphs on the card."""

    ONE = 1
    TWO = 2
    THREE = 3


# Attribute names in canonical order
ATTRIBUTES = ("symbol", "color", "shading", "count")

DECK_SIZE = len(Symbol) * len(Color) * len(Shading) * len(Count)  # 81


class Card(BaseModel, frozen=True):
    """Single Set card.

    The four attributes never change. The presentation flags are part of the
    value too, so flipping one yields a new Card carrying the same id.
    """

    symbol: Symbol
    color: Color
    shading: Shading
    count: Count
    id: UUID = Field(default_factory=uuid4)

    # Presentation flags
    selected: bool = False
    matched: bool = False
    face_down: bool = False

    @property
    def attributes(self) -> tuple[Symbol, Color, Shading, Count]:
        """Get the attribute tuple (identity excluded)."""
        return (self.symbol, self.color, self.shading, self.count)

    @property
    def is_selectable(self) -> bool:
        """Check if a tap on this card can toggle its selection."""
        return not self.face_down and not self.matched

    def with_flags(
        self,
        selected: bool | None = None,
        matched: bool | None = None,
        face_down: bool | None = None,
    ) -> "Card":
        """Return a copy with the given flags replaced.

        Args:
            selected: New selected flag (unchanged if None)
            matched: New matched flag (unchanged if None)
            face_down: New face_down flag (unchanged if None)

        Returns:
            Card with the same id and attributes.
        """
        update = {}
        if selected is not None:
            update["selected"] = selected
        if matched is not None:
            update["matched"] = matched
        if face_down is not None:
            update["face_down"] = face_down
        return self.model_copy(update=update)

    def __str__(self) -> str:
        return (
            f"{int(self.count)} {self.color.value} "
            f"{self.shading.value} {self.symbol.value}"
        )

    def __repr__(self) -> str:
        flags = []
        if self.selected:
            flags.append("selected")
        if self.matched:
            flags.append("matched")
        if self.face_down:
            flags.append("face_down")
        flag_str = f" [{', '.join(flags)}]" if flags else ""
        return f"Card({self}{flag_str})"


def create_full_deck(rng: random.Random | None = None) -> list[Card]:
    """Create a shuffled 81-card deck, one card per attribute tuple.

    Args:
        rng: Random source for the shuffle (module random if None)

    Returns:
        List of cards in deal order.
    """
    deck = [
        Card(symbol=symbol, color=color, shading=shading, count=count)
        for symbol, color, shading, count in product(Symbol, Color, Shading, Count)
    ]
    (rng or random).shuffle(deck)
    return deck
