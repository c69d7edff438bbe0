"""Game engine for the Set card game."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable
from uuid import UUID

from setgame.config import Config
from setgame.logging import GameLogger
from setgame.models.card import Card, create_full_deck
from setgame.models.game_state import GameState

from .validator import SET_SIZE, SetValidator, is_valid_set

logger = logging.getLogger(__name__)


class Outcome(str, Enum):
    """Result of a card selection."""

    INDETERMINATE = "indeterminate"  # Fewer than three selected
    MATCHED = "matched"  # Three selected cards formed a set
    NOT_A_SET = "not_a_set"  # Three selected cards did not form a set
    NOT_FOUND = "not_found"  # No selectable active card with that id

    @property
    def message(self) -> str:
        """Status line shown to the player."""
        if self is Outcome.MATCHED:
            return "Set was removed"
        if self is Outcome.NOT_A_SET:
            return "Not a set"
        return ""


@dataclass(frozen=True)
class MatchResolved:
    """Three selected cards formed a set."""

    card_ids: tuple[UUID, ...]


@dataclass(frozen=True)
class SelectionCleared:
    """Three selected cards did not form a set and were deselected."""

    card_ids: tuple[UUID, ...]


class GameEngine:
    """Deck, selection and match state machine.

    Every operation takes a GameState and returns a new one; the given state
    is never modified. The engine schedules nothing itself: presentation
    timing hangs off the match/mismatch callbacks.
    """

    def __init__(
        self,
        config: Config | None = None,
        game_logger: GameLogger | None = None,
        rng: random.Random | None = None,
    ):
        """Initialize game engine.

        Args:
            config: Configuration (uses defaults if not provided)
            game_logger: GameLogger instance for detailed logging
            rng: Random source (seeded from config if not provided)
        """
        self.config = config or Config()
        self.rules = self.config.game
        self.game_logger = game_logger
        self.rng = rng or random.Random(self.rules.seed)

        self.validator = SetValidator()

        self._on_match: Callable[[MatchResolved], None] | None = None
        self._on_mismatch: Callable[[SelectionCleared], None] | None = None

    def set_callbacks(
        self,
        on_match: Callable[[MatchResolved], None] | None = None,
        on_mismatch: Callable[[SelectionCleared], None] | None = None,
    ) -> None:
        """Set event callbacks.

        Args:
            on_match: Called when a selection resolves as a set
            on_mismatch: Called when a selection resolves as not a set
        """
        self._on_match = on_match
        self._on_mismatch = on_mismatch

    def new_game(self) -> GameState:
        """Start a new game.

        Returns:
            State with all 81 cards shuffled into the deck and an empty
            board. The opening deal is a separate call (deal_initial).
        """
        state = GameState(deck=create_full_deck(self.rng))
        logger.info(f"New game with {len(state.deck)} cards")

        if self.game_logger:
            self.game_logger.log_game_start(state, self.rules.seed)
        return state

    def deal_cards(self, state: GameState, n: int) -> GameState:
        """Move up to n cards from the front of the deck onto the board.

        Dealing past the end of the deck deals what remains; dealing from an
        empty deck changes nothing.

        Args:
            state: Current state
            n: Number of cards wanted

        Returns:
            New state

        Raises:
            ValueError: If n is negative
        """
        if n < 0:
            raise ValueError(f"Cannot deal a negative number of cards: {n}")
        if state.is_deck_empty() or n == 0:
            return state

        new_state = state.model_copy(deep=True)
        dealt = new_state.deck[:n]
        del new_state.deck[:n]
        if self.rules.deal_face_down:
            dealt = [c.with_flags(face_down=True) for c in dealt]
        new_state.active.extend(dealt)

        logger.debug(f"Dealt {len(dealt)} cards, {len(new_state.deck)} left in deck")
        if self.game_logger:
            self.game_logger.log_deal(dealt, len(new_state.deck))
        return new_state

    def deal_initial(self, state: GameState) -> GameState:
        """Deal the configured opening board."""
        return self.deal_cards(state, self.rules.initial_deal)

    def deal_more(self, state: GameState) -> GameState:
        """Deal the configured "deal more" batch."""
        return self.deal_cards(state, self.rules.deal_more)

    def select_card(self, state: GameState, card_id: UUID) -> tuple[GameState, Outcome]:
        """Toggle selection of an active card and resolve three selected.

        The tap that brings the selection to three resolves it at once, so a
        fourth card can never join a pending selection.

        Args:
            state: Current state
            card_id: Identity of the tapped card

        Returns:
            Tuple of (new state, outcome). On NOT_FOUND the given state is
            returned as is.
        """
        index = state.find_active(card_id)
        if index is None or not state.active[index].is_selectable:
            logger.debug(f"Card {card_id} is not selectable")
            return state, Outcome.NOT_FOUND

        tapped = state.active[index]
        new_state = state.model_copy(deep=True)
        new_state.active[index] = tapped.with_flags(selected=not tapped.selected)

        selected = new_state.selected_cards()
        if len(selected) < SET_SIZE:
            outcome = Outcome.INDETERMINATE
        else:
            new_state, outcome = self._resolve(new_state, selected)

        if self.game_logger:
            self.game_logger.log_select(tapped, outcome.value)
        return new_state, outcome

    def _resolve(
        self, state: GameState, selected: list[Card]
    ) -> tuple[GameState, Outcome]:
        """Evaluate three selected cards. Mutates the given (copied) state."""
        ids = tuple(c.id for c in selected)
        validation = self.validator.validate(selected)

        if self.game_logger:
            self.game_logger.log_resolution(selected, validation.is_valid)

        if validation.is_valid:
            logger.info(f"Set found: {', '.join(str(c) for c in selected)}")
            state = self.mark_matched(state, ids)
            if self.rules.remove_on_match:
                state = self.remove_matched(state)
            if self._on_match:
                self._on_match(MatchResolved(ids))
            return state, Outcome.MATCHED

        logger.info(f"Not a set ({validation.error_message})")
        state.active = [
            c.with_flags(selected=False) if c.id in ids else c
            for c in state.active
        ]
        if self._on_mismatch:
            self._on_mismatch(SelectionCleared(ids))
        return state, Outcome.NOT_A_SET

    def mark_matched(self, state: GameState, card_ids: Iterable[UUID]) -> GameState:
        """Flag active cards as matched without moving them.

        Args:
            state: Current state
            card_ids: Cards to flag (ids not on the board are ignored)

        Returns:
            New state
        """
        ids = set(card_ids)
        new_state = state.model_copy(deep=True)
        new_state.active = [
            c.with_flags(selected=False, matched=True) if c.id in ids else c
            for c in new_state.active
        ]
        return new_state

    def remove_matched(self, state: GameState) -> GameState:
        """Move every active card flagged matched to the matched pile.

        Args:
            state: Current state

        Returns:
            New state
        """
        if not any(c.matched for c in state.active):
            return state
        new_state = state.model_copy(deep=True)
        new_state.matched.extend(c for c in new_state.active if c.matched)
        new_state.active = [c for c in new_state.active if not c.matched]
        return new_state

    def flip_face_up(self, state: GameState) -> GameState:
        """Turn every face-down active card face up."""
        if not any(c.face_down for c in state.active):
            return state
        new_state = state.model_copy(deep=True)
        new_state.active = [c.with_flags(face_down=False) for c in new_state.active]
        return new_state

    def shuffle_active(self, state: GameState) -> GameState:
        """Shuffle the order of the cards on the board."""
        new_state = state.model_copy(deep=True)
        self.rng.shuffle(new_state.active)
        return new_state


__all__ = [
    "GameEngine",
    "MatchResolved",
    "Outcome",
    "SelectionCleared",
    "is_valid_set",
]
