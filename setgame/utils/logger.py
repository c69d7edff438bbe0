"""Logging utilities and game state display."""

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from setgame.game.engine import Outcome
    from setgame.models.card import Card
    from setgame.models.game_state import GameState


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


class GameDisplay:
    """Display game progress to stdout."""

    def __init__(self, show_cards: bool = False):
        """Initialize display.

        Args:
            show_cards: Whether to list the board after each change
        """
        self.show_cards = show_cards

    def print_separator(self) -> None:
        """Print a separator line."""
        print("=" * 60)

    def print_game_start(self, game_number: int, num_games: int) -> None:
        """Print game start message."""
        self.print_separator()
        print(f"GAME {game_number}/{num_games}")
        self.print_separator()

    def print_board(self, state: "GameState") -> None:
        """Print the active cards (if show_cards is enabled)."""
        if not self.show_cards:
            return

        print(f"\n{state}")
        for i, card in enumerate(state.active):
            print(f"  {i:2d}: {card}")

    def print_outcome(self, cards: list["Card"], outcome: "Outcome") -> None:
        """Print the result of a resolved selection."""
        names = ", ".join(str(c) for c in cards)
        print(f"  -> {outcome.message}: {names}")

    def print_deal(self, count: int, remaining: int) -> None:
        """Print a deal-more message."""
        print(f"  -> No set on board, dealt {count} ({remaining} left in deck)")

    def print_game_end(self, game_number: int, state: "GameState") -> None:
        """Print game end results."""
        sets_found = len(state.matched) // 3
        print(f"\nGame {game_number} finished!")
        print(f"  Sets found: {sets_found}")
        print(f"  Cards left on board: {len(state.active)}")

    def print_final_results(self, sets_per_game: list[int]) -> None:
        """Print totals across all games."""
        self.print_separator()
        print("FINAL RESULTS")
        self.print_separator()

        total = sum(sets_per_game)
        print(f"  Games: {len(sets_per_game)}")
        print(f"  Sets found: {total}")
        if sets_per_game:
            print(f"  Average per game: {total / len(sets_per_game):.2f}")
