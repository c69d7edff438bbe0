"""Game logger for detailed game replay."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Sequence, TextIO

from setgame.config import GameLogConfig
from setgame.models.card import Card
from setgame.models.game_state import GameState

from .formatters import format_cards


class GameLogger:
    """Logger for game events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    This allows step-by-step replay of a game.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize game logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> "GameLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_game_start(self, state: GameState, seed: int | None = None) -> None:
        """Log game start with the shuffled deck order.

        Args:
            state: Freshly created game state.
            seed: Seed used for the shuffle, if any.
        """
        self._write({
            "type": "game_start",
            "timestamp": datetime.now().isoformat(),
            "seed": seed,
            "deck": format_cards(state.deck),
        })

    def log_deal(self, cards: Sequence[Card], remaining: int) -> None:
        """Log cards moved from the deck to the board.

        Args:
            cards: Cards dealt, in deal order.
            remaining: Cards left in the deck afterwards.
        """
        self._write({
            "type": "deal",
            "cards": format_cards(cards),
            "remaining": remaining,
        })

    def log_select(self, card: Card, outcome: str) -> None:
        """Log a card tap and its outcome.

        Args:
            card: Card as it was before the tap.
            outcome: Outcome value of the selection.
        """
        self._write({
            "type": "select",
            "card": format_cards([card]),
            "outcome": outcome,
        })

    def log_resolution(self, cards: Sequence[Card], matched: bool) -> None:
        """Log a three-card evaluation.

        Args:
            cards: The three selected cards.
            matched: Whether they formed a set.
        """
        self._write({
            "type": "match" if matched else "mismatch",
            "cards": format_cards(cards),
        })

    def log_game_end(self, state: GameState) -> None:
        """Log final pile sizes.

        Args:
            state: Final game state.
        """
        self._write({
            "type": "game_end",
            "deck": len(state.deck),
            "active": len(state.active),
            "matched": len(state.matched),
        })
