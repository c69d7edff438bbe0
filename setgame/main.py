"""Main entry point: plays Set games automatically."""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from setgame.config import GameLogConfig, load_config
from setgame.game.analyzer import BoardAnalyzer
from setgame.game.engine import GameEngine, Outcome
from setgame.logging import GameLogger
from setgame.models.game_state import GameState
from setgame.utils.logger import GameDisplay, setup_logging

logger = logging.getLogger(__name__)


def generate_log_filename(log_dir: str) -> str:
    """Generate log filename with timestamp.

    Args:
        log_dir: Directory for log files.

    Returns:
        Full path to log file.
    """
    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    return str(Path(log_dir) / f"{timestamp}_setgame.jsonl")


def play_game(
    engine: GameEngine,
    analyzer: BoardAnalyzer,
    display: GameDisplay,
) -> GameState:
    """Play one game to the end.

    Picks the first set on the board; deals more when there is none. The game
    ends when the deck is empty and the board holds no set.

    Args:
        engine: Engine to play with
        analyzer: Set finder
        display: Output

    Returns:
        Final game state
    """
    state = engine.new_game()
    state = engine.flip_face_up(engine.deal_initial(state))
    display.print_board(state)

    while True:
        found = analyzer.find_first_set(state.active)
        if found is None:
            if state.is_deck_empty():
                break
            before = len(state.deck)
            state = engine.flip_face_up(engine.deal_more(state))
            display.print_deal(before - len(state.deck), len(state.deck))
            display.print_board(state)
            continue

        outcome = Outcome.INDETERMINATE
        for card in found:
            state, outcome = engine.select_card(state, card.id)
        if outcome is not Outcome.MATCHED:
            raise RuntimeError(f"Expected a set, got {outcome.value}")
        state = engine.remove_matched(state)
        display.print_outcome(list(found), outcome)

        # Refill the board back up to the initial deal size
        missing = engine.rules.initial_deal - len(state.active)
        if missing > 0:
            state = engine.flip_face_up(engine.deal_cards(state, missing))
        display.print_board(state)

    state.check_invariants()
    return state


def main() -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    parser = argparse.ArgumentParser(
        description="Set card game autoplay driver"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        help="Shuffle seed (overrides config)",
    )
    parser.add_argument(
        "-n",
        "--games",
        type=int,
        default=1,
        help="Number of games to play",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--show-cards",
        action="store_true",
        help="List the board after each change",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Directory for game log files (filename auto-generated)",
    )

    args = parser.parse_args()

    # Load config
    config = load_config(args.config)

    # Apply command-line overrides
    if args.seed is not None:
        config.game.seed = args.seed
    if args.verbose:
        config.logging.level = "DEBUG"
    if args.show_cards:
        config.logging.show_cards = True

    # Determine game log directory (CLI argument overrides config file)
    if args.game_log:
        game_log_config = GameLogConfig(
            enabled=True, output_path=generate_log_filename(str(args.game_log))
        )
    else:
        game_log_config = config.game_log

    setup_logging(config.logging.level)
    display = GameDisplay(show_cards=config.logging.show_cards)

    if game_log_config.enabled:
        print(f"Game log: {game_log_config.output_path}")

    try:
        with GameLogger(game_log_config) as game_logger:
            engine = GameEngine(config, game_logger)
            analyzer = BoardAnalyzer()

            sets_per_game: list[int] = []
            for game_num in range(1, args.games + 1):
                display.print_game_start(game_num, args.games)
                state = play_game(engine, analyzer, display)
                game_logger.log_game_end(state)
                display.print_game_end(game_num, state)
                sets_per_game.append(len(state.matched) // 3)

            display.print_final_results(sets_per_game)
        return 0

    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 1
    except Exception as e:
        logger.exception(f"Game error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
