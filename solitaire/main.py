"""Command-line entry point: deal a session and check moves against it."""

import argparse
import logging
import random
import sys
from pathlib import Path

from solitaire.config import load_config
from solitaire.game.controller import GameStateController
from solitaire.game.validator import MoveValidator, tokenize
from solitaire.logging import SessionLogger
from solitaire.utils.logger import setup_logging

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    parser = argparse.ArgumentParser(
        description="Deal a Klondike solitaire game and check moves against it"
    )
    parser.add_argument(
        "moves",
        nargs="*",
        help='Moves to check, e.g. "M C2 SA"',
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
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--session-log",
        type=Path,
        help="Path of the JSONL session log (enables it)",
    )

    args = parser.parse_args(argv)

    # Load config
    config = load_config(args.config)

    # Apply command-line overrides
    if args.seed is not None:
        config.game.seed = args.seed
    if args.verbose:
        config.logging.level = "DEBUG"
    if args.session_log:
        config.session_log.enabled = True
        config.session_log.output_path = str(args.session_log)

    setup_logging(config.logging.level)

    controller = GameStateController(config.scoring, rng=random.Random(config.game.seed))
    validator = MoveValidator()

    try:
        with SessionLogger(config.session_log) as session_log:
            state = controller.init()
            session_log.log_session_start(state, config.game.seed)

            for raw in args.moves:
                result = validator.validate(tokenize(raw), state)
                if result.is_valid:
                    print(f"{raw}: OK")
                    session_log.log_move(raw, accepted=True)
                else:
                    print(f"{raw}: {result.error_message}")
                    session_log.log_move(
                        raw, accepted=False, reason=result.error_message.splitlines()[0]
                    )

            controller.end_session(state)
            session_log.log_session_end(state, controller.elapsed_seconds(state))

        print(f"Score: {state.time_score}")
        return 0

    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 1
    except Exception as e:
        logger.exception(f"Session error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
