"""Session logger for solitaire game events."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

from solitaire.config import SessionLogConfig
from solitaire.models.game_state import GameState

from .formatters import format_layout


class SessionLogger:
    """Logger for session events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    """

    def __init__(self, config: SessionLogConfig | None = None):
        """Initialize session logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or SessionLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> "SessionLogger":
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

    def log_session_start(self, state: GameState, seed: int | None = None) -> None:
        """Log session start with the full deal.

        Args:
            state: Freshly dealt game state.
            seed: Shuffle seed, if the deal was seeded.
        """
        self._write({
            "type": "session_start",
            "timestamp": (state.start_time or datetime.now()).isoformat(),
            "seed": seed,
            "layout": format_layout(state, reveal=True),
        })

    def log_move(self, command: str, accepted: bool, reason: str = "") -> None:
        """Log a validated move.

        Args:
            command: Move command as entered.
            accepted: Whether the move passed all checks.
            reason: First line of the rejection message.
        """
        event: dict[str, Any] = {
            "type": "move",
            "command": command,
            "accepted": accepted,
        }
        if not accepted:
            event["reason"] = reason
        self._write(event)

    def log_session_end(self, state: GameState, elapsed: int) -> None:
        """Log session end with result and score.

        Args:
            state: Final game state.
            elapsed: Session length in whole seconds.
        """
        self._write({
            "type": "session_end",
            "timestamp": (state.end_time or datetime.now()).isoformat(),
            "won": state.game_won,
            "elapsed": elapsed,
            "score": state.time_score,
        })
