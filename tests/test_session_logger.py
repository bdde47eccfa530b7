"""Tests for session logging and formatters."""

import json
import random
from datetime import datetime, timedelta

from solitaire.config import SessionLogConfig
from solitaire.game.controller import GameStateController
from solitaire.logging import SessionLogger, format_card, format_deck, format_layout
from solitaire.main import main
from solitaire.models import Card, Deck, DeckType, Rank, Suit

START = datetime(2024, 1, 1, 12, 0, 0)


class TestFormatters:
    """Tests for card and deck formatters."""

    def test_format_card(self):
        """Test compact card codes."""
        assert format_card(Card(suit=Suit.SPADES, rank=Rank.ACE)) == "AS"
        assert format_card(Card(suit=Suit.HEARTS, rank=Rank.TEN)) == "10H"
        assert format_card(Card(suit=Suit.JOKER)) == "Jo"

    def test_format_deck_hides_invisible(self):
        """Test that face-down cards are hidden unless revealed."""
        deck = Deck(
            DeckType.COLUMN,
            [Card(suit=Suit.CLUBS, rank=Rank.TWO), Card(suit=Suit.DIAMONDS, rank=Rank.KING)],
            invisible_cards=1,
        )
        assert format_deck(deck) == "??,KD"
        assert format_deck(deck, reveal=True) == "2C,KD"
        assert format_deck(Deck(DeckType.STACK)) == ""

    def test_format_layout(self):
        """Test that the layout covers every deck."""
        state = GameStateController(rng=random.Random(5)).init()
        layout = format_layout(state)
        assert set(layout) == {"stock", "waste", "SA", "SB", "SC", "SD", "A", "B", "C", "D", "E", "F", "G"}
        assert layout["SA"] == ""
        assert layout["G"].startswith("??,??,??,??,??,??,")


class TestSessionLogger:
    """Tests for SessionLogger."""

    def test_disabled_writes_nothing(self, tmp_path):
        """Test that a disabled logger creates no file."""
        path = tmp_path / "log.jsonl"
        state = GameStateController(rng=random.Random(5)).init()
        with SessionLogger(SessionLogConfig(enabled=False, output_path=str(path))) as log:
            log.log_session_start(state)
            log.log_move("M A0 B", accepted=True)
        assert not path.exists()

    def test_events(self, tmp_path):
        """Test the event sequence of a session."""
        path = tmp_path / "logs" / "log.jsonl"
        times = iter([START, START + timedelta(seconds=40)])
        controller = GameStateController(rng=random.Random(5), clock=lambda: next(times))

        with SessionLogger(SessionLogConfig(enabled=True, output_path=str(path))) as log:
            state = controller.init()
            log.log_session_start(state, seed=5)
            log.log_move("M A0 B", accepted=True)
            log.log_move("M B0 O", accepted=False, reason="You can't move cards to the stock")
            controller.end_session(state)
            log.log_session_end(state, controller.elapsed_seconds(state))

        events = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
        assert [e["type"] for e in events] == ["session_start", "move", "move", "session_end"]

        start = events[0]
        assert start["seed"] == 5
        assert start["timestamp"] == START.isoformat()
        assert "??" not in start["layout"]["G"]

        assert events[1] == {"type": "move", "command": "M A0 B", "accepted": True}
        assert events[2]["reason"] == "You can't move cards to the stock"
        assert events[3]["won"] is False
        assert events[3]["elapsed"] == 40
        assert events[3]["score"] == -8


class TestMain:
    """Tests for the command-line entry point."""

    def test_run(self, tmp_path, capsys):
        """Test dealing a seeded game and checking moves."""
        log_path = tmp_path / "session.jsonl"
        exit_code = main(["-s", "11", "--session-log", str(log_path), "M A0 O", "M X"])

        assert exit_code == 0
        out = capsys.readouterr().out
        assert "M A0 O: You can't move cards to the stock" in out
        assert "M X: A move needs 3 parts" in out
        assert "Score:" in out

        events = [json.loads(line) for line in log_path.read_text(encoding="utf-8").splitlines()]
        assert events[0]["seed"] == 11
        assert events[-1]["type"] == "session_end"
