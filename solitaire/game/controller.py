"""Game state initialization, scoring and win detection."""

from __future__ import annotations

import logging
import random
from datetime import datetime
from typing import Callable

from solitaire.config import ScoringConfig
from solitaire.models.card import create_standard_deck
from solitaire.models.deck import Deck, DeckType
from solitaire.models.game_state import COLUMN_HEADERS, STACK_HEADERS, GameState

logger = logging.getLogger(__name__)


class GameStateController:
    """Builds a new session and applies time scoring and win detection.

    One controller belongs to one session. The random source and the clock
    can be injected so deals and scores are reproducible.
    """

    def __init__(
        self,
        config: ScoringConfig | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        """Initialize controller.

        Args:
            config: Scoring configuration (uses defaults if not provided)
            rng: Random source used for shuffling
            clock: Returns the current time
        """
        self.config = config or ScoringConfig()
        self.rng = rng or random.Random()
        self.clock = clock or datetime.now

    def init(self) -> GameState:
        """Create a new GameState populated with a shuffled deal.

        Stack piles start empty. Column i receives i + 1 cards with the first
        i face down. The next card goes to the stock and the rest to the waste.

        Returns:
            A new GameState, ready to play
        """
        cards = create_standard_deck()
        self.rng.shuffle(cards)

        state = GameState()
        for header in STACK_HEADERS:
            state.stack_piles[header] = Deck(DeckType.STACK)

        for i, header in enumerate(COLUMN_HEADERS):
            dealt, cards = cards[: i + 1], cards[i + 1 :]
            state.columns[header] = Deck(DeckType.COLUMN, dealt, invisible_cards=i)

        state.stock.add(cards.pop(0))
        state.waste.extend(cards)
        state.start_time = self.clock()

        logger.info(
            f"New game dealt: {len(state.columns)} columns, "
            f"stock={state.stock.size()}, waste={state.waste.size()}"
        )
        return state

    def elapsed_seconds(self, state: GameState) -> int:
        """Get the whole seconds between start and end of the session.

        Raises:
            ValueError: If the start or end time is not set
        """
        if state.start_time is None or state.end_time is None:
            raise ValueError("Session start and end time must both be set")
        return int((state.end_time - state.start_time).total_seconds())

    def apply_time_penalty(self, state: GameState) -> None:
        """Subtract penalty points for every full interval of play time.

        Assumes end_time has been set.
        """
        seconds = self.elapsed_seconds(state)
        penalty = seconds // self.config.penalty_interval * self.config.penalty_points
        state.time_score -= penalty
        logger.debug(f"Time penalty {penalty} after {seconds}s, score={state.time_score}")

    def apply_bonus_score(self, state: GameState) -> None:
        """Set the score to the time bonus of a won game.

        The bonus replaces the current score rather than adding to it.
        Games not longer than the threshold get no bonus.
        Assumes the game is won and end_time has been set.
        """
        seconds = self.elapsed_seconds(state)
        bonus = 0
        if seconds > self.config.bonus_threshold:
            bonus = self.config.bonus_numerator // seconds
        state.time_score = bonus
        logger.debug(f"Time bonus {bonus} after {seconds}s")

    def detect_game_win(self, state: GameState) -> None:
        """Set game_won when no column has face-down cards and the stock is empty."""
        if state.game_won:
            return
        hidden = any(d.invisible_cards > 0 for d in state.columns.values())
        if not hidden and state.stock.is_empty():
            state.game_won = True
            logger.info("Game won")

    def end_session(self, state: GameState) -> None:
        """Close the session and settle the score.

        Records the end time (if not already set), checks for a win, then
        applies the bonus to a won game or the time penalty otherwise.
        """
        if state.end_time is None:
            state.end_time = self.clock()

        self.detect_game_win(state)
        if state.game_won:
            self.apply_bonus_score(state)
        else:
            self.apply_time_penalty(state)

        logger.info(
            f"Session ended after {self.elapsed_seconds(state)}s: "
            f"{'won' if state.game_won else 'not won'}, score={state.time_score}"
        )
