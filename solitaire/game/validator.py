"""Move validation pipeline for player commands."""

import logging
from dataclasses import dataclass
from typing import Sequence

from solitaire.exceptions import MoveError
from solitaire.models.deck import Deck
from solitaire.models.game_state import STOCK_HEADER, GameState

from .checks import card_level_checks, check_player_input, deck_level_checks

logger = logging.getLogger(__name__)


@dataclass
class MoveCommand:
    """A syntactically valid move command."""

    source: str  # Stock header, stack header or column header
    destination: str
    source_row: int | None = None  # Row index for a column source

    def __str__(self) -> str:
        row = "" if self.source_row is None else str(self.source_row)
        return f"M {self.source}{row} {self.destination}"


@dataclass
class ValidationResult:
    """Result of move validation."""

    is_valid: bool
    error_message: str = ""
    command: MoveCommand | None = None


def tokenize(raw: str) -> list[str]:
    """Split raw player input on whitespace and uppercase it."""
    return raw.upper().split()


def parse_move(tokens: Sequence[str]) -> MoveCommand:
    """Check move syntax and split the locations into header and row.

    Raises:
        MoveError: On syntax error
    """
    check_player_input(tokens)
    _, source, destination = tokens

    header = source.rstrip("0123456789")
    row = source[len(header):]
    return MoveCommand(
        source=header,
        destination=destination,
        source_row=int(row) if row else None,
    )


class MoveValidator:
    """Validates player move commands against a game state."""

    def resolve(
        self,
        command: MoveCommand,
        state: GameState,
    ) -> tuple[Deck, int, Deck]:
        """Resolve a command to concrete decks and a source card index.

        The stock header as a source refers to the top card of the waste;
        as a destination it refers to the stock itself.

        Args:
            command: Parsed move command
            state: Current game state

        Returns:
            (source deck, source card index, destination deck)

        Raises:
            MoveError: If the column coordinate points past the last card
        """
        if command.source == STOCK_HEADER:
            source_deck = state.waste
        else:
            source_deck = state.get_deck(command.source)

        if command.source_row is None:
            source_index = max(source_deck.size() - 1, 0)
        else:
            source_index = command.source_row
            if source_index >= source_deck.size() and not source_deck.is_empty():
                raise MoveError("There is no card at that position")

        destination_deck = state.get_deck(command.destination)
        return source_deck, source_index, destination_deck

    def validate(self, tokens: Sequence[str], state: GameState) -> ValidationResult:
        """Validate a tokenized move command.

        Runs the syntax, deck-level and card-level checks in order and
        stops at the first failure.

        Args:
            tokens: Player input split on whitespace, uppercased
            state: Current game state

        Returns:
            ValidationResult
        """
        command = None
        try:
            command = parse_move(tokens)
            source_deck, source_index, destination_deck = self.resolve(command, state)
            deck_level_checks(source_deck, source_index, destination_deck)
            card_level_checks(destination_deck, source_deck[source_index])
        except MoveError as e:
            logger.debug(f"Move {' '.join(tokens)!r} rejected: {e.message.splitlines()[0]}")
            return ValidationResult(is_valid=False, error_message=e.message, command=command)

        return ValidationResult(is_valid=True, command=command)
