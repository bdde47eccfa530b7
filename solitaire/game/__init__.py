"""Game logic."""

from .checks import (
    card_level_checks,
    check_column_move,
    check_player_input,
    check_stack_move,
    deck_level_checks,
    opposing_color,
    red_suit,
)
from .controller import GameStateController
from .validator import MoveCommand, MoveValidator, ValidationResult, parse_move, tokenize

__all__ = [
    "card_level_checks",
    "check_column_move",
    "check_player_input",
    "check_stack_move",
    "deck_level_checks",
    "opposing_color",
    "red_suit",
    "GameStateController",
    "MoveCommand",
    "MoveValidator",
    "ValidationResult",
    "parse_move",
    "tokenize",
]
