"""Game models."""

from .card import Card, Color, Rank, Suit, create_standard_deck
from .deck import Deck, DeckType
from .game_state import COLUMN_HEADERS, STACK_HEADERS, STOCK_HEADER, GameState

__all__ = [
    "Card",
    "Color",
    "Rank",
    "Suit",
    "create_standard_deck",
    "Deck",
    "DeckType",
    "GameState",
    "STOCK_HEADER",
    "STACK_HEADERS",
    "COLUMN_HEADERS",
]
