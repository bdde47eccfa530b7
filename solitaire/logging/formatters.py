"""Formatters for session log output."""

from solitaire.models.card import RANK_NAMES, Card, Suit
from solitaire.models.deck import Deck
from solitaire.models.game_state import GameState

# Suit codes for log output
SUIT_CODES: dict[Suit, str] = {
    Suit.CLUBS: "C",
    Suit.SPADES: "S",
    Suit.DIAMONDS: "D",
    Suit.HEARTS: "H",
}

HIDDEN_CARD = "??"


def format_card(card: Card) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.

    Returns:
        Rank followed by suit code (e.g., "10H", "AS"), or "Jo" for a joker.
    """
    if card.is_joker:
        return "Jo"
    if card.rank is None:
        raise ValueError("Non-joker card must have a rank")
    return f"{RANK_NAMES[card.rank]}{SUIT_CODES[card.suit]}"


def format_deck(deck: Deck, reveal: bool = False) -> str:
    """Format a deck to comma-separated string, bottom card first.

    Args:
        deck: Deck to format.
        reveal: If False, face-down cards are written as "??".

    Returns:
        Comma-separated card codes. Empty string if the deck is empty.
    """
    codes = []
    for i, card in enumerate(deck):
        if i < deck.invisible_cards and not reveal:
            codes.append(HIDDEN_CARD)
        else:
            codes.append(format_card(card))
    return ",".join(codes)


def format_layout(state: GameState, reveal: bool = False) -> dict[str, str]:
    """Format every deck of a game state, keyed by header.

    The stock and waste are keyed "stock" and "waste".
    """
    layout = {"stock": format_deck(state.stock, reveal), "waste": format_deck(state.waste, reveal)}
    for header, deck in state.stack_piles.items():
        layout[header] = format_deck(deck, reveal)
    for header, deck in state.columns.items():
        layout[header] = format_deck(deck, reveal)
    return layout
