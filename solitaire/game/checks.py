"""Card move legality checks.

All checks are stateless and never mutate the decks they inspect. A failed
check raises MoveError with a message meant to be shown to the player;
checks are evaluated in a fixed order and the first violation is reported.
"""

import re
from typing import Callable, Sequence

from solitaire.exceptions import InvalidOperationError, MoveError
from solitaire.models.card import Card, Rank, Suit
from solitaire.models.deck import Deck, DeckType
from solitaire.models.game_state import COLUMN_HEADERS, STACK_HEADERS, STOCK_HEADER

from .help import HELP_TEXT, MOVE_COMMAND

_STOCK = re.escape(STOCK_HEADER)
_STACKS = "|".join(STACK_HEADERS)
_COLUMNS = "[" + "".join(COLUMN_HEADERS) + "]"

SOURCE_PATTERN = re.compile(rf"^(?:{_STOCK}|{_STACKS}|{_COLUMNS}\d{{1,2}})$")
DESTINATION_PATTERN = re.compile(rf"^(?:{_STOCK}|{_STACKS}|{_COLUMNS})$")


def _syntax_error(reason: str) -> MoveError:
    return MoveError(f"{reason}\n{HELP_TEXT}")


def check_player_input(tokens: Sequence[str]) -> None:
    """Verify that tokenized player input is a syntactically legal move.

    Legal input has three parts: the move command, a source location (stock
    header, stack header or column coordinate) and a destination location
    (stock header, stack header or column header; the row is irrelevant
    because cards are always added at the end of a column).

    Args:
        tokens: User input split on whitespace, uppercased

    Raises:
        MoveError: On syntax error, with the help text appended
    """
    if len(tokens) != 3:
        raise _syntax_error(
            f"A move needs 3 parts (command, source, destination), got {len(tokens)}"
        )

    command, source, destination = tokens
    if command != MOVE_COMMAND:
        raise _syntax_error(f"Unknown command '{command}'")
    if not SOURCE_PATTERN.match(source):
        raise _syntax_error(f"Invalid move source '{source}'")
    if not DESTINATION_PATTERN.match(destination):
        raise _syntax_error(f"Invalid move destination '{destination}'")


def deck_level_checks(
    source_deck: Deck,
    source_card_index: int,
    destination_deck: Deck,
) -> None:
    """Verify a move is possible given the decks involved.

    Card rank and suit are not considered here. Assumes check_player_input
    passed and the decks have been resolved.

    Args:
        source_deck: Deck that the card(s) originate from
        source_card_index: Index of the (first) card to move
        destination_deck: Deck that the card(s) will be transferred to

    Raises:
        MoveError: On illegal move
    """
    if source_card_index < source_deck.invisible_cards:
        raise MoveError("You can't move an invisible card")
    if source_deck is destination_deck:
        raise MoveError("Move source and destination can't be the same")
    if source_deck.size() == 0:
        raise MoveError("You can't move a card from an empty deck")
    if destination_deck.deck_type == DeckType.STOCK:
        raise MoveError("You can't move cards to the stock")
    if (
        destination_deck.deck_type == DeckType.STACK
        and source_card_index != source_deck.size() - 1
    ):
        raise MoveError("You can't move more than 1 card at a time to a Stack Pile")


def check_stack_move(top_card: Card | None, card_to_add: Card) -> None:
    """Verify a card may be put on a stack pile.

    Args:
        top_card: Top card of the stack, or None if the stack is empty
        card_to_add: Card to add to the stack

    Raises:
        MoveError: On illegal move
    """
    if top_card is None:
        if card_to_add.rank != Rank.ACE:
            raise MoveError("An Ace has to be the first card of a Stack pile")
        return

    if top_card.is_joker or card_to_add.rank != top_card.rank + 1:
        raise MoveError(
            "Stack piles can only hold cards increasing in rank from Ace to King"
        )
    if card_to_add.suit != top_card.suit:
        raise MoveError("Stack piles can only contain same-suit cards")


def check_column_move(top_card: Card | None, card_to_add: Card) -> None:
    """Verify a card may be put at the end of a column.

    Args:
        top_card: Last card of the column, or None if the column is empty
        card_to_add: (First) card to add to the column

    Raises:
        MoveError: On illegal move
    """
    if top_card is None:
        if card_to_add.rank != Rank.KING:
            raise MoveError("A King has to be the first card in a Column")
        return

    if not opposing_color(top_card, card_to_add):
        raise MoveError("Column cards have to alternate colors")
    if card_to_add.rank != top_card.rank - 1:
        raise MoveError(
            "Columns hold alternating-color cards of decreasing rank from King to Ace"
        )


_CARD_CHECKS: dict[DeckType, Callable[[Card | None, Card], None]] = {
    DeckType.STACK: check_stack_move,
    DeckType.COLUMN: check_column_move,
}


def card_level_checks(target_deck: Deck, card_to_add: Card) -> None:
    """Verify a move is possible given the rank and suit of the moved card.

    Assumes check_player_input and deck_level_checks passed.

    Args:
        target_deck: Deck that the card(s) will be transferred to
        card_to_add: (First) card being moved

    Raises:
        MoveError: On illegal move
    """
    check = _CARD_CHECKS.get(target_deck.deck_type)
    if check is None:
        raise MoveError("Target deck is neither Stack nor Column.")
    check(target_deck.top(), card_to_add)


def opposing_color(card1: Card, card2: Card) -> bool:
    """Check whether two cards are of opposing color (red versus black).

    Raises:
        InvalidOperationError: If either card is a joker
    """
    return red_suit(card1) != red_suit(card2)


def red_suit(card: Card) -> bool:
    """Check whether the card's suit is red (Diamonds or Hearts).

    Raises:
        InvalidOperationError: If the card is a joker
    """
    if card.suit == Suit.JOKER:
        raise InvalidOperationError("Method red_suit() should not be used with Jokers")
    return card.suit in (Suit.DIAMONDS, Suit.HEARTS)
