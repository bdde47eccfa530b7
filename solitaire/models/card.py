"""Card models."""

from enum import Enum, IntEnum

from pydantic import BaseModel

from solitaire.exceptions import InvalidOperationError


class Rank(IntEnum):
    """Card rank. Value is the position in the Ace-to-King sequence."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13


class Color(str, Enum):
    """Card color, derived from the suit."""

    BLACK = "black"
    RED = "red"


class Suit(IntEnum):
    """Card suit."""

    CLUBS = 0
    SPADES = 1
    DIAMONDS = 2
    HEARTS = 3
    JOKER = 4

    @property
    def color(self) -> Color:
        """Get the suit color.

        Raises:
            InvalidOperationError: For JOKER, which has no color.
        """
        if self is Suit.JOKER:
            raise InvalidOperationError("Jokers have no color")
        if self in (Suit.DIAMONDS, Suit.HEARTS):
            return Color.RED
        return Color.BLACK


PLAYABLE_SUITS = (Suit.CLUBS, Suit.SPADES, Suit.DIAMONDS, Suit.HEARTS)

# Map rank to display string
RANK_NAMES = {
    Rank.ACE: "A",
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}

SUIT_SYMBOLS = {
    Suit.CLUBS: "♣",
    Suit.SPADES: "♠",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
    Suit.JOKER: "🃏",
}


class Card(BaseModel, frozen=True):
    """Single card representation."""

    suit: Suit
    rank: Rank | None = None  # None for Joker

    @property
    def is_joker(self) -> bool:
        """Check if this card is a joker."""
        return self.suit == Suit.JOKER

    @property
    def color(self) -> Color:
        """Get the card color (not defined for jokers)."""
        return self.suit.color

    def __str__(self) -> str:
        if self.is_joker:
            return "Joker"
        return f"{SUIT_SYMBOLS[self.suit]}{RANK_NAMES[self.rank]}"

    def __repr__(self) -> str:
        return str(self)


def create_standard_deck() -> list[Card]:
    """Create the 52 playable cards (no jokers), ordered by suit then rank."""
    return [Card(suit=suit, rank=rank) for suit in PLAYABLE_SUITS for rank in Rank]
