"""Deck model."""

from enum import Enum
from typing import Iterable, Iterator

from .card import Card


class DeckType(str, Enum):
    """Role of a deck on the table; decides which move rules apply."""

    STOCK = "stock"
    WASTE = "waste"
    STACK = "stack"  # Foundation pile, built Ace to King per suit
    COLUMN = "column"  # Tableau pile, built King to Ace in alternating colors


class Deck:
    """Ordered pile of cards.

    Index 0 is the first card placed on the pile and the last index is the
    top (playable) card. The first ``invisible_cards`` cards are face down.
    """

    def __init__(
        self,
        deck_type: DeckType,
        cards: Iterable[Card] | None = None,
        invisible_cards: int = 0,
    ):
        """Initialize deck.

        Args:
            deck_type: Role of the deck.
            cards: Initial cards, bottom first.
            invisible_cards: Number of leading face-down cards.
        """
        self.deck_type = deck_type
        self._cards: list[Card] = list(cards) if cards else []
        self._invisible_cards = 0
        self.invisible_cards = invisible_cards

    @property
    def invisible_cards(self) -> int:
        """Number of face-down cards at the front of the deck."""
        return self._invisible_cards

    @invisible_cards.setter
    def invisible_cards(self, value: int) -> None:
        if not 0 <= value <= len(self._cards):
            raise ValueError(
                f"invisible_cards must be between 0 and {len(self._cards)}, got {value}"
            )
        self._invisible_cards = value

    def add(self, card: Card) -> None:
        """Put a card on top of the deck."""
        self._cards.append(card)

    def extend(self, cards: Iterable[Card]) -> None:
        """Put several cards on top of the deck, in order."""
        self._cards.extend(cards)

    def pop(self, index: int = -1) -> Card:
        """Remove and return a card (the top card by default)."""
        card = self._cards.pop(index)
        # Keep the face-down count within the deck size
        self._invisible_cards = min(self._invisible_cards, len(self._cards))
        return card

    def top(self) -> Card | None:
        """Get the top card, or None if the deck is empty."""
        return self._cards[-1] if self._cards else None

    def size(self) -> int:
        """Get number of cards."""
        return len(self._cards)

    def is_empty(self) -> bool:
        """Check if deck is empty."""
        return len(self._cards) == 0

    def visible(self) -> list[Card]:
        """Get the face-up cards, bottom first."""
        return self._cards[self._invisible_cards:]

    def __getitem__(self, index: int) -> Card:
        return self._cards[index]

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __str__(self) -> str:
        if not self._cards:
            return "[]"
        hidden = ["##"] * self._invisible_cards
        shown = [str(c) for c in self.visible()]
        return "[" + ", ".join(hidden + shown) + "]"

    def __repr__(self) -> str:
        return (
            f"Deck({self.deck_type.name}, size={len(self._cards)}, "
            f"invisible={self._invisible_cards})"
        )
