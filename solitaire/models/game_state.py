"""Game state model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .deck import Deck, DeckType

STOCK_HEADER = "O"
STACK_HEADERS = ("SA", "SB", "SC", "SD")
COLUMN_HEADERS = ("A", "B", "C", "D", "E", "F", "G")


class GameState(BaseModel):
    """State of a single solitaire session.

    Created by the GameStateController, mutated in place by move execution
    and by the controller's scoring and win checks.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    stack_piles: dict[str, Deck] = Field(default_factory=dict)
    columns: dict[str, Deck] = Field(default_factory=dict)
    stock: Deck = Field(default_factory=lambda: Deck(DeckType.STOCK))
    waste: Deck = Field(default_factory=lambda: Deck(DeckType.WASTE))

    start_time: datetime | None = None
    end_time: datetime | None = None
    time_score: int = 0
    game_won: bool = False

    def get_deck(self, header: str) -> Deck:
        """Get a deck by its header.

        Args:
            header: STOCK_HEADER, a stack header (SA-SD) or a column header (A-G)

        Returns:
            The matching deck

        Raises:
            KeyError: If the header is unknown
        """
        if header == STOCK_HEADER:
            return self.stock
        if header in self.stack_piles:
            return self.stack_piles[header]
        if header in self.columns:
            return self.columns[header]
        raise KeyError(header)

    def total_cards(self) -> int:
        """Count cards across stock, waste, columns and stack piles."""
        total = self.stock.size() + self.waste.size()
        total += sum(d.size() for d in self.columns.values())
        total += sum(d.size() for d in self.stack_piles.values())
        return total

    def __str__(self) -> str:
        parts = [f"Score {self.time_score}"]
        if self.game_won:
            parts.append("[WON]")
        parts.append(f"stock={self.stock.size()} waste={self.waste.size()}")
        return " ".join(parts)
