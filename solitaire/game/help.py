"""Help text for the move command syntax."""

from solitaire.models.game_state import COLUMN_HEADERS, STACK_HEADERS, STOCK_HEADER

MOVE_COMMAND = "M"

HELP_TEXT = (
    "Move syntax: M <source> <destination>\n"
    f"  <source>      {STOCK_HEADER} (top card of the waste), "
    f"a stack pile ({STACK_HEADERS[0]}-{STACK_HEADERS[-1]}) or a column coordinate "
    f"({COLUMN_HEADERS[0]}-{COLUMN_HEADERS[-1]} followed by the row, e.g. C2)\n"
    f"  <destination> a stack pile ({STACK_HEADERS[0]}-{STACK_HEADERS[-1]}) "
    f"or a column ({COLUMN_HEADERS[0]}-{COLUMN_HEADERS[-1]})\n"
    "Example: M C2 SA moves the card in row 2 of column C to stack pile SA"
)
