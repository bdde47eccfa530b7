"""Session logging module."""

from .formatters import format_card, format_deck, format_layout
from .session_logger import SessionLogger

__all__ = [
    "SessionLogger",
    "format_card",
    "format_deck",
    "format_layout",
]
