"""Klondike solitaire move legality checks and game state control."""

__version__ = "0.1.0"
