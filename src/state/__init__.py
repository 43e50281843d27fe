"""State management module."""
from .deck_store import DeckRegistry, parse_deck_id

__all__ = ["DeckRegistry", "parse_deck_id"]
