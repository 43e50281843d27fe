"""Deck service exceptions.

Every error is raised synchronously by the deck core and surfaced to the
caller as-is; the HTTP layer maps each kind onto a numeric error code.
"""
from typing import Optional


class DeckError(Exception):
    """Base class for all deck errors."""
    pass


class InvalidArgument(DeckError):
    """Malformed boolean or integer input."""
    pass


class InvalidCount(InvalidArgument):
    """Draw count is not a positive integer."""
    pass


class InvalidCardCode(DeckError):
    """A card code failed validation."""
    
    reason = "is invalid"
    
    def __init__(self, code: str, message: Optional[str] = None):
        self.code = code
        super().__init__(message or f"code '{code}' {self.reason}")


class InvalidCode(InvalidCardCode):
    """Card code too short to hold a rank and a suit."""
    reason = "is invalid, should have a rank followed by a suit"


class InvalidSuit(InvalidCardCode):
    """Card code does not end with a known suit initial."""
    reason = "is invalid, should have proper suit name"


class InvalidRank(InvalidCardCode):
    """Card code prefix is not a known rank."""
    reason = "is invalid, should have proper card value"


class InvalidIdentifier(DeckError):
    """Deck id is not a well-formed UUID string."""
    
    def __init__(self, deck_id: str):
        self.deck_id = deck_id
        super().__init__(f"input UUID '{deck_id}' is not a valid UUID4 value")


class DeckNotFound(DeckError):
    """No deck registered under the given id."""
    
    def __init__(self, deck_id: str):
        self.deck_id = deck_id
        super().__init__(f"deck not found for the input uuid {deck_id}")


class DeckExhausted(DeckError):
    """Draw attempted on a deck with no cards left."""
    
    def __init__(self):
        super().__init__("cannot draw any cards, deck is empty")


class InsufficientCards(DeckError):
    """Draw asked for more cards than the deck holds."""
    
    def __init__(self, requested: int, remaining: int):
        self.requested = requested
        self.remaining = remaining
        super().__init__(f"cannot draw {requested} cards, deck has only {remaining}")
