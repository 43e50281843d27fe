"""Card and deck model."""
from .deck import Deck, Card, Suit, Rank, full_deck, cards_from_codes, validate_card_code
from .exceptions import (
    DeckError,
    InvalidArgument,
    InvalidCount,
    InvalidCardCode,
    InvalidCode,
    InvalidSuit,
    InvalidRank,
    InvalidIdentifier,
    DeckNotFound,
    DeckExhausted,
    InsufficientCards,
)

__all__ = [
    "Deck",
    "Card",
    "Suit",
    "Rank",
    "full_deck",
    "cards_from_codes",
    "validate_card_code",
    "DeckError",
    "InvalidArgument",
    "InvalidCount",
    "InvalidCardCode",
    "InvalidCode",
    "InvalidSuit",
    "InvalidRank",
    "InvalidIdentifier",
    "DeckNotFound",
    "DeckExhausted",
    "InsufficientCards",
]
