"""Pydantic schemas and query parsing for the deck HTTP API."""
import re
from enum import IntEnum

from pydantic import BaseModel

from src.game.deck import Card, Deck
from src.game.exceptions import InvalidArgument, InvalidCount


class ErrorCode(IntEnum):
    """Numeric error codes returned in error responses."""
    INVALID_SHUFFLE = 1
    INVALID_CARD_CODE = 2
    DECK_ID_MISSING = 3
    DECK_OPEN_FAILED = 4
    COUNT_MISSING = 5
    INVALID_COUNT = 6
    DRAW_FAILED = 7


# ============= Query parameter parsing =============

_TRUE_VALUES = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_VALUES = {"0", "f", "F", "FALSE", "false", "False"}
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_INT32_MIN, _INT32_MAX = -(2 ** 31), 2 ** 31 - 1


def parse_bool(raw: str) -> bool:
    """Parse a boolean query value.
    
    Raises:
        InvalidArgument: If raw is not one of the accepted spellings.
    """
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise InvalidArgument(f"Invalid query param value for 'shuffle': {raw}")


def parse_count(raw: str) -> int:
    """Parse a draw count: a base-10, 32-bit, strictly positive integer.
    
    Raises:
        InvalidCount: If raw is not such an integer.
    """
    if not _INTEGER_RE.fullmatch(raw):
        raise InvalidCount(f"count '{raw}' is not an integer")
    count = int(raw)
    if not _INT32_MIN <= count <= _INT32_MAX:
        raise InvalidCount(f"count '{raw}' is not an integer")
    if count <= 0:
        raise InvalidCount("count must be greater than zero")
    return count


# ============= Responses =============

class CardSchema(BaseModel):
    """A single card."""
    value: str
    suit: str
    code: str
    
    @classmethod
    def from_card(cls, card: Card) -> "CardSchema":
        return cls(**card.to_dict())


class NewDeckResponse(BaseModel):
    """Response to deck creation."""
    deck_id: str
    shuffled: bool
    remaining: int
    
    @classmethod
    def from_deck(cls, deck: Deck) -> "NewDeckResponse":
        return cls(deck_id=str(deck.deck_id), shuffled=deck.shuffled, remaining=deck.remaining)


class OpenDeckResponse(NewDeckResponse):
    """Deck snapshot including its remaining cards."""
    cards: list[CardSchema]
    
    @classmethod
    def from_deck(cls, deck: Deck) -> "OpenDeckResponse":
        return cls(
            deck_id=str(deck.deck_id),
            shuffled=deck.shuffled,
            remaining=deck.remaining,
            cards=[CardSchema.from_card(card) for card in deck.cards],
        )


class DrawHandResponse(BaseModel):
    """Cards drawn from a deck."""
    cards: list[CardSchema]


class ErrorResponse(BaseModel):
    """Error response."""
    errorCode: int
    error: str
