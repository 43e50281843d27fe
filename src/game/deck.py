"""Card and deck value types."""
import uuid
from enum import Enum
from dataclasses import dataclass, field, replace
from typing import Optional

from src.game.exceptions import (
    DeckExhausted,
    InsufficientCards,
    InvalidCode,
    InvalidCount,
    InvalidRank,
    InvalidSuit,
)


class Suit(str, Enum):
    """Card suits, in canonical deck order."""
    SPADES = "SPADES"
    DIAMONDS = "DIAMONDS"
    CLUBS = "CLUBS"
    HEARTS = "HEARTS"

    @property
    def initial(self) -> str:
        """Single letter used in card codes."""
        return self.value[0]

    @classmethod
    def from_initial(cls, initial: str) -> Optional["Suit"]:
        return _SUITS_BY_INITIAL.get(initial)

    def __str__(self) -> str:
        return self.value


class Rank(str, Enum):
    """Card ranks, Ace low, in canonical deck order."""
    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"

    @property
    def display(self) -> str:
        """Value as shown in API responses (ACE, 2..10, JACK, QUEEN, KING)."""
        if self.value.isdigit():
            return self.value
        return self.name

    @classmethod
    def from_token(cls, token: str) -> Optional["Rank"]:
        return _RANKS_BY_TOKEN.get(token)

    def __str__(self) -> str:
        return self.value


_SUITS_BY_INITIAL = {suit.initial: suit for suit in Suit}
_RANKS_BY_TOKEN = {rank.value: rank for rank in Rank}


def validate_card_code(code: str) -> tuple[Rank, Suit]:
    """Validate a card code such as 'AS' or '10H'.

    Validation is case-sensitive and runs on the whitespace-trimmed code.

    Args:
        code: Card code (rank token followed by a suit initial).

    Returns:
        The (rank, suit) pair the code stands for.

    Raises:
        InvalidCode: If the code is shorter than two characters.
        InvalidSuit: If the last character is not S, D, C or H.
        InvalidRank: If the prefix is not one of A, 2..10, J, Q, K.
    """
    code = code.strip()
    if len(code) < 2:
        raise InvalidCode(code)

    suit = Suit.from_initial(code[-1])
    if suit is None:
        raise InvalidSuit(code)

    rank = Rank.from_token(code[:-1])
    if rank is None:
        raise InvalidRank(code)

    return rank, suit


@dataclass(frozen=True)
class Card:
    """A playing card."""
    rank: Rank
    suit: Suit

    @property
    def code(self) -> str:
        return f"{self.rank.value}{self.suit.initial}"

    @property
    def value(self) -> str:
        return self.rank.display

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return str(self)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {"value": self.value, "suit": self.suit.value, "code": self.code}

    @classmethod
    def from_code(cls, code: str) -> "Card":
        """Parse card from a code like 'AS', '10H', 'QC'.

        Raises:
            InvalidCardCode: If the code fails validation.
        """
        rank, suit = validate_card_code(code)
        return cls(rank=rank, suit=suit)


def full_deck() -> list[Card]:
    """All 52 cards in sequential order: suits S, D, C, H; ranks A through K."""
    return [
        Card(rank=rank, suit=suit)
        for suit in Suit
        for rank in Rank
    ]


def cards_from_codes(codes: str) -> list[Card]:
    """Build cards from a comma separated list of codes, keeping input order.

    The first invalid code aborts the whole call.
    """
    return [Card.from_code(token.strip()) for token in codes.split(",")]


@dataclass(frozen=True)
class Deck:
    """An identified, ordered collection of cards.

    Decks are values: drawing produces a new Deck with the same id and
    shuffled flag and fewer cards, leaving the original untouched.
    """
    cards: tuple[Card, ...]
    shuffled: bool = False
    deck_id: uuid.UUID = field(default_factory=uuid.uuid4)

    @property
    def remaining(self) -> int:
        """Number of cards remaining in the deck."""
        return len(self.cards)

    def draw(self, count: int) -> tuple[list[Card], "Deck"]:
        """Take cards from the front of the deck.

        Args:
            count: Number of cards to draw.

        Returns:
            The hand and the deck left over after drawing.

        Raises:
            InvalidCount: If count is not a positive integer.
            DeckExhausted: If the deck has no cards.
            InsufficientCards: If fewer than count cards remain.
        """
        if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
            raise InvalidCount("count must be more than zero")
        if not self.cards:
            raise DeckExhausted()
        if count > len(self.cards):
            raise InsufficientCards(count, len(self.cards))

        hand = list(self.cards[:count])
        return hand, replace(self, cards=self.cards[count:])

    def __len__(self) -> int:
        return len(self.cards)
