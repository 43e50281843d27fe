"""In-memory deck registry."""
import random
import re
import threading
import uuid
from typing import Optional

from src.game.deck import Card, Deck, cards_from_codes, full_deck
from src.game.exceptions import DeckNotFound, InvalidCount, InvalidIdentifier
from src.utils.logger import get_logger

logger = get_logger(__name__)

_HEX_UUID = r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
# Canonical form, optionally braced or urn-prefixed, or 32 bare hex digits
_DECK_ID_RE = re.compile(
    rf"(?:{_HEX_UUID}|\{{{_HEX_UUID}\}}|(?i:urn:uuid:){_HEX_UUID}|[0-9a-fA-F]{{32}})"
)


def parse_deck_id(deck_id: str) -> uuid.UUID:
    """Parse a deck id string.

    Raises:
        InvalidIdentifier: If the string is not a UUID.
    """
    if not isinstance(deck_id, str) or not _DECK_ID_RE.fullmatch(deck_id):
        raise InvalidIdentifier(deck_id)
    try:
        return uuid.UUID(deck_id)
    except ValueError:
        raise InvalidIdentifier(deck_id) from None


class DeckRegistry:
    """Holds every deck created by this process, keyed by deck id.

    Decks live for the lifetime of the registry. Stored decks are immutable
    values; a draw replaces the stored value under the same id while holding
    that deck's lock, so concurrent draws never lose an update.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()
        self._decks: dict[uuid.UUID, Deck] = {}
        self._locks: dict[uuid.UUID, threading.Lock] = {}
        self._lock = threading.Lock()

    def create_deck(self, shuffle: bool = False, codes: Optional[str] = None) -> Deck:
        """Create and register a new deck.

        Args:
            shuffle: Whether to shuffle the cards.
            codes: Comma separated card codes. Empty or None builds the full
                52-card deck in sequential order.

        Returns:
            The newly registered deck.

        Raises:
            InvalidCardCode: If any code is invalid; nothing is registered.
        """
        cards = cards_from_codes(codes) if codes else full_deck()
        if shuffle:
            self._rng.shuffle(cards)

        deck = Deck(cards=tuple(cards), shuffled=shuffle)
        with self._lock:
            self._decks[deck.deck_id] = deck
            self._locks[deck.deck_id] = threading.Lock()

        logger.info(
            f"Created deck {deck.deck_id} ({deck.remaining} cards, shuffled={shuffle})"
        )
        return deck

    def open_deck(self, deck_id: str) -> Deck:
        """Get a snapshot of an existing deck.

        Args:
            deck_id: Deck id as a UUID string.

        Returns:
            The deck as currently stored.

        Raises:
            InvalidIdentifier: If deck_id is not a UUID.
            DeckNotFound: If no deck has this id.
        """
        key = parse_deck_id(deck_id)
        with self._lock:
            deck = self._decks.get(key)
        if deck is None:
            raise DeckNotFound(deck_id)
        return deck

    def draw_cards(self, deck_id: str, count: int) -> list[Card]:
        """Draw cards from the front of a deck.

        Args:
            deck_id: Deck id as a UUID string.
            count: Number of cards to draw, must be positive.

        Returns:
            The drawn hand, in deck order.

        Raises:
            InvalidCount: If count is not a positive integer.
            InvalidIdentifier: If deck_id is not a UUID.
            DeckNotFound: If no deck has this id.
            DeckExhausted: If the deck is empty.
            InsufficientCards: If fewer than count cards remain.
        """
        if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
            raise InvalidCount("count must be more than zero")

        deck = self.open_deck(deck_id)
        with self._locks[deck.deck_id]:
            # Re-read under the deck lock; the snapshot above may be stale
            current = self._decks[deck.deck_id]
            hand, rest = current.draw(count)
            with self._lock:
                self._decks[deck.deck_id] = rest

        logger.debug(f"Drew {count} cards from deck {deck.deck_id}, {rest.remaining} left")
        return hand

    def __len__(self) -> int:
        return len(self._decks)

    def __contains__(self, deck_id: object) -> bool:
        if isinstance(deck_id, str):
            try:
                deck_id = parse_deck_id(deck_id)
            except InvalidIdentifier:
                return False
        return deck_id in self._decks
