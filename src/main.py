"""FastAPI server exposing the deck registry over HTTP."""
import random
from typing import Optional
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends, Request
from fastapi.responses import JSONResponse

from src.config import config
from src.game.exceptions import DeckError, InvalidArgument, InvalidCardCode
from src.protocol.messages import (
    CardSchema,
    DrawHandResponse,
    ErrorCode,
    ErrorResponse,
    NewDeckResponse,
    OpenDeckResponse,
    parse_bool,
    parse_count,
)
from src.state.deck_store import DeckRegistry
from src.utils.logger import get_logger

logger = get_logger(__name__)


def error_response(code: ErrorCode, message: str) -> JSONResponse:
    """Build a 400 response carrying a numeric error code."""
    logger.warning(f"Rejected request (errorCode={int(code)}): {message}")
    body = ErrorResponse(errorCode=int(code), error=message)
    return JSONResponse(status_code=400, content=body.model_dump())


def get_registry(request: Request) -> DeckRegistry:
    """Dependency returning the registry owned by the running app."""
    return request.app.state.registry


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info(f"Deck server starting with {len(app.state.registry)} decks")
    yield
    logger.info("Deck server shutdown complete")


def create_app(registry: Optional[DeckRegistry] = None) -> FastAPI:
    """Create the FastAPI application.

    Args:
        registry: Deck registry to serve. A new one seeded from
            SHUFFLE_SEED is built when omitted.
    """
    app = FastAPI(
        title="Deck of Cards Server",
        description="Create, open and draw from decks of playing cards",
        version="1.0.0",
        lifespan=lifespan,
    )
    if registry is None:
        registry = DeckRegistry(rng=random.Random(config.shuffle_seed))
    app.state.registry = registry

    # Health check
    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.post("/deck", response_model=NewDeckResponse)
    async def new_deck(
        shuffle: str = "false",
        cards: Optional[str] = None,
        registry: DeckRegistry = Depends(get_registry),
    ):
        """Create a full or partial deck."""
        try:
            do_shuffle = parse_bool(shuffle)
        except InvalidArgument as e:
            return error_response(ErrorCode.INVALID_SHUFFLE, str(e))

        try:
            deck = registry.create_deck(shuffle=do_shuffle, codes=cards)
        except InvalidCardCode as e:
            return error_response(ErrorCode.INVALID_CARD_CODE, f"error in deck creation: {e}")

        return NewDeckResponse.from_deck(deck)

    @app.get("/deck/open", response_model=OpenDeckResponse)
    async def open_deck(
        deck_id: Optional[str] = None,
        registry: DeckRegistry = Depends(get_registry),
    ):
        """Return a deck with all its remaining cards."""
        if not deck_id:
            return error_response(ErrorCode.DECK_ID_MISSING, "'deck_id' query param not provided")

        try:
            deck = registry.open_deck(deck_id)
        except DeckError as e:
            return error_response(ErrorCode.DECK_OPEN_FAILED, f"Error in opening deck: {e}")

        return OpenDeckResponse.from_deck(deck)

    @app.get("/deck/draw", response_model=DrawHandResponse)
    async def draw_cards(
        deck_id: Optional[str] = None,
        count: Optional[str] = None,
        registry: DeckRegistry = Depends(get_registry),
    ):
        """Draw cards from the front of a deck."""
        if not deck_id:
            return error_response(ErrorCode.DECK_ID_MISSING, "'deck_id' query param not provided")
        if not count:
            return error_response(ErrorCode.COUNT_MISSING, "'count' query param not provided")

        try:
            card_count = parse_count(count)
        except InvalidArgument as e:
            return error_response(ErrorCode.INVALID_COUNT, str(e))

        # Every registry failure shares one wire code; the message names the cause
        try:
            hand = registry.draw_cards(deck_id, card_count)
        except DeckError as e:
            return error_response(ErrorCode.DRAW_FAILED, f"Error in drawing a hand from deck: {e}")

        return DrawHandResponse(cards=[CardSchema.from_card(card) for card in hand])

    return app


app = create_app()


# Entry point
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "src.main:app",
        host=config.host,
        port=config.port,
    )
