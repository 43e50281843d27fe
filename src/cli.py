#!/usr/bin/env python3
"""CLI client for a running deck server."""
import asyncio
import sys
from typing import Optional

import httpx

from src.config import config


def format_cards(cards: list[dict]) -> str:
    """Format cards one per line, indexed from zero."""
    return "\n".join(
        f"{index} {card['code']} ({card['value']} of {card['suit']})"
        for index, card in enumerate(cards)
    )


def _client() -> httpx.AsyncClient:
    """HTTP client pointed at API_URL."""
    return httpx.AsyncClient(base_url=config.api_url)


def _fail(message: str):
    """Print an error and exit with status 1."""
    print(f"Error: {message}")
    sys.exit(1)


def _check(response: httpx.Response) -> dict:
    """Return the JSON body, or print the server error and exit."""
    try:
        body = response.json()
    except ValueError:
        _fail(f"server returned HTTP {response.status_code} with a non-JSON body")
    if response.status_code != 200:
        print(f"Error {body.get('errorCode')}: {body.get('error')}")
        sys.exit(1)
    return body


async def _request(method: str, url: str, params: dict) -> dict:
    """Send one request and return the checked JSON body."""
    try:
        async with _client() as client:
            response = await client.request(method, url, params=params)
    except httpx.HTTPError as e:
        _fail(f"request to {config.api_url}{url} failed: {e}")
    return _check(response)


async def new_deck(shuffle: bool, cards: Optional[str]):
    """Create a deck and print its id."""
    params = {"shuffle": "true" if shuffle else "false"}
    if cards:
        params["cards"] = cards

    body = await _request("POST", "/deck", params)

    print(f"deck_id   = {body['deck_id']}")
    print(f"shuffled  = {body['shuffled']}")
    print(f"remaining = {body['remaining']}")


async def open_deck(deck_id: str):
    """Print a deck and its remaining cards."""
    body = await _request("GET", "/deck/open", {"deck_id": deck_id})

    print(f"is_shuffled = {body['shuffled']} remaining_cards = {body['remaining']}")
    if body["cards"]:
        print(format_cards(body["cards"]))


async def draw_cards(deck_id: str, count: str):
    """Draw cards and print the hand."""
    body = await _request("GET", "/deck/draw", {"deck_id": deck_id, "count": count})

    print(format_cards(body["cards"]))


def print_usage():
    """Print CLI usage."""
    print("""
Deck Server CLI

Usage: python -m src.cli <command> [args]

Commands:
  new [--shuffle] [CODES]   Create a deck (CODES like AS,10H,QC; default full deck)
  open <deck_id>            Show a deck and its remaining cards
  draw <deck_id> <count>    Draw cards from a deck
  help                      Show this help message

The server address is read from API_URL (default http://localhost:3000).
""")


def main():
    """Main CLI entry point."""
    if len(sys.argv) < 2:
        print_usage()
        sys.exit(1)

    command = sys.argv[1].lower()

    if command == "new":
        args = sys.argv[2:]
        shuffle = "--shuffle" in args
        codes = [arg for arg in args if arg != "--shuffle"]
        asyncio.run(new_deck(shuffle, codes[0] if codes else None))

    elif command == "open":
        if len(sys.argv) < 3:
            print("Error: Deck id required.")
            print("Usage: python -m src.cli open <deck_id>")
            sys.exit(1)
        asyncio.run(open_deck(sys.argv[2]))

    elif command == "draw":
        if len(sys.argv) < 4:
            print("Error: Deck id and count required.")
            print("Usage: python -m src.cli draw <deck_id> <count>")
            sys.exit(1)
        asyncio.run(draw_cards(sys.argv[2], sys.argv[3]))

    elif command in ("help", "-h", "--help"):
        print_usage()

    else:
        print(f"Unknown command: {command}")
        print_usage()
        sys.exit(1)


if __name__ == "__main__":
    main()
