"""Tests for the CLI client."""
import random
import sys

import httpx
import pytest
from httpx import ASGITransport

from src import cli
from src.cli import _check, format_cards
from src.main import create_app
from src.state.deck_store import DeckRegistry


@pytest.fixture
def registry():
    """Registry behind the app the CLI talks to."""
    return DeckRegistry(rng=random.Random(3))


@pytest.fixture
def server(monkeypatch, registry):
    """Point the CLI at an in-process app."""
    app = create_app(registry)
    monkeypatch.setattr(
        cli, "_client",
        lambda: httpx.AsyncClient(transport=ASGITransport(app=app), base_url="http://test"),
    )
    return app


def use_transport(monkeypatch, handler):
    """Point the CLI at a mock transport."""
    monkeypatch.setattr(
        cli, "_client",
        lambda: httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://test"),
    )


def run_cli(monkeypatch, *args):
    """Run the CLI entry point with the given arguments."""
    monkeypatch.setattr(sys, "argv", ["deck-cli", *args])
    cli.main()


class TestFormatCards:
    """Test card listing output."""

    def test_indexed_lines(self):
        cards = [
            {"value": "ACE", "suit": "SPADES", "code": "AS"},
            {"value": "10", "suit": "HEARTS", "code": "10H"},
        ]
        assert format_cards(cards) == "0 AS (ACE of SPADES)\n1 10H (10 of HEARTS)"

    def test_empty(self):
        assert format_cards([]) == ""


class TestCheck:
    """Test response handling."""

    def test_success_returns_body(self):
        response = httpx.Response(200, json={"cards": []})
        assert _check(response) == {"cards": []}

    def test_error_exits(self, capsys):
        response = httpx.Response(400, json={"errorCode": 7, "error": "deck is empty"})

        with pytest.raises(SystemExit) as exc_info:
            _check(response)

        assert exc_info.value.code == 1
        assert "Error 7: deck is empty" in capsys.readouterr().out

    def test_non_json_body_exits(self, capsys):
        response = httpx.Response(502, text="<html>Bad Gateway</html>")

        with pytest.raises(SystemExit) as exc_info:
            _check(response)

        assert exc_info.value.code == 1
        assert "HTTP 502" in capsys.readouterr().out


class TestCommands:
    """Test commands against a running app."""

    def test_new_open_draw(self, monkeypatch, capsys, server, registry):
        """Test a deck created from the CLI can be opened and drawn."""
        run_cli(monkeypatch, "new", "AS,KD,10H")
        out = capsys.readouterr().out
        assert "remaining = 3" in out
        assert "shuffled  = False" in out
        assert len(registry) == 1

        deck_id = out.split("deck_id   = ")[1].splitlines()[0]

        run_cli(monkeypatch, "draw", deck_id, "2")
        assert "0 AS (ACE of SPADES)\n1 KD (KING of DIAMONDS)" in capsys.readouterr().out

        run_cli(monkeypatch, "open", deck_id)
        out = capsys.readouterr().out
        assert "is_shuffled = False remaining_cards = 1" in out
        assert "0 10H (10 of HEARTS)" in out

    def test_new_shuffled_full_deck(self, monkeypatch, capsys, server):
        """Test --shuffle with no codes."""
        run_cli(monkeypatch, "new", "--shuffle")
        out = capsys.readouterr().out

        assert "shuffled  = True" in out
        assert "remaining = 52" in out

    def test_server_error_exits(self, monkeypatch, capsys, server):
        """Test a 400 from the server is printed."""
        with pytest.raises(SystemExit) as exc_info:
            run_cli(monkeypatch, "draw", "abc", "1")

        assert exc_info.value.code == 1
        assert "Error 7:" in capsys.readouterr().out

    def test_connection_error_exits(self, monkeypatch, capsys):
        """Test an unreachable server is reported without a traceback."""
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        use_transport(monkeypatch, refuse)

        with pytest.raises(SystemExit) as exc_info:
            run_cli(monkeypatch, "open", "abc")

        assert exc_info.value.code == 1
        assert "connection refused" in capsys.readouterr().out

    def test_non_json_reply_exits(self, monkeypatch, capsys):
        """Test a proxy error page is reported."""
        use_transport(monkeypatch, lambda request: httpx.Response(502, text="Bad Gateway"))

        with pytest.raises(SystemExit) as exc_info:
            run_cli(monkeypatch, "new")

        assert exc_info.value.code == 1
        assert "HTTP 502" in capsys.readouterr().out


class TestDispatch:
    """Test argument handling."""

    @pytest.mark.parametrize("args", [(), ("open",), ("draw", "abc"), ("bogus",)])
    def test_bad_usage_exits(self, monkeypatch, capsys, args):
        with pytest.raises(SystemExit) as exc_info:
            run_cli(monkeypatch, *args)

        assert exc_info.value.code == 1
        assert capsys.readouterr().out

    def test_help(self, monkeypatch, capsys):
        run_cli(monkeypatch, "help")
        assert "Usage: python -m src.cli" in capsys.readouterr().out
