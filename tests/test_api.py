"""HTTP API tests."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

from aiohttp import web
from aiohttp.test_utils import TestClient
from aiohttp.test_utils import TestServer

from mbtnd.buttons import Command
from mbtnd.buttons.handler import MediaButtonHandler
from mbtnd.htserver import add_exposed
from mbtnd.prefs import PrefsStore
from mbtnd.apps.mbtnd.api import ButtonsApi

from tests.fakes import FakeFocus
from tests.fakes import FakePlayer
from tests.fakes import FakeSource


def _make_app(tmp_path: Path, player: FakePlayer, focus: FakeFocus) -> web.Application:
    prefs = PrefsStore(str(tmp_path / "prefs.json"), "media_button", True)
    handler = MediaButtonHandler(
        read_enabled=prefs.get_bool,
        read_in_call=FakeSource(False),
        focus=focus,
        dispatcher=player.send,
    )
    app = web.Application()
    add_exposed(app, ButtonsApi(handler, prefs))
    return app


def test_api_flow(tmp_path: Path) -> None:
    player = FakePlayer()
    focus = FakeFocus()

    async def scenario() -> None:
        async with TestClient(TestServer(_make_app(tmp_path, player, focus))) as client:
            resp = await client.get("/state")
            assert resp.status == 200
            result = (await resp.json())["result"]
            assert result["enabled"] is True
            assert result["registered"] is True
            assert result["focus"] is True

            resp = await client.post("/key", params={"key": "primary", "state": "press"})
            assert (await resp.json())["result"] == {"handled": True}
            resp = await client.post("/key", params={"key": "other"})
            assert (await resp.json())["result"] == {"handled": False}

            resp = await client.post("/call", params={"in_call": "1"})
            assert resp.status == 200
            resp = await client.post("/key", params={"key": "next"})
            assert (await resp.json())["result"] == {"handled": False}
            await client.post("/call", params={"in_call": "0"})

            resp = await client.post("/prefs", params={"media_button": "false"})
            assert (await resp.json())["result"] == {"enabled": False}
            assert json.loads((tmp_path / "prefs.json").read_text()) == {"media_button": False}
            resp = await client.post("/key", params={"key": "next"})
            assert (await resp.json())["result"] == {"handled": False}

            (tmp_path / "prefs.json").write_text(json.dumps({"media_button": True}))
            resp = await client.post("/prefs/reload")
            assert (await resp.json())["result"] == {"enabled": True}
            resp = await client.post("/key", params={"key": "previous"})
            assert (await resp.json())["result"] == {"handled": True}

    asyncio.run(scenario())
    assert player.commands == [Command.TOGGLE_PLAYBACK, Command.PREVIOUS_TRACK]
    assert (focus.acquired, focus.released) == (2, 1)


def test_api_bad_arguments(tmp_path: Path) -> None:
    async def scenario() -> None:
        async with TestClient(TestServer(_make_app(tmp_path, FakePlayer(), FakeFocus()))) as client:
            for (path, params) in [
                ("/key", {"key": "volume"}),
                ("/key", {"key": "next", "state": "hold"}),
                ("/call", {}),
                ("/prefs", {"media_button": "maybe"}),
            ]:
                resp = await client.post(path, params=params)
                assert resp.status == 400
                data = await resp.json()
                assert data["ok"] is False
                assert data["result"]["error"] == "BadRequestError"

    asyncio.run(scenario())
