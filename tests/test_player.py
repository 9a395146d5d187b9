"""Player client tests against a local aiohttp server."""

from __future__ import annotations

import asyncio

import pytest

from aiohttp import web
from aiohttp.test_utils import TestServer

from mbtnd.buttons import Command
from mbtnd.clients.player import PlayerError
from mbtnd.clients.player import PlayerClient


def _make_player_app(received: list[str]) -> web.Application:
    async def handle(req: web.Request) -> web.Response:
        action = req.match_info["action"]
        if action == "previous_song_autoplay":
            return web.Response(status=409, text="Nothing to go back to")
        received.append(f"{action}:{req.headers.get('User-Agent')}")
        return web.Response(text="ok")

    app = web.Application()
    app.router.add_post("/player/{action}", handle)
    return app


def test_send_commands() -> None:
    received: list[str] = []

    async def scenario() -> None:
        async with TestServer(_make_player_app(received)) as server:
            client = PlayerClient(str(server.make_url("/")), "", 5.0, "MBTND")
            await client.send(Command.TOGGLE_PLAYBACK)
            await client.send(Command.NEXT_TRACK)
            with pytest.raises(PlayerError):
                await client.send(Command.PREVIOUS_TRACK)

    asyncio.run(scenario())
    assert received == ["toggle_playback:MBTND", "next_song_autoplay:MBTND"]
