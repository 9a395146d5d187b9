"""Media button handler tests: dispatching, focus and external notifications."""

from __future__ import annotations

import asyncio
import threading

from mbtnd.buttons import ButtonKey
from mbtnd.buttons import Transition
from mbtnd.buttons import ButtonEvent
from mbtnd.buttons import Command
from mbtnd.buttons.handler import MediaButtonHandler

from tests.fakes import FakeSource
from tests.fakes import FakeFocus
from tests.fakes import FakePlayer
from tests.fakes import FakeClock


def _handler(
    enabled: bool = True,
    in_call: bool = False,
    focus: FakeFocus | None = None,
    player: FakePlayer | None = None,
    clock: FakeClock | None = None,
) -> tuple[MediaButtonHandler, FakeSource, FakePlayer, FakeClock]:
    source = FakeSource(enabled)
    player = (player or FakePlayer())
    clock = (clock or FakeClock())
    handler = MediaButtonHandler(
        read_enabled=source,
        read_in_call=FakeSource(in_call),
        focus=focus,
        dispatcher=player.send,
        clock=clock,
    )
    return (handler, source, player, clock)


def _press(key: ButtonKey) -> ButtonEvent:
    return ButtonEvent(key, Transition.PRESS)


def test_presses_are_dispatched() -> None:
    (handler, _, player, clock) = _handler()

    async def scenario() -> None:
        assert await handler.process_key(_press(ButtonKey.PRIMARY)) is True
        clock.now = 100
        assert await handler.process_key(_press(ButtonKey.PRIMARY)) is True
        assert await handler.process_key(_press(ButtonKey.PREVIOUS)) is True
        assert await handler.process_key(ButtonEvent(ButtonKey.NEXT, Transition.RELEASE)) is True
        assert await handler.process_key(_press(ButtonKey.OTHER)) is False
        assert await handler.process_key(None) is False

    asyncio.run(scenario())
    assert player.commands == [Command.TOGGLE_PLAYBACK, Command.NEXT_TRACK, Command.PREVIOUS_TRACK]


def test_double_click_uses_processing_clock() -> None:
    (handler, _, player, clock) = _handler()

    async def scenario() -> None:
        clock.now = 5000
        await handler.process_key(ButtonEvent(ButtonKey.PRIMARY, Transition.PRESS, 0))
        clock.now = 5200
        await handler.process_key(ButtonEvent(ButtonKey.PRIMARY, Transition.PRESS, 999999))

    asyncio.run(scenario())
    assert player.commands == [Command.TOGGLE_PLAYBACK, Command.NEXT_TRACK]


def test_disabled_and_in_call_are_not_handled() -> None:
    (disabled, _, disabled_player, _) = _handler(enabled=False)
    (calling, _, calling_player, _) = _handler(in_call=True)

    async def scenario() -> None:
        assert await disabled.process_key(_press(ButtonKey.PRIMARY)) is False
        assert await calling.process_key(_press(ButtonKey.PRIMARY)) is False
        calling.set_in_call(False)
        assert await calling.process_key(_press(ButtonKey.PRIMARY)) is True

    asyncio.run(scenario())
    assert disabled_player.commands == []
    assert calling_player.commands == [Command.TOGGLE_PLAYBACK]


def test_player_failure_is_not_propagated() -> None:
    (handler, _, _, _) = _handler(player=FakePlayer(fail=True))
    assert asyncio.run(handler.process_key(_press(ButtonKey.NEXT))) is True
    assert handler.get_state()["last_primary_press"] is None


def test_start_acquires_focus_when_enabled() -> None:
    focus = FakeFocus()
    (handler, _, _, _) = _handler(focus=focus)
    handler.start()
    handler.start()
    assert focus.acquired == 1
    assert handler.get_state()["registered"] is True

    handler.close()
    assert focus.released == 1


def test_start_keeps_focus_when_disabled() -> None:
    focus = FakeFocus()
    (handler, _, _, _) = _handler(enabled=False, focus=focus)
    handler.start()
    handler.close()
    assert (focus.acquired, focus.released) == (0, 0)


def test_preference_reload_toggles_focus() -> None:
    focus = FakeFocus()
    (handler, source, _, _) = _handler(enabled=False, focus=focus)
    handler.start()

    source.value = True
    assert handler.reload_preference() is True
    assert handler.reload_preference() is True
    assert focus.acquired == 1

    source.value = False
    assert handler.reload_preference() is False
    assert handler.reload_preference() is False
    assert focus.released == 1
    assert handler.is_enabled() is False


def test_lazy_resolution_acquires_focus() -> None:
    focus = FakeFocus()
    (handler, _, _, _) = _handler(focus=focus)
    asyncio.run(handler.process_key(_press(ButtonKey.NEXT)))
    assert focus.acquired == 1


def test_process_message() -> None:
    (handler, _, player, _) = _handler()

    async def scenario() -> None:
        assert await handler.process_message({"event": {"key": "next", "state": "press"}}) is True
        assert await handler.process_message({"event": {"key": "other", "state": "press"}}) is False
        assert await handler.process_message({"event": {"key": "next"}}) is False
        assert await handler.process_message({"event": {"key": "volume", "state": "press"}}) is False
        assert await handler.process_message({"event": "next"}) is False
        assert await handler.process_message({}) is False

    asyncio.run(scenario())
    assert player.commands == [Command.NEXT_TRACK]


def test_state_snapshot() -> None:
    (handler, _, _, clock) = _handler()
    assert handler.get_state() == {
        "feature": "unknown",
        "call": "unknown",
        "focus": False,
        "registered": False,
        "last_primary_press": None,
    }
    clock.now = 42
    asyncio.run(handler.process_key(_press(ButtonKey.PRIMARY)))
    assert handler.get_state() == {
        "feature": "enabled",
        "call": "idle",
        "focus": False,
        "registered": True,
        "last_primary_press": 42,
    }


def test_call_state_is_queried_off_the_loop() -> None:
    loop_ran = threading.Event()
    waited: list[bool] = []

    def read_in_call() -> bool:
        waited.append(loop_ran.wait(5))
        return False

    player = FakePlayer()
    handler = MediaButtonHandler(
        read_enabled=FakeSource(True),
        read_in_call=read_in_call,
        focus=None,
        dispatcher=player.send,
        clock=FakeClock(),
    )

    async def ticker() -> None:
        await asyncio.sleep(0)
        loop_ran.set()

    async def scenario() -> None:
        task = asyncio.create_task(ticker())
        assert await handler.process_key(_press(ButtonKey.PRIMARY)) is True
        await task

    asyncio.run(scenario())
    assert waited == [True]
    assert handler.get_state()["call"] == "idle"
    assert player.commands == [Command.TOGGLE_PLAYBACK]


def test_call_notification_wins_over_pending_query() -> None:
    answer = threading.Event()
    player = FakePlayer()

    def read_in_call() -> bool:
        answer.wait(5)
        return False

    handler = MediaButtonHandler(
        read_enabled=FakeSource(True),
        read_in_call=read_in_call,
        focus=None,
        dispatcher=player.send,
        clock=FakeClock(),
    )

    async def notify() -> None:
        handler.set_in_call(True)
        answer.set()

    async def scenario() -> None:
        task = asyncio.create_task(notify())
        assert await handler.process_key(_press(ButtonKey.PRIMARY)) is False
        await task

    asyncio.run(scenario())
    assert handler.get_state()["call"] == "in_call"
    assert player.commands == []


def test_call_state_is_not_queried_while_disabled() -> None:
    in_call = FakeSource(False)
    handler = MediaButtonHandler(
        read_enabled=FakeSource(False),
        read_in_call=in_call,
        focus=None,
        dispatcher=FakePlayer().send,
    )
    assert asyncio.run(handler.process_key(_press(ButtonKey.PRIMARY))) is False
    assert in_call.calls == 0
