"""Fakes for the external collaborators of the media buttons handler."""

from __future__ import annotations

from mbtnd.buttons import Command
from mbtnd.plugins.focus import BaseFocus


class FakeSource:
    def __init__(self, value: bool) -> None:
        self.value = value
        self.calls = 0

    def __call__(self) -> bool:
        self.calls += 1
        return self.value


class FakeFocus(BaseFocus):
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.acquired = 0
        self.released = 0

    def acquire(self) -> None:
        if self.fail:
            raise OSError("Device or resource busy")
        self.acquired += 1

    def release(self) -> None:
        if self.fail:
            raise OSError("Device or resource busy")
        self.released += 1


class FakePlayer:
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.commands: list[Command] = []

    async def send(self, command: Command) -> None:
        if self.fail:
            raise RuntimeError("Player is not running")
        self.commands.append(command)


class FakeClock:
    def __init__(self, now: int = 0) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now


