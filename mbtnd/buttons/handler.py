# ========================================================================== #
#                                                                            #
#    MBTND - The media buttons daemon.                                       #
#                                                                            #
#    Copyright (C) 2018-2024  Maxim Devaev <mdevaev@gmail.com>               #
#                                                                            #
#    This program is free software: you can redistribute it and/or modify    #
#    it under the terms of the GNU General Public License as published by    #
#    the Free Software Foundation, either version 3 of the License, or       #
#    (at your option) any later version.                                     #
#                                                                            #
#    This program is distributed in the hope that it will be useful,         #
#    but WITHOUT ANY WARRANTY; without even the implied warranty of          #
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the           #
#    GNU General Public License for more details.                            #
#                                                                            #
#    You should have received a copy of the GNU General Public License       #
#    along with this program.  If not, see <https://www.gnu.org/licenses/>.  #
#                                                                            #
# ========================================================================== #


import time

from typing import Callable
from typing import Awaitable
from typing import Mapping
from typing import Any

from .. import tools
from .. import aiotools
from ..logging import get_logger

from ..plugins.focus import BaseFocus

from . import ButtonKey
from . import Transition
from . import ButtonEvent
from . import Command

from .tristate import FeatureState
from .tristate import CallState
from .classifier import EventClassifier
from .gate import RegistrationGate


# =====
def monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


class MediaButtonHandler:  # pylint: disable=too-many-instance-attributes
    """
    Handles media button events and sends the appropriate commands
    to the player. Acquires the button focus while the buttons are enabled.
    """

    def __init__(  # pylint: disable=too-many-arguments
        self,
        read_enabled: Callable[[], bool],
        read_in_call: Callable[[], bool],
        focus: (BaseFocus | None),
        dispatcher: Callable[[Command], Awaitable[None]],
        double_click_delay: int=EventClassifier.DOUBLE_CLICK_DELAY,
        clock: Callable[[], int]=monotonic_ms,
    ) -> None:

        self.__read_in_call = read_in_call
        self.__dispatcher = dispatcher
        self.__clock = clock

        self.__gate = RegistrationGate(focus)
        self.__feature = FeatureState(read_enabled, self.__on_feature_resolved)
        self.__call = CallState(read_in_call)
        self.__classifier = EventClassifier(self.__feature, self.__call, double_click_delay)

    def start(self) -> None:
        enabled = self.__feature.is_enabled()
        get_logger(0).info("Media buttons are %s", ("enabled" if enabled else "disabled"))

    def close(self) -> None:
        self.__gate.disable()

    # =====

    def is_enabled(self) -> bool:
        return self.__feature.is_enabled()

    def reload_preference(self) -> bool:
        enabled = self.__feature.reload()
        get_logger(0).info("Media buttons preference reloaded: %s", ("enabled" if enabled else "disabled"))
        return enabled

    def set_in_call(self, value: bool) -> None:
        self.__call.set(value)
        get_logger(0).info("Call state changed: %s", ("in call" if value else "idle"))

    def get_state(self) -> dict:
        return {
            "feature": self.__feature.status.value,
            "call": self.__call.status.value,
            "focus": self.__gate.has_focus_support(),
            "registered": self.__gate.is_registered(),
            "last_primary_press": self.__classifier.last_primary_press,
        }

    # =====

    async def process_key(self, event: (ButtonEvent | None)) -> bool:
        if event is not None:
            await self.__resolve_call_state()
        if not self.__classifier.is_handled(event):
            return False
        assert event is not None
        command = self.__classifier.classify(event, self.__clock())
        if command is not None:
            get_logger(0).info("Button %s -> %s", event.key.value, command.value)
            await self.__dispatch(command)
        return True

    async def process_message(self, message: Mapping[str, Any]) -> bool:
        event = message.get("event")
        if not isinstance(event, Mapping):
            return (await self.process_key(None))
        try:
            key = ButtonKey(event["key"])
            transition = Transition(event["state"])
        except (KeyError, ValueError) as ex:
            get_logger(0).debug("Ignored malformed button message %r: %s", message, tools.efmt(ex))
            return False
        return (await self.process_key(ButtonEvent(key, transition, self.__clock())))

    # =====

    async def __resolve_call_state(self) -> None:
        if self.__call.is_resolved() or not self.__feature.is_enabled():
            return
        in_call = bool(await aiotools.run_async(self.__read_in_call))
        if not self.__call.is_resolved():  # A notification may have come while waiting
            get_logger(0).debug("Resolved call state: %s", in_call)
            self.__call.set(in_call)

    def __on_feature_resolved(self, enabled: bool) -> None:
        if enabled:
            self.__gate.enable()
        else:
            self.__gate.disable()

    async def __dispatch(self, command: Command) -> None:
        try:
            await self.__dispatcher(command)
        except Exception as ex:
            get_logger(0).error("Can't send %s to the player: %s", command.value, tools.efmt(ex))
