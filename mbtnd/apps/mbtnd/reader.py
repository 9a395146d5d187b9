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


import evdev
from evdev import ecodes

from ... import tools
from ...logging import get_logger

from ...buttons.keymap import KeyMap
from ...buttons.handler import MediaButtonHandler


# =====
class ButtonsReaderError(Exception):
    pass


class ButtonsReader:
    def __init__(self, device_path: str, keymap: KeyMap) -> None:
        self.__device_path = device_path
        self.__keymap = keymap
        self.__device: (evdev.InputDevice | None) = None

    def open(self) -> evdev.InputDevice:
        assert self.__device is None
        if self.__device_path:
            try:
                self.__device = evdev.InputDevice(self.__device_path)
            except OSError as ex:
                raise ButtonsReaderError(f"Can't open {self.__device_path}: {tools.efmt(ex)}") from ex
        else:
            self.__device = self.__find_device()
        get_logger(0).info("Using input device %s (%s)", self.__device.path, self.__device.name)
        return self.__device

    def close(self) -> None:
        if self.__device is not None:
            try:
                self.__device.close()
            except Exception as ex:
                get_logger(0).error("Can't close %s: %s", self.__device.path, tools.efmt(ex))
            self.__device = None

    async def run(self, handler: MediaButtonHandler) -> None:
        assert self.__device is not None
        logger = get_logger(0)
        async for event in self.__device.async_read_loop():
            if event.type != ecodes.EV_KEY:
                continue
            button = self.__keymap.make_event(event.code, event.value, int(event.timestamp() * 1000))
            if button is not None:
                handled = await handler.process_key(button)
                logger.debug("Key code=%d value=%d: handled=%s", event.code, event.value, handled)

    def __find_device(self) -> evdev.InputDevice:
        logger = get_logger(0)
        codes = self.__keymap.get_codes()
        for path in evdev.list_devices():
            try:
                device = evdev.InputDevice(path)
            except OSError as ex:
                logger.debug("Can't access %s: %s", path, tools.efmt(ex))
                continue
            if codes.intersection(device.capabilities().get(ecodes.EV_KEY, [])):
                return device
            device.close()
        raise ButtonsReaderError("Can't find any input device with media keys")
