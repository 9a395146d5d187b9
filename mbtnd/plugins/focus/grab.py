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


from typing import Any

from ... import tools
from ...logging import get_logger

from . import FocusError
from . import BaseFocus


# =====
class Plugin(BaseFocus):
    """
    Exclusive access to the input device (EVIOCGRAB). While the device
    is grabbed, nobody else receives its media keys.
    """

    def __init__(self, device: Any) -> None:  # pylint: disable=super-init-not-called
        self.__device = device

    def __str__(self) -> str:
        return f"grab:{self.__device.path}"

    @classmethod
    def probe(cls, device: Any) -> bool:
        if device is None:
            return False
        try:
            device.grab()
            device.ungrab()
        except OSError as ex:
            get_logger(0).error("Can't grab %s: %s", device.path, tools.efmt(ex))
            return False
        return True

    def acquire(self) -> None:
        try:
            self.__device.grab()
        except OSError as ex:
            raise FocusError(f"Can't grab {self.__device.path}: {ex}") from ex

    def release(self) -> None:
        try:
            self.__device.ungrab()
        except OSError as ex:
            raise FocusError(f"Can't ungrab {self.__device.path}: {ex}") from ex
