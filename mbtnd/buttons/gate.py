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


import enum

from .. import tools
from ..logging import get_logger

from ..plugins.focus import BaseFocus


# =====
class GateState(enum.Enum):
    REGISTERED = "registered"
    UNREGISTERED = "unregistered"


class RegistrationGate:
    def __init__(self, focus: (BaseFocus | None)) -> None:
        self.__focus = focus
        self.__state = GateState.UNREGISTERED

    @property
    def state(self) -> GateState:
        return self.__state

    def has_focus_support(self) -> bool:
        return (self.__focus is not None)

    def is_registered(self) -> bool:
        return (self.__state == GateState.REGISTERED)

    def enable(self) -> None:
        if self.__state == GateState.UNREGISTERED:
            if self.__transit("acquire"):
                self.__state = GateState.REGISTERED

    def disable(self) -> None:
        if self.__state == GateState.REGISTERED:
            if self.__transit("release"):
                self.__state = GateState.UNREGISTERED

    def __transit(self, action: str) -> bool:
        if self.__focus is None:
            return True
        logger = get_logger(0)
        try:
            if action == "acquire":
                self.__focus.acquire()
            else:
                self.__focus.release()
        except Exception as ex:
            logger.error("Can't %s the button focus: %s", action, tools.efmt(ex))
            return False
        logger.info("Button focus %s: %s", ("acquired" if action == "acquire" else "released"), self.__focus)
        return True
