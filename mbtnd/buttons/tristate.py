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

from typing import Callable

from ..logging import get_logger


# =====
class FeatureStatus(enum.Enum):
    UNKNOWN = "unknown"
    ENABLED = "enabled"
    DISABLED = "disabled"


class CallStatus(enum.Enum):
    UNKNOWN = "unknown"
    IN_CALL = "in_call"
    IDLE = "idle"


# =====
class _LazyFlag:
    """
    A boolean taken from an external accessor on first use and memoized.
    The accessor is not called again until the value is invalidated.
    """

    _UNKNOWN: enum.Enum
    _TRUE: enum.Enum
    _FALSE: enum.Enum

    def __init__(
        self,
        resolver: Callable[[], bool],
        on_resolved: (Callable[[bool], None] | None)=None,
    ) -> None:

        self.__resolver = resolver
        self.__on_resolved = on_resolved
        self.__status = self._UNKNOWN

    @property
    def status(self) -> enum.Enum:
        return self.__status

    def is_resolved(self) -> bool:
        return (self.__status != self._UNKNOWN)

    def get(self) -> bool:
        if self.__status == self._UNKNOWN:
            value = bool(self.__resolver())
            get_logger(0).debug("Resolved %s: %s", type(self).__name__, value)
            self.set(value)
        return (self.__status == self._TRUE)

    def set(self, value: bool) -> None:
        self.__status = (self._TRUE if value else self._FALSE)
        if self.__on_resolved is not None:
            self.__on_resolved(value)

    def invalidate(self) -> None:
        self.__status = self._UNKNOWN


class FeatureState(_LazyFlag):
    _UNKNOWN = FeatureStatus.UNKNOWN
    _TRUE = FeatureStatus.ENABLED
    _FALSE = FeatureStatus.DISABLED

    def is_enabled(self) -> bool:
        return self.get()

    def reload(self) -> bool:
        self.invalidate()
        return self.get()


class CallState(_LazyFlag):
    _UNKNOWN = CallStatus.UNKNOWN
    _TRUE = CallStatus.IN_CALL
    _FALSE = CallStatus.IDLE

    def is_in_call(self) -> bool:
        return self.get()
