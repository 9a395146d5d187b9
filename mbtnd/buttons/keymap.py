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


from evdev import ecodes

from . import ButtonKey
from . import Transition
from . import ButtonEvent


# =====
class KeyMap:
    __PRIMARY = (ecodes.KEY_MEDIA, ecodes.KEY_PLAYPAUSE)  # KEY_MEDIA is the headset hook
    __NEXT = (ecodes.KEY_NEXTSONG,)
    __PREVIOUS = (ecodes.KEY_PREVIOUSSONG,)

    def __init__(
        self,
        primary: (list[int] | None)=None,
        next: (list[int] | None)=None,  # pylint: disable=redefined-builtin
        previous: (list[int] | None)=None,
    ) -> None:

        self.__keys: dict[int, ButtonKey] = {}
        for (key, codes) in [
            (ButtonKey.PRIMARY, [*self.__PRIMARY, *(primary or [])]),
            (ButtonKey.NEXT, [*self.__NEXT, *(next or [])]),
            (ButtonKey.PREVIOUS, [*self.__PREVIOUS, *(previous or [])]),
        ]:
            for code in codes:
                if code in self.__keys and self.__keys[code] != key:
                    raise ValueError(f"Key code {code} is already mapped to {self.__keys[code].value}")
                self.__keys[code] = key

    def get_codes(self) -> set[int]:
        return set(self.__keys)

    def get_key(self, code: int) -> ButtonKey:
        return self.__keys.get(code, ButtonKey.OTHER)

    def make_event(self, code: int, value: int, timestamp: int) -> (ButtonEvent | None):
        # evdev values: 0 = release, 1 = press, 2 = autorepeat
        if value == 1:
            transition = Transition.PRESS
        elif value == 0:
            transition = Transition.RELEASE
        else:
            return None
        return ButtonEvent(self.get_key(code), transition, timestamp)
