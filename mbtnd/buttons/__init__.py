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
import dataclasses


# =====
class ButtonKey(enum.Enum):
    PRIMARY = "primary"
    NEXT = "next"
    PREVIOUS = "previous"
    OTHER = "other"


class Transition(enum.Enum):
    PRESS = "press"
    RELEASE = "release"


class Command(enum.Enum):
    TOGGLE_PLAYBACK = "toggle_playback"
    NEXT_TRACK = "next_song_autoplay"
    PREVIOUS_TRACK = "previous_song_autoplay"


@dataclasses.dataclass(frozen=True)
class ButtonEvent:
    key:        ButtonKey
    transition: Transition
    timestamp:  int = dataclasses.field(default=0)

    @property
    def is_press(self) -> bool:
        return (self.transition == Transition.PRESS)
