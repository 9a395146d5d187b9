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


from . import ButtonKey
from . import ButtonEvent
from . import Command

from .tristate import FeatureState
from .tristate import CallState


# =====
class EventClassifier:
    """
    Turns raw button events into playback commands.

    A press of the primary key toggles playback. Another primary press within
    the double click delay skips to the next track instead. Every primary press
    becomes the new reference point, so a third quick press is a double click
    again. Not thread-safe: callers must serialize access.
    """

    DOUBLE_CLICK_DELAY = 400  # Milliseconds

    def __init__(
        self,
        feature: FeatureState,
        call: CallState,
        double_click_delay: int=DOUBLE_CLICK_DELAY,
    ) -> None:

        self.__feature = feature
        self.__call = call
        self.__double_click_delay = double_click_delay

        self.__last_primary_ts: (int | None) = None

    @property
    def last_primary_press(self) -> (int | None):
        return self.__last_primary_ts

    def reset(self) -> None:
        self.__last_primary_ts = None

    def is_blocked(self) -> bool:
        return (not self.__feature.is_enabled() or self.__call.is_in_call())

    def is_handled(self, event: (ButtonEvent | None)) -> bool:
        if event is None or self.is_blocked():
            return False
        return (event.key != ButtonKey.OTHER)

    def classify(self, event: (ButtonEvent | None), now: int) -> (Command | None):
        if event is None or self.is_blocked():
            return None

        if event.key == ButtonKey.PRIMARY:
            # Single click: pause/resume, double click: next track
            if event.is_press:
                if self.__last_primary_ts is not None and now - self.__last_primary_ts < self.__double_click_delay:
                    command = Command.NEXT_TRACK
                else:
                    command = Command.TOGGLE_PLAYBACK
                self.__last_primary_ts = now
                return command

        elif event.key == ButtonKey.NEXT:
            if event.is_press:
                return Command.NEXT_TRACK

        elif event.key == ButtonKey.PREVIOUS:
            if event.is_press:
                return Command.PREVIOUS_TRACK

        return None
