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


import os
import json

from . import tools
from .logging import get_logger


# =====
class PrefsStore:
    def __init__(self, path: str, key: str, default: bool) -> None:
        self.__path = path
        self.__key = key
        self.__default = default

    def get_bool(self) -> bool:
        try:
            prefs = self.__load()
        except Exception as ex:
            get_logger(0).error("Can't load preferences from %s: %s", self.__path, tools.efmt(ex))
            return self.__default
        value = prefs.get(self.__key, self.__default)
        if not isinstance(value, bool):
            get_logger(0).error("Invalid preference %r=%r in %s; using default %s",
                                self.__key, value, self.__path, self.__default)
            return self.__default
        return value

    def set_bool(self, value: bool) -> None:
        try:
            prefs = self.__load()
        except Exception as ex:
            get_logger(0).warning("Replacing unreadable preferences in %s: %s", self.__path, tools.efmt(ex))
            prefs = {}
        prefs[self.__key] = value
        dir_path = os.path.dirname(self.__path)
        if dir_path:
            os.makedirs(dir_path, exist_ok=True)
        tmp_path = f"{self.__path}.tmp"
        with open(tmp_path, "w") as prefs_file:
            json.dump(prefs, prefs_file)
        os.replace(tmp_path, self.__path)
        get_logger(0).info("Preference %r saved: %s", self.__key, value)

    def __load(self) -> dict:
        if not os.path.exists(self.__path):
            return {}
        with open(self.__path) as prefs_file:
            prefs = json.load(prefs_file)
        if not isinstance(prefs, dict):
            raise ValueError("Preferences must be a JSON object")
        return prefs
