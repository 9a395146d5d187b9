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

from typing import Any

from . import raise_error
from .basic import valid_stripped_string
from .basic import valid_string_list


# =====
def valid_abs_path(arg: Any, type: str="", name: str="") -> str:  # pylint: disable=redefined-builtin
    if type:
        if not name:
            name = f"absolute path to existent {type}"
        type = {
            "file": "isfile",
            "dir": "isdir",
            "link": "islink",
        }[type]

    if not name:
        name = "absolute path"

    if len(str(arg).strip()) == 0:
        arg = None
    arg = valid_stripped_string(arg, name)

    arg = os.path.abspath(arg)
    if type and not getattr(os.path, type)(arg):
        raise_error(arg, name)
    return os.path.normpath(arg)


def valid_abs_path_or_empty(arg: Any, name: str="") -> str:
    if not str(arg or "").strip():
        return ""
    return valid_abs_path(arg, name=name)


def valid_command(arg: Any) -> list[str]:
    return valid_string_list(arg, delim=r"[\t ]+", name="command")
