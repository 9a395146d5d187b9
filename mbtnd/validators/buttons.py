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

from evdev import ecodes

from . import raise_error
from . import check_string_in_list
from . import check_re_match
from .basic import valid_number
from .basic import valid_string_list


# =====
def valid_button_key(arg: Any) -> str:
    return check_string_in_list(arg, "button key", ["primary", "next", "previous", "other"])


def valid_button_state(arg: Any) -> str:
    return check_string_in_list(arg, "button state", ["press", "release"])


def valid_double_click_delay(arg: Any) -> int:
    return int(valid_number(arg, min=0, max=5000, name="double click delay (ms)"))


def valid_key_code(arg: Any) -> int:
    name = "key code"
    if isinstance(arg, int) and not isinstance(arg, bool):
        code = arg
    else:
        arg = check_re_match(arg, name, r"^([0-9]+|(?i:key_)[a-zA-Z0-9_]+)$")
        if arg.isdigit():
            code = int(arg)
        else:
            code = ecodes.ecodes.get(arg.upper(), -1)
    if code < 0 or code > ecodes.KEY_MAX:
        raise_error(arg, name)
    return code


def valid_key_codes(arg: Any) -> list[int]:
    if isinstance(arg, int) and not isinstance(arg, bool):
        arg = [arg]
    return valid_string_list(arg, subval=valid_key_code, name="key codes list")


def valid_focus_type(arg: Any) -> str:
    return check_string_in_list(arg, "focus type", ["grab", "none"])
