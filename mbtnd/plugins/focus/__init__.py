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

from ...logging import get_logger

from .. import BasePlugin
from .. import get_plugin_class


# =====
class FocusError(Exception):
    pass


# =====
class BaseFocus(BasePlugin):
    @classmethod
    def probe(cls, device: Any) -> bool:
        _ = device
        return True

    def acquire(self) -> None:
        raise NotImplementedError

    def release(self) -> None:
        raise NotImplementedError


# =====
def get_focus_class(name: str) -> type[BaseFocus]:
    return get_plugin_class("focus", name)  # type: ignore


def make_focus(name: str, device: Any) -> (BaseFocus | None):
    # Resolved once at startup, None means no focus support on this host
    logger = get_logger(0)
    if name == "none":
        logger.info("Button focus is disabled by config")
        return None
    focus_cls = get_focus_class(name)
    if not focus_cls.probe(device):
        logger.warning("Button focus %r is not supported by the input device; ignored", name)
        return None
    return focus_cls(device=device)
