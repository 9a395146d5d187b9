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


from aiohttp.web import Request
from aiohttp.web import Response

from ...htserver import exposed_http
from ...htserver import make_json_response

from ...validators.basic import valid_bool
from ...validators.buttons import valid_button_key
from ...validators.buttons import valid_button_state

from ...prefs import PrefsStore

from ...buttons import ButtonKey
from ...buttons import Transition
from ...buttons import ButtonEvent
from ...buttons.handler import MediaButtonHandler
from ...buttons.handler import monotonic_ms


# =====
class ButtonsApi:
    def __init__(self, handler: MediaButtonHandler, prefs: PrefsStore) -> None:
        self.__handler = handler
        self.__prefs = prefs

    @exposed_http("GET", "/state")
    async def __state_handler(self, _: Request) -> Response:
        return make_json_response({
            "enabled": self.__handler.is_enabled(),
            **self.__handler.get_state(),
        })

    @exposed_http("POST", "/prefs/reload")
    async def __reload_prefs_handler(self, _: Request) -> Response:
        return make_json_response({"enabled": self.__handler.reload_preference()})

    @exposed_http("POST", "/prefs")
    async def __set_prefs_handler(self, req: Request) -> Response:
        value = valid_bool(req.query.get("media_button"))
        self.__prefs.set_bool(value)
        return make_json_response({"enabled": self.__handler.reload_preference()})

    @exposed_http("POST", "/call")
    async def __call_handler(self, req: Request) -> Response:
        self.__handler.set_in_call(valid_bool(req.query.get("in_call")))
        return make_json_response()

    @exposed_http("POST", "/key")
    async def __key_handler(self, req: Request) -> Response:
        event = ButtonEvent(
            key=ButtonKey(valid_button_key(req.query.get("key"))),
            transition=Transition(valid_button_state(req.query.get("state", "press"))),
            timestamp=monotonic_ms(),
        )
        return make_json_response({"handled": (await self.__handler.process_key(event))})
