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


import json
import inspect
import dataclasses

from typing import Callable

from aiohttp.web import Application
from aiohttp.web import Request
from aiohttp.web import Response

from .logging import get_logger

from .validators import ValidatorError


# =====
class HttpError(Exception):
    def __init__(self, msg: str, status: int) -> None:
        super().__init__(msg)
        self.status = status


class BadRequestError(HttpError):
    def __init__(self, msg: str="Bad request") -> None:
        super().__init__(msg, 400)


# =====
_HTTP_EXPOSED = "_http_exposed"
_HTTP_METHOD = "_http_method"
_HTTP_PATH = "_http_path"


@dataclasses.dataclass(frozen=True)
class HttpExposed:
    method:  str
    path:    str
    handler: Callable


def exposed_http(http_method: str, path: str) -> Callable:
    def set_attrs(handler: Callable) -> Callable:
        setattr(handler, _HTTP_EXPOSED, True)
        setattr(handler, _HTTP_METHOD, http_method)
        setattr(handler, _HTTP_PATH, path)
        return handler
    return set_attrs


def get_exposed_http(obj: object) -> list[HttpExposed]:
    return [
        HttpExposed(
            method=getattr(handler, _HTTP_METHOD),
            path=getattr(handler, _HTTP_PATH),
            handler=handler,
        )
        for handler in [getattr(obj, name) for name in dir(obj)]
        if inspect.ismethod(handler) and getattr(handler, _HTTP_EXPOSED, False)
    ]


# =====
def make_json_response(
    result: (dict | None)=None,
    status: int=200,
    wrap_result: bool=True,
) -> Response:

    if wrap_result:
        result = {
            "ok": (status == 200),
            "result": (result or {}),
        }
    return Response(
        text=json.dumps(result, sort_keys=True, indent=4),
        status=status,
        content_type="application/json",
    )


def make_json_exception(err: Exception, status: (int | None)=None) -> Response:
    name = type(err).__name__
    msg = str(err)
    if isinstance(err, HttpError):
        status = err.status
    else:
        get_logger().error("API error: %s: %s", name, msg)
    assert status is not None, err
    return make_json_response({
        "error": name,
        "error_msg": msg,
    }, status=status)


# =====
def add_exposed(app: Application, obj: object) -> None:
    for exposed in get_exposed_http(obj):
        _add_exposed_http(app, exposed)


def _add_exposed_http(app: Application, exposed: HttpExposed) -> None:
    async def wrapper(req: Request) -> Response:
        try:
            return (await exposed.handler(req))
        except ValidatorError as ex:
            return make_json_exception(BadRequestError(str(ex)))
        except HttpError as ex:
            return make_json_exception(ex)
    app.router.add_route(exposed.method, exposed.path, wrapper)
