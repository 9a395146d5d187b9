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


from aiohttp import web

from ... import tools
from ... import aiotools
from ...logging import get_logger

from ...htserver import add_exposed

from ...buttons.handler import MediaButtonHandler

from .reader import ButtonsReader
from .api import ButtonsApi


# =====
class MediaButtonServer:
    def __init__(
        self,
        handler: MediaButtonHandler,
        reader: ButtonsReader,
        api: ButtonsApi,
    ) -> None:

        self.__handler = handler
        self.__reader = reader
        self.__api = api

        self.__runner: (web.AppRunner | None) = None

    def run(self, host: str, port: int, unix_path: str) -> None:
        logger = get_logger(0)
        logger.info("Starting Media Buttons Server ...")
        failed = False
        try:
            aiotools.run(self.__run(host, port, unix_path), self.__cleanup())
        except OSError as ex:
            logger.error("Media Buttons Server failed: %s", tools.efmt(ex))
            failed = True
        logger.info("Bye-bye")
        if failed:
            raise SystemExit(1)

    def make_app(self) -> web.Application:
        app = web.Application()
        add_exposed(app, self.__api)
        return app

    # =====

    async def __run(self, host: str, port: int, unix_path: str) -> None:
        logger = get_logger(0)

        self.__runner = web.AppRunner(self.make_app())
        await self.__runner.setup()
        if unix_path:
            site: web.BaseSite = web.UnixSite(self.__runner, unix_path)
            logger.info("Listening HTTP on UNIX socket %s ...", unix_path)
        else:
            site = web.TCPSite(self.__runner, host, port)
            logger.info("Listening HTTP on [%s]:%d ...", host, port)
        await site.start()

        self.__handler.start()

        await self.__reader.run(self.__handler)

    async def __cleanup(self) -> None:
        self.__handler.close()
        self.__reader.close()
        if self.__runner is not None:
            await self.__runner.cleanup()
