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


import aiohttp

from ..buttons import Command


# =====
class PlayerError(Exception):
    pass


class PlayerClient:
    def __init__(
        self,
        url: str,
        unix_path: str,
        timeout: float,
        user_agent: str,
    ) -> None:

        self.__url = url.rstrip("/")
        self.__unix_path = unix_path
        self.__timeout = timeout
        self.__user_agent = user_agent

    async def send(self, command: Command) -> None:
        async with self.__make_http_session() as session:
            async with session.post(f"{self.__url}/player/{command.value}") as resp:
                if resp.status != 200:
                    text = (await resp.text()).strip()
                    raise PlayerError(f"Player rejected {command.value}: HTTP {resp.status} {text}")

    def __make_http_session(self) -> aiohttp.ClientSession:
        kwargs: dict = {
            "headers": {"User-Agent": self.__user_agent},
            "timeout": aiohttp.ClientTimeout(total=self.__timeout),
        }
        if self.__unix_path:
            kwargs["connector"] = aiohttp.UnixConnector(path=self.__unix_path)
        return aiohttp.ClientSession(**kwargs)
