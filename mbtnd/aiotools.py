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


import asyncio
import signal
import functools

from typing import Callable
from typing import Coroutine
from typing import TypeVar
from typing import Any


# =====
_RetvalT = TypeVar("_RetvalT")


async def run_async(method: Callable[..., _RetvalT], *args: Any, **kwargs: Any) -> _RetvalT:
    return (await asyncio.get_running_loop().run_in_executor(
        None,
        functools.partial(method, *args, **kwargs),
    ))


# =====
def run(coro: Coroutine, final: (Coroutine | None)=None) -> None:
    async def run_with_final() -> None:
        loop = asyncio.get_running_loop()
        main_task = asyncio.create_task(coro)

        for sig in [signal.SIGINT, signal.SIGTERM]:
            loop.add_signal_handler(sig, main_task.cancel)

        try:
            await main_task
        except asyncio.CancelledError:
            pass
        finally:
            if final is not None:
                await final

    asyncio.run(run_with_final())

