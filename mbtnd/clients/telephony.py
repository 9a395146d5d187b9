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


import subprocess

from .. import tools
from ..logging import get_logger


# =====
class TelephonyClient:
    def __init__(self, cmd: list[str], timeout: float) -> None:
        self.__cmd = cmd
        self.__timeout = timeout

    def is_in_call(self) -> bool:
        if not self.__cmd:
            return False
        logger = get_logger(0)
        try:
            result = subprocess.run(
                self.__cmd,
                capture_output=True,
                text=True,
                timeout=self.__timeout,
                check=False,
            )
            if result.returncode != 0:
                error = (result.stderr.strip() if result.stderr else "Unknown error")
                raise RuntimeError(f"Exited with retcode={result.returncode}: {error}")
            state = result.stdout.strip().lower()
            logger.debug("Call state: %r", state)
            return (state != "idle")
        except subprocess.TimeoutExpired:
            logger.error("Timeout while querying call state: %s", tools.cmdfmt(self.__cmd))
        except Exception as ex:
            logger.error("Can't query call state: %s", tools.efmt(ex))
        return False
