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


from ...logging import get_logger

from ...aioproc import settle

from ...prefs import PrefsStore

from ...clients.player import PlayerClient
from ...clients.telephony import TelephonyClient

from ...plugins.focus import make_focus

from ...buttons.keymap import KeyMap
from ...buttons.handler import MediaButtonHandler

from .. import init

from .reader import ButtonsReaderError
from .reader import ButtonsReader
from .api import ButtonsApi
from .server import MediaButtonServer


# =====
def main(argv: (list[str] | None)=None) -> None:
    (parser, remaining, config) = init(
        prog="mbtnd",
        description="The media buttons daemon",
        argv=argv,
    )
    parser.parse_args(remaining[1:])

    try:
        keymap = KeyMap(**config.buttons.keys._unpack())
    except ValueError as ex:
        raise SystemExit(f"ConfigError: {ex}")

    settle("Media Buttons Daemon", "mbtnd")

    reader = ButtonsReader(config.reader.device, keymap)
    try:
        device = reader.open()
    except ButtonsReaderError as ex:
        get_logger(0).error("%s", ex)
        raise SystemExit(1)

    prefs = PrefsStore(**config.prefs._unpack())
    telephony = TelephonyClient(**config.telephony._unpack())
    player = PlayerClient(user_agent="MBTND", **config.player._unpack())

    handler = MediaButtonHandler(
        read_enabled=prefs.get_bool,
        read_in_call=telephony.is_in_call,
        focus=make_focus(config.focus.type, device),
        dispatcher=player.send,
        double_click_delay=config.buttons.double_click_delay,
    )

    MediaButtonServer(
        handler=handler,
        reader=reader,
        api=ButtonsApi(handler, prefs),
    ).run(**config.server._unpack())
