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


import sys
import os
import argparse

from typing import Any

from .. import logging as mlogging
from .. import tools

from ..yamlconf import ConfigError
from ..yamlconf import Section
from ..yamlconf import Option
from ..yamlconf import build_raw_from_options
from ..yamlconf import make_config
from ..yamlconf import dump_config
from ..yamlconf.loader import load_yaml_file

from ..validators.basic import valid_stripped_string
from ..validators.basic import valid_stripped_string_not_empty
from ..validators.basic import valid_bool
from ..validators.basic import valid_number
from ..validators.basic import valid_float_f01
from ..validators.os import valid_abs_path
from ..validators.os import valid_abs_path_or_empty
from ..validators.os import valid_command
from ..validators.buttons import valid_double_click_delay
from ..validators.buttons import valid_key_codes
from ..validators.buttons import valid_focus_type


# =====
def init(
    prog: (str | None)=None,
    description: (str | None)=None,
    argv: (list[str] | None)=None,
) -> tuple[argparse.ArgumentParser, list[str], Section]:

    argv = (argv or sys.argv)
    assert len(argv) > 0

    args_parser = argparse.ArgumentParser(prog=(prog or argv[0]), add_help=False)
    args_parser.add_argument("-c", "--config", default="/etc/mbtnd/main.yaml", type=valid_abs_path,
                             help="Set config file path", metavar="<file>")
    args_parser.add_argument("-o", "--set-options", default=[], nargs="+",
                             help="Override config options list (like sec/sub/opt=value)", metavar="<k=v>",)
    args_parser.add_argument("-m", "--dump-config", action="store_true",
                             help="View current configuration (include all overrides)")
    (options, remaining) = args_parser.parse_known_args(argv)

    if options.dump_config:
        _dump_config(_init_config(
            config_path=options.config,
            override_options=options.set_options,
        ))
        raise SystemExit()
    config = _init_config(options.config, options.set_options)

    mlogging.configure(**config.logging._unpack())

    parser = argparse.ArgumentParser(
        prog=(prog or argv[0]),
        description=description,
        parents=[args_parser],
    )
    return (parser, remaining, config)


# =====
def _init_config(config_path: str, override_options: list[str]) -> Section:
    try:
        raw_config: dict = {}
        if os.path.exists(config_path):
            raw_config = (load_yaml_file(config_path) or {})
            if not isinstance(raw_config, dict):
                raise ConfigError(f"The config {config_path!r} must be a dictionary")
        tools.merge(raw_config, build_raw_from_options(override_options))
        return make_config(raw_config, _get_config_scheme())
    except (ConfigError, OSError) as ex:
        raise SystemExit(f"ConfigError: {ex}")


def _dump_config(config: Section) -> None:
    dump = dump_config(config)
    if sys.stdout.isatty():
        dump = f"# Config for mbtnd\n{dump}"
    print(dump, flush=True)


def _get_config_scheme() -> dict[str, Any]:
    return {
        "logging": {
            "level":  Option("INFO", type=valid_stripped_string_not_empty),
            "fmt":    Option("%(asctime)s - %(name)s - %(levelname)s - %(message)s", type=valid_stripped_string_not_empty),
        },

        "buttons": {
            "double_click_delay": Option(400, type=valid_double_click_delay),
            "keys": {
                "primary":  Option([], type=valid_key_codes, help="Extra key codes for play/pause"),
                "next":     Option([], type=valid_key_codes, help="Extra key codes for the next track"),
                "previous": Option([], type=valid_key_codes, help="Extra key codes for the previous track"),
            },
        },

        "reader": {
            "device": Option("", type=valid_abs_path_or_empty, help="Input device, autodetect if empty"),
        },

        "focus": {
            "type": Option("grab", type=valid_focus_type),
        },

        "prefs": {
            "path":    Option("/var/lib/mbtnd/prefs.json", type=valid_abs_path),
            "key":     Option("media_button", type=valid_stripped_string_not_empty),
            "default": Option(True, type=valid_bool),
        },

        "telephony": {
            "cmd":     Option([], type=valid_command, help="Prints the call state, 'idle' if there is no call"),
            "timeout": Option(3.0, type=valid_float_f01),
        },

        "player": {
            "url":     Option("http://localhost:0", type=valid_stripped_string_not_empty),
            "unix":    Option("/run/mbtnd/player.sock", type=valid_abs_path_or_empty, unpack_as="unix_path"),
            "timeout": Option(5.0, type=valid_float_f01),
        },

        "server": {
            "host": Option("127.0.0.1", type=valid_stripped_string),
            "port": Option(8085, type=(lambda arg: int(valid_number(arg, min=0, max=65535, name="TCP port")))),
            "unix": Option("", type=valid_abs_path_or_empty, unpack_as="unix_path"),
        },
    }
