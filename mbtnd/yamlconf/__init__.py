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


from typing import Callable
from typing import Any

import yaml


# =====
class ConfigError(ValueError):
    pass


# =====
def build_raw_from_options(options: list[str]) -> dict[str, Any]:
    raw: dict[str, Any] = {}
    for option in options:
        (key, value) = (option.split("=", 1) + [None])[:2]  # type: ignore
        if len(key.strip()) == 0:
            raise ConfigError(f"Empty option key (required 'key=value' instead of {option!r})")
        if value is None:
            raise ConfigError(f"No value for key {key!r}")

        section = raw
        subs = list(filter(None, map(str.strip, key.split("/"))))
        for sub in subs[:-1]:
            section.setdefault(sub, {})
            section = section[sub]
        section[subs[-1]] = _parse_value(value)
    return raw


def _parse_value(value: str) -> Any:
    value = value.strip()
    if (
        not value.isdigit()
        and value not in ["true", "false", "null"]
        and not value.startswith(("{", "[", "\""))
    ):
        value = f"\"{value}\""
    return yaml.safe_load(value)


# =====
class Section(dict):
    def __init__(self) -> None:
        dict.__init__(self)
        self.__meta: dict[str, dict[str, Any]] = {}

    def _unpack(self, ignore: (list[str] | None)=None) -> dict[str, Any]:
        unpacked: dict[str, Any] = {}
        for (key, value) in self.items():
            if ignore is not None and key in ignore:
                continue
            if isinstance(value, Section):
                unpacked[key] = value._unpack()  # pylint: disable=protected-access
            else:  # Option
                unpacked[self._get_unpack_as(key)] = value
        return unpacked

    def _set_meta(self, key: str, default: Any, unpack_as: str, help: str) -> None:  # pylint: disable=redefined-builtin
        self.__meta[key] = {
            "default": default,
            "unpack_as": unpack_as,
            "help": help,
        }

    def _get_default(self, key: str) -> Any:
        return self.__meta[key]["default"]

    def _get_unpack_as(self, key: str) -> str:
        return (self.__meta[key]["unpack_as"] or key)

    def _get_help(self, key: str) -> str:
        return self.__meta[key]["help"]

    def __getattribute__(self, key: str) -> Any:
        if key in self:
            return self[key]
        else:  # For pickling
            return dict.__getattribute__(self, key)


class Option:
    __type = type

    def __init__(
        self,
        default: Any,
        type: (Callable[[Any], Any] | None)=None,  # pylint: disable=redefined-builtin
        unpack_as: str="",
        help: str="",  # pylint: disable=redefined-builtin
    ) -> None:

        self.default = default
        self.type: Callable[[Any], Any] = (type or (self.__type(default) if default is not None else str))  # type: ignore
        self.unpack_as = unpack_as
        self.help = help

    def __repr__(self) -> str:
        return f"<Option(default={self.default}, type={self.type}, unpack_as={self.unpack_as})>"


# =====
def make_config(raw: dict[str, Any], scheme: dict[str, Any], _keys: tuple[str, ...]=()) -> Section:
    if not isinstance(raw, dict):
        raise ConfigError(f"The node {('/'.join(_keys) or '/')!r} must be a dictionary")

    config = Section()

    for key in raw:
        if key not in scheme:
            raise ConfigError(f"Unknown config key {'/'.join(_keys + (key,))!r}")

    for (key, option) in scheme.items():
        full_key = _keys + (key,)
        full_name = "/".join(full_key)

        if isinstance(option, Option):
            value = raw.get(key, option.default)
            try:
                value = option.type(value)
            except (TypeError, ValueError) as ex:
                raise ConfigError(f"Invalid value {value!r} for key {full_name!r}: {ex}")

            config[key] = value
            config._set_meta(  # pylint: disable=protected-access
                key=key,
                default=option.default,
                unpack_as=option.unpack_as,
                help=option.help,
            )
        elif isinstance(option, dict):
            config[key] = make_config(raw.get(key, {}), option, full_key)
        else:
            raise RuntimeError(f"Incorrect scheme definition for key {full_name!r}:"
                               f" the value is {type(option)!r}, not dict() or Option()")
    return config


# =====
def dump_config(config: Section) -> str:
    return "\n".join(_inner_make_dump(config)) + "\n"


def _inner_make_dump(config: Section, _level: int=0) -> list[str]:
    lines: list[str] = []
    indent = " " * (4 * _level)
    for (key, value) in config.items():
        if isinstance(value, Section):
            lines.append(f"{indent}{key}:")
            lines.extend(_inner_make_dump(value, _level + 1))
        else:
            comment = config._get_help(key)  # pylint: disable=protected-access
            default = config._get_default(key)  # pylint: disable=protected-access
            if comment:
                lines.append(f"{indent}# {comment}")
            line = f"{indent}{key}: {_make_yaml_value(value)}"
            if value != default:
                line += f"  # default: {_make_yaml_value(default)}"
            lines.append(line)
    return lines


def _make_yaml_value(value: Any) -> str:
    dumped = yaml.safe_dump(value, default_flow_style=True, allow_unicode=True, width=1024)
    if dumped.endswith("\n...\n"):
        dumped = dumped[:-len("\n...\n")]
    return dumped.strip()
