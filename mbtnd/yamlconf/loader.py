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


import os

from typing import IO
from typing import Any

import yaml
import yaml.nodes
import yaml.resolver
import yaml.constructor

from . import ConfigError


# =====
def load_yaml_file(path: str) -> Any:
    with open(path) as yaml_file:
        try:
            return yaml.load(yaml_file, _YamlLoader)
        except Exception as ex:
            # Reraise internal exception as standard ValueError and show the incorrect file
            raise ConfigError(f"Invalid YAML in the file {path!r}:\n{ex}") from None


# =====
class _YamlLoader(yaml.SafeLoader):
    def __init__(self, yaml_file: IO) -> None:
        super().__init__(yaml_file)
        self.__root = os.path.dirname(yaml_file.name)

    def include(self, node: yaml.nodes.Node) -> Any:
        incs: list[str]
        if isinstance(node, yaml.nodes.SequenceNode):
            incs = [
                str(child)
                for child in self.construct_sequence(node)
                if isinstance(child, (int, float, str))
            ]
        else:  # Trying scalar for the fallback
            incs = [str(self.construct_scalar(node))]  # type: ignore
        return self.__inner_include(list(filter(None, incs)))

    def __inner_include(self, incs: list[str]) -> Any:
        tree: dict = {}
        for inc in incs:
            path = os.path.join(self.__root, inc)
            if os.path.isfile(path):
                tree.update(load_yaml_file(path) or {})
        return tree


_YamlLoader.add_constructor("!include", _YamlLoader.include)
