#!/usr/bin/env python3
"""
Shared constants and protocols for cmdlinekit.

"""
# ruff: noqa:

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from importlib.metadata import version
from importlib.resources import files
# ##-- end stdlib imports

# ##-- types
# isort: off
import abc
import collections.abc
from typing import TYPE_CHECKING, Final
# Protocols:
from typing import Protocol, runtime_checkable

if TYPE_CHECKING:
    from typing import Any
    from importlib.resources.abc import Traversable
    from cmdlinekit._structs.cmdline import CmdLine

##--|

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Vars:
__version__ : Final[str] = version("cmdlinekit")

# -- data
data_path                    = files("cmdlinekit.__data")
config_file  : Traversable   = data_path.joinpath("config.toml")

# -- grammar
SPACE        : Final[str]    = " "
QUOTE        : Final[str]    = '"'
ESCAPE       : Final[str]    = "\\"
DASH         : Final[str]    = "-"
VALUE_DELIM  : Final[str]    = ","
CHOICE_JOIN  : Final[str]    = " | "

# -- printing
PRINTER_NAME          : Final[str]  = "_printer_"
DEFAULT_WIDTH         : Final[int]  = 80
DEFAULT_VALUE_NAME    : Final[str]  = "value"
DEFAULT_PROMPT        : Final[str]  = "> "

# Body:

@runtime_checkable
class Command_p(Protocol):
    """ Something the console can execute once it has been looked up """

    def execute(self, ctx:Context_p) -> None: ...

@runtime_checkable
class Context_p(Protocol):
    """ What a command receives: the console driving it, and its remaining command line """

    console  : Any
    cmd_line : CmdLine

@runtime_checkable
class CommandFactory_p(Protocol):
    """ Looks up a command by name, raising CommandNotFoundError when there is none """

    def get_command_for(self, name:str) -> Command_p: ...

class ConsoleListener_i(abc.ABC):
    """ Hooks called by the console loop. """

    @abc.abstractmethod
    def on_start(self, console:Any) -> None:
        pass

    @abc.abstractmethod
    def on_abort(self, console:Any) -> None:
        pass

    @abc.abstractmethod
    def on_command_not_found(self, console:Any, name:str) -> None:
        pass
