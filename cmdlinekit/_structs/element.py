#!/usr/bin/env python3
"""
The two kinds of parsed command-line element.
An Arg is a bare positional token, an Option is a dash prefixed token
that may carry a value.

"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import TYPE_CHECKING, ClassVar, Final

# ##-- end stdlib imports

# ##-- 1st party imports
import cmdlinekit.errors
from cmdlinekit._interface import DASH, SPACE, VALUE_DELIM

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

TRUTHY : Final[str] = "true"
YES    : Final[str] = "y"

class CmdElement:
    """ Base for command-line elements. Holds a name, which is never None. """

    __slots__ = ("_name",)

    def __init__(self, name:str):
        if name is None:
            raise ValueError("Command line elements need a name")
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def name_equals(self, *candidates:str) -> bool:
        """ true if any of the candidates is this element's name """
        return any(self._name == x for x in candidates)

class Arg(CmdElement):
    """ A positional, name only, command-line argument """

    __slots__ = ()

    def __str__(self):
        return self._name

    def __repr__(self):
        return f"<Arg: {self._name}>"

class Option(CmdElement):
    """ A named command-line option, with an optional value.
      Renders as '-name' or '-name value'.
      The value is only assigned after construction by the parser,
      when a bare token follows a valueless option.
    """

    __slots__ = ("_value",)

    def __init__(self, name:str, value:None|str=None):
        super().__init__(name)
        self._value = value

    @property
    def value(self) -> None|str:
        return self._value

    def _set_value(self, value:str) -> None:
        self._value = value

    def is_set(self) -> bool:
        return self._value is not None

    def is_null(self) -> bool:
        return self._value is None

    def value_or_fail(self) -> str:
        if self._value is None:
            raise cmdlinekit.errors.InputError("No value found for option: '%s'", self._name)
        return self._value

    def value_or_default(self, default:str|bool|int) -> str|bool|int:
        """ The value, converted to the type of the default, or the default if there is no value """
        match default:
            case _ if self._value is None:
                return default
            case bool():
                return self.as_bool()
            case int():
                return self.as_int()
            case _:
                return self._value

    def as_int(self) -> int:
        try:
            return int(self.value_or_fail())
        except (cmdlinekit.errors.InputError, ValueError) as err:
            raise cmdlinekit.errors.InputError("Integer expected for option '%s'", self._name) from err

    def as_bool(self) -> bool:
        """ A valueless option is a set flag, otherwise 'true' or anything starting with 'y' """
        if self._value is None:
            return True

        lowered = self._value.lower()
        return lowered == TRUTHY or lowered.startswith(YES)

    def split_value(self, delim:str=VALUE_DELIM) -> list[str]:
        if self._value is None:
            return []
        return [x for x in self._value.split(delim) if bool(x)]

    def __str__(self):
        if self._value is None:
            return f"{DASH}{self._name}"
        return f"{DASH}{self._name}{SPACE}{self._value}"

    def __repr__(self):
        match self._value:
            case None:
                return f"<Option: {DASH}{self._name}>"
            case str() as val:
                return f"<Option: {DASH}{self._name}={val}>"
