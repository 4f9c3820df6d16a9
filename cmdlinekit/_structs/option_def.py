#!/usr/bin/env python3
"""
Declarations of the options a command accepts,
used to validate a CmdLine and to display option help.

Built fluently:
    options = (OptionsBuilder()
               .name("log").desc("the log level").must_have_value().option()
               .name("verbose").optional().option()
               .build_options())
    options.validate(cmd)

"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import functools as ftz
import logging as logmod
from typing import (TYPE_CHECKING, Any, Callable, Final, Iterable,
                    Iterator, TextIO)

# ##-- end stdlib imports

# ##-- 3rd party imports
from pydantic import BaseModel

# ##-- end 3rd party imports

# ##-- 1st party imports
import cmdlinekit.errors
from cmdlinekit._interface import DASH, DEFAULT_VALUE_NAME, DEFAULT_WIDTH

# ##-- end 1st party imports

if TYPE_CHECKING:
    from cmdlinekit._structs.cmdline import CmdLine

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

REQUIRED : Final[str] = "required"
OPTIONAL : Final[str] = "optional"

@ftz.total_ordering
class OptionDef(BaseModel, frozen=True):
    """ Describes a single command-line option.
      `required` and `must_have_value` are independent:
      a non-required option that must have a value is only checked when present.
      Equality and ordering are by name.
    """

    name            : str
    value_name      : str  = DEFAULT_VALUE_NAME
    description     : str  = ""
    must_have_value : bool = False
    required        : bool = False

    def help_name(self, *, display_value_name:bool=False) -> str:
        if self.must_have_value and display_value_name:
            return f"{DASH}{self.name} <{self.value_name}>"
        return f"{DASH}{self.name}"

    def __eq__(self, other) -> bool:
        match other:
            case OptionDef():
                return self.name == other.name
            case _:
                return False

    def __lt__(self, other:OptionDef) -> bool:
        return self.name < other.name

    def __hash__(self):
        return hash(self.name)

    def __str__(self):
        return self.name

    def __repr__(self):
        return f"<OptionDef: {DASH}{self.name}>"

class Options:
    """
      An ordered set of option declarations,
      to validate a CmdLine against, or display help for.
    """

    def __init__(self, defs:Iterable[OptionDef], *, display_value_name:bool=False, ignore_unknown:bool=False):
        self._defs               : tuple[OptionDef, ...]  = tuple(defs)
        self._by_name            : dict[str, OptionDef]   = {x.name : x for x in self._defs}
        self.display_value_name  : bool                   = display_value_name
        self.ignore_unknown      : bool                   = ignore_unknown

    def validate(self, cmd:CmdLine) -> None:
        """ Check the options of a command line against these declarations,
          raising an InputError on the first problem found.
          Unknown options are checked first, then declarations in order.
        """
        if not self.ignore_unknown:
            for opt in cmd.all_options():
                if opt.name not in self._by_name:
                    raise cmdlinekit.errors.InputError("Unknown command-line option specified: %s", opt.name)

        for decl in self._defs:
            match decl:
                case OptionDef(required=True):
                    logging.debug("Checking Required Option: %s", decl.name)
                    cmd.require_option(decl.name, decl.must_have_value)
                case OptionDef(must_have_value=True) if cmd.contains_option(decl.name):
                    logging.debug("Checking Optional Option has value: %s", decl.name)
                    cmd.require_option(decl.name, True)
                case _:
                    pass

    def sort(self, key:None|Callable[[OptionDef], Any]=None) -> Options:
        """ A copy of these options, in sorted order """
        return Options(sorted(self._defs, key=key),
                       display_value_name=self.display_value_name,
                       ignore_unknown=self.ignore_unknown)

    def sort_required_first(self) -> Options:
        """ Required options first, each group alphabetical """
        return self.sort(key=lambda x: (not x.required, x.name))

    def help_rows(self) -> list[tuple[str, str, str]]:
        return [(x.help_name(display_value_name=self.display_value_name),
                 REQUIRED if x.required else OPTIONAL,
                 x.description)
                for x in self._defs]

    def display_help(self, caption:None|str=None, *, out:None|TextIO=None, width:int=DEFAULT_WIDTH) -> None:
        """ Print a table of option name, required/optional, and description """
        from cmdlinekit.utils.help_table import HelpTable
        HelpTable(width=width).display(self.help_rows(), caption=caption, out=out)

    def get(self, name:str, default:None|OptionDef=None) -> None|OptionDef:
        return self._by_name.get(name, default)

    def __contains__(self, name:str) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[OptionDef]:
        return iter(self._defs)

    def __len__(self) -> int:
        return len(self._defs)

    def __repr__(self):
        return f"<Options: {[x.name for x in self._defs]}>"

class OptionsBuilder:
    """
      Accumulates one option declaration at a time.
      `option()` commits the pending declaration and starts a new one,
      `build()` and `build_options()` commit anything pending first.

      `display_value_name` and `ignore_unknown_options` apply to the whole set.
    """

    def __init__(self):
        self._built               : list[OptionDef]  = []
        self._pending             : dict             = {}
        self._display_value_name  : bool             = False
        self._ignore_unknown      : bool             = False

    def name(self, name:str) -> OptionsBuilder:
        self._pending['name'] = name
        return self

    def value_name(self, name:str) -> OptionsBuilder:
        """ The name used for the option's value in help, when the option must have a value """
        self._pending['value_name'] = name
        return self

    def desc(self, description:str) -> OptionsBuilder:
        """ Appends to the pending option's description """
        self._pending['description'] = self._pending.get('description', "") + description
        return self

    def required(self) -> OptionsBuilder:
        self._pending['required'] = True
        return self

    def optional(self) -> OptionsBuilder:
        self._pending['required'] = False
        return self

    def must_have_value(self) -> OptionsBuilder:
        self._pending['must_have_value'] = True
        return self

    def display_value_name(self) -> OptionsBuilder:
        self._display_value_name = True
        return self

    def ignore_unknown_options(self) -> OptionsBuilder:
        self._ignore_unknown = True
        return self

    def option(self) -> OptionsBuilder:
        """ Commit the pending declaration. Nothing pending is a no-op. """
        match self._pending:
            case dict() if not bool(self._pending):
                return self
            case {"name": str()}:
                pass
            case _:
                self._pending = {}
                raise cmdlinekit.errors.DeclarationError("Option name must be provided")

        decl = OptionDef(**self._pending)
        logging.debug("Declared Option: %s", repr(decl))
        self._built.append(decl)
        self._pending = {}
        return self

    def build(self) -> list[OptionDef]:
        """ Commit anything pending, and hand over the declarations built so far """
        self.option()
        built, self._built = self._built, []
        return built

    def build_options(self) -> Options:
        return Options(self.build(),
                       display_value_name=self._display_value_name,
                       ignore_unknown=self._ignore_unknown)
