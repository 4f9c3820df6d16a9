#!/usr/bin/env python3
"""
CmdLine: the container for a parsed command line.

Holds elements in order, an index of options by name,
and a cursor used for forward iteration.

eg: 'start app -log debug "Hello World"'
is: Arg(start), Arg(app), Option(log=debug), Arg(Hello World)

"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import itertools as itz
import logging as logmod
import pathlib as pl
from typing import (TYPE_CHECKING, Any, Final, Iterable, Iterator, Mapping,
                    Sequence)

# ##-- end stdlib imports

# ##-- 3rd party imports
import more_itertools as mitz

# ##-- end 3rd party imports

# ##-- 1st party imports
import cmdlinekit.errors
from cmdlinekit._interface import CHOICE_JOIN, DASH, SPACE
from cmdlinekit._structs.element import Arg, CmdElement, Option

# ##-- end 1st party imports

if TYPE_CHECKING:
    from cmdlinekit.control.process import ExecHandle

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class CmdLine:
    """
      A list of Arg and Option elements, in the order they were added.
      Options are also indexed by name, the last added option of a name wins.

      Forward iteration uses an internal cursor:
      while cmd.has_next():
          elem = cmd.next()

      Removing an element at or before the cursor moves the cursor back by one.

      Not safe to share between threads.
    """

    def __init__(self):
        self._elems   : list[CmdElement]  = []
        self._options : dict[str, Option] = {}
        self._cursor  : int               = 0
        self._source  : None|CmdLine      = None

    @classmethod
    def _build(cls, elems:list[CmdElement], options:dict[str, Option], *, source:None|CmdLine=None) -> CmdLine:
        """ Build a command line around existing storage, without copying it """
        obj          = cls()
        obj._elems   = elems
        obj._options = options
        obj._source  = source
        return obj

    @staticmethod
    def parse(line:str|Sequence[str]) -> CmdLine:
        """ Tokenize a line of text, or a list of tokens, into a CmdLine """
        from cmdlinekit.parsers.line_parser import LineParser
        return LineParser().parse(line)

    ##-- index maintenance

    def _index(self, elem:CmdElement) -> None:
        match elem:
            case Option():
                self._options[elem.name] = elem
            case _:
                pass

    def _sharing_elems(self) -> Iterator[CmdElement]:
        """ The elements of every command line sharing this option index, sources first """
        if self._source is not None:
            yield from self._source._sharing_elems()

        yield from self._elems

    def _unindex(self, elem:CmdElement) -> None:
        """ after removal of an option, point its name at the last remaining option of that name """
        match elem:
            case Option() if self._options.get(elem.name) is elem:
                remaining = [x for x in self._sharing_elems() if isinstance(x, Option) and x.name == elem.name]
                if bool(remaining):
                    self._options[elem.name] = remaining[-1]
                else:
                    del self._options[elem.name]
            case _:
                pass

    def _remove_at(self, index:int) -> CmdElement:
        elem = self._elems.pop(index)
        if 0 < self._cursor and index <= self._cursor:
            self._cursor -= 1
        self._unindex(elem)
        return elem

    ##-- end index maintenance

    ##-- building

    def append(self, elem:CmdElement) -> CmdLine:
        match elem:
            case Arg() | Option():
                self._elems.append(elem)
                self._index(elem)
            case _:
                raise TypeError("Only Arg or Option elements can be added to a command line", elem)

        return self

    def insert(self, index:int, elem:CmdElement) -> CmdLine:
        if not (0 <= index <= len(self._elems)):
            raise IndexError("Insertion index out of range", index, len(self._elems))

        match elem:
            case Arg() | Option():
                self._elems.insert(index, elem)
                self._index(elem)
            case _:
                raise TypeError("Only Arg or Option elements can be added to a command line", elem)

        return self

    def add_arg(self, name:str, *, index:None|int=None) -> CmdLine:
        match index:
            case None:
                return self.append(Arg(name))
            case int():
                return self.insert(index, Arg(name))

    def add_opt(self, name:str, value:None|str=None) -> CmdLine:
        return self.append(Option(name, value))

    ##-- end building

    ##-- positional access

    def element_at(self, index:int) -> CmdElement:
        if not (0 <= index < len(self._elems)):
            raise IndexError("Command line index out of range", index, len(self._elems))
        return self._elems[index]

    def first(self) -> CmdElement:
        return self.element_at(0)

    def last(self) -> CmdElement:
        return self.element_at(len(self._elems) - 1)

    def size(self) -> int:
        return len(self._elems)

    def is_empty(self) -> bool:
        return not bool(self._elems)

    ##-- end positional access

    ##-- cursor iteration

    def has_next(self) -> bool:
        return self._cursor < len(self._elems)

    def peek_next(self) -> CmdElement:
        if not self.has_next():
            raise IndexError("No next element in command line", self._cursor)
        return self._elems[self._cursor]

    def next(self) -> CmdElement:
        elem          = self.peek_next()
        self._cursor += 1
        return elem

    def reset(self) -> None:
        self._cursor = 0

    def is_next_arg(self) -> bool:
        """ check has_next() first """
        return isinstance(self._elems[self._cursor], Arg)

    def is_next_option(self) -> bool:
        """ check has_next() first """
        return isinstance(self._elems[self._cursor], Option)

    def next_arg_or_fail(self) -> Arg:
        """ Consume the next element, only if it is an Arg """
        if not (self.has_next() and self.is_next_arg()):
            raise cmdlinekit.errors.InputError("Argument expected")

        return self.next()

    def next_arg_among(self, names:Iterable[str]) -> Arg:
        """ Consume the next element as an Arg, which has to be one of the given names.
          A name mismatch is reported after the Arg has been consumed.
        """
        names = list(names)
        arg   = self.next_arg_or_fail()
        if arg.name_equals(*names):
            return arg

        raise cmdlinekit.errors.InputError("One of the following arguments expected: %s", CHOICE_JOIN.join(names))

    ##-- end cursor iteration

    ##-- removal

    def filter_args(self) -> CmdLine:
        """ A new command line of just the Args, which still shares this command line's options.
          Options added to the view are indexed in the shared map, so they are visible from the source too.
        """
        return CmdLine._build([x for x in self._elems if isinstance(x, Arg)], self._options, source=self)

    def remove_option(self, name:str) -> CmdLine:
        """ Remove every option with the given name """
        for i in reversed(range(len(self._elems))):
            match self._elems[i]:
                case Option() as opt if opt.name == name:
                    logging.debug("Removing Option: %s at %s", name, i)
                    self._remove_at(i)
                case _:
                    pass

        return self

    def remove_first(self) -> CmdElement:
        if not bool(self._elems):
            raise IndexError("Cannot remove from an empty command line")

        return self._remove_at(0)

    def remove_first_arg(self) -> None|Arg:
        """ Remove the first element, returning it only if it is an Arg """
        match self.remove_first():
            case Arg() as arg:
                return arg
            case _:
                return None

    ##-- end removal

    ##-- option queries

    def option_named(self, name:str) -> None|Option:
        return self._options.get(name, None)

    def option_named_or_fail(self, name:str) -> Option:
        match self._options.get(name, None):
            case None:
                raise cmdlinekit.errors.InputError("Option '%s' not specified", name)
            case opt:
                return opt

    def option_named_or_empty(self, name:str) -> Option:
        """ The named option, or a new valueless option when there isn't one """
        return self._options.get(name, None) or Option(name)

    def option_or_default(self, name:str, default:str) -> Option:
        """ The named option, or a new one with the default value when missing or valueless """
        match self._options.get(name, None):
            case Option() as opt if opt.is_set():
                return opt
            case _:
                return Option(name, default)

    def require_option(self, name:str, require_value:bool=False) -> Option:
        opt = self.option_named_or_fail(name)
        if require_value and opt.is_null():
            raise cmdlinekit.errors.InputError("Option '%s' must have a value", name)

        return opt

    def require_option_with_value(self, name:str, value:str) -> Option:
        opt = self.require_option(name, require_value=True)
        if opt.value != value:
            raise cmdlinekit.errors.InputError("Option '%s' expects value '%s'", name, value)

        return opt

    def require_option_with_one_of(self, name:str, values:Iterable[str]) -> Option:
        values = list(values)
        opt    = self.require_option(name, require_value=True)
        if opt.value not in values:
            raise cmdlinekit.errors.InputError("Option '%s' expects one of the following values: %s",
                                               name, CHOICE_JOIN.join(values))

        return opt

    def contains_option(self, name:str, *, require_value:bool=False, value:None|str=None) -> bool:
        """ Whether an option of this name exists.
          If require_value, it must also have a value.
          If value is given, the option's value must equal it.
        """
        match self._options.get(name, None):
            case None:
                return False
            case Option() as opt if value is not None:
                return opt.value == value
            case Option() as opt if require_value:
                return opt.is_set()
            case _:
                return True

    def all_options(self) -> list[Option]:
        return [x for x in self._elems if isinstance(x, Option)]

    def remaining_options(self) -> list[Option]:
        return [x for x in self._elems[self._cursor:] if isinstance(x, Option)]

    ##-- end option queries

    ##-- rendering

    @staticmethod
    def _render(elem:CmdElement) -> list[str]:
        match elem:
            case Arg():
                return [elem.name]
            case Option() if elem.is_set():
                return [f"{DASH}{elem.name}", elem.value]
            case Option():
                return [f"{DASH}{elem.name}"]
            case _:
                raise TypeError("Unrenderable command line element", elem)

    def to_array(self) -> list[str]:
        """ As an argv style list, eg: for subprocess """
        return list(itz.chain.from_iterable(map(self._render, self._elems)))

    def to_array_options_first(self) -> list[str]:
        args, opts = mitz.partition(lambda x: isinstance(x, Option), self._elems)
        return list(itz.chain.from_iterable(map(self._render, itz.chain(opts, args))))

    def to_array_options_last(self) -> list[str]:
        args, opts = mitz.partition(lambda x: isinstance(x, Option), self._elems)
        return list(itz.chain.from_iterable(map(self._render, itz.chain(args, opts))))

    def to_text(self) -> str:
        return SPACE.join(str(x) for x in self._elems)

    ##-- end rendering

    def clone(self) -> CmdLine:
        """ A copy with its own element list and option index, sharing the elements themselves """
        return CmdLine._build(list(self._elems), dict(self._options))

    def exec(self, *, cwd:None|pl.Path=None, env:None|Mapping[str, str]=None) -> ExecHandle:
        """ Run this command line as an external process """
        from cmdlinekit.control.process import ExecHandle
        return ExecHandle.start(self.to_array(), cwd=cwd, env=env)

    def __copy__(self) -> CmdLine:
        return self.clone()

    def __len__(self) -> int:
        return len(self._elems)

    def __iter__(self) -> Iterator[CmdElement]:
        """ Iterates over a snapshot of the elements. Does not touch the cursor """
        return iter(list(self._elems))

    def __getitem__(self, index:int) -> CmdElement:
        return self.element_at(index)

    def __str__(self):
        return self.to_text()

    def __repr__(self):
        return f"<CmdLine: {self.to_text()!r} @ {self._cursor}>"
