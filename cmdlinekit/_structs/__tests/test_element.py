#!/usr/bin/env python3
"""

"""
##-- imports
from __future__ import annotations

import logging as logmod
from typing import (Any, Callable, ClassVar, Generic, Iterable, Iterator,
                    Mapping, Match, MutableMapping, Sequence, Tuple, TypeAlias,
                    TypeVar, cast)
##-- end imports
logging = logmod.root

import pytest
import cmdlinekit.errors
from cmdlinekit.structs import Arg, CmdElement, Option

class TestArg:

    def test_initial(self):
        arg = Arg("blah")
        assert(isinstance(arg, CmdElement))
        assert(arg.name == "blah")

    def test_str(self):
        assert(str(Arg("blah")) == "blah")

    def test_name_required(self):
        with pytest.raises(ValueError):
            Arg(None)

    def test_name_equals(self):
        arg = Arg("blah")
        assert(arg.name_equals("bloo", "blah"))
        assert(not arg.name_equals("bloo", "aweg"))
        assert(not arg.name_equals())

class TestOption:

    def test_initial(self):
        opt = Option("blah")
        assert(isinstance(opt, CmdElement))
        assert(opt.value is None)
        assert(opt.is_null())
        assert(not opt.is_set())

    def test_with_value(self):
        opt = Option("blah", "val")
        assert(opt.value == "val")
        assert(opt.is_set())

    def test_str(self):
        assert(str(Option("blah")) == "-blah")
        assert(str(Option("blah", "val")) == "-blah val")

    def test_repr(self):
        assert(repr(Option("blah", "val")) == "<Option: -blah=val>")
        assert(repr(Option("blah")) == "<Option: -blah>")

    def test_value_or_fail(self):
        assert(Option("a", "b").value_or_fail() == "b")
        with pytest.raises(cmdlinekit.errors.InputError):
            Option("a").value_or_fail()

    def test_value_or_default_str(self):
        assert(Option("a").value_or_default("def") == "def")
        assert(Option("a", "val").value_or_default("def") == "val")

    def test_value_or_default_bool(self):
        assert(Option("a").value_or_default(False) is False)
        assert(Option("a", "yes").value_or_default(False) is True)
        assert(Option("a", "no").value_or_default(True) is False)

    def test_value_or_default_int(self):
        assert(Option("a").value_or_default(5) == 5)
        assert(Option("a", "12").value_or_default(5) == 12)

    def test_as_int(self):
        assert(Option("a", "-3").as_int() == -3)

    @pytest.mark.parametrize("value", [None, "blah", "1.5"])
    def test_as_int_fail(self, value):
        with pytest.raises(cmdlinekit.errors.InputError):
            Option("a", value).as_int()

    @pytest.mark.parametrize("value,expected", [
        (None, True),
        ("true", True),
        ("TRUE", True),
        ("y", True),
        ("Yes", True),
        ("false", False),
        ("no", False),
        ("1", False),
    ])
    def test_as_bool(self, value, expected):
        assert(Option("a", value).as_bool() is expected)

    def test_split_value(self):
        assert(Option("a", "b,c,,d").split_value() == ["b", "c", "d"])
        assert(Option("a", "b:c").split_value(":") == ["b", "c"])
        assert(Option("a").split_value() == [])
