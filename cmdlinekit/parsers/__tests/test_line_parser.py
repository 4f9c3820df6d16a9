#!/usr/bin/env python3
"""

"""
##-- imports
from __future__ import annotations

import logging as logmod
import pathlib as pl
from typing import (Any, Callable, ClassVar, Generic, Iterable, Iterator,
                    Mapping, Match, MutableMapping, Sequence, Tuple, TypeAlias,
                    TypeVar, cast)
##-- end imports
logging = logmod.root

import pytest
from cmdlinekit.parsers.line_parser import LineParser
from cmdlinekit.structs import Arg, CmdLine, Option

EXAMPLE = 'arg1 arg2 -opt1 val1 arg3 -opt2 val2 -opt3 "opt3 value" -opt4 -opt5'

class TestLineParser:

    def test_initial(self):
        parser = LineParser()
        assert(isinstance(parser.parse(""), CmdLine))

    def test_empty(self):
        result = LineParser().parse("")
        assert(result.is_empty())
        assert(len(result) == 0)

    def test_only_spaces(self):
        result = LineParser().parse("    ")
        assert(result.is_empty())

    def test_example_args(self):
        result = LineParser().parse(EXAMPLE)
        args   = [x.name for x in result if isinstance(x, Arg)]
        assert(args == ["arg1", "arg2", "arg3"])

    def test_example_options(self):
        result = LineParser().parse(EXAMPLE)
        opts   = [(x.name, x.value) for x in result if isinstance(x, Option)]
        assert(opts == [("opt1", "val1"),
                        ("opt2", "val2"),
                        ("opt3", "opt3 value"),
                        ("opt4", None),
                        ("opt5", None)])

    def test_example_first_last(self):
        result = LineParser().parse(EXAMPLE)
        assert(isinstance(result.first(), Arg))
        assert(result.first().name == "arg1")
        assert(isinstance(result.last(), Option))
        assert(result.last().name == "opt5")
        assert(len(result) == 8)

    def test_value_attaches_once(self):
        result = LineParser().parse("-opt val extra")
        assert(len(result) == 2)
        assert(result.first().value == "val")
        assert(isinstance(result.last(), Arg))
        assert(result.last().name == "extra")

    def test_option_after_option(self):
        result = LineParser().parse("-a -b val")
        assert(result.element_at(0).value is None)
        assert(result.element_at(1).value == "val")

    def test_multiple_spaces(self):
        result = LineParser().parse("a   b")
        assert([x.name for x in result] == ["a", "b"])

    def test_quoted_arg(self):
        result = LineParser().parse('start "Hello World"')
        assert(result.last().name == "Hello World")

    def test_quoted_within_token(self):
        result = LineParser().parse('ab"c d"e')
        assert(len(result) == 1)
        assert(result.first().name == "abc de")

    def test_escaped_quote_is_literal(self):
        result = LineParser().parse('say \\"hi\\"')
        assert(len(result) == 2)
        assert(result.last().name == '\\"hi\\"')

    def test_escaped_quote_doesnt_toggle(self):
        result = LineParser().parse('a\\" b')
        assert(len(result) == 2)

    def test_unterminated_quote(self):
        result = LineParser().parse('a "b c')
        assert(len(result) == 2)
        assert(result.last().name == "b c")

    def test_empty_quotes_are_dropped(self):
        result = LineParser().parse('a "" b')
        assert([x.name for x in result] == ["a", "b"])

    def test_lone_dash(self):
        result = LineParser().parse("-")
        assert(isinstance(result.first(), Option))
        assert(result.first().name == "")

    def test_double_dash_keeps_second_dash(self):
        result = LineParser().parse("--long")
        assert(result.first().name == "-long")

    def test_quoted_dash_is_option(self):
        result = LineParser().parse('"-x"')
        assert(isinstance(result.first(), Option))

    def test_option_value_can_look_numeric(self):
        result = LineParser().parse("-n 10")
        assert(result.option_named("n").as_int() == 10)

    def test_parse_list(self):
        result = LineParser().parse(["start", "app", "-log", "debug"])
        assert(result.to_array() == ["start", "app", "-log", "debug"])

    def test_parse_list_resplits_tokens(self):
        result = LineParser().parse(["hello world", "-x"])
        assert([x.name for x in result] == ["hello", "world", "x"])

    def test_parse_tuple(self):
        result = LineParser().parse(("a", "b"))
        assert(len(result) == 2)

    def test_parse_bad_type(self):
        with pytest.raises(TypeError):
            LineParser().parse(10)

    def test_cmdline_parse_delegates(self):
        result = CmdLine.parse(EXAMPLE)
        assert(len(result) == 8)

    @pytest.mark.parametrize("line", [
        "a b c",
        "cmd -opt val arg",
        "-a -b -c",
        "x -y z -w",
    ])
    def test_text_round_trip(self, line):
        first  = LineParser().parse(line)
        second = LineParser().parse(first.to_text())
        assert(first.to_text() == line)
        assert([repr(x) for x in first] == [repr(x) for x in second])

    def test_array_round_trip(self):
        first  = LineParser().parse("cmd -opt val arg -flag")
        second = LineParser().parse(first.to_array())
        assert([repr(x) for x in first] == [repr(x) for x in second])
