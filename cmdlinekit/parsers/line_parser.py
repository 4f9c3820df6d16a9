##-- imports
from __future__ import annotations

import enum
import logging as logmod
from typing import TYPE_CHECKING, Sequence

##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from cmdlinekit._abstract import LineParser_i
from cmdlinekit._interface import DASH, ESCAPE, QUOTE, SPACE
from cmdlinekit._structs.cmdline import CmdLine
from cmdlinekit._structs.element import Arg, Option

class LineParser(LineParser_i):
    """
    Tokenize a line into a CmdLine, in a single left to right pass:

    - spaces separate tokens, unless inside double quotes.
    - a double quote toggles quoting, unless preceded by a backslash,
      in which case it is kept as a literal.
    - a token starting with '-' is an Option, named by the rest of the token.
    - a bare token directly after a valueless Option becomes that Option's value,
      otherwise it is an Arg.

    Unterminated quotes are not an error, the line just ends quoted.
    """

    class _QuoteState(enum.Enum):
        OUT = enum.auto()
        IN  = enum.auto()

    def parse(self, line:str|Sequence[str]) -> CmdLine:
        match line:
            case str():
                return self._parse_text(line)
            case [*xs]:
                # Tokens are re-joined and re-split,
                # so a token containing spaces or quotes is not kept whole
                return self._parse_text(SPACE.join(xs))
            case _:
                raise TypeError("Can only parse a string or a sequence of strings", line)

    def _parse_text(self, line:str) -> CmdLine:
        logging.debug("Parsing Line: %s", line)
        QS     = LineParser._QuoteState
        cmd    = CmdLine()
        buffer = []
        state  = QS.OUT

        for i, char in enumerate(line):
            match char, state:
                case x, QS.IN if x == SPACE:
                    buffer.append(char)
                case x, QS.OUT if x == SPACE:
                    self._flush(cmd, buffer)
                case x, _ if x == QUOTE and 0 < i and line[i-1] == ESCAPE:
                    buffer.append(char)
                case x, QS.OUT if x == QUOTE:
                    state = QS.IN
                case x, QS.IN if x == QUOTE:
                    state = QS.OUT
                case _:
                    buffer.append(char)
        else:
            self._flush(cmd, buffer)

        if state is QS.IN:
            logging.debug("Line ended inside quotes: %s", line)

        return cmd

    def _flush(self, cmd:CmdLine, buffer:list[str]) -> None:
        """ Turn the buffered characters into an element of the cmd, then clear the buffer """
        if not bool(buffer):
            return

        token = "".join(buffer)
        buffer.clear()

        match token:
            case str() if token.startswith(DASH):
                cmd.append(Option(token.removeprefix(DASH)))
            case _ if cmd.is_empty():
                cmd.append(Arg(token))
            case _:
                match cmd.last():
                    case Option() as opt if opt.is_null():
                        logging.debug("Attaching value to Option: %s = %s", opt.name, token)
                        opt._set_value(token)
                    case _:
                        cmd.append(Arg(token))
