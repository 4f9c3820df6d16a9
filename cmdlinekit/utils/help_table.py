#!/usr/bin/env python3
"""
A plain text, fixed width table for option help.

"""
##-- imports
from __future__ import annotations

import itertools as itz
import logging as logmod
import textwrap
from typing import TYPE_CHECKING, Final, Iterable, TextIO

##-- end imports

from cmdlinekit._interface import DEFAULT_WIDTH, PRINTER_NAME

##-- logging
logging = logmod.getLogger(__name__)
printer = logmod.getLogger(PRINTER_NAME)
##-- end logging

NAME_SHARE     : Final[float] = 0.35
REQUIRED_SHARE : Final[float] = 0.12
COL_SEP        : Final[str]   = " "

class HelpTable:
    """ Three columns: option name, required/optional, description.
      Cells longer than their column wrap onto following lines.
    """

    def __init__(self, *, width:int=DEFAULT_WIDTH):
        name_total          = int(width * NAME_SHARE)
        required_total      = int(width * REQUIRED_SHARE)
        self.widths         = (max(1, name_total - 2),
                               max(1, required_total - 1),
                               max(1, width - (name_total + required_total) - 2))

    def _row_lines(self, row:tuple[str, ...]) -> list[str]:
        wrapped = [textwrap.wrap(cell, width=w) or [""] for cell, w in zip(row, self.widths)]
        lines   = []
        for parts in itz.zip_longest(*wrapped, fillvalue=""):
            cells = [part.ljust(w) for part, w in zip(parts, self.widths)]
            lines.append(COL_SEP.join(cells).rstrip())

        return lines

    def render(self, rows:Iterable[tuple[str, str, str]], *, caption:None|str=None) -> list[str]:
        lines = []
        if bool(caption):
            lines += [caption, ""]

        for row in rows:
            lines += self._row_lines(row)

        return lines

    def display(self, rows:Iterable[tuple[str, str, str]], *, caption:None|str=None, out:None|TextIO=None) -> None:
        for line in self.render(rows, caption=caption):
            match out:
                case None:
                    printer.info(line)
                case _:
                    print(line, file=out)
