#!/usr/bin/env python3
"""
Log formatters that add, or strip, terminal colours.

The console tags its messages with a role through `extra`:
    printer.info("Command not found: x", extra={"colour": "error"})

ColourFormatter colours a record by that role, or by its level when untagged.
ColourStripFormatter removes colour codes, for files and plain streams.
Colours come from `sty`.
"""
##-- imports
from __future__ import annotations

import logging
import re
from typing import ClassVar, Final

from sty import ef, fg, rs
##-- end imports

COLOUR_RESET  : Final[str]                 = rs.all
ANSI_CODE_RE  : Final[re.Pattern]          = re.compile(r"\x1b\[[\d;]*m")

LEVEL_COLOURS : Final[dict[int, str]]      = {
    logging.DEBUG    : fg.grey,
    logging.INFO     : "",
    logging.WARNING  : fg.yellow,
    logging.ERROR    : fg.red,
    logging.CRITICAL : ef.bold + fg.red,
    }

ROLE_COLOURS  : Final[dict[str, str]]      = {
    "banner"  : fg.cyan,
    "error"   : fg.red,
    "notice"  : fg.yellow,
    "title"   : ef.bold,
    }

class ColourFormatter(logging.Formatter):
    """
    Brace style formatter for terminals.
    A record's `colour` role wins over its level. Unknown roles fall back to the level.
    """

    _default_fmt      : ClassVar[str] = "{levelname:<8} : {message}"
    _default_date_fmt : ClassVar[str] = "%H:%M:%S"

    def __init__(self, *, fmt=None, roles:None|dict[str, str]=None):
        super().__init__(fmt or self._default_fmt, datefmt=self._default_date_fmt, style="{")
        self.roles = dict(ROLE_COLOURS) | (roles or {})

    def colour_for(self, record:logging.LogRecord) -> str:
        match getattr(record, "colour", None):
            case str() as role if role in self.roles:
                return self.roles[role]
            case _:
                return LEVEL_COLOURS.get(record.levelno, "")

    def format(self, record):
        text   = super().format(record)
        colour = self.colour_for(record)
        if not bool(colour):
            return text

        return f"{colour}{text}{COLOUR_RESET}"

class ColourStripFormatter(logging.Formatter):
    """ Brace style formatter that removes any colour codes in the formatted text """

    _default_fmt      : ClassVar[str] = "{asctime} | {levelname:<8} | {name} | {message}"
    _default_date_fmt : ClassVar[str] = "%Y-%m-%d %H:%M:%S"

    def __init__(self, *, fmt=None):
        super().__init__(fmt or self._default_fmt, datefmt=self._default_date_fmt, style="{")

    def format(self, record):
        return ANSI_CODE_RE.sub("", super().format(record))
