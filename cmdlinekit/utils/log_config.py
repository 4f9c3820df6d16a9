#!/usr/bin/env python3
"""
Toml driven logging setup.

A LoggerSpec names a logger, its level, format, and where it writes to.
LogConfig applies the [logging] section of the config:
    [logging.stream]  : the root logger
    [logging.printer] : the printer, which the console uses instead of `print`

"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import pathlib as pl
from sys import stderr, stdout
from typing import TYPE_CHECKING, Any, ClassVar, Final

# ##-- end stdlib imports

# ##-- 3rd party imports
from pydantic import BaseModel, field_validator
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
from cmdlinekit._interface import PRINTER_NAME
from cmdlinekit.utils.log_colour import ColourFormatter, ColourStripFormatter

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

TARGETS : Final[list[str]] = ["file", "stdout", "stderr", "pass"]

class LoggerSpec(BaseModel):
    """
      A Spec for toml defined logging control.
      When 'apply' is called, it gets the logger,
      clears any handlers it previously added, and adds a handler for its target.
    """

    name                       : str
    level                      : str|int        = logmod.WARNING
    format                     : str            = "{levelname:<8} : {message}"
    colour                     : bool           = False
    target                     : str            = "stdout"
    filename                   : None|pl.Path   = None
    propagate                  : bool           = False

    RootName                   : ClassVar[str]  = "root"

    @staticmethod
    def build(data:TomlGuard|dict, **kwargs) -> LoggerSpec:
        match data:
            case TomlGuard():
                as_dict = dict(data._table())
            case dict():
                as_dict = data.copy()
            case _:
                raise TypeError("LoggerSpec can only be built from a dict or TomlGuard", data)

        as_dict.update(kwargs)
        return LoggerSpec.model_validate(as_dict)

    @field_validator("level")
    def _validate_level(cls, val):
        match val:
            case int():
                return val
            case str():
                return logmod.getLevelNamesMapping().get(val.upper(), logmod.WARNING)

    @field_validator("target")
    def _validate_target(cls, val):
        if val not in TARGETS:
            raise ValueError("Unknown target value for LoggerSpec", val)
        return val

    def _build_handler(self) -> None|logmod.Handler:
        match self.target:
            case "pass":
                return None
            case "stdout":
                handler = logmod.StreamHandler(stdout)
            case "stderr":
                handler = logmod.StreamHandler(stderr)
            case "file" if self.filename is None:
                raise ValueError("A file LoggerSpec needs a filename", self.name)
            case "file":
                handler = logmod.FileHandler(self.filename, mode='w')

        match handler:
            case logmod.FileHandler():
                handler.setFormatter(ColourStripFormatter(fmt=self.format))
            case _ if self.colour:
                handler.setFormatter(ColourFormatter(fmt=self.format))
            case _:
                handler.setFormatter(ColourStripFormatter(fmt=self.format))

        handler.setLevel(self.level)
        handler._cmdlinekit_spec = True
        return handler

    def get(self) -> logmod.Logger:
        return logmod.getLogger(self.name if self.name != LoggerSpec.RootName else None)

    def apply(self) -> logmod.Logger:
        """ Apply this spec to the relevant logger """
        logger           = self.get()
        self.clear()
        logger.propagate = self.propagate
        logger.setLevel(self.level)
        match self._build_handler():
            case None:
                pass
            case handler:
                logger.addHandler(handler)

        return logger

    def clear(self) -> None:
        """ Remove handlers previously added by a LoggerSpec """
        logger = self.get()
        for handler in logger.handlers[:]:
            if getattr(handler, "_cmdlinekit_spec", False):
                logger.removeHandler(handler)

    def set_level(self, level:int|str) -> None:
        match level:
            case str():
                level = logmod.getLevelNamesMapping().get(level.upper(), logmod.WARNING)
            case int():
                pass
        logger = self.get()
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

class LogConfig:
    """ Utility class to setup stream and printer logging from config.
      The printer replaces 'print(x)' for user facing output.
    """

    def __init__(self):
        self.stream_spec  = LoggerSpec.build({"format": "{levelname}  : INIT : {message}"}, name=LoggerSpec.RootName)
        self.printer_spec = LoggerSpec.build({"format": "{message}", "level": "INFO"}, name=PRINTER_NAME)

    def setup(self, config:TomlGuard) -> None:
        """ Apply the [logging] section of a config """
        self.stream_spec.clear()
        self.printer_spec.clear()
        self.stream_spec  = LoggerSpec.build(config.on_fail({}).logging.stream(), name=LoggerSpec.RootName)
        self.printer_spec = LoggerSpec.build(config.on_fail({}).logging.printer(), name=PRINTER_NAME)
        self.stream_spec.apply()
        self.printer_spec.apply()
        logging.debug("Logging Setup from config")

    def set_level(self, level:int|str) -> None:
        self.stream_spec.set_level(level)
