#!/usr/bin/env python3
"""
cmdlinekit : parse, inspect, and validate command lines,
with a minimal console to dispatch them to commands.

"""
# Imports:
from __future__ import annotations

import logging as logmod
import pathlib as pl

import tomlguard
from tomlguard import TomlGuard

from ._interface import __version__, config_file
from .structs import Arg, CmdElement, CmdLine, Option, OptionDef, Options, OptionsBuilder

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

def load_config(path:None|pl.Path=None) -> TomlGuard:
    """ Load the default config, or a user's config file if given """
    match path:
        case None:
            logging.debug("Loading default config")
            return tomlguard.read(config_file.read_text())
        case pl.Path() | str() if pl.Path(path).exists():
            logging.debug("Loading config: %s", path)
            return tomlguard.read(pl.Path(path).read_text())
        case _:
            logging.warning("Config file not found, using defaults: %s", path)
            return tomlguard.read(config_file.read_text())

def parse(line:str|list[str]) -> CmdLine:
    """ Tokenize a line, or a list of args, into a CmdLine """
    return CmdLine.parse(line)
