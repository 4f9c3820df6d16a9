#!/usr/bin/env python3
"""
These are the cmdlinekit specific errors that can occur
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
# ##-- end stdlib imports

# ##-- Generated Exports
__all__ = ( # noqa: RUF022

# -- Classes
"AbortError",
"CmdLineError",
"CommandNotFoundError",
"ControlError",
"DeclarationError",
"InputError",
"StructError",
"UserError",

)
# ##-- end Generated Exports

# ##-- 1st party imports
from ._base import CmdLineError, ControlError, StructError, UserError
from .control import AbortError, CommandNotFoundError
from .input import InputError
from .struct import DeclarationError
# ##-- end 1st party imports
