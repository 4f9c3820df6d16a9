#!/usr/bin/env python3
"""
Errors that steer the console loop.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from ._base import ControlError

class AbortError(ControlError):
    """ A command asked the console to stop looping """
    general_msg = "Console Aborted:"
    pass

class CommandNotFoundError(ControlError):
    """ No command is registered under the requested name """
    general_msg = "Command Not Found:"

    @property
    def name(self) -> str:
        match self.args:
            case [_, str() as name, *_]:
                return name
            case _:
                return str(self)
