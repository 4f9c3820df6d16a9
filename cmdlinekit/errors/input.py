#!/usr/bin/env python3
"""
Errors for command lines that don't have the shape a caller asked for.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from ._base import UserError

class InputError(UserError):
    """ User supplied command-line content failed a declared or requested shape.
      Recoverable: the command line it was raised from is left intact.
    """
    general_msg = "Invalid Input:"
    pass
