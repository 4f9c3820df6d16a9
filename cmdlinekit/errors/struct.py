#!/usr/bin/env python3
"""
Errors raised when building declarations incorrectly.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from ._base import StructError

class DeclarationError(StructError, ValueError):
    """ An option declaration was committed without the data it needs. Caller error. """
    general_msg = "Bad Option Declaration:"
    pass
