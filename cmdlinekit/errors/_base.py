#!/usr/bin/env python3
"""
The base errors of cmdlinekit

"""
# Import:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Body:
class CmdLineError(Exception):
    """
      The base class for all cmdlinekit errors
      will try to % format the first argument with remaining args in str()
    """
    general_msg = "Non-Specific CmdLine Error:"

    def __str__(self):
        try:
            return self.args[0] % self.args[1:]
        except TypeError:
            return str(self.args)

class UserError(CmdLineError):
    pass

class ControlError(CmdLineError):
    pass

class StructError(CmdLineError):
    pass
