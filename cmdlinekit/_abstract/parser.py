#!/usr/bin/env python3
"""

"""
##-- imports
from __future__ import annotations

import abc
import logging as logmod
from typing import TYPE_CHECKING, Sequence

##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

if TYPE_CHECKING:
    from cmdlinekit._structs.cmdline import CmdLine

class LineParser_i:
    """
    A Single standard process point for turning a line of text,
    or a list of already split args, into a CmdLine
    """

    @abc.abstractmethod
    def parse(self, line:str|Sequence[str]) -> CmdLine:
        pass
