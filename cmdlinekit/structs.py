#!/usr/bin/env python3
"""
Public Access point for cmdlinekit Structures
"""
from __future__ import annotations

from cmdlinekit._structs.element import CmdElement, Arg, Option
from cmdlinekit._structs.cmdline import CmdLine
from cmdlinekit._structs.option_def import OptionDef, Options, OptionsBuilder
