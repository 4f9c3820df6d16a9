#!/usr/bin/env python3
"""

"""
##-- imports
from __future__ import annotations

import logging as logmod
import pathlib as pl
##-- end imports
logging = logmod.root

import pytest
from tomlguard import TomlGuard
import cmdlinekit
import cmdlinekit.errors

class TestBasic:

    def test_version(self):
        assert(isinstance(cmdlinekit.__version__, str))

    def test_parse(self):
        result = cmdlinekit.parse("a -b c")
        assert(isinstance(result, cmdlinekit.CmdLine))
        assert(result.option_named("b").value == "c")

    def test_default_config(self):
        config = cmdlinekit.load_config()
        assert(isinstance(config, TomlGuard))
        assert(config.console.prompt == "> ")
        assert(config.on_fail(0, int).help.width() == 80)

    def test_user_config(self, tmp_path):
        target = tmp_path / "config.toml"
        target.write_text('[console]\nprompt = "$ "\n')
        config = cmdlinekit.load_config(target)
        assert(config.console.prompt == "$ ")
        assert(config.on_fail(None).help.width() is None)

    def test_missing_config_falls_back(self, tmp_path):
        config = cmdlinekit.load_config(tmp_path / "nothing.toml")
        assert(config.console.prompt == "> ")

class TestErrors:

    def test_formatting(self):
        err = cmdlinekit.errors.InputError("Option '%s' not specified", "blah")
        assert(str(err) == "Option 'blah' not specified")

    def test_formatting_fallback(self):
        err = cmdlinekit.errors.InputError("no args %s %s", "blah")
        assert(str(err) == str(("no args %s %s", "blah")))

    def test_hierarchy(self):
        assert(issubclass(cmdlinekit.errors.InputError, cmdlinekit.errors.UserError))
        assert(issubclass(cmdlinekit.errors.DeclarationError, ValueError))
        assert(not issubclass(cmdlinekit.errors.CommandNotFoundError, cmdlinekit.errors.InputError))
