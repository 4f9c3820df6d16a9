#!/usr/bin/env python3
"""
The cmdlinekit console runner

    python -m cmdlinekit [-config path]

"""
# Imports:
from __future__ import annotations

import logging as logmod
import sys

##-- logging
logging         = logmod.root
logging.setLevel(logmod.WARNING)
##-- end logging

def main():
    import cmdlinekit
    import cmdlinekit.errors
    from cmdlinekit.control.commands import builtin_factory
    from cmdlinekit.control.console import CommandConsole
    from cmdlinekit.structs import CmdLine, OptionsBuilder
    from cmdlinekit.utils.log_config import LogConfig

    options = (OptionsBuilder()
               .name("config").value_name("path").desc("a toml config file").must_have_value().option()
               .display_value_name()
               .build_options())
    cli = CmdLine.parse(sys.argv[1:])
    try:
        options.validate(cli)
    except cmdlinekit.errors.InputError as err:
        print(err, file=sys.stderr)
        options.display_help("usage: cmdlinekit [options]", out=sys.stderr)
        sys.exit(1)

    config = cmdlinekit.load_config(cli.option_named_or_empty("config").value)
    LogConfig().setup(config)
    CommandConsole(builtin_factory(config), config=config).start()

if __name__ == "__main__":
    main()
