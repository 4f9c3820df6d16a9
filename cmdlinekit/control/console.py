#!/usr/bin/env python3
"""
A minimal read-eval-print console.

Each line is parsed into a CmdLine, the leading Arg names the command,
and the rest of the CmdLine is handed to that command in a Context.

    factory = DictCommandFactory({"echo": EchoCommand})
    CommandConsole(factory).start()

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Mapping, TextIO

# ##-- end stdlib imports

# ##-- 3rd party imports
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
import cmdlinekit
import cmdlinekit.errors
from cmdlinekit._interface import (DEFAULT_PROMPT, DEFAULT_WIDTH, PRINTER_NAME,
                                   Command_p, CommandFactory_p,
                                   ConsoleListener_i)
from cmdlinekit._structs.cmdline import CmdLine

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
printer = logmod.getLogger(PRINTER_NAME)
##-- end logging

@dataclass
class Context:
    """ What a command is executed with """
    console  : CommandConsole
    cmd_line : CmdLine
    name     : str
    data     : dict = field(default_factory=dict)

class DictCommandFactory(CommandFactory_p):
    """ Looks up commands by name, building a new instance for each lookup """

    def __init__(self, commands:None|Mapping[str, Callable[[], Command_p]]=None):
        self._commands : dict[str, Callable[[], Command_p]] = dict(commands or {})

    def add(self, name:str, command:Callable[[], Command_p]) -> DictCommandFactory:
        self._commands[name] = command
        return self

    def names(self) -> list[str]:
        return sorted(self._commands.keys())

    def get_ctor_for(self, name:str) -> Callable[[], Command_p]:
        match self._commands.get(name, None):
            case None:
                raise cmdlinekit.errors.CommandNotFoundError("No command registered for: %s", name)
            case ctor:
                return ctor

    def get_command_for(self, name:str) -> Command_p:
        return self.get_ctor_for(name)()

    def __contains__(self, name:str) -> bool:
        return name in self._commands

class ConsoleListener(ConsoleListener_i):
    """ The default listener, reports console events to the user """

    def on_start(self, console:CommandConsole) -> None:
        banner = console.config.on_fail(None).console.banner()
        if banner is not None:
            console.println(banner, colour="banner")

    def on_abort(self, console:CommandConsole) -> None:
        console.println("Bye")

    def on_command_not_found(self, console:CommandConsole, name:str) -> None:
        console.println(f"Command not found: {name}", colour="error")

class CommandConsole:
    """
      Loops on: prompt, read, parse, dispatch.
      InputErrors and unknown commands are reported and the loop continues,
      an AbortError, or the end of input, stops it.

      Output goes to `stdout` if given, otherwise through the printer logger.
    """

    def __init__(self, factory:CommandFactory_p, *, config:None|TomlGuard=None, stdin:None|TextIO=None, stdout:None|TextIO=None, listener:None|ConsoleListener_i=None):
        self.factory   = factory
        self.config    = config if config is not None else cmdlinekit.load_config()
        self.listener  = listener or ConsoleListener()
        self._in       = stdin or sys.stdin
        self._out      = stdout

    @property
    def out(self) -> None|TextIO:
        return self._out

    @property
    def width(self) -> int:
        return self.config.on_fail(DEFAULT_WIDTH, int).help.width()

    def prompt(self) -> None:
        prompt = self.config.on_fail(DEFAULT_PROMPT, str).console.prompt()
        match self._out:
            case None:
                sys.stdout.write(prompt)
                sys.stdout.flush()
            case out:
                out.write(prompt)

    def read_line(self) -> None|str:
        """ The next line of input, or None at the end of input """
        line = self._in.readline()
        if not bool(line):
            return None
        return line.strip()

    def println(self, text:str="", *, colour:None|str=None) -> None:
        """ Print a line. `colour` names a role the printer's formatter colours by, see utils.log_colour """
        match self._out:
            case None:
                printer.info(text, extra={"colour": colour})
            case out:
                print(text, file=out)

    def new_context(self, name:str, cmd_line:CmdLine) -> Context:
        return Context(console=self, cmd_line=cmd_line, name=name)

    def start(self) -> None:
        self.listener.on_start(self)
        while True:
            name = None
            try:
                self.prompt()
                match self.read_line():
                    case None:
                        self.listener.on_abort(self)
                        break
                    case "":
                        continue
                    case str() as line:
                        cmd_line = CmdLine.parse(line)

                if cmd_line.is_empty():
                    continue

                if not cmd_line.is_next_arg():
                    self.println("Command name expected", colour="notice")
                    continue

                name    = cmd_line.remove_first_arg().name
                command = self.factory.get_command_for(name)
                logging.debug("Executing Command: %s : %s", name, cmd_line)
                command.execute(self.new_context(name, cmd_line))
            except cmdlinekit.errors.InputError as err:
                self.println(str(err), colour="error")
            except cmdlinekit.errors.AbortError:
                self.listener.on_abort(self)
                break
            except cmdlinekit.errors.CommandNotFoundError:
                self.listener.on_command_not_found(self, name)
