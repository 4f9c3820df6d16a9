#!/usr/bin/env python3
"""
Built-in console commands.

A command has a `desc`, optionally an `options` declaration it validates its
command line against, and an `execute(ctx)` method.

"""
##-- imports
from __future__ import annotations

import abc
import logging as logmod
from typing import TYPE_CHECKING, ClassVar

##-- end imports

import cmdlinekit.errors
from cmdlinekit._interface import SPACE, Command_p
from cmdlinekit._structs.option_def import Options, OptionsBuilder

if TYPE_CHECKING:
    from tomlguard import TomlGuard
    from cmdlinekit.control.console import Context, DictCommandFactory

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class BaseCommand(Command_p, abc.ABC):
    """ Validates the context's command line before running """

    desc    : ClassVar[str]           = "An undescribed command"
    options : ClassVar[None|Options]  = None

    def execute(self, ctx:Context) -> None:
        if self.options is not None:
            self.options.validate(ctx.cmd_line)
        self._execute(ctx)

    @abc.abstractmethod
    def _execute(self, ctx:Context) -> None:
        pass

class QuitCommand(BaseCommand):

    desc    = "Leave the console"
    options = OptionsBuilder().build_options()

    def _execute(self, ctx:Context) -> None:
        raise cmdlinekit.errors.AbortError("Quit requested by: %s", ctx.name)

class EchoCommand(BaseCommand):
    """ echo [-times <n>] words... """

    desc    = "Print the given arguments"
    options = (OptionsBuilder()
               .name("times").value_name("n").desc("how many times to print").must_have_value().option()
               .display_value_name()
               .build_options())

    def _execute(self, ctx:Context) -> None:
        times = ctx.cmd_line.option_or_default("times", "1").as_int()
        words = ctx.cmd_line.filter_args()
        text  = SPACE.join(x.name for x in words)
        for _ in range(times):
            ctx.console.println(text)

class ExecCommand(BaseCommand):
    """ exec program args...
      Runs the rest of the command line as an external process.
      Options are passed through, not validated.
    """

    desc = "Run an external program"

    def _execute(self, ctx:Context) -> None:
        with ctx.cmd_line.exec() as handle:
            out, err = handle.communicate()

        for text in (out, err):
            if bool(text):
                ctx.console.println(text.rstrip())

class HelpCommand(BaseCommand):
    """ help [command] """

    desc    = "List commands, or show a command's options"
    options = OptionsBuilder().build_options()

    def _execute(self, ctx:Context) -> None:
        factory = ctx.console.factory
        if not ctx.cmd_line.has_next():
            for name in factory.names():
                ctor = factory.get_ctor_for(name)
                ctx.console.println(f"{name:<15} : {getattr(ctor, 'desc', '')}")
            return

        target  = ctx.cmd_line.next_arg_or_fail().name
        if target not in factory:
            raise cmdlinekit.errors.InputError("No such command: %s", target)

        ctor    = factory.get_ctor_for(target)
        caption = f"{target} : {getattr(ctor, 'desc', '')}"
        match getattr(ctor, "options", None):
            case Options() as opts if bool(opts):
                opts.display_help(caption, out=ctx.console.out, width=ctx.console.width)
            case _:
                ctx.console.println(caption)

def builtin_factory(config:TomlGuard) -> DictCommandFactory:
    """ A factory holding the built-in commands, with quit registered under each abort command name """
    from cmdlinekit.control.console import DictCommandFactory
    factory = DictCommandFactory({
        "echo" : EchoCommand,
        "exec" : ExecCommand,
        "help" : HelpCommand,
        })
    for name in config.on_fail(["quit"], list).console.abort_commands():
        factory.add(name, QuitCommand)

    return factory
