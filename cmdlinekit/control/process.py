#!/usr/bin/env python3
"""
Running a command line as an external process.

    with cmd.exec() as handle:
        out, err = handle.communicate()

"""
##-- imports
from __future__ import annotations

import logging as logmod
import pathlib as pl
import subprocess
from typing import TYPE_CHECKING, Any, Mapping, Sequence, TextIO

##-- end imports

import cmdlinekit.errors

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class ExecHandle:
    """ Wraps a spawned process and its output streams. Close it when done. """

    def __init__(self, process:subprocess.Popen):
        self._process = process

    @staticmethod
    def start(args:Sequence[str], *, cwd:None|pl.Path=None, env:None|Mapping[str, str]=None) -> ExecHandle:
        if not bool(args):
            raise cmdlinekit.errors.InputError("Nothing to execute")

        logging.debug("Spawning: %s", args)
        try:
            process = subprocess.Popen(list(args),
                                       cwd=cwd,
                                       env=None if env is None else dict(env),
                                       stdout=subprocess.PIPE,
                                       stderr=subprocess.PIPE,
                                       text=True)
        except (FileNotFoundError, PermissionError) as err:
            raise cmdlinekit.errors.InputError("Could not execute: %s", args[0]) from err

        return ExecHandle(process)

    @property
    def process(self) -> subprocess.Popen:
        return self._process

    @property
    def stdout(self) -> None|TextIO:
        return self._process.stdout

    @property
    def stderr(self) -> None|TextIO:
        return self._process.stderr

    def wait(self, timeout:None|float=None) -> int:
        return self._process.wait(timeout=timeout)

    def communicate(self, timeout:None|float=None) -> tuple[str, str]:
        return self._process.communicate(timeout=timeout)

    def close(self) -> None:
        """ Close the streams, and stop the process if it is still running """
        for stream in (self._process.stdout, self._process.stderr):
            if stream is not None:
                stream.close()

        if self._process.poll() is None:
            logging.debug("Killing still running process: %s", self._process.pid)
            self._process.kill()
            self._process.wait()

    def __enter__(self) -> ExecHandle:
        return self

    def __exit__(self, *exc) -> bool:
        self.close()
        return False
