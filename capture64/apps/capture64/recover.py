# SPDX-FileCopyrightText: 2019-2022 REFITT Team
# SPDX-License-Identifier: Apache-2.0

"""Recover original bytes from forcibly decoded text."""


# type annotations
from __future__ import annotations
from typing import Optional

# standard libs
import logging
import io
import os
import sys
import functools

# external libs
from cmdkit.app import Application, exit_status
from cmdkit.cli import Interface

# internal libs
from capture64.core.exceptions import log_exception, write_traceback
from capture64.core.recovery import recover_text

# public interface
__all__ = ['RecoverApp', ]

# application logger
log = logging.getLogger('capture64')


PROGRAM = 'capture64 recover'
USAGE = f"""\
usage: {PROGRAM} [-h] FILE [-o PATH]
{__doc__}\
"""

HELP = f"""\
{USAGE}

The input is text (UTF-8) as captured from the host transport.
Recovered bytes are written to stdout unless an output path is given.

arguments:
FILE                    Path to text file ('-' for stdin).

options:
-o, --output     PATH   Write bytes to PATH.
-h, --help              Show this message and exit.\
"""


class RecoverApp(Application):
    """Application class for recover command."""

    interface = Interface(PROGRAM, USAGE, HELP)

    source: str
    interface.add_argument('source', metavar='FILE')

    output: Optional[str] = None
    interface.add_argument('-o', '--output', default=None)

    exceptions = {
        FileNotFoundError: functools.partial(log_exception, logger=log.critical,
                                             status=exit_status.runtime_error),
        Exception: functools.partial(write_traceback, logger=log),
    }

    def run(self) -> None:
        """Business logic for `capture64 recover`."""
        data = recover_text(self.read_text())
        log.debug(f'Recovered {len(data)} bytes')
        if self.output is None:
            sys.stdout.buffer.write(data)
            sys.stdout.buffer.flush()
        else:
            with open(self.output, mode='wb') as stream:
                stream.write(data)

    def read_text(self) -> str:
        """Read full text from input file or stdin."""
        if self.source == '-':
            return io.TextIOWrapper(sys.stdin.buffer, encoding='utf-8', newline='').read()
        if not os.path.isfile(self.source):
            raise FileNotFoundError(f'No such file ({self.source})')
        with open(self.source, mode='r', encoding='utf-8', newline='') as stream:
            return stream.read()
