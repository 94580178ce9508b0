# SPDX-FileCopyrightText: 2019-2022 REFITT Team
# SPDX-License-Identifier: Apache-2.0

"""Entry-point for capture64 command-line interface."""


# type annotations
from __future__ import annotations

# standard libs
import logging
import sys

# external libs
from cmdkit.app import Application, ApplicationGroup
from cmdkit.cli import Interface

# internal libs
from capture64 import __version__, __description__, __copyright__, __developer__, __contact__, __website__
from capture64.apps.capture64 import encode, recover, config

# public interface
__all__ = ['Capture64App', 'main', ]


PROGRAM = 'capture64'
USAGE = f"""\
usage: {PROGRAM} [-h] [-v] <command> [<args>...]
{__description__}\
"""

EPILOG = f"""\
Documentation and issue tracking at:
{__website__}

Copyright {__copyright__}
{__developer__} <{__contact__}>\
"""

HELP = f"""\
{USAGE}

commands:
encode                 {encode.__doc__}
recover                {recover.__doc__}
config                 {config.__doc__}

options:
-h, --help             Show this message and exit.
-v, --version          Show the version and exit.

Use the -h/--help flag with the above commands to
learn more about their usage.

{EPILOG}\
"""


# initialize application logger
log = logging.getLogger('capture64')


# logging setup for command-line interface
Application.log_critical = log.critical
Application.log_exception = log.exception


class Capture64App(ApplicationGroup):
    """Top-level application class for capture64."""

    interface = Interface(PROGRAM, USAGE, HELP)
    interface.add_argument('command')
    interface.add_argument('-v', '--version', action='version', version=__version__)

    command = None
    commands = {'encode': encode.EncodeApp,
                'recover': recover.RecoverApp,
                'config': config.ConfigApp,
                }


def main() -> int:
    """Entry-point for `capture64` console application."""
    return Capture64App.main(sys.argv[1:])
