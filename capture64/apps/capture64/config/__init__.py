# SPDX-FileCopyrightText: 2019-2022 REFITT Team
# SPDX-License-Identifier: Apache-2.0

"""Manage configuration."""


# external libs
from cmdkit.app import ApplicationGroup
from cmdkit.cli import Interface

# internal libs
from capture64.apps.capture64.config import which

# public interface
__all__ = ['ConfigApp', ]


PROGRAM = 'capture64 config'
USAGE = f"""\
usage: {PROGRAM} [-h] <command> [<args>...]
{__doc__}\
"""

HELP = f"""\
{USAGE}

commands:
which                       {which.__doc__}

options:
-h, --help                  Show this message and exit.

files:
/etc/capture64.toml         System configuration.
~/.capture64/config.toml    User configuration.
./.capture64/config.toml    Local configuration.

Use the -h/--help flag with the above commands to
learn more about their usage.\
"""


class ConfigApp(ApplicationGroup):
    """Application class for config command group."""

    interface = Interface(PROGRAM, USAGE, HELP)
    interface.add_argument('command')

    command = None
    commands = {'which': which.WhichConfigApp, }
