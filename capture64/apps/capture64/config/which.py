# SPDX-FileCopyrightText: 2019-2022 REFITT Team
# SPDX-License-Identifier: Apache-2.0

"""Check origin of configuration variable."""


# standard libs
import logging
import functools

# external libs
from cmdkit.app import Application, exit_status
from cmdkit.cli import Interface

# internal libs
from capture64.core.platform import path
from capture64.core.config import config
from capture64.core.exceptions import log_exception

# public interface
__all__ = ['WhichConfigApp', ]

# application logger
log = logging.getLogger('capture64')


PROGRAM = 'capture64 config which'
USAGE = f"""\
usage: {PROGRAM} [-h] SECTION[...].VAR
{__doc__}\
"""

HELP = f"""\
{USAGE}

arguments:
SECTION[...].VAR        Path to variable.

options:
-h, --help              Show this message and exit.\
"""


class WhichConfigApp(Application):
    """Application class for config which command."""

    interface = Interface(PROGRAM, USAGE, HELP)

    varpath: str = None
    interface.add_argument('varpath', metavar='VAR')

    exceptions = {
        RuntimeError: functools.partial(log_exception, logger=log.critical,
                                    status=exit_status.runtime_error),
    }

    def run(self) -> None:
        """Business logic for `config which`."""
        try:
            site = config.which(*self.varpath.split('.'))
        except KeyError:
            site = None
        if site is None:
            raise RuntimeError(f'"{self.varpath}" not found')
        if site in ('system', 'user', 'local'):
            print(f'{site}: {path[site].config}')
        else:
            print(site)
