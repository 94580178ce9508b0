# SPDX-FileCopyrightText: 2019-2022 REFITT Team
# SPDX-License-Identifier: Apache-2.0

"""Common exceptions and error handling."""


# type annotations
from __future__ import annotations
from typing import Callable, Optional

# standard libs
import os
import sys
import datetime
import traceback
import logging

# external libs
from cmdkit.app import exit_status

# internal libs
from capture64.core.ansi import Ansi
from capture64.core.platform import default_path

# public interface
__all__ = ['TableError', 'TransportError', 'log_exception', 'write_traceback',
           'display_critical', ]


class TableError(Exception):
    """The substitution table violates its invariants."""


class TransportError(Exception):
    """A failed attempt to fetch a resource."""

    def __init__(self, status: int, *messages: str) -> None:
        super().__init__(status, *messages)
        self.status = status

    def __str__(self) -> str:
        status, *messages = self.args
        return f'[{status}] ' + ' - '.join(messages)


def log_exception(exc: Exception, logger: Callable[[str], None], status: int) -> int:
    """Log the exception and exit with `status`."""
    logger(str(exc))
    return status


def display_critical(message: str, module: Optional[str] = None) -> None:
    """Print a critical message to stderr before logging is configured."""
    prefix = f'{Ansi.MAGENTA.value}CRITICAL{Ansi.RESET.value}'
    if module:
        prefix += f' {Ansi.FAINT.value}[{module}]{Ansi.RESET.value}'
    print(f'{prefix} {message}', file=sys.stderr)


def write_traceback(exc: Exception, logger: Optional[logging.Logger] = None,
                    module: Optional[str] = None) -> int:
    """Write exception traceback to file and return exit code."""
    time = datetime.datetime.now().strftime('%Y%m%d-%H%M%S')
    os.makedirs(default_path.log, exist_ok=True)
    path = os.path.join(default_path.log, f'exception-{time}.log')
    with open(path, mode='w') as stream:
        print(''.join(traceback.format_exception(type(exc), exc, exc.__traceback__)), file=stream)
    msg = str(exc).replace('\n', ' - ')
    if logger is not None:
        logger.critical(f'{exc.__class__.__name__}: {msg}')
        logger.critical(f'Exception traceback written to {path}')
    else:
        display_critical(f'{exc.__class__.__name__}: {msg}', module=module)
        display_critical(f'Exception traceback written to {path}', module=module)
    return exit_status.uncaught_exception
