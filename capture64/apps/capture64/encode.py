# SPDX-FileCopyrightText: 2019-2022 REFITT Team
# SPDX-License-Identifier: Apache-2.0

"""Fetch a picture and encode it as base64."""


# type annotations
from __future__ import annotations

# standard libs
import logging
import functools

# external libs
from cmdkit.app import Application, exit_status
from cmdkit.cli import Interface, ArgumentError

# internal libs
from capture64.core.config import config
from capture64.core.exceptions import log_exception, write_traceback
from capture64.core.pipeline import data_uri
from capture64.capture import Camera, LocatorService, DisplayType, Failure

# public interface
__all__ = ['EncodeApp', ]

# application logger
log = logging.getLogger('capture64')


PROGRAM = 'capture64 encode'
USAGE = f"""\
usage: {PROGRAM} [-h] LOCATOR [--uri [--mimetype TYPE] | --reference]
{__doc__}\
"""

HELP = f"""\
{USAGE}

The resource is read through the same forced single-byte decode as the
host transport and the original bytes are recovered before encoding.

arguments:
LOCATOR                 URL (http, https, file) or path to picture.

options:
    --uri               Write a full data URI.
    --mimetype   TYPE   Media type for data URI (default: {config.encode.mimetype}).
    --reference         Write LOCATOR unchanged instead of inline data.
-h, --help              Show this message and exit.\
"""


class EncodeApp(Application):
    """Application class for encode command."""

    interface = Interface(PROGRAM, USAGE, HELP)

    locator: str
    interface.add_argument('locator')

    as_uri: bool = False
    interface.add_argument('--uri', action='store_true', dest='as_uri')

    mimetype: str = config.encode.mimetype
    interface.add_argument('--mimetype', default=mimetype)

    reference: bool = False
    interface.add_argument('--reference', action='store_true')

    exceptions = {
        RuntimeError: functools.partial(log_exception, logger=log.critical,
                                        status=exit_status.runtime_error),
        Exception: functools.partial(write_traceback, logger=log),
    }

    def run(self) -> None:
        """Business logic for `capture64 encode`."""
        if self.reference and self.as_uri:
            raise ArgumentError('Cannot use --uri with --reference')
        camera = Camera(LocatorService(self.locator))
        result = camera.get_picture(DisplayType.DATA_URI if self.reference else DisplayType.DATA_URL)
        if isinstance(result, Failure):
            raise RuntimeError(str(result.error))
        if self.as_uri:
            print(data_uri(result.payload, self.mimetype), flush=True)
        else:
            print(result.payload, flush=True)
