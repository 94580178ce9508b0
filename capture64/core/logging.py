# SPDX-FileCopyrightText: 2019-2022 REFITT Team
# SPDX-License-Identifier: Apache-2.0

"""
Logging configuration.

All messages go through the 'capture64' logger to stderr, formatted by the
configured `logging.style`. Records carry the hostname, a per-process instance
identifier, and ANSI codes for the level color.
"""


# type annotations
from __future__ import annotations
from typing import Any

# standard libs
import sys
import uuid
import socket
import logging

# external libs
from cmdkit.app import exit_status
from cmdkit.config import ConfigurationError

# internal libs
from capture64.core.ansi import Ansi
from capture64.core.config import config, blame
from capture64.core.exceptions import write_traceback

# public interface
__all__ = ['HOSTNAME', 'INSTANCE', 'level_from_name', 'handler', ]


HOSTNAME = socket.gethostname()
INSTANCE = str(uuid.uuid4())


LEVEL_COLOR = {
    'DEBUG': Ansi.BLUE,
    'INFO': Ansi.GREEN,
    'WARNING': Ansi.YELLOW,
    'ERROR': Ansi.RED,
    'CRITICAL': Ansi.MAGENTA,
}


class LogRecord(logging.LogRecord):
    """Adds the attributes referenced by the logging styles."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.app_id = INSTANCE
        self.hostname = HOSTNAME
        self.ansi_level = LEVEL_COLOR.get(self.levelname, Ansi.NULL).value
        self.ansi_bold = Ansi.BOLD.value
        self.ansi_faint = Ansi.FAINT.value
        self.ansi_reset = Ansi.RESET.value


logging.setLogRecordFactory(LogRecord)


class StreamHandler(logging.StreamHandler):
    """Exits on a broken logging configuration instead of printing noise per message."""

    def handleError(self, record: logging.LogRecord) -> None:
        write_traceback(sys.exc_info()[1], module=__name__)
        sys.exit(exit_status.bad_config)


def level_from_name(name: Any) -> int:
    """Numeric level for `name` (e.g., 'info')."""
    if isinstance(name, str) and name.upper() in LEVEL_COLOR:
        return getattr(logging, name.upper())
    raise ConfigurationError(f'Unsupported logging level \'{name}\' ({blame(config, "logging", "level")})')


try:
    level = level_from_name(config.logging.level)
    handler = StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter(config.logging.format, datefmt=config.logging.datefmt))
except Exception as error:
    write_traceback(error, module=__name__)
    sys.exit(exit_status.bad_config)


logger = logging.getLogger('capture64')
logger.setLevel(level)
logger.addHandler(handler)
