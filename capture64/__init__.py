# SPDX-FileCopyrightText: 2019-2022 REFITT Team
# SPDX-License-Identifier: Apache-2.0

"""
Recover image binaries from forcibly decoded text and encode them as base64.

This package provides the byte recovery and base64 encoding pipeline along with
the transport, capture glue, and command-line tools built around it.
"""


# standard libs
import sys

# external libs
from rich.traceback import install as enable_rich_tracebacks

# internal libs
from capture64.__meta__ import (__appname__, __version__, __authors__, __developer__, __contact__,
                                __license__, __website__, __copyright__, __description__,
                                __keywords__)

# internal libs (forced initialization)
from capture64.core.config import config
from capture64.core import logging

# public interface
__all__ = ['__appname__', '__version__', '__authors__', '__developer__', '__contact__',
           '__license__', '__website__', '__copyright__', '__description__',
           '__keywords__', ]


# Enable rich tracebacks for interactive shells
if sys.stdout.isatty() and hasattr(sys, 'ps1'):
    enable_rich_tracebacks()
