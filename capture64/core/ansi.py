# SPDX-FileCopyrightText: 2019-2022 REFITT Team
# SPDX-License-Identifier: Apache-2.0

"""ANSI escape sequences for colored log and console messages."""


# standard libs
from enum import Enum

# public interface
__all__ = ['Ansi', ]


class Ansi(Enum):
    """ANSI escape sequences for formatting and color."""

    NULL = ''
    RESET = '\033[0m'
    BOLD = '\033[1m'
    FAINT = '\033[2m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    BLUE = '\033[34m'
    MAGENTA = '\033[35m'
