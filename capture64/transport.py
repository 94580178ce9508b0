# SPDX-FileCopyrightText: 2019-2022 REFITT Team
# SPDX-License-Identifier: Apache-2.0

"""
Fetch resources through a forced single-byte text decode.

This module reproduces the lossy transport the byte recovery stage was built
to undo. Remote resources are retrieved with the popular `requests` package,
local resources (`file://` or plain paths) are read from disk, and in both
cases the raw content is decoded as text the way the host would.

Example:
    >>> from capture64.transport import fetch_binary
    >>> fetch_binary('/tmp/picture.jpg')
    b'\\xff\\xd8\\xff...'
"""


# type annotations
from __future__ import annotations
from typing import Optional, Tuple

# standard libs
import os
import re
import codecs
import logging
from urllib.parse import urlparse, unquote

# external libs
import requests

# internal libs
from capture64.core.config import config
from capture64.core.exceptions import TransportError
from capture64.core.recovery import recover_text

# public interface
__all__ = ['legacy_decode', 'fetch_text', 'fetch_binary', 'read_local', 'read_remote', ]

# initialize module level logger
log = logging.getLogger(__name__)


def _passthrough(error: UnicodeDecodeError) -> Tuple[str, int]:
    """Map undefined bytes to the code point of the same value."""
    return chr(error.object[error.start]), error.start + 1


codecs.register_error('capture64.passthrough', _passthrough)


def legacy_decode(raw: bytes, charset: Optional[str] = None) -> str:
    """Decode `raw` as the host does when asked for a single-byte charset."""
    return raw.decode(charset or config.transport.charset, errors='capture64.passthrough')


__has_protocol: re.Pattern = re.compile(r'^https?://')
def is_remote(locator: str) -> bool:
    """True if `locator` is an HTTP(S) URL."""
    return __has_protocol.match(locator) is not None


def read_local(locator: str) -> bytes:
    """Read raw content from a `file://` URL or a plain path."""
    filepath = unquote(urlparse(locator).path) if locator.startswith('file://') else locator
    if not os.path.isfile(filepath):
        raise TransportError(404, f'No such file ({filepath})')
    try:
        with open(filepath, mode='rb') as stream:
            return stream.read()
    except PermissionError as error:
        raise TransportError(403, f'Permission denied ({filepath})') from error
    except OSError as error:
        raise TransportError(404, f'Cannot read file ({filepath}): {error.strerror}') from error


def read_remote(locator: str, timeout: Optional[float] = None) -> bytes:
    """Request raw content from an HTTP(S) URL."""
    response = requests.get(locator, timeout=(timeout if timeout is not None else config.transport.timeout))
    if response.status_code != 200:
        raise TransportError(response.status_code, f'Failed to fetch {locator}')
    return response.content


def fetch_text(locator: str, timeout: Optional[float] = None) -> str:
    """Fetch `locator` and return its content as forcibly decoded text."""
    if is_remote(locator):
        log.debug(f'Requesting {locator}')
        raw = read_remote(locator, timeout=timeout)
    else:
        log.debug(f'Reading {locator}')
        raw = read_local(locator)
    log.debug(f'Fetched {len(raw)} bytes from {locator}')
    return legacy_decode(raw)


def fetch_binary(locator: str, timeout: Optional[float] = None) -> bytes:
    """Fetch `locator` and recover its original bytes."""
    return recover_text(fetch_text(locator, timeout=timeout))
