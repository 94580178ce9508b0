# SPDX-FileCopyrightText: 2019-2022 REFITT Team
# SPDX-License-Identifier: Apache-2.0

"""
Camera interface around a device capture service.

A capture service hands back a locator for the new picture (or an error code).
The camera either inlines the picture as base64 or passes the locator through,
depending on the requested display type. Every outcome is returned as an
explicit result rather than dispatched through callbacks.

Example:
    >>> from capture64.capture import Camera, LocatorService, DisplayType
    >>> camera = Camera(LocatorService('/tmp/picture.jpg'))
    >>> camera.get_picture(DisplayType.DATA_URL)
    Success(payload='/9j/4AAQSkZJRgABAQ...')
"""


# type annotations
from __future__ import annotations
from typing import Optional, Protocol, Tuple, Union

# standard libs
import logging
from enum import IntEnum
from dataclasses import dataclass

# external libs
from requests import RequestException

# internal libs
from capture64.core import base64
from capture64.core.exceptions import TransportError
from capture64.transport import fetch_binary

# public interface
__all__ = ['DisplayType', 'CameraError', 'Success', 'Failure', 'Result',
           'CaptureService', 'LocatorService', 'Camera', ]

# initialize module level logger
log = logging.getLogger(__name__)


class DisplayType(IntEnum):
    """How a captured picture is delivered."""
    DATA_URL = 0  # Inline base64 content
    DATA_URI = 1  # Original locator


@dataclass(frozen=True)
class CameraError:
    """Structured error reported to the caller."""

    message: Union[str, int]
    name: str = 'CameraError'

    @property
    def code(self) -> Optional[int]:
        """Numeric error code (if any)."""
        return self.message if isinstance(self.message, int) else None

    def __str__(self) -> str:
        return f'{self.name}: {self.message}'


@dataclass(frozen=True)
class Success:
    """Delivered picture (base64 content or locator)."""
    payload: str


@dataclass(frozen=True)
class Failure:
    """Failed attempt to deliver a picture."""
    error: CameraError


Result = Union[Success, Failure]


class CaptureService(Protocol):
    """Device capture service interface."""

    def start(self) -> Tuple[int, str]:
        """Take a picture and return (error_code, locator)."""
        ...


class LocatorService:
    """A capture service that always reports the same picture."""

    def __init__(self, locator: str, error_code: int = 0) -> None:
        self.locator = locator
        self.error_code = error_code

    def start(self) -> Tuple[int, str]:
        """Report configured error code and locator."""
        return self.error_code, self.locator


class Camera:
    """Access pictures from a capture service."""

    def __init__(self, service: Optional[CaptureService] = None) -> None:
        self.service = service

    def get_picture(self, display_type: DisplayType = DisplayType.DATA_URL) -> Result:
        """Capture a picture and deliver it according to `display_type`."""
        if self.service is None:
            log.error('Could not load camera service')
            return Failure(CameraError('could not load camera service'))
        error_code, locator = self.service.start()
        if error_code != 0:
            log.error(f'Capture failed with error code {error_code}')
            return Failure(CameraError(error_code))
        if display_type == DisplayType.DATA_URI:
            return Success(locator)
        try:
            data = fetch_binary(locator)
        except TransportError as error:
            log.error(str(error))
            return Failure(CameraError(error.status))
        except RequestException as error:
            log.error(f'Request failed: {error}')
            return Failure(CameraError(str(error)))
        log.debug(f'Encoding {len(data)} bytes from {locator}')
        return Success(base64.encode(data))
