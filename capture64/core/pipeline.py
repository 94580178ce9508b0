# SPDX-FileCopyrightText: 2019-2022 REFITT Team
# SPDX-License-Identifier: Apache-2.0

"""Compose byte recovery and base64 encoding."""


# type annotations
from __future__ import annotations
from typing import Iterable, Union

# internal libs
from capture64.core.recovery import recover, recover_text
from capture64.core import base64

# public interface
__all__ = ['to_base64', 'data_uri', ]


def to_base64(source: Union[str, Iterable[int]]) -> str:
    """Recover original bytes from decoded text (or code points) and encode as base64."""
    data = recover_text(source) if isinstance(source, str) else recover(source)
    return base64.encode(data)


def data_uri(payload: str, mimetype: str) -> str:
    """Embed base64 `payload` in a data URI."""
    return f'data:{mimetype};base64,{payload}'
