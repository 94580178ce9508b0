# SPDX-FileCopyrightText: 2019-2022 REFITT Team
# SPDX-License-Identifier: Apache-2.0

"""Base64 encoding/decoding for representing raw data streams."""


# type annotations
from __future__ import annotations
from typing import Iterable, Iterator, Optional, Tuple

# standard libs
from base64 import decodebytes as _decode

# public interface
__all__ = ['ALPHABET', 'PADDING', 'triples', 'encode', 'decode', ]


ALPHABET = 'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/='
PADDING = 64  # Index of '='


Triple = Tuple[int, Optional[int], Optional[int]]


def triples(data: Iterable[int]) -> Iterator[Triple]:
    """
    Group `data` into consecutive triples, masked to 8 bits.

    The final group may be short, in which case the missing slots are None.
    """
    group = []
    for value in data:
        group.append(value & 0xFF)
        if len(group) == 3:
            yield group[0], group[1], group[2]
            group = []
    if group:
        group.extend([None] * (3 - len(group)))
        yield group[0], group[1], group[2]


def encode_triple(byte1: int, byte2: Optional[int], byte3: Optional[int]) -> str:
    """Encode one group of up to three bytes as four characters."""
    enc1 = byte1 >> 2
    enc2 = ((byte1 & 3) << 4) | ((byte2 or 0) >> 4)
    if byte2 is None:
        enc3 = enc4 = PADDING
    else:
        enc3 = ((byte2 & 15) << 2) | ((byte3 or 0) >> 6)
        enc4 = PADDING if byte3 is None else byte3 & 63
    return ALPHABET[enc1] + ALPHABET[enc2] + ALPHABET[enc3] + ALPHABET[enc4]


def encode(data: Iterable[int]) -> str:
    """Encode raw bytes into base64 encoded string."""
    return ''.join(encode_triple(*group) for group in triples(data))


def decode(data: str) -> bytes:
    """Decode base64 encoded string `data` back to raw bytes."""
    return _decode(data.encode())
