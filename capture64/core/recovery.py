# SPDX-FileCopyrightText: 2019-2022 REFITT Team
# SPDX-License-Identifier: Apache-2.0

"""
Recover raw bytes from text read through a forced single-byte decode.

Hosts that are asked to read a binary resource as 'us-ascii' actually apply
Windows-1252, so bytes 0x80-0x9F come back as typographic code points
(e.g., 0x80 -> U+20AC EURO SIGN). Every other byte maps to the code point of
the same value. Inverting those substitutions gives back the original bytes.

Example:
    >>> from capture64.core.recovery import recover
    >>> recover([8364, 65, 66])
    b'\\x80AB'
"""


# type annotations
from __future__ import annotations
from typing import Iterable, Mapping

# standard libs
from types import MappingProxyType

# internal libs
from capture64.core.exceptions import TableError

# public interface
__all__ = ['SUBSTITUTION', 'check_table', 'recover_byte', 'recover', 'recover_text', ]


# Windows-1252 code point -> original byte
# Positions 0x81, 0x8D, 0x8F, 0x90, 0x9D are undefined and pass through unchanged
SUBSTITUTION: Mapping[int, int] = MappingProxyType({
    8364: 128,  # €
    8218: 130,  # ‚
    402:  131,  # ƒ
    8222: 132,  # „
    8230: 133,  # …
    8224: 134,  # †
    8225: 135,  # ‡
    710:  136,  # ˆ
    8240: 137,  # ‰
    352:  138,  # Š
    8249: 139,  # ‹
    338:  140,  # Œ
    381:  142,  # Ž
    8216: 145,  # ‘
    8217: 146,  # ’
    8220: 147,  # “
    8221: 148,  # ”
    8226: 149,  # •
    8211: 150,  # –
    8212: 151,  # —
    732:  152,  # ˜
    8482: 153,  # ™
    353:  154,  # š
    8250: 155,  # ›
    339:  156,  # œ
    382:  158,  # ž
    376:  159,  # Ÿ
})


def check_table(table: Mapping[int, int]) -> None:
    """
    Ensure `table` is a valid substitution table.

    Every key must be a code point above the single-byte range, every value
    must lie within 0x80-0x9F, and no two keys may map to the same byte.

    Raises:
        TableError: On the first violation found.
    """
    for code, value in table.items():
        if code <= 255:
            raise TableError(f'Expected code point above 255, found {code}')
        if not 128 <= value <= 159:
            raise TableError(f'Expected byte in range [128, 159], found {value} (for {code})')
    if len(set(table.values())) != len(table):
        raise TableError('Substitution table is not injective')


check_table(SUBSTITUTION)


def recover_byte(code: int) -> int:
    """Original byte value for a single decoded `code` point."""
    try:
        return SUBSTITUTION[code]
    except KeyError:
        return code % 256


def recover(codes: Iterable[int]) -> bytes:
    """Recover original bytes from a sequence of decoded code points."""
    return bytes(recover_byte(code) for code in codes)


def recover_text(text: str) -> bytes:
    """Recover original bytes from forcibly decoded `text`."""
    return recover(map(ord, text))
