# SPDX-FileCopyrightText: 2019-2022 REFITT Team
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for base64 encoding."""


# standard libs
import math
import base64 as _std

# external libs
import pytest
from hypothesis import given, strategies as st

# internal libs
from capture64.core.base64 import ALPHABET, PADDING, triples, encode, decode


@pytest.mark.unit
class TestTriples:
    """Unit tests for grouping bytes."""

    def test_full(self) -> None:
        assert list(triples([1, 2, 3, 4, 5, 6])) == [(1, 2, 3), (4, 5, 6)]

    def test_short(self) -> None:
        assert list(triples([1, 2, 3, 4])) == [(1, 2, 3), (4, None, None)]
        assert list(triples([1, 2])) == [(1, 2, None)]

    def test_masked(self) -> None:
        assert list(triples([-1, 256, 0x1FF])) == [(255, 0, 255)]

    def test_zero_is_present(self) -> None:
        """A zero byte is data, not padding."""
        assert list(triples([0])) == [(0, None, None)]
        assert encode([0]) == 'AA=='
        assert encode([0, 0]) == 'AAA='


@pytest.mark.unit
class TestEncode:
    """Unit tests for base64 encoding."""

    def test_alphabet(self) -> None:
        assert len(ALPHABET) == 65
        assert ALPHABET[PADDING] == '='

    def test_known_vectors(self) -> None:
        assert encode([]) == ''
        assert encode([0x4D, 0x61, 0x6E]) == 'TWFu'
        assert encode([0x4D, 0x61]) == 'TWE='
        assert encode([0x4D]) == 'TQ=='
        assert encode(b'Man') == 'TWFu'

    @given(data=st.binary(max_size=512))
    def test_length(self, data: bytes) -> None:
        assert len(encode(data)) == 4 * math.ceil(len(data) / 3)

    @given(data=st.binary(max_size=512))
    def test_padding(self, data: bytes) -> None:
        output = encode(data)
        if len(data) % 3 == 0:
            assert '=' not in output
        elif len(data) % 3 == 1:
            assert output.endswith('==')
        else:
            assert output.endswith('=') and not output.endswith('==')

    @given(data=st.binary(max_size=512))
    def test_standard(self, data: bytes) -> None:
        assert encode(data) == _std.b64encode(data).decode()
        assert encode(data).isascii()

    def test_decode(self) -> None:
        assert decode('TWFu') == b'Man'
        assert decode(encode(bytes(range(256)))) == bytes(range(256))
