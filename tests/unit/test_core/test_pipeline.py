# SPDX-FileCopyrightText: 2019-2022 REFITT Team
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for the recovery and encoding pipeline."""


# standard libs
import base64 as _std

# external libs
import pytest

# internal libs
from capture64.core.base64 import encode
from capture64.core.pipeline import to_base64, data_uri


@pytest.mark.unit
class TestPipeline:
    """Unit tests for to_base64 and data_uri."""

    def test_code_points(self) -> None:
        assert to_base64([8364, 65, 66]) == encode([128, 65, 66]) == 'gEFC'

    def test_text(self) -> None:
        assert to_base64('€AB') == 'gEFC'

    def test_empty(self) -> None:
        assert to_base64('') == ''
        assert to_base64([]) == ''

    def test_host_decoded(self, corrupted: str) -> None:
        assert to_base64(corrupted) == _std.b64encode(bytes(range(256))).decode()

    def test_data_uri(self) -> None:
        assert data_uri('gEFC', 'image/jpeg') == 'data:image/jpeg;base64,gEFC'
