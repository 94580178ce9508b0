# SPDX-FileCopyrightText: 2019-2022 REFITT Team
# SPDX-License-Identifier: Apache-2.0

"""Fixtures for unit tests."""


# standard libs
import os
from datetime import datetime

# external libs
import pytest


@pytest.fixture(scope='package')
def tmpdir() -> str:
    """Ensure a new temporary directory exists and return its path."""
    date = datetime.now().strftime('%Y%m%d-%H%M%S')
    path = f'/tmp/capture64/tests/{date}'
    os.makedirs(path, exist_ok=True)
    return path


@pytest.fixture
def corrupted() -> str:
    """Every byte value as the host transport would decode it."""
    from capture64.transport import legacy_decode
    return legacy_decode(bytes(range(256)))
