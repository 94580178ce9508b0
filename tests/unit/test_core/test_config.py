# SPDX-FileCopyrightText: 2019-2022 REFITT Team
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for configuration and logging setup."""


# standard libs
import os
import logging

# external libs
import pytest
from cmdkit.config import Configuration, Namespace, ConfigurationError

# internal libs
from capture64.core.ansi import Ansi
from capture64.core.config import config, default, load_file, blame, logging_style, LOGGING_STYLES
from capture64.core.logging import LogRecord, level_from_name, HOSTNAME, INSTANCE


@pytest.mark.unit
class TestConfig:
    """Unit tests for configuration loading."""

    def test_defaults(self) -> None:
        assert default.transport.charset == 'cp1252'
        assert default.encode.mimetype == 'image/jpeg'
        assert config.logging.style in LOGGING_STYLES

    def test_load_file_missing(self, tmpdir: str) -> None:
        assert load_file(os.path.join(tmpdir, 'missing.toml')) == Namespace({})

    def test_load_file_private(self, tmpdir: str) -> None:
        path = os.path.join(tmpdir, 'private.toml')
        with open(path, mode='w') as stream:
            stream.write('[encode]\nmimetype = \'image/png\'\n')
        os.chmod(path, 0o600)
        assert load_file(path).encode.mimetype == 'image/png'

    def test_load_file_not_private(self, tmpdir: str) -> None:
        path = os.path.join(tmpdir, 'public.toml')
        with open(path, mode='w') as stream:
            stream.write('[encode]\nmimetype = \'image/png\'\n')
        os.chmod(path, 0o644)
        with pytest.raises(ConfigurationError) as exc_info:
            load_file(path)
        response, = exc_info.value.args
        assert response == f'Non-private file permissions ({path})'

    def test_blame(self) -> None:
        base = Configuration(default=default, env=Namespace({'transport': {'timeout': 3}}))
        assert blame(base, 'transport', 'timeout') == 'from: CAPTURE64_TRANSPORT_TIMEOUT'
        assert blame(base, 'encode', 'mimetype') == 'from: <default>'

    def test_logging_style(self) -> None:
        base = Configuration(default=default, local=Namespace({'logging': {'style': 'SYSTEM'}}))
        assert logging_style(base).logging.format == LOGGING_STYLES['system']['format']

    def test_logging_style_unknown(self) -> None:
        base = Configuration(default=default, local=Namespace({'logging': {'style': 'fancy'}}))
        with pytest.raises(ConfigurationError):
            logging_style(base)


@pytest.mark.unit
class TestLogging:
    """Unit tests for logging setup."""

    def test_level_from_name(self) -> None:
        assert level_from_name('info') == logging.INFO
        assert level_from_name('CRITICAL') == logging.CRITICAL

    def test_level_from_name_invalid(self) -> None:
        with pytest.raises(ConfigurationError):
            level_from_name('verbose')
        with pytest.raises(ConfigurationError):
            level_from_name(10)

    def test_record_attributes(self) -> None:
        record = LogRecord('capture64', logging.WARNING, __file__, 1, 'message', None, None)
        assert record.hostname == HOSTNAME
        assert record.app_id == INSTANCE
        assert record.ansi_level == Ansi.YELLOW.value
        for style in LOGGING_STYLES.values():
            assert logging.Formatter(style['format']).format(record).endswith('message')
