# SPDX-FileCopyrightText: 2019-2022 REFITT Team
# SPDX-License-Identifier: Apache-2.0

"""
Runtime configuration.

Files:
         /etc/capture64.toml    System
    ~/.capture64/config.toml    User
      .capture64/config.toml    Local

Environment variables prefixed with CAPTURE64_ take precedence over all files.
"""


# type annotations
from __future__ import annotations
from typing import Optional

# standard libs
import os
import sys
import functools

# external libs
from cmdkit.app import exit_status
from cmdkit.config import Namespace, Environ, Configuration, ConfigurationError

# internal libs
from capture64.core.platform import path, check_private
from capture64.core.exceptions import write_traceback

# public interface
__all__ = ['config', 'default', 'load', 'load_file', 'blame', 'LOGGING_STYLES',
           'ConfigurationError', 'Namespace', ]


# NOTE: files and environment may still override a style's 'format'/'datefmt'
LOGGING_STYLES = {
    'default': {
        'datefmt': '%Y-%m-%d %H:%M:%S',
        'format': ('%(ansi_bold)s%(ansi_level)s%(levelname)8s%(ansi_reset)s'
                   ' %(ansi_faint)s[%(name)s]%(ansi_reset)s %(message)s'),
    },
    'system': {
        'datefmt': '%Y-%m-%d %H:%M:%S',
        'format': '%(asctime)s %(hostname)s %(levelname)8s [%(app_id)s] [%(name)s] %(message)s',
    },
}


default = Namespace({
    'logging': {
        'level': 'warning',
        'style': 'default',
        **LOGGING_STYLES['default'],
    },
    'transport': {
        'timeout': 10,  # Seconds
        'charset': 'cp1252',  # Applied by hosts asked for 'us-ascii'
    },
    'encode': {
        'mimetype': 'image/jpeg',
    },
})


@functools.lru_cache(maxsize=None)
def load_file(filepath: str) -> Namespace:
    """Load TOML configuration from `filepath` (empty if missing)."""
    if not os.path.exists(filepath):
        return Namespace({})
    if not check_private(filepath):
        raise ConfigurationError(f'Non-private file permissions ({filepath})')
    try:
        return Namespace.from_toml(filepath)
    except Exception as err:
        raise ConfigurationError(f'(from file: {filepath}) {err.__class__.__name__}: {err}') from err


def blame(base: Configuration, *varpath: str) -> Optional[str]:
    """Describe where the value at `varpath` was defined."""
    source = base.which(*varpath)
    if source in ('system', 'user', 'local'):
        return f'from: {path[source].config}'
    if source == 'env':
        return 'from: CAPTURE64_' + '_'.join(node.upper() for node in varpath)
    return None if not source else f'from: <{source}>'


def logging_style(base: Configuration) -> Namespace:
    """Format and date format for the configured `logging.style`."""
    style = base.logging.style
    if not isinstance(style, str) or style.lower() not in LOGGING_STYLES:
        raise ConfigurationError(f'Unrecognized `logging.style` \'{style}\' ({blame(base, "logging", "style")})')
    return Namespace({'logging': LOGGING_STYLES[style.lower()]})


def load() -> Configuration:
    """Merge defaults, configuration files, and environment variables."""
    sources = {
        'system': load_file(path.system.config),
        'user': load_file(path.user.config),
        'local': load_file(path.local.config),
        'env': Environ(prefix='CAPTURE64').expand(),
    }
    base = Configuration(default=default, **sources)
    return Configuration(default=default, style=logging_style(base), **sources)


try:
    config = load()
except Exception as error:
    write_traceback(error, module=__name__)
    sys.exit(exit_status.bad_config)
