# SPDX-FileCopyrightText: 2019-2022 REFITT Team
# SPDX-License-Identifier: Apache-2.0

"""Configuration and log file locations."""


# standard libs
import os
import stat

# external libs
from cmdkit.config import Namespace

# public interface
__all__ = ['path', 'site', 'default_path', 'check_private', ]


def site_paths(prefix: str, config: str) -> Namespace:
    """Log folder beneath `prefix` and the given `config` file."""
    return Namespace({'log': os.path.join(prefix, 'log'), 'config': config})


_home = os.path.join(os.getenv('HOME', ''), '.capture64')
_local = os.path.join(os.getcwd(), '.capture64')
path = Namespace({
    'system': {'log': '/var/log/capture64', 'config': '/etc/capture64.toml'},
    'user': site_paths(_home, os.path.join(_home, 'config.toml')),
    'local': site_paths(_local, os.path.join(_local, 'config.toml')),
})


# Tracebacks go to the system site only when running as root
site = 'system' if os.getuid() == 0 else 'user'
default_path = path[site]


def check_private(filepath: str) -> bool:
    """Check that `filepath` has '-rw-------' permissions."""
    return stat.filemode(os.stat(filepath).st_mode) == '-rw-------'
