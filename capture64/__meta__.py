# SPDX-FileCopyrightText: 2019-2022 REFITT Team
# SPDX-License-Identifier: Apache-2.0

"""Package metadata for capture64."""


__appname__     = 'capture64'
__version__     = '0.1.0'
__authors__     = ['Geoffrey Lentner <glentner@purdue.edu>',
                   ]
__developer__   = 'Geoffrey Lentner'
__contact__     = 'glentner@purdue.edu'
__license__     = 'Apache License 2.0'
__website__     = 'https://github.com/refitt/capture64'
__copyright__   = 'REFITT Team 2019-2022'
__description__ = 'Recover image binaries from forcibly decoded text and encode them as base64.'
__keywords__    = 'base64 data-uri camera binary recovery windows-1252'
