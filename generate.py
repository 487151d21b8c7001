"""
Copyright (c) 2026 The h2cstartup Authors. All rights reserved.

SPDX-License-Identifier: MIT

Run h2cstartup.
"""

from sys import version_info
if version_info < (3, 8):
    print("h2cstartup requires Python 3.8+")
    exit()

try:
    import intervaltree
except ModuleNotFoundError as e:
    print("h2cstartup requires intervaltree: `pip install intervaltree`")
    exit()

import sys
import h2cs

sys.exit(h2cs.main())
