"""
Copyright (c) 2026 The h2cstartup Authors. All rights reserved.

SPDX-License-Identifier: MIT
"""

import sys

from . import main

sys.exit(main())
