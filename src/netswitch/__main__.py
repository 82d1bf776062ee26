# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Entry point for ``python -m netswitch``."""

import sys

from netswitch.runtime.launcher import main

sys.exit(main())
