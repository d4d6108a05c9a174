#!/usr/bin/env python3
"""Check if the uk_departures package is installed."""

import sys

try:
    import uk_departures  # noqa: F401
    sys.exit(0)
except ImportError:
    sys.exit(1)
