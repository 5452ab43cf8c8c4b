"""
Package entry point.

Allows:
  python -m bridge_bidding [--verbose] [--config FILE]

Delegates to the orchestrator CLI.
"""

from __future__ import annotations

import sys

from .orchestrator import main

if __name__ == "__main__":
    sys.exit(main())
