#!/usr/bin/env python3
"""Run the doxy2md command line tool with ``python -m doxy2md PAGE.json``."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

from doxy2md.cli import main

if __name__ == "__main__":
    sys.exit(main())
