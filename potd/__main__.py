#!/usr/bin/env python3
"""
Main entry point for running the POTD generator as a module.
"""

import sys
from potd.cli import main

if __name__ == "__main__":
    sys.exit(main())
