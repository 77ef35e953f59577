#!/usr/bin/env python3
"""
Main entry point for running pdf2hash as a module.
"""

import sys
from pdf2hash.cli import main

if __name__ == "__main__":
    sys.exit(main())
