#!/usr/bin/env python3
"""Top-level wrapper script for guifactory.

Allows running directly: python guifactory.py [args]
"""

from guifactory.cli import main

if __name__ == "__main__":
    main()
