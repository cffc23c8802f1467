"""
Entry point for running scriptreflect as a module.

Usage:
    python -m scriptreflect analyze app.js
    python -m scriptreflect --help
"""

import sys
from scriptreflect.cli import main

if __name__ == "__main__":
    sys.exit(main())
