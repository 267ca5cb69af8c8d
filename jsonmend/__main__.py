#!/usr/bin/env python3
"""
jsonmend - Main Entry Point

This module allows the package to be run as a script:
    python -m jsonmend
"""

# Local imports
from jsonmend.adapters.cli.main import run

if __name__ == "__main__":
    run()
