# jsonmend/infrastructure/logging/__init__.py

"""Logging infrastructure for jsonmend.

This module provides centralized logging configuration and progress display.
"""

# Local imports
from jsonmend.infrastructure.logging._progress import FileProgress
from jsonmend.infrastructure.logging._setup import log_run_summary
from jsonmend.infrastructure.logging._setup import set_up_logging as setup_logging

__all__ = ["FileProgress", "setup_logging", "log_run_summary"]
