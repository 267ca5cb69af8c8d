# jsonmend/adapters/api/__init__.py

"""API module for inspecting and repairing JSON text

This module provides the high-level facade used by the CLI and by hosts
embedding jsonmend.
"""

# Local imports
from jsonmend.adapters.api._inspector import EMPTY_INPUT_MESSAGE
from jsonmend.adapters.api._inspector import JsonInspector

__all__ = ["EMPTY_INPUT_MESSAGE", "JsonInspector"]
