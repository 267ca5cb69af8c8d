# jsonmend/shared/utils/__init__.py

"""Shared utility functions for JSON serialization and text presentation"""

# Local imports
# JSON codec
from jsonmend.shared.utils.json_codec import dumps_canonical
from jsonmend.shared.utils.json_codec import dumps_compact
from jsonmend.shared.utils.json_codec import dumps_pretty
from jsonmend.shared.utils.json_codec import loads_strict

# Text utilities
from jsonmend.shared.utils.text_utils import create_preview
from jsonmend.shared.utils.text_utils import render_error_context

__all__ = [
    # JSON codec
    "dumps_canonical",
    "dumps_compact",
    "dumps_pretty",
    "loads_strict",
    # Text utilities
    "create_preview",
    "render_error_context",
]
