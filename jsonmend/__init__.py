# jsonmend/__init__.py

"""jsonmend Package

A library for repairing near-JSON text and addressing locations inside parsed
JSON values with dot-paths or PHP-style bracket paths.
"""

# Local imports
# High-level API
from jsonmend.adapters.api import JsonInspector

# Core operations
from jsonmend.application.processing import convert_path
from jsonmend.application.processing import format_dot_path
from jsonmend.application.processing import format_php_path
from jsonmend.application.processing import parse_dot_path
from jsonmend.application.processing import parse_php_path
from jsonmend.application.processing import repair
from jsonmend.application.processing import resolve
from jsonmend.application.processing import walk_paths

# Data models
from jsonmend.core.domain import DiagnosticKind
from jsonmend.core.domain import Failed
from jsonmend.core.domain import Found
from jsonmend.core.domain import IndexSegment
from jsonmend.core.domain import Invalid
from jsonmend.core.domain import KeySegment
from jsonmend.core.domain import ParseDiagnostic
from jsonmend.core.domain import PathNotFound
from jsonmend.core.domain import PathSyntax
from jsonmend.core.domain import PathWarning
from jsonmend.core.domain import RepairStep
from jsonmend.core.domain import Repaired

# For users who want lower-level control
from jsonmend.infrastructure.config import ConfigLoader

# Version info
__version__ = "0.1.0"

__all__: list[str] = [
    # Primary API
    "JsonInspector",
    # Operations
    "repair",
    "resolve",
    "walk_paths",
    "parse_dot_path",
    "parse_php_path",
    "format_dot_path",
    "format_php_path",
    "convert_path",
    # Data models
    "DiagnosticKind",
    "Failed",
    "Found",
    "IndexSegment",
    "Invalid",
    "KeySegment",
    "ParseDiagnostic",
    "PathNotFound",
    "PathSyntax",
    "PathWarning",
    "RepairStep",
    "Repaired",
    # Advanced usage - infrastructure
    "ConfigLoader",
    # Version
    "__version__",
]
