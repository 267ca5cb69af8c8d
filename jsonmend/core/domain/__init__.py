# jsonmend/core/domain/__init__.py

"""Core domain models: path segments, diagnostics and results"""

# Local imports
from jsonmend.core.domain.diagnostics import ParseDiagnostic
from jsonmend.core.domain.diagnostics import PathWarning
from jsonmend.core.domain.enums import DiagnosticKind
from jsonmend.core.domain.enums import PathSyntax
from jsonmend.core.domain.enums import REPAIR_STEP_DESCRIPTIONS
from jsonmend.core.domain.enums import RepairStep
from jsonmend.core.domain.path_segment import IndexSegment
from jsonmend.core.domain.path_segment import KeySegment
from jsonmend.core.domain.path_segment import PathSegment
from jsonmend.core.domain.path_segment import PathSegments
from jsonmend.core.domain.path_segment import is_index
from jsonmend.core.domain.path_segment import is_key
from jsonmend.core.domain.results import Failed
from jsonmend.core.domain.results import Found
from jsonmend.core.domain.results import Invalid
from jsonmend.core.domain.results import LoadResult
from jsonmend.core.domain.results import LookupResult
from jsonmend.core.domain.results import PathNotFound
from jsonmend.core.domain.results import RepairResult
from jsonmend.core.domain.results import Repaired
from jsonmend.core.domain.results import is_found
from jsonmend.core.domain.results import is_repaired

__all__ = [
    # Diagnostics
    "DiagnosticKind",
    "ParseDiagnostic",
    "PathWarning",
    # Paths
    "IndexSegment",
    "KeySegment",
    "PathSegment",
    "PathSegments",
    "PathSyntax",
    "is_index",
    "is_key",
    # Repair
    "REPAIR_STEP_DESCRIPTIONS",
    "RepairStep",
    "Failed",
    "Invalid",
    "LoadResult",
    "RepairResult",
    "Repaired",
    "is_repaired",
    # Lookup
    "Found",
    "LookupResult",
    "PathNotFound",
    "is_found",
]
