# jsonmend/application/processing/__init__.py

"""Core processing logic for repairing text and addressing parsed values"""

# Local imports
from jsonmend.application.processing.path_resolver import resolve
from jsonmend.application.processing.path_resolver import walk_paths
from jsonmend.application.processing.path_syntax import PHP_ROOT
from jsonmend.application.processing.path_syntax import ROOT_SENTINEL
from jsonmend.application.processing.path_syntax import convert_path
from jsonmend.application.processing.path_syntax import format_dot_path
from jsonmend.application.processing.path_syntax import format_path
from jsonmend.application.processing.path_syntax import format_php_path
from jsonmend.application.processing.path_syntax import parse_dot_path
from jsonmend.application.processing.path_syntax import parse_path
from jsonmend.application.processing.path_syntax import parse_php_path
from jsonmend.application.processing.repair_engine import REPAIR_PIPELINE
from jsonmend.application.processing.repair_engine import apply_repairs
from jsonmend.application.processing.repair_engine import repair

__all__: list[str] = [
    # Repair
    "REPAIR_PIPELINE",
    "apply_repairs",
    "repair",
    # Paths
    "PHP_ROOT",
    "ROOT_SENTINEL",
    "convert_path",
    "format_dot_path",
    "format_path",
    "format_php_path",
    "parse_dot_path",
    "parse_path",
    "parse_php_path",
    "resolve",
    "walk_paths",
]
