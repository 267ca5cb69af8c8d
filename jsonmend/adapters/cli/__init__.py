# jsonmend/adapters/cli/__init__.py

"""CLI adapter for jsonmend"""

# Local imports
from jsonmend.adapters.cli.main import main
from jsonmend.adapters.cli.main import run
from jsonmend.adapters.cli.parser import create_argument_parser

__all__ = [
    "create_argument_parser",
    "main",
    "run",
]
