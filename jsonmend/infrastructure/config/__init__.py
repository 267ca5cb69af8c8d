# jsonmend/infrastructure/config/__init__.py

"""Configuration infrastructure for jsonmend.

This module manages configuration loading, validation, and models.
"""

# Local imports
from jsonmend.infrastructure.config._loader import ConfigLoader
from jsonmend.infrastructure.config._loader import get_config
from jsonmend.infrastructure.config._models import AppConfig
from jsonmend.infrastructure.config._models import LoggingConfig
from jsonmend.infrastructure.config._models import OutputConfig
from jsonmend.infrastructure.config._models import PathsConfig
from jsonmend.infrastructure.config._models import RepairConfig

__all__ = [
    "AppConfig",
    "ConfigLoader",
    "get_config",
    "LoggingConfig",
    "OutputConfig",
    "PathsConfig",
    "RepairConfig",
]
