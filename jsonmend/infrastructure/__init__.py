# jsonmend/infrastructure/__init__.py

"""System infrastructure components for configuration and logging."""

# Local imports
from jsonmend.infrastructure.config import ConfigLoader
from jsonmend.infrastructure.config import get_config

__all__ = ["ConfigLoader", "get_config"]
