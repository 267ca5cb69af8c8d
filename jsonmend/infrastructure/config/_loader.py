# jsonmend/infrastructure/config/_loader.py

"""Main configuration loader using Pydantic models"""

# Standard library imports
from logging import getLogger

# Local imports
from jsonmend.core.types.json import JSONDict
from jsonmend.infrastructure.config._models import AppConfig
from jsonmend.infrastructure.config._models import LoggingConfig
from jsonmend.infrastructure.config._models import OutputConfig
from jsonmend.infrastructure.config._models import PathsConfig
from jsonmend.infrastructure.config._models import RepairConfig

logger = getLogger(__name__)


class ConfigLoader:
    """Configuration loader exposing typed configuration sections"""

    def __init__(self, config_path: str | None = None):
        """Initialize configuration loader

        Args:
            config_path: Path to JSON configuration file, None for auto-detection
        """
        self.config_path = config_path
        self._app_config = AppConfig.load(config_path)

    @property
    def config(self) -> JSONDict:
        """Full config as a JSON-compatible dict"""
        return self._app_config.to_dict()

    @property
    def repair(self) -> RepairConfig:
        """Repair fallback configuration"""
        return self._app_config.repair

    @property
    def output(self) -> OutputConfig:
        """Serialization configuration"""
        return self._app_config.output

    @property
    def paths(self) -> PathsConfig:
        """Path addressing configuration"""
        return self._app_config.paths

    @property
    def logging(self) -> LoggingConfig:
        """Logging configuration"""
        return self._app_config.logging


# Global default instance
_default_config: ConfigLoader | None = None


def get_config(config_path: str | None = None) -> ConfigLoader:
    """Get configuration loader instance

    Args:
        config_path: Path to configuration file, None for default

    Returns:
        ConfigLoader instance
    """
    global _default_config

    if config_path:
        return ConfigLoader(config_path)

    if _default_config is None:
        _default_config = ConfigLoader(None)

    return _default_config
