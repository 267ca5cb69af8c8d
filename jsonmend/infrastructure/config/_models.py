# jsonmend/infrastructure/config/_models.py

"""Pydantic models for configuration with validation"""

# Standard library imports
from json import JSONDecodeError
from json import load
from logging import getLogger
from pathlib import Path

# Third party imports
from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError
from pydantic import field_validator

# Local imports
from jsonmend.core.domain.enums import PathSyntax
from jsonmend.core.types.json import JSONDict

logger = getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "jsonmend.json"


class RepairConfig(BaseModel):
    """Repair fallback configuration"""

    enabled: bool = Field(True, description="Attempt repair when strict parsing fails")


class OutputConfig(BaseModel):
    """Serialization configuration"""

    indent: int = Field(2, ge=0, le=8, description="Indent used when formatting")
    ensure_ascii: bool = Field(False, description="Escape non-ASCII characters in output")
    preview_length: int = Field(100, gt=0, description="Characters kept in text previews")


class PathsConfig(BaseModel):
    """Path addressing configuration"""

    default_syntax: PathSyntax = Field(PathSyntax.DOT, description="Syntax of user paths")
    root_sentinel: str = Field("root", description="Dot-path text treated as the root")
    warn_on_ambiguous: bool = Field(
        True, description="Log a warning when a numeric segment matched an object key"
    )

    @field_validator("root_sentinel")
    @classmethod
    def validate_sentinel(cls, v: str) -> str:
        """The sentinel must survive being typed on a command line"""
        if not v.strip() or "." in v:
            raise ValueError("root_sentinel must be non-blank and contain no dots")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration"""

    debug: bool = Field(False, description="Enable debug logging")
    log_file: str | None = Field(None, description="Log file path")


class AppConfig(BaseModel):
    """Root application configuration model"""

    repair: RepairConfig = Field(default_factory=RepairConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Path | str | None = None) -> "AppConfig":
        """Load configuration from JSON file with defaults

        Args:
            config_path: Path to configuration JSON file, None to look for
                jsonmend.json in the current directory

        Returns:
            Validated AppConfig instance
        """
        if isinstance(config_path, str):
            config_path = Path(config_path)

        if config_path is None:
            config_path = Path(DEFAULT_CONFIG_FILENAME)
            if not config_path.exists():
                return cls()

        if not config_path.exists():
            logger.warning(f"Config file {config_path} not found. Using defaults.")
            return cls()

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = load(f)
            return cls.model_validate(data)
        except (OSError, JSONDecodeError, ValidationError) as e:
            logger.warning(f"Failed to load config from {config_path}: {e}. Using defaults.")
            return cls()

    def to_dict(self) -> JSONDict:
        """Convert to a JSON-compatible dictionary"""
        return self.model_dump(mode="json")
