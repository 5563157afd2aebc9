"""Configuration management for tagscrub."""

from typing import Any, Dict, Literal
from pathlib import Path
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
import yaml
import logging

logger = logging.getLogger(__name__)


class OutputConfig(BaseModel):
    """Command-line output defaults."""

    field: Literal["album", "track", "artists", "common"] = "common"
    format: Literal["text", "json"] = "text"
    skip_blank: bool = False  # Drop lines that clean to an empty string


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"


class TagscrubConfig(BaseSettings):
    """Main tagscrub configuration.

    Without a config file, sections can be given as JSON in the
    ``TAGSCRUB_OUTPUT`` and ``TAGSCRUB_LOGGING`` environment variables.
    ``from_file`` sets every section explicitly and ignores them.
    """

    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    # YAML is loaded manually via from_file()
    model_config = SettingsConfigDict(env_prefix="TAGSCRUB_", env_ignore_empty=True)

    @classmethod
    def from_file(cls, config_path: str | Path = "tagscrub.yaml") -> "TagscrubConfig":
        """Load configuration from YAML file.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not valid YAML, a section is not a
                mapping, or a value fails validation
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        try:
            with open(config_path, "r") as f:
                config_dict = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {config_path}: {e}") from e

        if not isinstance(config_dict, dict):
            raise ValueError(f"Config file {config_path} must contain a mapping")

        output_config = config_dict.get("output") or {}
        logging_config = config_dict.get("logging") or {}
        for name, section in (("output", output_config), ("logging", logging_config)):
            if not isinstance(section, dict):
                raise ValueError(f"Config section '{name}' in {config_path} must be a mapping")

        return cls(
            output=OutputConfig(**output_config) if output_config else OutputConfig(),
            logging=LoggingConfig(**logging_config) if logging_config else LoggingConfig(),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "output": self.output.model_dump(),
            "logging": self.logging.model_dump(),
        }

    def to_yaml(self) -> str:
        """Convert configuration to YAML string."""
        return yaml.dump(self.to_dict(), default_flow_style=False)

    def save(self, path: str | Path = "tagscrub.yaml") -> None:
        """Save configuration to YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            f.write(self.to_yaml())

        logger.info(f"Configuration saved to {path}")
