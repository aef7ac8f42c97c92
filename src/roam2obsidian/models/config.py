"""Configuration models for roam2obsidian."""

from pydantic import BaseModel, Field, ValidationError, field_validator
from pathlib import Path
import yaml

from roam2obsidian.services.exceptions import ConfigError


class ConverterConfig(BaseModel):
    """Settings for a conversion run.

    Every field has a default, so a config file is optional and may set
    any subset of them. Command-line flags override file values.
    """

    output_dir: Path = Field(
        default_factory=Path.cwd,
        description="Directory the markdown files are written to"
    )

    daily_folder: str = Field(
        default="daily",
        description="Subdirectory of output_dir for daily notes"
    )

    indent_width: int = Field(
        default=4,
        ge=1,
        description="Spaces per nesting level in rendered pages"
    )

    max_reference_depth: int = Field(
        default=16,
        ge=1,
        description="Deepest chain of nested block references that is expanded"
    )

    @field_validator('daily_folder')
    @classmethod
    def validate_daily_folder(cls, v: str) -> str:
        """Daily folder must be a non-empty relative path."""
        if not v.strip():
            raise ValueError("daily_folder must not be empty")
        if Path(v).is_absolute():
            raise ValueError(
                f"daily_folder must be relative to output_dir: {v}"
            )
        return v

    @field_validator('output_dir')
    @classmethod
    def expand_output_dir(cls, v: Path) -> Path:
        return Path(v).expanduser()

    @classmethod
    def load(cls, path: Path) -> "ConverterConfig":
        """
        Load configuration from YAML file.

        Args:
            path: Path to config.yaml file

        Returns:
            Validated ConverterConfig instance

        Raises:
            ConfigError: If the file is missing, is not valid YAML, or fails validation
        """
        if not path.exists():
            raise ConfigError(
                f"Configuration file not found at {path}\n\n"
                f"Example format:\n\n"
                f"output_dir: ~/Documents/vault\n"
                f"daily_folder: daily\n"
                f"indent_width: 4\n"
                f"max_reference_depth: 16\n"
            )

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Could not read configuration file {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration file {path} must contain a mapping")

        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigError(f"Configuration validation failed:\n{e}") from e

    model_config = {"frozen": True}
