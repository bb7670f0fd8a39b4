"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:           str = "mdlexical"
    output_dir:         str = Field(default="dist", description="Directory for converted JSON records")
    output_format:      str = Field(default="lexical", pattern="^(lexical|tree)$", description="lexical or tree")
    description_length: int = Field(default=160, ge=4, description="Max description length before truncation")
    title_scan_length: int = Field(default=60, ge=4, description="Length of the first-paragraph title fallback")
    default_title:      str = Field(default="Untitled", description="Title used when nothing else is found")
    strip_frontmatter:  bool = Field(default=True, description="Remove a leading YAML frontmatter block")
    log_level:          str = Field(default="WARNING", description="Logging level for the CLI")


ENV_PREFIX = "MDLEXICAL_"


def _env_value(name: str, raw: str) -> Any:
    """Parse an env string as a YAML scalar for non-str fields ('false', '80'); str fields stay raw."""
    if Settings.model_fields[name].annotation is str:
        return raw
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {ENV_PREFIX}{name.upper()}: {e}") from e


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Build Settings for a conversion run.

    Precedence, lowest first: field defaults, config.yaml in the working
    directory, MDLEXICAL_<FIELD> env vars, then non-None CLI overrides.
    Raises ValueError for unreadable YAML or values that fail validation.
    """
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if raw := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = _env_value(name, raw)

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
