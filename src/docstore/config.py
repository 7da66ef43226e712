"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:    str = "docstore"
    storage_url: str = Field(default="memory", description="'memory' or a SQLAlchemy URL for the documents table")
    log_level:   str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        """Accept level names in any case (debug, Info, ...)."""
        return value.strip().upper() if isinstance(value, str) else value


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then DOCSTORE_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"DOCSTORE_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
