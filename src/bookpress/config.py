"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "BOOKPRESS_"


class Settings(BaseModel):
    app_name:      str = "bookpress"
    author:        str = Field(default="Anonymous", description="Default author when a book file names none")
    output_dir:    str = Field(default="dist",      description="Directory the built .epub is saved to")
    body_format:   str = Field(default="text", pattern="^(text|markdown)$", description="text or markdown")
    fallback_name: str = Field(default="untitled",  min_length=1, description="File name stem for untitled books")
    log_level:     str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then BOOKPRESS_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
