"""Application configuration: settings schema and mdcontent.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "mdcontent.yaml"


class Settings(BaseModel):
    app_name:         str = "mdcontent"
    content_dir:      str = Field(default="content",    description="Root directory of Markdown sources")
    workers:          int = Field(default=1,  ge=1,     description="Parser threads; 1 parses serially")
    words_per_minute: int = Field(default=213, ge=1,    description="Reading speed used for reading_time")
    summary_length:   int = Field(default=70, ge=1,     description="Max words in an automatic summary")
    parser_config:    str = Field(default="gfm-like",   description="MarkdownIt parser preset name")
    index_file:       str = Field(default="index.json", description="Output path for the published index")
    log_level:        str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from mdcontent.yaml, then MDCONTENT_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"MDCONTENT_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
