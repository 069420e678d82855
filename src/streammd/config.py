"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "STREAMMD_"


class Settings(BaseModel):
    app_name:      str = "streammd"
    output_format: str = Field(default="json", pattern="^(json|text)$", description="json or text")
    output_dir:    Optional[str] = Field(default=None, description="Write parse output here instead of stdout")
    chunk_size:    int = Field(default=16, ge=1, description="Characters added per simulated stream update")
    coalesce_runs: bool = Field(default=True, description="Merge adjacent plain inline runs")
    log_level:     str = Field(
        default="WARNING",
        pattern="(?i)^(debug|info|warning|error|critical)$",
        description="Level for the streammd logger",
    )


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then STREAMMD_<FIELD> env vars, then non-None CLI overrides."""
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
