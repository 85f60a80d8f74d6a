from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class RuntimeConfig(BaseSettings):
    # NADM_ARGS belongs to the child; never declare an "args" field here.
    model_config = SettingsConfigDict(
        env_prefix="NADM_", case_sensitive=False, extra="ignore"
    )

    script_path: Path | None = None
    indexed_args: bool = False
    log_level: str = "info"
    log_format: str = "json"
    log_dir: Path | None = None
    log_to_file: bool = False


@lru_cache
def get_runtime_config() -> RuntimeConfig:
    return RuntimeConfig()
