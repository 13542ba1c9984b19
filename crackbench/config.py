"""
Configuration settings for crackbench.

Uses Pydantic Settings to load environment variables for benchmark defaults,
logging and the optional S3 upload. Only the CLI reads these settings; the
search core and the orchestrator receive explicit config objects built from
them.
"""
from __future__ import annotations

import os
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(ValueError):
    """Invalid benchmark configuration, rejected before any search starts."""


class Settings(BaseSettings):
    # Benchmark defaults
    password_length: int = Field(6, alias="PASSWORD_LENGTH")
    benchmark_runs: int = Field(5, alias="BENCHMARK_RUNS")
    worker_count: int = Field(default_factory=lambda: os.cpu_count() or 1, alias="WORKER_COUNT")
    search_backend: str = Field("process", alias="SEARCH_BACKEND")
    results_dir: str = Field("results", alias="RESULTS_DIR")

    # Application
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    json_logs: bool = Field(False, alias="JSON_LOGS")

    # S3 upload
    s3_bucket: str = Field("cracking-algorithm-data", alias="S3_BUCKET")
    aws_region: str = Field("sa-east-1", alias="AWS_REGION")
    aws_access_key_id: Optional[str] = Field(None, alias="AWS_ACCESS_KEY_ID")
    aws_secret_access_key: Optional[str] = Field(None, alias="AWS_SECRET_ACCESS_KEY")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["ConfigurationError", "Settings", "get_settings"]
