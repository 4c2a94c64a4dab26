"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for configuration.
Values can be overridden via environment variables:
- TOWNGRAPH_GRAPH_DATA_DIR=/path/to/data
- TOWNGRAPH_GRAPH_ROADS_FILE=roads.txt
- TOWNGRAPH_GRAPH_SKIP_MALFORMED_LINES=true
- TOWNGRAPH_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Road data configuration.

    Environment variables prefixed with TOWNGRAPH_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="TOWNGRAPH_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    roads_file: str = "roads.txt"
    encoding: str = "utf-8"
    skip_malformed_lines: bool = False

    @property
    def roads_path(self) -> Path:
        """Full path to the bulk-load road file."""
        return self.data_dir / self.roads_file


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with TOWNGRAPH_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="TOWNGRAPH_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.roads_path)

    Environment variables prefixed with TOWNGRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="TOWNGRAPH_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
