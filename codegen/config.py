"""
Codegen configuration — all environment variables in one place.

Read from environment at runtime. The build plugin usually passes an explicit
GenerationLayout instead; these are the defaults for standalone runs.
"""

from __future__ import annotations

import logging
import os


class Settings:
    """Generation settings from environment variables."""

    # Entry point
    MAIN_CLASS: str = os.environ.get("CODEGEN_MAIN_CLASS", "com.example.Main")

    # Source trees (sbt/maven layout)
    SOURCE_DIR: str = os.environ.get("CODEGEN_SOURCE_DIR", "src/main/java")
    TEST_SOURCE_DIR: str = os.environ.get("CODEGEN_TEST_SOURCE_DIR", "src/test/java")
    IT_SOURCE_DIR: str = os.environ.get("CODEGEN_IT_SOURCE_DIR", "src/it/java")
    GENERATED_SOURCE_DIR: str = os.environ.get("CODEGEN_GENERATED_SOURCE_DIR", "target/generated-sources/java")
    GENERATED_TEST_SOURCE_DIR: str = os.environ.get(
        "CODEGEN_GENERATED_TEST_SOURCE_DIR", "target/generated-test-sources/java"
    )

    # Logging
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")


settings = Settings()


def configure_logging(config: Settings | None = None) -> None:
    """Apply LOG_LEVEL to the root logger. Unknown levels fall back to INFO."""
    config = config or settings
    level = getattr(logging, config.LOG_LEVEL.upper(), logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
