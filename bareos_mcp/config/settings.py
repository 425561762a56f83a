"""Centralized configuration for bareos-mcp."""
import logging
import sys
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).parent.parent.parent


def get_env_path() -> Path:
    """Return the path to the .env file."""
    project_env = PROJECT_ROOT / ".env"
    if project_env.exists():
        return project_env
    cwd_env = Path.cwd() / ".env"
    if cwd_env.exists():
        return cwd_env
    return project_env


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # bconsole
    bconsole_path: str = Field(
        default="bconsole",
        validation_alias="BCONSOLE_PATH",
        description="Path to the bconsole binary (bare names are looked up on PATH)",
    )
    bconsole_config: Optional[str] = Field(
        default=None,
        validation_alias="BCONSOLE_CONFIG",
        description="Optional bconsole configuration file passed with -c",
    )

    # Logging settings
    log_level: str = Field(
        default="WARNING",
        validation_alias="BAREOS_MCP_LOG_LEVEL",
        description="Log level",
    )
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        validation_alias="BAREOS_MCP_LOG_FORMAT",
        description="Log format",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    def bconsole_command(self) -> List[str]:
        """Argument vector used to start bconsole."""
        argv = [self.bconsole_path]
        if self.bconsole_config:
            argv += ["-c", self.bconsole_config]
        return argv

    def setup_logging(self, level: Optional[str] = None) -> None:
        """Setup application logging.

        Logs always go to stderr: stdout is reserved for protocol lines.
        """
        logging.basicConfig(
            level=getattr(logging, level or self.log_level),
            format=self.log_format,
            handlers=[logging.StreamHandler(sys.stderr)],
            force=True,
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
