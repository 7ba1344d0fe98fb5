"""Configuration loader -- reads config.yaml + .env, validates with Pydantic.

Resolves ${ENV_VAR} references in YAML values from environment variables.
Fails fast with clear errors if a schedule expression does not parse.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from core.models.schedules import ScheduleDefinition
from scheduler.expression import CronExpression

logger = logging.getLogger(__name__)

# Default home directory for config.yaml and .env
DEFAULT_HOME = Path.home() / ".cronfield"

_ENV_VAR_RE = re.compile(r"\$\{(\w+)\}")


def _resolve_env_vars(value: Any) -> Any:
    """Recursively resolve ${ENV_VAR} references in config values."""
    if isinstance(value, str):
        def replacer(match: re.Match) -> str:
            var_name = match.group(1)
            env_value = os.environ.get(var_name)
            if env_value is None:
                logger.warning("Environment variable %s not set", var_name)
                return match.group(0)  # leave unresolved
            return env_value
        return _ENV_VAR_RE.sub(replacer, value)
    elif isinstance(value, dict):
        return {k: _resolve_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_resolve_env_vars(item) for item in value]
    return value


# ---------------------------------------------------------------------------
# Config models (Pydantic)
# ---------------------------------------------------------------------------

class LoggingConfig(BaseModel):
    level: str = "INFO"


class AppConfig(BaseModel):
    """Top-level application configuration."""

    home_dir: str = str(DEFAULT_HOME)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    schedules: list[ScheduleDefinition] = Field(default_factory=list)

    @field_validator("schedules")
    @classmethod
    def validate_unique_names(cls, schedules: list[ScheduleDefinition]) -> list[ScheduleDefinition]:
        seen: set[str] = set()
        for schedule in schedules:
            if schedule.name in seen:
                raise ValueError(f"Duplicate schedule name: {schedule.name!r}")
            seen.add(schedule.name)
        return schedules

    @property
    def home_path(self) -> Path:
        """Resolved home directory as a Path."""
        return Path(self.home_dir).expanduser()

    def compiled_schedules(self) -> dict[str, CronExpression]:
        """Parsed expressions for every enabled schedule, keyed by name."""
        compiled = {}
        for schedule in self.schedules:
            if not schedule.enabled:
                logger.debug("Skipping disabled schedule %s", schedule.name)
                continue
            compiled[schedule.name] = schedule.compile()
        return compiled


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def load_config(
    config_path: str | Path | None = None,
    env_path: str | Path | None = None,
) -> AppConfig:
    """Load configuration from YAML + .env files.

    1. Load .env into environment variables
    2. Load config.yaml and resolve ${ENV_VAR} references
    3. Validate against Pydantic models (every schedule is parsed here)
    """
    # Determine paths
    home = Path(os.environ.get("CRONFIELD_HOME", str(DEFAULT_HOME))).expanduser()

    if env_path is None:
        env_path = home / ".env"
    if config_path is None:
        config_path = home / "config.yaml"

    env_path = Path(env_path)
    config_path = Path(config_path)

    # Load .env
    if env_path.exists():
        load_dotenv(env_path)
        logger.info("Loaded environment from %s", env_path)
    else:
        logger.debug("No .env file at %s", env_path)

    # Load config.yaml
    raw_config: dict = {}
    if config_path.exists():
        with open(config_path) as f:
            raw_config = yaml.safe_load(f) or {}
        logger.info("Loaded config from %s", config_path)
    else:
        logger.warning("No config file at %s, using defaults", config_path)

    # Resolve ${ENV_VAR} references
    resolved = _resolve_env_vars(raw_config)

    # Override home_dir if set via env
    if "CRONFIELD_HOME" in os.environ:
        resolved["home_dir"] = os.environ["CRONFIELD_HOME"]

    # Validate
    config = AppConfig(**resolved)
    logger.debug("Validated %d schedule(s)", len(config.schedules))
    return config
