"""
Configuration loader for the Exercise Grader.

Handles parsing and validation of the optional YAML runner configuration.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from .config import DEFAULT_API_URL, PACING_INTERVAL_MS, REQUEST_TIMEOUT_SECONDS, RULES_FILENAME
from .errors import ConfigError


class RunnerConfig(BaseModel):
    """
    Configuration model for a grading run.
    """
    api_url: str = Field(DEFAULT_API_URL, description="Base URL of the Piston API")
    request_timeout: float = Field(REQUEST_TIMEOUT_SECONDS, gt=0, description="Per-request timeout in seconds")
    pacing_interval_ms: int = Field(PACING_INTERVAL_MS, ge=0, description="Delay after every submission")
    rules_filename: str = Field(RULES_FILENAME, description="Rules file name inside the exercise directory")
    verbose: bool = Field(False, description="Enable verbose output")

    def with_overrides(self, **overrides: Any) -> "RunnerConfig":
        """
        Return a copy with every non-None override applied and re-validated.

        Raises:
            ConfigError: If an override is invalid.
        """
        data = self.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return _validate(data, source="command line")


def load_config(config_path: Path) -> RunnerConfig:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        RunnerConfig object with loaded values.

    Raises:
        ConfigError: If the file is missing, is invalid YAML, or has invalid values.
    """
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not config_data:
        return RunnerConfig()

    if not isinstance(config_data, dict):
        raise ConfigError(f"Configuration in {config_path} must be a mapping")

    return _validate(config_data, source=str(config_path))


def _validate(data: dict[str, Any], source: str) -> RunnerConfig:
    try:
        return RunnerConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {source}: {e}") from e
