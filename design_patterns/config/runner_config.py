"""Configuration settings for the demo runner."""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from ..errors import ConfigurationError

LOG_FORMATS = ("console", "json")


@dataclass
class RunnerConfig:
    """Configuration for the pattern demo runner.

    Attributes:
        pause_between_patterns: Wait for Enter between demos when running all patterns
        log_level: Minimum structlog level name (debug, info, warning, error)
        log_format: Log renderer, either "console" or "json"
        show_metrics: Print notification counters after a run
    """

    pause_between_patterns: bool = True
    log_level: str = "warning"
    log_format: str = "console"
    show_metrics: bool = False

    def __post_init__(self) -> None:
        for name in ("log_level", "log_format"):
            if not isinstance(getattr(self, name), str):
                raise ConfigurationError(f"{name} must be a string")
        for name in ("pause_between_patterns", "show_metrics"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigurationError(f"{name} must be true or false")

        self.log_level = self.log_level.lower()
        self.log_format = self.log_format.lower()
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(f"Unsupported log format: {self.log_format}")

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "RunnerConfig":
        """Create a RunnerConfig instance from a dictionary.

        Args:
            config_dict: Dictionary containing configuration values

        Returns:
            RunnerConfig instance with values from dictionary
        """
        return cls(**{k: v for k, v in config_dict.items() if k in cls.__dataclass_fields__})

    @classmethod
    def from_env(cls) -> "RunnerConfig":
        """Create config from environment variables."""
        return cls(
            pause_between_patterns=os.getenv("DESIGN_PATTERNS_PAUSE", "true").lower()
            not in ("0", "false", "no"),
            log_level=os.getenv("DESIGN_PATTERNS_LOG_LEVEL", "warning"),
            log_format=os.getenv("DESIGN_PATTERNS_LOG_FORMAT", "console"),
        )


def load_config(config_path: Optional[Path] = None) -> RunnerConfig:
    """Load configuration from file or use environment defaults.

    Args:
        config_path: Path to a JSON configuration file.

    Returns:
        RunnerConfig with file values layered over environment defaults.
    """
    defaults = RunnerConfig.from_env()
    if config_path and config_path.exists():
        with open(config_path) as f:
            try:
                user_config = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"Invalid config file {config_path}: {e}") from e
        if not isinstance(user_config, dict):
            raise ConfigurationError(f"Config file {config_path} must contain a JSON object")
        return RunnerConfig.from_dict({**defaults.__dict__, **user_config})

    return defaults
