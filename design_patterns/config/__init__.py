"""Configuration management for the demo runner."""

from .runner_config import RunnerConfig, load_config

__all__ = ["RunnerConfig", "load_config"]
