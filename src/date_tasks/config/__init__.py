"""Configuration helpers for date-tasks.

Exposes a single public function `load_config` that reads environment
variables and returns a typed `AppConfig` instance with sensible
defaults.
"""

from .env import AppConfig, load_config

__all__ = ["AppConfig", "load_config"]
