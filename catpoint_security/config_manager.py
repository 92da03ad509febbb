"""Configuration management with JSON file persistence."""

import json
import os
from dataclasses import fields
from typing import Optional, Callable, List

from .models.config import SecurityConfig
from .config.defaults import DEFAULT_PATHS, REPOSITORY_BACKENDS, LOG_LEVELS
from .utils import ensure_directory_exists
from .logging_config import get_logger

logger = get_logger("config_manager")


class ConfigManager:
    """Manages system configuration with file persistence and change callbacks."""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path or DEFAULT_PATHS["config_file"]
        self._config: Optional[SecurityConfig] = None
        self._config_change_callbacks: List[Callable[[SecurityConfig], None]] = []

        self.load_config()

    def load_config(self) -> SecurityConfig:
        """Load configuration from file or create default."""
        if os.path.exists(self.config_path):
            try:
                with open(self.config_path, 'r') as f:
                    config_dict = json.load(f)
                known = {f.name for f in fields(SecurityConfig)}
                unknown = set(config_dict) - known
                if unknown:
                    logger.warning(f"Ignoring unknown config keys: {sorted(unknown)}")
                self._config = SecurityConfig(**{k: v for k, v in config_dict.items() if k in known})
            except (ValueError, TypeError, AttributeError) as e:
                logger.error(f"Error loading config: {e}. Using defaults.")
                self._config = SecurityConfig()
        else:
            self._config = SecurityConfig()
            self.save_config()

        return self._config

    def save_config(self) -> None:
        """Save current configuration to file."""
        if self._config is None:
            return

        directory = os.path.dirname(self.config_path)
        if directory:
            ensure_directory_exists(directory)

        with open(self.config_path, 'w') as f:
            json.dump(self._config.to_dict(), f, indent=2)

    def get_config(self) -> SecurityConfig:
        """Get current configuration."""
        if self._config is None:
            return self.load_config()
        return self._config

    def update_config(self, **kwargs) -> None:
        """Update configuration with new values."""
        if self._config is None:
            self.load_config()

        for key, value in kwargs.items():
            if hasattr(self._config, key):
                setattr(self._config, key, value)
            else:
                logger.warning(f"Unknown config key ignored: {key}")

        self.save_config()

        for callback in self._config_change_callbacks:
            callback(self._config)

    def add_config_change_callback(self, callback: Callable[[SecurityConfig], None]) -> None:
        """Register a callback run after every update."""
        self._config_change_callbacks.append(callback)

    def remove_config_change_callback(self, callback: Callable[[SecurityConfig], None]) -> None:
        if callback in self._config_change_callbacks:
            self._config_change_callbacks.remove(callback)

    def validate_config(self) -> bool:
        """Validate current configuration."""
        if self._config is None:
            return False
        return validate_config(self._config)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_config(config: SecurityConfig) -> bool:
    """Check a configuration, logging the first invalid setting."""
    if not _is_number(config.cat_confidence_threshold) or \
            not 0.0 <= config.cat_confidence_threshold <= 100.0:
        logger.error(f"Invalid cat_confidence_threshold: {config.cat_confidence_threshold}")
        return False

    if config.repository_backend not in REPOSITORY_BACKENDS:
        logger.error(f"Invalid repository_backend: {config.repository_backend}")
        return False

    if not isinstance(config.log_level, str) or config.log_level.upper() not in LOG_LEVELS:
        logger.error(f"Invalid log_level: {config.log_level}")
        return False

    if isinstance(config.simulation_steps, bool) or \
            not isinstance(config.simulation_steps, int) or config.simulation_steps < 1:
        logger.error(f"Invalid simulation_steps: {config.simulation_steps}")
        return False

    if not _is_number(config.cat_probability) or \
            not 0.0 <= config.cat_probability <= 1.0:
        logger.error(f"Invalid cat_probability: {config.cat_probability}")
        return False

    return True
