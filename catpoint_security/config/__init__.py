"""Configuration components for the Catpoint security system."""

from .defaults import (
    CAT_CONFIDENCE_THRESHOLD,
    DEFAULT_CONFIG,
    DEFAULT_PATHS,
    SIMULATION_SETTINGS,
    CASCADE_SETTINGS
)

__all__ = [
    'CAT_CONFIDENCE_THRESHOLD',
    'DEFAULT_CONFIG',
    'DEFAULT_PATHS',
    'SIMULATION_SETTINGS',
    'CASCADE_SETTINGS'
]
