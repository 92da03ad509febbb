"""
Catpoint Security

A home security alarm simulator. Sensor activations, the arming control and
a cat detection image check together decide the alarm status.
"""

__version__ = "1.0.0"
__author__ = "Catpoint Security"

from .config_manager import ConfigManager
from .models import (
    Sensor,
    SensorType,
    ArmingStatus,
    AlarmStatus,
    SecurityConfig
)
from .services import (
    SecurityRepositoryInterface,
    ImageServiceInterface,
    StatusListener,
    SecurityService,
    InMemorySecurityRepository,
    JsonFileSecurityRepository,
    LoggingStatusListener
)

__all__ = [
    # Core management
    'ConfigManager',

    # Data models
    'Sensor',
    'SensorType',
    'ArmingStatus',
    'AlarmStatus',
    'SecurityConfig',

    # Services
    'SecurityRepositoryInterface',
    'ImageServiceInterface',
    'StatusListener',
    'SecurityService',
    'InMemorySecurityRepository',
    'JsonFileSecurityRepository',
    'LoggingStatusListener'
]
