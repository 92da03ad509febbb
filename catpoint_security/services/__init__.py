"""Services for the Catpoint security system."""

from .interfaces import (
    SecurityRepositoryInterface,
    ImageServiceInterface,
    StatusListener
)
from .security_service import SecurityService
from .security_repository import (
    InMemorySecurityRepository,
    JsonFileSecurityRepository,
    create_repository
)
from .status_listener import LoggingStatusListener

__all__ = [
    'SecurityRepositoryInterface',
    'ImageServiceInterface',
    'StatusListener',
    'SecurityService',
    'InMemorySecurityRepository',
    'JsonFileSecurityRepository',
    'create_repository',
    'LoggingStatusListener'
]
