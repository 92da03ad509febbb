"""Service interfaces and abstract base classes."""

from abc import ABC, abstractmethod
from typing import Any, Set

from ..models.security import Sensor, ArmingStatus, AlarmStatus


class SecurityRepositoryInterface(ABC):
    """Interface for the store of sensors, arming status and alarm status."""

    @abstractmethod
    def add_sensor(self, sensor: Sensor) -> None:
        """Start tracking a sensor."""
        pass

    @abstractmethod
    def remove_sensor(self, sensor: Sensor) -> None:
        """Stop tracking a sensor."""
        pass

    @abstractmethod
    def update_sensor(self, sensor: Sensor) -> None:
        """Persist the current state of a tracked sensor."""
        pass

    @abstractmethod
    def set_alarm_status(self, alarm_status: AlarmStatus) -> None:
        """Store the alarm status."""
        pass

    @abstractmethod
    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        """Store the arming status."""
        pass

    @abstractmethod
    def get_sensors(self) -> Set[Sensor]:
        """Get all tracked sensors."""
        pass

    @abstractmethod
    def get_alarm_status(self) -> AlarmStatus:
        """Get the current alarm status."""
        pass

    @abstractmethod
    def get_arming_status(self) -> ArmingStatus:
        """Get the current arming status."""
        pass


class ImageServiceInterface(ABC):
    """Interface for image analysis."""

    @abstractmethod
    def image_contains_cat(self, image: Any, confidence_threshold: float) -> bool:
        """Return True if a cat is found with at least the given confidence (percent)."""
        pass


class StatusListener(ABC):
    """Observer of security system events."""

    @abstractmethod
    def notify(self, alarm_status: AlarmStatus) -> None:
        """Called whenever the alarm status is written."""
        pass

    @abstractmethod
    def cat_detected(self, cat_detected: bool) -> None:
        """Called with the result of every image analysis."""
        pass

    @abstractmethod
    def sensor_status_changed(self) -> None:
        """Called after one or more sensors changed state."""
        pass
