"""Repository implementations for security system state."""

import json
import os
from typing import Set, Optional, Dict, Any

from ..models.security import Sensor, ArmingStatus, AlarmStatus
from ..config.defaults import DEFAULT_PATHS
from .interfaces import SecurityRepositoryInterface
from ..utils import ensure_directory_exists
from ..logging_config import get_logger

logger = get_logger("security_repository")


class InMemorySecurityRepository(SecurityRepositoryInterface):
    """Keeps all state in memory. Starts disarmed with no alarm."""

    def __init__(self):
        self.sensors: Set[Sensor] = set()
        self.alarm_status = AlarmStatus.NO_ALARM
        self.arming_status = ArmingStatus.DISARMED

    def add_sensor(self, sensor: Sensor) -> None:
        self.sensors.add(sensor)

    def remove_sensor(self, sensor: Sensor) -> None:
        self.sensors.discard(sensor)

    def update_sensor(self, sensor: Sensor) -> None:
        # Equal sensors share identity, replace so the stored object is the caller's
        self.sensors.discard(sensor)
        self.sensors.add(sensor)

    def set_alarm_status(self, alarm_status: AlarmStatus) -> None:
        self.alarm_status = alarm_status

    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        self.arming_status = arming_status

    def get_sensors(self) -> Set[Sensor]:
        return self.sensors

    def get_alarm_status(self) -> AlarmStatus:
        return self.alarm_status

    def get_arming_status(self) -> ArmingStatus:
        return self.arming_status


class JsonFileSecurityRepository(InMemorySecurityRepository):
    """In-memory repository that writes its full state to a JSON file.

    The file is read once at construction and rewritten after every
    mutation. A missing file starts from defaults; an unreadable one is
    logged and replaced on the next write.
    """

    def __init__(self, file_path: Optional[str] = None):
        super().__init__()
        self.file_path = file_path or DEFAULT_PATHS["repository_file"]
        self._load()

    def _load(self) -> None:
        if not os.path.exists(self.file_path):
            logger.debug(f"No repository file at {self.file_path}, using defaults")
            return

        try:
            with open(self.file_path, 'r') as f:
                data = json.load(f)
            self.alarm_status = AlarmStatus[data.get('alarm_status', AlarmStatus.NO_ALARM.name)]
            self.arming_status = ArmingStatus[data.get('arming_status', ArmingStatus.DISARMED.name)]
            self.sensors = {Sensor.from_dict(item) for item in data.get('sensors', [])}
            logger.info(f"Loaded {len(self.sensors)} sensors from {self.file_path}")
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.error(f"Error loading repository file {self.file_path}: {e}. Using defaults.")
            self.sensors = set()
            self.alarm_status = AlarmStatus.NO_ALARM
            self.arming_status = ArmingStatus.DISARMED

    def _to_dict(self) -> Dict[str, Any]:
        return {
            'alarm_status': self.alarm_status.name,
            'arming_status': self.arming_status.name,
            'sensors': [sensor.to_dict() for sensor in sorted(self.sensors)]
        }

    def save(self) -> None:
        """Write the current state to the repository file."""
        directory = os.path.dirname(self.file_path)
        if directory:
            ensure_directory_exists(directory)

        with open(self.file_path, 'w') as f:
            json.dump(self._to_dict(), f, indent=2)

    def add_sensor(self, sensor: Sensor) -> None:
        super().add_sensor(sensor)
        self.save()

    def remove_sensor(self, sensor: Sensor) -> None:
        super().remove_sensor(sensor)
        self.save()

    def update_sensor(self, sensor: Sensor) -> None:
        super().update_sensor(sensor)
        self.save()

    def set_alarm_status(self, alarm_status: AlarmStatus) -> None:
        super().set_alarm_status(alarm_status)
        self.save()

    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        super().set_arming_status(arming_status)
        self.save()


def create_repository(backend: str = "memory",
                      file_path: Optional[str] = None) -> SecurityRepositoryInterface:
    """Build the repository named by the configuration backend."""
    if backend == "memory":
        return InMemorySecurityRepository()
    if backend == "json":
        return JsonFileSecurityRepository(file_path)
    raise ValueError(f"Unknown repository backend: {backend}")
