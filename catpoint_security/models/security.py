"""Security data models: sensors and status enums."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict


class SensorType(Enum):
    """Kinds of sensor that can be attached to the system."""
    DOOR = "DOOR"
    WINDOW = "WINDOW"
    MOTION = "MOTION"


class ArmingStatus(Enum):
    """Arming state chosen by the user."""
    DISARMED = "Disarmed"
    ARMED_HOME = "Armed - At Home"
    ARMED_AWAY = "Armed - Away"

    @property
    def description(self) -> str:
        return self.value

    @property
    def is_armed(self) -> bool:
        return self is not ArmingStatus.DISARMED


class AlarmStatus(Enum):
    """Escalation level of the alarm."""
    NO_ALARM = "Cool and Good"
    PENDING_ALARM = "I'm in Danger..."
    ALARM = "Awooga!"

    @property
    def description(self) -> str:
        return self.value


@dataclass(unsafe_hash=True)
class Sensor:
    """A binary door, window or motion sensor.

    Identity is the (name, sensor_type) pair; ``active`` is mutable state and
    is ignored by equality and hashing so a sensor can be toggled while it
    sits in a set.
    """
    name: str
    sensor_type: SensorType
    active: bool = field(default=False, compare=False)

    def sort_key(self) -> tuple:
        return (self.name, self.sensor_type.value)

    def __lt__(self, other: "Sensor") -> bool:
        if not isinstance(other, Sensor):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'sensor_type': self.sensor_type.name,
            'active': self.active
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Sensor":
        active = data.get('active', False)
        if not isinstance(active, bool):
            raise TypeError(f"Sensor active flag must be a boolean, got {active!r}")
        return cls(
            name=data['name'],
            sensor_type=SensorType[data['sensor_type']],
            active=active
        )
