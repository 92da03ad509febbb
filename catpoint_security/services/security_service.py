"""Security service: the alarm status state machine."""

from typing import Any, Set

from ..models.security import Sensor, ArmingStatus, AlarmStatus
from ..config.defaults import CAT_CONFIDENCE_THRESHOLD
from .interfaces import SecurityRepositoryInterface, ImageServiceInterface, StatusListener
from ..logging_config import get_logger

logger = get_logger("security_service")


class SecurityService:
    """Applies the alarm rules to sensor, arming and image events.

    The service is the only writer of the alarm status. Sensors, arming
    status and alarm status live in the repository; the service itself only
    keeps the registered listeners and the result of the last image analysis.
    Listener and image service errors are not caught.
    """

    def __init__(self, security_repository: SecurityRepositoryInterface,
                 image_service: ImageServiceInterface,
                 confidence_threshold: float = CAT_CONFIDENCE_THRESHOLD):
        self.security_repository = security_repository
        self.image_service = image_service
        self.confidence_threshold = confidence_threshold
        self.status_listeners: Set[StatusListener] = set()
        self._last_cat_detected = False

    @property
    def last_cat_detected(self) -> bool:
        """Result of the most recent image analysis."""
        return self._last_cat_detected

    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        """Change the arming status.

        Disarming clears the alarm. Arming resets every sensor to inactive,
        and arming at home while the last image showed a cat raises the alarm.
        """
        if arming_status == ArmingStatus.DISARMED:
            self._set_alarm_status(AlarmStatus.NO_ALARM)
        else:
            self._reset_sensors()
            if arming_status == ArmingStatus.ARMED_HOME and self._last_cat_detected:
                self._set_alarm_status(AlarmStatus.ALARM)

        self.security_repository.set_arming_status(arming_status)
        logger.info(f"Arming status set to {arming_status.name}")

    def _reset_sensors(self) -> None:
        # Direct reset, rules for deactivation must not run here
        sensors = list(self.security_repository.get_sensors())
        for sensor in sensors:
            sensor.active = False
            self.security_repository.update_sensor(sensor)

        if sensors:
            logger.debug(f"Reset {len(sensors)} sensors to inactive")
            for listener in list(self.status_listeners):
                listener.sensor_status_changed()

    def _set_alarm_status(self, alarm_status: AlarmStatus) -> None:
        self.security_repository.set_alarm_status(alarm_status)
        logger.info(f"Alarm status set to {alarm_status.name}")
        for listener in list(self.status_listeners):
            listener.notify(alarm_status)

    def _handle_sensor_activated(self) -> None:
        alarm_status = self.security_repository.get_alarm_status()
        if alarm_status == AlarmStatus.NO_ALARM:
            self._set_alarm_status(AlarmStatus.PENDING_ALARM)
        elif alarm_status == AlarmStatus.PENDING_ALARM:
            self._set_alarm_status(AlarmStatus.ALARM)

    def _handle_sensor_deactivated(self) -> None:
        alarm_status = self.security_repository.get_alarm_status()
        if alarm_status == AlarmStatus.PENDING_ALARM:
            self._set_alarm_status(AlarmStatus.NO_ALARM)
        elif alarm_status == AlarmStatus.ALARM:
            self._set_alarm_status(AlarmStatus.PENDING_ALARM)

    def change_sensor_activation_status(self, sensor: Sensor, active: bool) -> None:
        """Activate or deactivate a tracked sensor and apply the alarm rules."""
        if active:
            # Activation escalates even for an already active sensor
            if self.security_repository.get_arming_status().is_armed:
                self._handle_sensor_activated()
        elif sensor.active:
            self._handle_sensor_deactivated()

        sensor.active = active
        self.security_repository.update_sensor(sensor)
        logger.debug(f"Sensor {sensor.name} ({sensor.sensor_type.name}) active={active}")

        for listener in list(self.status_listeners):
            listener.sensor_status_changed()

    def process_image(self, image: Any) -> bool:
        """Analyze a camera image and apply the cat detection rules.

        Returns whether a cat was detected.
        """
        cat_detected = self.image_service.image_contains_cat(image, self.confidence_threshold)
        self._last_cat_detected = cat_detected
        logger.info(f"Image processed, cat detected: {cat_detected}")

        if cat_detected:
            if self.security_repository.get_arming_status() == ArmingStatus.ARMED_HOME:
                self._set_alarm_status(AlarmStatus.ALARM)
        elif not any(sensor.active for sensor in self.security_repository.get_sensors()):
            self._set_alarm_status(AlarmStatus.NO_ALARM)

        for listener in list(self.status_listeners):
            listener.cat_detected(cat_detected)

        return cat_detected

    def add_status_listener(self, status_listener: StatusListener) -> None:
        self.status_listeners.add(status_listener)

    def remove_status_listener(self, status_listener: StatusListener) -> None:
        self.status_listeners.discard(status_listener)

    def get_alarm_status(self) -> AlarmStatus:
        return self.security_repository.get_alarm_status()

    def get_arming_status(self) -> ArmingStatus:
        return self.security_repository.get_arming_status()

    def get_sensors(self) -> Set[Sensor]:
        return self.security_repository.get_sensors()

    def add_sensor(self, sensor: Sensor) -> None:
        self.security_repository.add_sensor(sensor)

    def remove_sensor(self, sensor: Sensor) -> None:
        self.security_repository.remove_sensor(sensor)
