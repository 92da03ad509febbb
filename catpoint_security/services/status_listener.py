"""Status listener that records and logs security events."""

from typing import Optional

from ..models.security import AlarmStatus
from .interfaces import StatusListener
from ..logging_config import get_logger

logger = get_logger("status_listener")


class LoggingStatusListener(StatusListener):
    """Logs every event and keeps the latest values for display."""

    def __init__(self, name: str = "console"):
        self.name = name
        self.last_alarm_status: Optional[AlarmStatus] = None
        self.last_cat_detected: Optional[bool] = None
        self.alarm_notifications = 0
        self.cat_detections = 0
        self.sensor_changes = 0

    def notify(self, alarm_status: AlarmStatus) -> None:
        self.last_alarm_status = alarm_status
        self.alarm_notifications += 1
        if alarm_status == AlarmStatus.ALARM:
            logger.warning(f"[{self.name}] ALARM: {alarm_status.description}")
        else:
            logger.info(f"[{self.name}] Alarm status: {alarm_status.description}")

    def cat_detected(self, cat_detected: bool) -> None:
        self.last_cat_detected = cat_detected
        if cat_detected:
            self.cat_detections += 1
            logger.info(f"[{self.name}] DANGER - CAT DETECTED")
        else:
            logger.info(f"[{self.name}] Camera clear")

    def sensor_status_changed(self) -> None:
        self.sensor_changes += 1
        logger.debug(f"[{self.name}] Sensor status changed")
