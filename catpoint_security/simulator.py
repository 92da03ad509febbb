#!/usr/bin/env python3
"""Command line driver that plays events against the security service."""

import argparse
import random
import sys
from typing import Dict, List, Optional

import numpy as np

from .config_manager import ConfigManager, validate_config
from .config.defaults import SIMULATION_SETTINGS
from .models.config import SecurityConfig
from .models.security import Sensor, SensorType, ArmingStatus
from .services.security_service import SecurityService
from .services.security_repository import create_repository
from .services.image_service import FakeImageService, OpenCVImageService, load_image
from .services.status_listener import LoggingStatusListener
from .logging_config import get_logger, setup_logging

logger = get_logger("simulator")

# Camera frame used when no image file is given
BLANK_FRAME_SHAPE = (480, 640, 3)


class SecuritySimulator:
    """Drives a security service with random sensor, camera and arming events."""

    def __init__(self, security_service: SecurityService, seed: Optional[int] = None,
                 event_weights: Optional[Dict[str, int]] = None,
                 camera_image: Optional[np.ndarray] = None):
        self.security_service = security_service
        self.camera_image = camera_image if camera_image is not None \
            else np.zeros(BLANK_FRAME_SHAPE, dtype=np.uint8)
        self.random = random.Random(seed)
        self.event_weights = event_weights or SIMULATION_SETTINGS["event_weights"]
        self.events: List[str] = []

    def ensure_default_sensors(self) -> None:
        """Add the default sensors when the repository has none."""
        if self.security_service.get_sensors():
            return

        for name, sensor_type in SIMULATION_SETTINGS["default_sensors"]:
            self.security_service.add_sensor(Sensor(name, SensorType[sensor_type]))
        logger.info(f"Added {len(SIMULATION_SETTINGS['default_sensors'])} default sensors")

    def step(self) -> str:
        """Play one random event and return its description."""
        event_names = list(self.event_weights.keys())
        weights = [self.event_weights[name] for name in event_names]
        event = self.random.choices(event_names, weights=weights)[0]

        if event == "toggle_sensor":
            description = self._toggle_sensor()
        elif event == "scan_image":
            description = self._scan_image()
        else:
            description = self._change_arming()

        self.events.append(description)
        return description

    def run(self, steps: int) -> List[str]:
        for _ in range(steps):
            description = self.step()
            logger.info(f"{description} -> {self.security_service.get_alarm_status().name}")
        return self.events

    def _toggle_sensor(self) -> str:
        sensors = sorted(self.security_service.get_sensors())
        if not sensors:
            return "no sensors to toggle"

        sensor = self.random.choice(sensors)
        active = not sensor.active
        self.security_service.change_sensor_activation_status(sensor, active)
        return f"{sensor.name} {'activated' if active else 'deactivated'}"

    def _scan_image(self) -> str:
        cat_detected = self.security_service.process_image(self.camera_image)
        return f"camera scan, cat {'detected' if cat_detected else 'not detected'}"

    def _change_arming(self) -> str:
        arming_status = self.random.choice(list(ArmingStatus))
        self.security_service.set_arming_status(arming_status)
        return f"arming set to {arming_status.description}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="catpoint-simulator",
        description="Simulate a home security system with cat detection.")
    parser.add_argument("--config", help="Path to a JSON configuration file")
    parser.add_argument("--steps", type=int, help="Number of random events to play")
    parser.add_argument("--seed", type=int, help="Random seed for repeatable runs")
    parser.add_argument("--arm", choices=[status.name.lower() for status in ArmingStatus],
                        help="Arming status to set before the run")
    parser.add_argument("--image", help="Scan this image file with the OpenCV cat detector")
    parser.add_argument("--log-level", help="Override the configured log level")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the simulator."""
    args = build_parser().parse_args(argv)

    if args.config:
        config = ConfigManager(args.config).get_config()
    else:
        config = SecurityConfig()

    if args.steps is not None:
        config.simulation_steps = args.steps
    if args.seed is not None:
        config.simulation_seed = args.seed
    if args.log_level:
        config.log_level = args.log_level

    setup_logging(config.log_level, config.log_dir)

    if not validate_config(config):
        logger.error("Invalid configuration, exiting")
        return 1

    if args.image:
        image_service = OpenCVImageService()
        camera_image = load_image(args.image)
    else:
        image_service = FakeImageService(config.simulation_seed, config.cat_probability)
        camera_image = None

    repository = create_repository(config.repository_backend, config.repository_path)
    security_service = SecurityService(repository, image_service, config.cat_confidence_threshold)

    listener = LoggingStatusListener()
    security_service.add_status_listener(listener)

    simulator = SecuritySimulator(security_service, config.simulation_seed,
                                  camera_image=camera_image)
    simulator.ensure_default_sensors()

    if args.arm:
        security_service.set_arming_status(ArmingStatus[args.arm.upper()])

    simulator.run(config.simulation_steps)

    print("=== Catpoint Simulation Summary ===")
    print(f"Events played: {len(simulator.events)}")
    print(f"Arming status: {security_service.get_arming_status().description}")
    print(f"Alarm status: {security_service.get_alarm_status().description}")
    print(f"Alarm notifications: {listener.alarm_notifications}")
    print(f"Cat detections: {listener.cat_detections}")
    for sensor in sorted(security_service.get_sensors()):
        print(f"  {sensor.name} ({sensor.sensor_type.name}): "
              f"{'Active' if sensor.active else 'Inactive'}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
