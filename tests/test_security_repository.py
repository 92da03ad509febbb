"""Unit tests for security repositories and sensor models."""

import unittest
import json
import os
import shutil
import tempfile
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from catpoint_security.models.security import Sensor, SensorType, ArmingStatus, AlarmStatus
from catpoint_security.services.security_repository import (
    InMemorySecurityRepository, JsonFileSecurityRepository, create_repository
)


class TestSensor(unittest.TestCase):
    """Test cases for the Sensor model."""

    def test_identity_ignores_active_flag(self):
        a = Sensor("Front Door", SensorType.DOOR, active=True)
        b = Sensor("Front Door", SensorType.DOOR, active=False)

        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertEqual(len({a, b}), 1)

    def test_identity_uses_name_and_type(self):
        self.assertNotEqual(Sensor("Front", SensorType.DOOR), Sensor("Front", SensorType.WINDOW))
        self.assertNotEqual(Sensor("Front", SensorType.DOOR), Sensor("Back", SensorType.DOOR))

    def test_toggling_inside_set_keeps_membership(self):
        sensor = Sensor("Hallway", SensorType.MOTION)
        sensors = {sensor}

        sensor.active = True

        self.assertIn(Sensor("Hallway", SensorType.MOTION), sensors)

    def test_sorting(self):
        sensors = [
            Sensor("Window", SensorType.WINDOW),
            Sensor("Door", SensorType.WINDOW),
            Sensor("Door", SensorType.DOOR)
        ]

        ordered = sorted(sensors)

        self.assertEqual([(s.name, s.sensor_type) for s in ordered], [
            ("Door", SensorType.DOOR),
            ("Door", SensorType.WINDOW),
            ("Window", SensorType.WINDOW)
        ])

    def test_dict_conversion(self):
        sensor = Sensor("Garage", SensorType.DOOR, active=True)

        data = sensor.to_dict()

        self.assertEqual(data, {'name': "Garage", 'sensor_type': "DOOR", 'active': True})
        restored = Sensor.from_dict(data)
        self.assertEqual(restored, sensor)
        self.assertTrue(restored.active)

    def test_from_dict_requires_boolean_active_flag(self):
        for active in ("false", "true", 1, 0, None):
            with self.subTest(active=active):
                with self.assertRaises(TypeError):
                    Sensor.from_dict({'name': "a", 'sensor_type': "DOOR", 'active': active})

    def test_from_dict_missing_active_flag_is_inactive(self):
        sensor = Sensor.from_dict({'name': "a", 'sensor_type': "DOOR"})

        self.assertFalse(sensor.active)

    def test_status_descriptions(self):
        self.assertEqual(ArmingStatus.ARMED_HOME.description, "Armed - At Home")
        self.assertEqual(AlarmStatus.ALARM.description, "Awooga!")
        self.assertFalse(ArmingStatus.DISARMED.is_armed)
        self.assertTrue(ArmingStatus.ARMED_AWAY.is_armed)


class TestInMemorySecurityRepository(unittest.TestCase):
    """Test cases for InMemorySecurityRepository."""

    def setUp(self):
        """Set up test fixtures."""
        self.repository = InMemorySecurityRepository()

    def test_defaults(self):
        self.assertEqual(self.repository.get_alarm_status(), AlarmStatus.NO_ALARM)
        self.assertEqual(self.repository.get_arming_status(), ArmingStatus.DISARMED)
        self.assertEqual(self.repository.get_sensors(), set())

    def test_add_and_remove_sensor(self):
        sensor = Sensor("Front Door", SensorType.DOOR)

        self.repository.add_sensor(sensor)
        self.assertIn(sensor, self.repository.get_sensors())

        self.repository.remove_sensor(sensor)
        self.assertNotIn(sensor, self.repository.get_sensors())

    def test_remove_unknown_sensor_is_noop(self):
        self.repository.remove_sensor(Sensor("Ghost", SensorType.MOTION))
        self.assertEqual(len(self.repository.get_sensors()), 0)

    def test_update_sensor_replaces_stored_sensor(self):
        self.repository.add_sensor(Sensor("Front Door", SensorType.DOOR))
        updated = Sensor("Front Door", SensorType.DOOR, active=True)

        self.repository.update_sensor(updated)

        sensors = self.repository.get_sensors()
        self.assertEqual(len(sensors), 1)
        self.assertTrue(next(iter(sensors)).active)

    def test_status_setters(self):
        self.repository.set_alarm_status(AlarmStatus.PENDING_ALARM)
        self.repository.set_arming_status(ArmingStatus.ARMED_AWAY)

        self.assertEqual(self.repository.get_alarm_status(), AlarmStatus.PENDING_ALARM)
        self.assertEqual(self.repository.get_arming_status(), ArmingStatus.ARMED_AWAY)


class TestJsonFileSecurityRepository(unittest.TestCase):
    """Test cases for JsonFileSecurityRepository."""

    def setUp(self):
        """Set up test fixtures."""
        self.test_dir = tempfile.mkdtemp()
        self.file_path = os.path.join(self.test_dir, "state", "security.json")

    def tearDown(self):
        """Clean up test fixtures."""
        if os.path.exists(self.test_dir):
            shutil.rmtree(self.test_dir)

    def test_missing_file_uses_defaults(self):
        repository = JsonFileSecurityRepository(self.file_path)

        self.assertEqual(repository.get_alarm_status(), AlarmStatus.NO_ALARM)
        self.assertEqual(repository.get_arming_status(), ArmingStatus.DISARMED)
        self.assertFalse(os.path.exists(self.file_path))

    def test_state_survives_reload(self):
        repository = JsonFileSecurityRepository(self.file_path)
        repository.add_sensor(Sensor("Front Door", SensorType.DOOR))
        repository.add_sensor(Sensor("Hallway", SensorType.MOTION))
        repository.update_sensor(Sensor("Hallway", SensorType.MOTION, active=True))
        repository.set_arming_status(ArmingStatus.ARMED_HOME)
        repository.set_alarm_status(AlarmStatus.PENDING_ALARM)

        reloaded = JsonFileSecurityRepository(self.file_path)

        self.assertEqual(reloaded.get_arming_status(), ArmingStatus.ARMED_HOME)
        self.assertEqual(reloaded.get_alarm_status(), AlarmStatus.PENDING_ALARM)
        active = {s.name: s.active for s in reloaded.get_sensors()}
        self.assertEqual(active, {"Front Door": False, "Hallway": True})

    def test_removed_sensor_not_reloaded(self):
        repository = JsonFileSecurityRepository(self.file_path)
        sensor = Sensor("Garage", SensorType.DOOR)
        repository.add_sensor(sensor)
        repository.remove_sensor(sensor)

        reloaded = JsonFileSecurityRepository(self.file_path)

        self.assertEqual(reloaded.get_sensors(), set())

    def test_file_contents(self):
        repository = JsonFileSecurityRepository(self.file_path)
        repository.add_sensor(Sensor("Kitchen", SensorType.WINDOW))

        with open(self.file_path, 'r') as f:
            data = json.load(f)

        self.assertEqual(data['alarm_status'], "NO_ALARM")
        self.assertEqual(data['arming_status'], "DISARMED")
        self.assertEqual(data['sensors'], [{'name': "Kitchen", 'sensor_type': "WINDOW", 'active': False}])

    def test_corrupt_file_uses_defaults(self):
        os.makedirs(os.path.dirname(self.file_path))
        with open(self.file_path, 'w') as f:
            f.write("{not json")

        repository = JsonFileSecurityRepository(self.file_path)

        self.assertEqual(repository.get_alarm_status(), AlarmStatus.NO_ALARM)
        self.assertEqual(repository.get_sensors(), set())

    def test_non_utf8_file_uses_defaults(self):
        os.makedirs(os.path.dirname(self.file_path))
        with open(self.file_path, 'wb') as f:
            f.write(b'\xff\xfe{"alarm_status": 1}')

        repository = JsonFileSecurityRepository(self.file_path)

        self.assertEqual(repository.get_alarm_status(), AlarmStatus.NO_ALARM)
        self.assertEqual(repository.get_arming_status(), ArmingStatus.DISARMED)
        self.assertEqual(repository.get_sensors(), set())

    def test_non_boolean_active_flag_uses_defaults(self):
        os.makedirs(os.path.dirname(self.file_path))
        with open(self.file_path, 'w') as f:
            json.dump({'alarm_status': "PENDING_ALARM", 'arming_status': "ARMED_HOME",
                       'sensors': [{'name': "Front Door", 'sensor_type': "DOOR",
                                    'active': "false"}]}, f)

        repository = JsonFileSecurityRepository(self.file_path)

        self.assertEqual(repository.get_alarm_status(), AlarmStatus.NO_ALARM)
        self.assertEqual(repository.get_sensors(), set())

    def test_unknown_status_uses_defaults(self):
        os.makedirs(os.path.dirname(self.file_path))
        with open(self.file_path, 'w') as f:
            json.dump({'alarm_status': "PANIC", 'arming_status': "DISARMED", 'sensors': []}, f)

        repository = JsonFileSecurityRepository(self.file_path)

        self.assertEqual(repository.get_alarm_status(), AlarmStatus.NO_ALARM)


class TestCreateRepository(unittest.TestCase):
    """Test cases for the repository factory."""

    def test_memory_backend(self):
        self.assertIsInstance(create_repository("memory"), InMemorySecurityRepository)

    def test_json_backend(self):
        test_dir = tempfile.mkdtemp()
        try:
            repository = create_repository("json", os.path.join(test_dir, "state.json"))
            self.assertIsInstance(repository, JsonFileSecurityRepository)
        finally:
            shutil.rmtree(test_dir)

    def test_unknown_backend(self):
        with self.assertRaises(ValueError):
            create_repository("sqlite")


if __name__ == '__main__':
    unittest.main()
