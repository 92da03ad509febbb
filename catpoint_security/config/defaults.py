"""Default configuration values and constants."""

from typing import Dict, Any

# Minimum confidence, in percent, for an image to count as containing a cat
CAT_CONFIDENCE_THRESHOLD = 50.0

# Default system configuration
DEFAULT_CONFIG: Dict[str, Any] = {
    # Image analysis
    "cat_confidence_threshold": CAT_CONFIDENCE_THRESHOLD,

    # Repository settings
    "repository_backend": "memory",
    "repository_path": "data/security_state.json",

    # Logging settings
    "log_level": "INFO",
    "log_dir": None,

    # Simulation settings
    "simulation_steps": 20,
    "simulation_seed": None,
    "cat_probability": 0.5
}

REPOSITORY_BACKENDS = ("memory", "json")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# File paths and directories
DEFAULT_PATHS = {
    "config_file": "config.json",
    "repository_file": "data/security_state.json"
}

# Sensors created by the simulator when the repository starts empty
SIMULATION_SETTINGS = {
    "default_sensors": [
        ("Front Door", "DOOR"),
        ("Kitchen Window", "WINDOW"),
        ("Hallway Motion", "MOTION")
    ],
    # Relative weights of simulated events
    "event_weights": {
        "toggle_sensor": 6,
        "scan_image": 3,
        "change_arming": 1
    }
}

# Haar cascade settings for the OpenCV image service
CASCADE_SETTINGS = {
    "cascade_file": "haarcascade_frontalcatface.xml",
    "scale_factor": 1.1,
    "min_neighbors": 3,
    "min_size": (30, 30),
    "max_size": (300, 300)
}
