"""Configuration data models."""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from ..config.defaults import CAT_CONFIDENCE_THRESHOLD


@dataclass
class SecurityConfig:
    """Security system configuration settings."""
    # Image analysis
    cat_confidence_threshold: float = CAT_CONFIDENCE_THRESHOLD  # Percent, 0-100

    # Repository settings
    repository_backend: str = "memory"  # memory, json
    repository_path: str = "data/security_state.json"

    # Logging settings
    log_level: str = "INFO"
    log_dir: Optional[str] = None  # Console only when unset

    # Simulation settings
    simulation_steps: int = 20
    simulation_seed: Optional[int] = None
    cat_probability: float = 0.5

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
