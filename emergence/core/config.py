"""
Configuration classes and defaults for the flocking simulation.
"""

import json
import logging
from dataclasses import dataclass, field, fields, asdict
from typing import List, Optional, Tuple


logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a configuration file cannot be used."""


@dataclass
class SimulationParameters:
    """
    Live simulation parameters.

    Shared by every boid and read once per frame. The keyboard controls and
    the autopilot write these fields directly; no range checking happens here.
    """

    # Rule weights
    alignmentWeight: float = 1.0
    cohesionWeight: float = 1.0
    separationWeight: float = 1.5

    # Perception and kinematics
    perceptionRadius: float = 50.0
    maxSpeed: float = 5.0
    maxForce: float = 0.2

    populationSize: int = 100

    def to_dict(self) -> dict:
        """Convert parameters to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "SimulationParameters":
        """Create parameters from dictionary, ignoring unknown keys."""
        return cls(**{k: v for k, v in data.items() if hasattr(cls, k)})


@dataclass
class SimulationConfig:
    """Static configuration for the flocking simulation."""

    # Screen settings
    screenWidth: int = 1200
    screenHeight: int = 800
    fpsTarget: int = 60

    # Update behaviour
    autopilot: bool = True
    autopilotStep: float = 0.005
    sequentialUpdate: bool = True  # False = snapshot-then-commit
    seed: Optional[int] = None

    # Visualization
    glyph: str = "triangle"
    boidSize: int = 5
    agitationThreshold: float = 0.15
    backgroundColor: List[int] = field(default_factory=lambda: [17, 17, 17])
    textColor: List[int] = field(default_factory=lambda: [230, 230, 230])

    # Headless statistics
    statsInterval: int = 10

    # Output
    timeseriesOutputFile: str = "flock_timeseries.csv"
    reportOutputFile: str = "flock_run_report.json"
    plotOutputFile: str = "flock_timeseries.png"

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "SimulationConfig":
        """Create config from dictionary."""
        return cls(**{k: v for k, v in data.items() if hasattr(cls, k)})


@dataclass(frozen=True)
class ParameterControl:
    """Range and step of one user-adjustable parameter."""

    key: str
    label: str
    description: str
    minimum: float
    maximum: float
    step: float

    def clamp(self, value: float) -> float:
        return max(self.minimum, min(self.maximum, value))


# Control surface ranges. The core accepts any value; only the controls clamp.
PARAMETER_CONTROLS: Tuple[ParameterControl, ...] = (
    ParameterControl("alignmentWeight", "Alignment",
                     "How much boids steer to match neighbors' direction.", 0, 5, 0.1),
    ParameterControl("cohesionWeight", "Cohesion",
                     "How much boids steer towards the center of the flock.", 0, 5, 0.1),
    ParameterControl("separationWeight", "Separation",
                     "How much boids steer to avoid crowding neighbors.", 0, 5, 0.1),
    ParameterControl("perceptionRadius", "Perception",
                     'How far a boid can "see" its neighbors.', 0, 300, 1),
    ParameterControl("maxSpeed", "Max Speed",
                     "The global maximum speed for all boids.", 1, 10, 0.1),
    ParameterControl("populationSize", "Boid Count",
                     "The total number of boids in the simulation.", 1, 150, 1),
)


def split_overrides(data: dict) -> Tuple[dict, dict]:
    """Split a flat override mapping into config and parameter keys."""
    param_keys = {f.name for f in fields(SimulationParameters)}
    config_keys = {f.name for f in fields(SimulationConfig)}

    config_data = {}
    param_data = {}
    for key, value in data.items():
        if key in param_keys:
            param_data[key] = value
        elif key in config_keys:
            config_data[key] = value
        else:
            logger.warning("Ignoring unknown config key %r", key)
    return config_data, param_data


def load_config(path: str) -> Tuple[SimulationConfig, SimulationParameters]:
    """
    Load configuration overrides from a JSON file.

    The file holds a single flat JSON object whose keys may belong to either
    SimulationConfig or SimulationParameters.

    Args:
        path: Path to the JSON file

    Returns:
        Tuple of (config, parameters) with the overrides applied to defaults

    Raises:
        ConfigError: If the file cannot be read or is not a JSON object
    """
    try:
        with open(path) as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")

    config_data, param_data = split_overrides(data)
    logger.debug("Loaded %d config and %d parameter overrides from %s",
                 len(config_data), len(param_data), path)
    return SimulationConfig.from_dict(config_data), SimulationParameters.from_dict(param_data)


# Autopilot output ranges
WEIGHT_RANGE = (0.0, 5.0)
PERCEPTION_RANGE = (50.0, 200.0)

# Hue endpoints for speed colouring (blue when still, red at max speed)
SLOW_HUE = 240.0
FAST_HUE = 0.0

# Initial speed range of freshly spawned boids
SPAWN_SPEED_RANGE = (2.0, 4.0)
