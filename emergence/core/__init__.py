"""
Core module containing configuration, vector helpers, agents, the flock and
the simulation step.
"""

from .config import (
    SimulationConfig, SimulationParameters, ConfigError, load_config,
    PARAMETER_CONTROLS,
)
from .flock import Flock
from .autopilot import ParameterDriver
from .state import SimulationState, create_state, step, set_population, resize_world

__all__ = [
    'SimulationConfig', 'SimulationParameters', 'ConfigError', 'load_config',
    'PARAMETER_CONTROLS',
    'Flock', 'ParameterDriver',
    'SimulationState', 'create_state', 'step', 'set_population', 'resize_world',
]
