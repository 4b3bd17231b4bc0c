"""
Explicit simulation state and the per-frame step function.

Callers (the keyboard controls, the renderer, the headless runner) read and
write the fields of SimulationState directly; ``step`` is the only place the
frame advances.
"""

import logging
import random
from dataclasses import dataclass, field, replace
from typing import List, Optional

from .agents.boid import BoidView
from .autopilot import PERLIN_BASES, ParameterDriver
from .config import SimulationConfig, SimulationParameters
from .flock import Flock


logger = logging.getLogger(__name__)


@dataclass
class SimulationState:
    """Parameters, flock and per-run switches."""

    params: SimulationParameters
    flock: Flock
    width: float
    height: float
    autopilot: bool = False
    driver: Optional[ParameterDriver] = None
    sequential: bool = True
    agitationThreshold: float = float("inf")
    frame: int = 0
    views: List[BoidView] = field(default_factory=list)


def create_state(config: Optional[SimulationConfig] = None,
                 params: Optional[SimulationParameters] = None,
                 driver: Optional[ParameterDriver] = None,
                 rng=None) -> SimulationState:
    """
    Build a fresh simulation state.

    Args:
        config: Static configuration (defaults if None)
        params: Initial live parameters (defaults if None); copied
        driver: Autopilot driver (Perlin driver seeded from ``rng`` if None)
        rng: Random source (seeded from ``config.seed`` if None)

    Returns:
        New SimulationState with a freshly spawned flock
    """
    config = config or SimulationConfig()
    params = replace(params) if params else SimulationParameters()
    if rng is None:
        rng = random.Random(config.seed) if config.seed is not None else random

    flock = Flock(params.populationSize, config.screenWidth, config.screenHeight, rng=rng)
    if driver is None:
        driver = ParameterDriver(step=config.autopilotStep, seed=rng.randrange(PERLIN_BASES))
    return SimulationState(
        params=params,
        flock=flock,
        width=config.screenWidth,
        height=config.screenHeight,
        autopilot=config.autopilot,
        driver=driver,
        sequential=config.sequentialUpdate,
        agitationThreshold=config.agitationThreshold,
    )


def step(state: SimulationState, dt: float = 1.0) -> SimulationState:
    """
    Advance the simulation by one frame.

    Order: autopilot writes the parameters, the flock is resized if the
    population parameter changed, then every boid is wrapped, steered and
    integrated.

    Args:
        state: State to advance in place
        dt: Time step in frames

    Returns:
        The same state object
    """
    if state.autopilot and state.driver is not None:
        state.driver.advance(state.params)

    target = max(0, int(state.params.populationSize))
    if len(state.flock) != target:
        logger.info("Population changed from %d to %d, resetting flock",
                    len(state.flock), target)
        state.flock.reset(target)

    state.flock.set_bounds(state.width, state.height)
    state.views = state.flock.update(state.params, sequential=state.sequential,
                                     dt=dt, threshold=state.agitationThreshold)
    state.frame += 1
    return state


def set_population(state: SimulationState, size: int) -> None:
    """Set the population and reset the flock immediately."""
    state.params.populationSize = max(0, int(size))
    state.flock.reset(state.params.populationSize)


def resize_world(state: SimulationState, width: float, height: float) -> None:
    """Change the wraparound bounds."""
    state.width = width
    state.height = height
    state.flock.set_bounds(width, height)
