"""
Noise-driven autopilot for the simulation parameters.

A single phase value advances by a small fixed step every frame. Each driven
parameter samples the noise function at that phase plus its own constant
offset, so the four values drift smoothly and independently of each other.
"""

import functools
import logging
import random
from typing import Callable, Dict, NamedTuple, Optional, Tuple

import noise

from . import vector
from .config import SimulationParameters, WEIGHT_RANGE, PERCEPTION_RANGE


logger = logging.getLogger(__name__)


class Channel(NamedTuple):
    """One driven parameter: its noise offset and output range."""

    key: str
    offset: float
    low: float
    high: float


CHANNELS: Tuple[Channel, ...] = (
    Channel("alignmentWeight", 0.0, *WEIGHT_RANGE),
    Channel("cohesionWeight", 100.0, *WEIGHT_RANGE),
    Channel("separationWeight", 200.0, *WEIGHT_RANGE),
    Channel("perceptionRadius", 300.0, *PERCEPTION_RANGE),
)

DEFAULT_STEP = 0.005

# pnoise1 output lies roughly in [-1, 1]; sample() clamps anything outside
PERLIN_RANGE = (-1.0, 1.0)

# pnoise1's ``base`` indexes a 512-entry permutation table
PERLIN_BASES = 256


class ParameterDriver:
    """
    Produces smoothly varying parameter values from coherent noise.

    Args:
        noise_fn: Deterministic noise function of one float (Perlin if None)
        step: Phase increment per frame
        phase: Starting phase
        noise_range: Output range of ``noise_fn``
        seed: Perlin permutation base; random if None, unused with ``noise_fn``
    """

    def __init__(self, noise_fn: Optional[Callable[[float], float]] = None,
                 step: float = DEFAULT_STEP, phase: float = 0.0,
                 noise_range: Tuple[float, float] = PERLIN_RANGE,
                 seed: Optional[int] = None):
        if noise_fn is None:
            if seed is None:
                seed = random.randrange(PERLIN_BASES)
            self.seed = seed % PERLIN_BASES
            noise_fn = functools.partial(noise.pnoise1, base=self.seed)
            logger.debug("Perlin autopilot seeded with base %d", self.seed)
        else:
            self.seed = seed
        self.noise_fn = noise_fn
        self.step = step
        self.phase = phase
        self.noise_range = noise_range

    def sample(self, phase: Optional[float] = None) -> Dict[str, float]:
        """
        Evaluate every channel at ``phase`` (current phase if None).

        Returns:
            Mapping of parameter name to value, each within its channel range
        """
        if phase is None:
            phase = self.phase
        low_in, high_in = self.noise_range

        values = {}
        for channel in CHANNELS:
            raw = self.noise_fn(phase + channel.offset)
            values[channel.key] = vector.lerp(raw, low_in, high_in,
                                              channel.low, channel.high, clamp=True)
        return values

    def advance(self, params: SimulationParameters) -> Dict[str, float]:
        """
        Step the phase once and write the new values into ``params``.

        Args:
            params: Parameters to update in place

        Returns:
            The values written
        """
        self.phase += self.step
        values = self.sample()
        for key, value in values.items():
            setattr(params, key, value)
        return values
