"""Pytest configuration - headless pygame/matplotlib and shared fixtures."""
import math
import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("MPLBACKEND", "Agg")

import pygame
import pytest

from emergence.core.agents.boid import Boid
from emergence.core.config import SimulationParameters


def make_boid(x, y, vx=0.0, vy=0.0):
    """Boid with an explicit position and velocity."""
    return Boid(x, y, velocity=pygame.Vector2(vx, vy))


def fake_noise(x):
    """Smooth, bounded, deterministic stand-in for Perlin noise (range [-1, 1])."""
    return math.sin(x)


@pytest.fixture
def params():
    """Parameters of the two-boid reference scenario."""
    return SimulationParameters(
        alignmentWeight=1.0,
        cohesionWeight=1.0,
        separationWeight=1.0,
        perceptionRadius=50.0,
        maxSpeed=5.0,
        maxForce=0.2,
        populationSize=2,
    )


@pytest.fixture
def rng():
    return random.Random(1234)
