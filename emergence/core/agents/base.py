"""
Base Agent class for all simulation entities.
"""

import math
import random

import pygame

from .. import vector
from ..config import SimulationParameters, SPAWN_SPEED_RANGE


class Agent:
    """
    Base class for all agents in the simulation.

    Provides position, velocity and acceleration plus Euler integration.
    Speed and force limits are global and come from SimulationParameters.
    """

    def __init__(self, x: float, y: float, velocity: pygame.Vector2 = None, rng=None):
        """
        Initialize an agent.

        Args:
            x: Initial x position
            y: Initial y position
            velocity: Initial velocity (random direction and spawn speed if None)
            rng: Random source (``random`` module if None)
        """
        rng = rng or random
        self.position = pygame.Vector2(x, y)
        if velocity is None:
            angle = rng.uniform(0, 2 * math.pi)
            velocity = pygame.Vector2(math.cos(angle), math.sin(angle)) * rng.uniform(*SPAWN_SPEED_RANGE)
        self.velocity = pygame.Vector2(velocity)
        self.acceleration = pygame.Vector2(0, 0)

    def apply_force(self, force: pygame.Vector2) -> None:
        """
        Apply a force to the agent's acceleration.

        Args:
            force: Force vector to apply
        """
        self.acceleration += force

    def update(self, params: SimulationParameters, dt: float = 1.0) -> None:
        """
        Integrate one frame.

        Velocity is updated before position, so a force moves the agent in the
        same frame it is applied.

        Args:
            params: Live simulation parameters (for maxSpeed)
            dt: Time step in frames
        """
        self.velocity = vector.add(self.velocity, vector.scale(self.acceleration, dt))
        self.velocity = vector.limit(self.velocity, params.maxSpeed)

        self.position = vector.add(self.position, vector.scale(self.velocity, dt))
        self.acceleration *= 0

    def steering(self, desired: pygame.Vector2, params: SimulationParameters) -> pygame.Vector2:
        """
        Calculate steering force toward a desired velocity.

        Args:
            desired: The desired velocity vector
            params: Live simulation parameters (for maxForce)

        Returns:
            Steering force vector
        """
        steer = vector.subtract(desired, self.velocity)
        return vector.limit(steer, params.maxForce)

    @property
    def speed(self) -> float:
        return vector.magnitude(self.velocity)

    @property
    def heading(self) -> float:
        return vector.heading(self.velocity)
