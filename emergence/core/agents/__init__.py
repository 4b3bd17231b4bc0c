"""
Agent classes for the flocking simulation.
"""

from .base import Agent
from .boid import Boid, BoidView, Forces, is_agitated, repulsion, speed_hue

__all__ = ['Agent', 'Boid', 'BoidView', 'Forces', 'is_agitated', 'repulsion', 'speed_hue']
