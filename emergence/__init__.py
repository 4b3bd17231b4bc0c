"""
Emergence: a boids flocking simulation.
"""

__version__ = "0.1.0"
