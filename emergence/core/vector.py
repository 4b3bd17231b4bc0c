"""
Vector helpers on top of pygame.Vector2.

pygame's own ``scale_to_length`` and ``normalize`` raise on a zero vector and
division by zero raises as well; the simulation needs those cases to quietly
produce a zero (or unchanged) vector instead, so the steering code goes
through these helpers.
"""

import math

import pygame


def vec(x: float = 0.0, y: float = 0.0) -> pygame.Vector2:
    """Create a new vector."""
    return pygame.Vector2(x, y)


def add(a: pygame.Vector2, b: pygame.Vector2) -> pygame.Vector2:
    return a + b


def subtract(a: pygame.Vector2, b: pygame.Vector2) -> pygame.Vector2:
    return a - b


def scale(v: pygame.Vector2, scalar: float) -> pygame.Vector2:
    return v * scalar


def divide(v: pygame.Vector2, scalar: float) -> pygame.Vector2:
    """
    Divide a vector by a scalar.

    Dividing by zero is a no-op and returns an unchanged copy.
    """
    if scalar == 0:
        return pygame.Vector2(v)
    return v / scalar


def magnitude(v: pygame.Vector2) -> float:
    return v.length()


def distance(a: pygame.Vector2, b: pygame.Vector2) -> float:
    return a.distance_to(b)


def set_magnitude(v: pygame.Vector2, target: float) -> pygame.Vector2:
    """
    Rescale a vector to the given magnitude.

    A zero vector has no direction and stays zero.
    """
    length = v.length()
    if length == 0:
        return pygame.Vector2(0, 0)
    return v * (target / length)


def limit(v: pygame.Vector2, max_magnitude: float) -> pygame.Vector2:
    """Rescale a vector down to ``max_magnitude`` if it is longer, else copy it."""
    length = v.length()
    if length > max_magnitude:
        return v * (max_magnitude / length)
    return pygame.Vector2(v)


def heading(v: pygame.Vector2) -> float:
    """Angle of the vector from the positive x axis, in radians."""
    return math.atan2(v.y, v.x)


def lerp(value: float, start1: float, stop1: float, start2: float, stop2: float,
         clamp: bool = False) -> float:
    """
    Map ``value`` linearly from the range [start1, stop1] to [start2, stop2].

    Args:
        value: Value to map
        start1: Lower bound of the source range
        stop1: Upper bound of the source range
        start2: Value returned for ``start1``
        stop2: Value returned for ``stop1``
        clamp: Constrain the result to the target range

    Returns:
        The mapped value
    """
    if stop1 == start1:
        return start2
    mapped = start2 + (value - start1) * (stop2 - start2) / (stop1 - start1)
    if clamp:
        low, high = min(start2, stop2), max(start2, stop2)
        mapped = max(low, min(high, mapped))
    return mapped
