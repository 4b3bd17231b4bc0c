"""
Boid agent class implementing flocking behavior.
"""

from typing import Iterable, NamedTuple

import pygame

from .base import Agent
from .. import vector
from ..config import SimulationParameters, SLOW_HUE, FAST_HUE


class Forces(NamedTuple):
    """Unweighted steering forces of one boid for one frame."""

    alignment: pygame.Vector2
    cohesion: pygame.Vector2
    separation: pygame.Vector2


class BoidView(NamedTuple):
    """Render-facing state of one boid."""

    position: pygame.Vector2
    heading: float
    speed: float
    hue: float
    agitated: bool


def is_agitated(separation: pygame.Vector2, threshold: float) -> bool:
    """A boid is agitated when its separation steering exceeds ``threshold``."""
    return vector.magnitude(separation) > threshold


def repulsion(position: pygame.Vector2, other: pygame.Vector2, dist: float) -> pygame.Vector2:
    """
    Push away from ``other``: unit direction scaled by ``1 / dist``.

    ``dist`` must be positive.
    """
    return vector.scale(vector.subtract(position, other), 1 / (dist * dist))


def speed_hue(speed: float, max_speed: float) -> float:
    """Hue for a speed: blue (240) when still, red (0) at ``max_speed``."""
    return vector.lerp(speed, 0, max_speed, SLOW_HUE, FAST_HUE, clamp=True)


class Boid(Agent):
    """
    A boid agent that exhibits flocking behavior.

    Implements Reynolds' boid rules:
    - Separation: Avoid crowding neighbors
    - Alignment: Steer toward average heading of neighbors
    - Cohesion: Steer toward average position of neighbors

    Every rule scans the whole flock; there is no spatial index.
    """

    def flock(self, boids: Iterable["Boid"], params: SimulationParameters) -> Forces:
        """
        Apply weighted flocking forces to the acceleration.

        Args:
            boids: All boids in the flock (self is skipped)
            params: Live simulation parameters

        Returns:
            The unweighted forces that were blended in
        """
        forces = self.steering_forces(boids, params)

        self.apply_force(vector.scale(forces.alignment, params.alignmentWeight))
        self.apply_force(vector.scale(forces.cohesion, params.cohesionWeight))
        self.apply_force(vector.scale(forces.separation, params.separationWeight))
        return forces

    def steering_forces(self, boids: Iterable["Boid"], params: SimulationParameters) -> Forces:
        """Compute the three unweighted steering forces without applying them."""
        boids = list(boids)
        return Forces(
            alignment=self.alignment(boids, params),
            cohesion=self.cohesion(boids, params),
            separation=self.separation(boids, params),
        )

    def alignment(self, boids: Iterable["Boid"], params: SimulationParameters) -> pygame.Vector2:
        """
        Calculate alignment steering toward average neighbor heading.

        Args:
            boids: All boids in the flock
            params: Live simulation parameters

        Returns:
            Alignment steering force
        """
        steering = vector.vec()
        total = 0

        for other in boids:
            if other is self:
                continue
            if vector.distance(self.position, other.position) < params.perceptionRadius:
                steering = vector.add(steering, other.velocity)
                total += 1

        if total > 0:
            steering = vector.divide(steering, total)
            steering = vector.set_magnitude(steering, params.maxSpeed)
            steering = self.steering(steering, params)
        return steering

    def cohesion(self, boids: Iterable["Boid"], params: SimulationParameters) -> pygame.Vector2:
        """
        Calculate cohesion steering toward average neighbor position.

        Args:
            boids: All boids in the flock
            params: Live simulation parameters

        Returns:
            Cohesion steering force
        """
        center = vector.vec()
        total = 0

        for other in boids:
            if other is self:
                continue
            if vector.distance(self.position, other.position) < params.perceptionRadius:
                center = vector.add(center, other.position)
                total += 1

        if total == 0:
            return vector.vec()

        center = vector.divide(center, total)
        desired = vector.set_magnitude(vector.subtract(center, self.position), params.maxSpeed)
        return self.steering(desired, params)

    def separation(self, boids: Iterable["Boid"], params: SimulationParameters) -> pygame.Vector2:
        """
        Calculate separation steering to avoid crowding neighbors.

        Only boids within half the perception radius count. Each contribution
        is weighted by inverse distance; coincident boids are skipped.

        Args:
            boids: All boids in the flock
            params: Live simulation parameters

        Returns:
            Separation steering force
        """
        steering = vector.vec()
        total = 0
        radius = params.perceptionRadius / 2

        for other in boids:
            if other is self:
                continue
            dist = vector.distance(self.position, other.position)
            if 0 < dist < radius:
                steering = vector.add(steering, repulsion(self.position, other.position, dist))
                total += 1

        if total > 0:
            steering = vector.divide(steering, total)
            steering = vector.set_magnitude(steering, params.maxSpeed)
            steering = self.steering(steering, params)
        return steering

    def edges(self, width: float, height: float) -> None:
        """
        Wrap the position around the world edges (torus).

        Crossing the far edge resets the coordinate to 0; crossing the near
        edge wraps it around from the far side. Velocity is left untouched.
        """
        self.position.x = _wrap(self.position.x, width)
        self.position.y = _wrap(self.position.y, height)

    def view(self, params: SimulationParameters, separation: pygame.Vector2 = None,
             threshold: float = float("inf")) -> BoidView:
        """
        Snapshot of the render-relevant state.

        Args:
            params: Live simulation parameters (for maxSpeed)
            separation: This frame's separation force, if known
            threshold: Separation magnitude above which the boid is agitated

        Returns:
            BoidView for the renderer
        """
        speed = self.speed
        agitated = separation is not None and is_agitated(separation, threshold)
        return BoidView(
            position=pygame.Vector2(self.position),
            heading=self.heading,
            speed=speed,
            hue=speed_hue(speed, params.maxSpeed),
            agitated=agitated,
        )


def _wrap(value: float, size: float) -> float:
    if size <= 0 or value >= size:
        return 0.0
    if value < 0:
        value %= size
        # -1e-20 % size rounds to size
        if value >= size:
            return 0.0
    return value
