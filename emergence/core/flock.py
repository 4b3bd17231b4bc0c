"""
Flock: the ordered collection of boids and the per-frame update pass.
"""

import logging
import random
from typing import Iterator, List

import pygame

from .agents.boid import Boid, BoidView
from .config import SimulationParameters


logger = logging.getLogger(__name__)


class Flock:
    """
    Ordered collection of boids in a toroidal world.

    Membership changes wholesale: resizing discards every boid and spawns a
    fresh, randomly initialised set.
    """

    def __init__(self, size: int, width: float, height: float, rng=None):
        """
        Initialize the flock.

        Args:
            size: Number of boids to spawn
            width: World width used for spawning and wraparound
            height: World height used for spawning and wraparound
            rng: Random source (``random`` module if None)
        """
        self.width = width
        self.height = height
        self.rng = rng or random
        self.boids: List[Boid] = []
        self.reset(size)

    def __len__(self) -> int:
        return len(self.boids)

    def __iter__(self) -> Iterator[Boid]:
        return iter(self.boids)

    def spawn(self) -> Boid:
        """Create one boid at a random position with a random velocity."""
        x = self.rng.uniform(0, self.width)
        y = self.rng.uniform(0, self.height)
        return Boid(x, y, rng=self.rng)

    def reset(self, size: int) -> None:
        """
        Replace every member with ``size`` fresh boids.

        Args:
            size: New member count (negative counts as zero)
        """
        size = max(0, int(size))
        self.boids = [self.spawn() for _ in range(size)]
        logger.debug("Flock reset to %d boids", size)

    resize = reset

    def update(self, params: SimulationParameters, sequential: bool = True,
               dt: float = 1.0, threshold: float = float("inf")) -> List[BoidView]:
        """
        Advance every boid by one frame.

        Sequential mode wraps, steers and integrates each boid before moving
        on, so later boids see earlier boids' new state. Snapshot mode computes
        every boid's steering against the same pre-frame state and commits
        afterwards.

        Args:
            params: Live simulation parameters
            sequential: Use in-place sequential update instead of snapshot
            dt: Time step in frames
            threshold: Separation magnitude above which a boid is agitated

        Returns:
            One BoidView per boid, in member order
        """
        if sequential:
            return self._update_sequential(params, dt, threshold)
        return self._update_snapshot(params, dt, threshold)

    def _update_sequential(self, params, dt, threshold) -> List[BoidView]:
        views = []
        for boid in self.boids:
            boid.edges(self.width, self.height)
            forces = boid.flock(self.boids, params)
            boid.update(params, dt)
            views.append(boid.view(params, forces.separation, threshold))
        return views

    def _update_snapshot(self, params, dt, threshold) -> List[BoidView]:
        for boid in self.boids:
            boid.edges(self.width, self.height)

        # Accumulating into acceleration leaves positions and velocities intact
        all_forces = [boid.flock(self.boids, params) for boid in self.boids]

        views = []
        for boid, forces in zip(self.boids, all_forces):
            boid.update(params, dt)
            views.append(boid.view(params, forces.separation, threshold))
        return views

    def set_bounds(self, width: float, height: float) -> None:
        """Change the wraparound bounds (window resize)."""
        self.width = width
        self.height = height

    def centroid(self) -> pygame.Vector2:
        """Mean position of all boids (origin for an empty flock)."""
        center = pygame.Vector2(0, 0)
        if not self.boids:
            return center
        for boid in self.boids:
            center += boid.position
        return center / len(self.boids)

    def average_speed(self) -> float:
        if not self.boids:
            return 0.0
        return sum(b.speed for b in self.boids) / len(self.boids)

    def cohesion(self) -> float:
        """Mean distance from the centroid (lower is a tighter flock)."""
        if not self.boids:
            return 0.0
        center = self.centroid()
        return sum(b.position.distance_to(center) for b in self.boids) / len(self.boids)

    def average_neighbors(self, radius: float) -> float:
        """Mean number of other boids within ``radius`` of each boid."""
        if not self.boids:
            return 0.0
        total = 0
        for boid in self.boids:
            for other in self.boids:
                if other is not boid and boid.position.distance_to(other.position) < radius:
                    total += 1
        return total / len(self.boids)
