"""
Headless simulation for data collection.
"""

import logging
import time
from typing import Any, Dict, Optional

from ..core.autopilot import ParameterDriver
from ..core.config import SimulationConfig, SimulationParameters
from ..core.state import create_state, step


logger = logging.getLogger(__name__)

PROGRESS_INTERVAL = 1000


class HeadlessSimulation:
    """
    Runs the simulation without a display and records statistics.

    A time-series sample is taken every ``config.statsInterval`` frames.
    """

    def __init__(self, config: Optional[SimulationConfig] = None,
                 params: Optional[SimulationParameters] = None,
                 driver: Optional[ParameterDriver] = None, rng=None):
        """
        Initialize headless simulation.

        Args:
            config: Simulation configuration (defaults if None)
            params: Initial parameters (defaults if None)
            driver: Autopilot driver (Perlin driver if None)
            rng: Random source (seeded from config if None)
        """
        self.config = config if config else SimulationConfig()
        self.state = create_state(self.config, params, driver=driver, rng=rng)
        self.start_time = time.time()

        self.stats = {
            "speed_sum": 0.0,
            "cohesion_sum": 0.0,
            "samples": 0,
            "timeseries": [],
        }

    @property
    def frame_count(self) -> int:
        return self.state.frame

    def update(self) -> None:
        """Advance one frame and update statistics."""
        step(self.state)
        self._update_statistics()

    def _update_statistics(self) -> None:
        flock = self.state.flock
        if not len(flock):
            return

        avg_speed = flock.average_speed()
        cohesion = flock.cohesion()
        self.stats["speed_sum"] += avg_speed
        self.stats["cohesion_sum"] += cohesion
        self.stats["samples"] += 1

        interval = max(1, self.config.statsInterval)
        if self.frame_count % interval == 0:
            params = self.state.params
            views = self.state.views
            agitated = sum(1 for v in views if v.agitated) / len(views) if views else 0.0
            self.stats["timeseries"].append({
                "frame": self.frame_count,
                "avg_speed": avg_speed,
                "cohesion": cohesion,
                "avg_neighbors": flock.average_neighbors(params.perceptionRadius),
                "agitated_fraction": agitated,
                "boid_count": len(flock),
                "alignmentWeight": params.alignmentWeight,
                "cohesionWeight": params.cohesionWeight,
                "separationWeight": params.separationWeight,
                "perceptionRadius": params.perceptionRadius,
            })

    def run(self, max_frames: int) -> Dict[str, Any]:
        """
        Run for a number of frames.

        Args:
            max_frames: Frames to simulate

        Returns:
            Results dictionary with summary statistics and the time series
        """
        logger.info("Running headless simulation for %d frames", max_frames)

        while self.frame_count < max_frames:
            self.update()

            if self.frame_count % PROGRESS_INTERVAL == 0:
                elapsed = time.time() - self.start_time
                progress = (self.frame_count / max_frames) * 100
                logger.info("Progress: %.1f%% (%d/%d frames, %.1fs elapsed)",
                            progress, self.frame_count, max_frames, elapsed)

        return self.get_results()

    def get_results(self) -> Dict[str, Any]:
        """
        Get run results.

        Returns:
            Dictionary containing summary statistics and time series
        """
        samples = self.stats["samples"]
        return {
            "frames": self.frame_count,
            "elapsed_time_seconds": time.time() - self.start_time,
            "final_boid_count": len(self.state.flock),
            "avg_speed": self.stats["speed_sum"] / samples if samples else 0.0,
            "avg_cohesion": self.stats["cohesion_sum"] / samples if samples else 0.0,
            "autopilot": self.state.autopilot,
            "sequential": self.state.sequential,
            "final_parameters": self.state.params.to_dict(),
            "timeseries": self.stats["timeseries"],
        }
