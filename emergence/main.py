"""
Main entry point for the flocking simulation.

Run with:
    python -m emergence.main                         # Interactive simulation
    python -m emergence.main --headless --frames 5000
    python -m emergence.main --headless --export --plot
"""

import argparse
import logging
import sys
from dataclasses import replace


logger = logging.getLogger(__name__)


def run_interactive(config, params):
    """Run the interactive simulation with GUI."""
    from .simulation.interactive import Simulation

    print("=" * 60)
    print("Emergence: A Study of Flocking Behaviour")
    print("=" * 60)
    print("\nControls:")
    print("  ESC        - Quit")
    print("  TAB / 1-6  - Select parameter")
    print("  UP / DOWN  - Adjust selected parameter")
    print("  A          - Toggle auto-pilot ON/OFF")
    print("  G          - Cycle glyph (triangle/circle/cross/letter)")
    print("  M          - Toggle sequential / snapshot update")
    print("  R          - Respawn flock")
    print("  H          - Help overlay")
    print("\nAuto-pilot is", "ON" if config.autopilot else "OFF")
    print("\nStarting simulation...")

    sim = Simulation(config, params)
    sim.run()


def run_headless(config, params, frames: int = 5000, trials: int = 1,
                 export: bool = False, plot: bool = False):
    """
    Run the simulation without a display and report statistics.

    Args:
        config: Simulation configuration
        params: Initial parameters
        frames: Duration in frames per trial
        trials: Number of trials (seeds ``seed``, ``seed + 1``, ...)
        export: Write CSV time series and JSON report
        plot: Save time series and parameter drift plots
    """
    if trials < 1:
        raise ValueError(f"trials must be at least 1, got {trials}")

    from .simulation.headless import HeadlessSimulation
    from .analysis.export import export_timeseries_to_csv, export_run_report, calculate_aggregate_stats

    print("=" * 60)
    print("HEADLESS FLOCK RUN")
    print("=" * 60)
    print(f"Duration per trial: {frames} frames")
    print(f"Trials: {trials}")
    print(f"Boids: {params.populationSize}")
    print(f"Auto-pilot: {'ON' if config.autopilot else 'OFF'}")
    print(f"Update mode: {'sequential' if config.sequentialUpdate else 'snapshot'}")
    print()

    base_seed = config.seed if config.seed is not None else 42
    results = []
    for trial in range(trials):
        print(f"Trial {trial + 1}/{trials}")
        trial_config = replace(config, seed=base_seed + trial)
        sim = HeadlessSimulation(trial_config, params)
        result = sim.run(frames)
        result["trial"] = trial + 1
        results.append(result)
        print(f"  avg speed={result['avg_speed']:.2f}, cohesion={result['avg_cohesion']:.1f}")

    aggregates = calculate_aggregate_stats(results)

    print("\n" + "=" * 60)
    print("RESULTS SUMMARY")
    print("=" * 60)
    print(f"   Avg Speed: {aggregates.get('avg_speed_mean', 0):.2f} +/- {aggregates.get('avg_speed_std', 0):.2f}")
    print(f"   Cohesion:  {aggregates.get('avg_cohesion_mean', 0):.1f} +/- {aggregates.get('avg_cohesion_std', 0):.1f}")

    if export:
        export_timeseries_to_csv(results[0], config.timeseriesOutputFile)
        export_run_report({
            "config": config.to_dict(),
            "parameters": params.to_dict(),
            "trial_results": results,
            "aggregates": aggregates,
        }, config.reportOutputFile)

    if plot:
        from .analysis.plotting import plot_timeseries, plot_parameter_drift

        plot_timeseries(results[0], config.plotOutputFile)
        if config.autopilot:
            plot_parameter_drift(results[0], "parameter_drift.png")

    return results, aggregates


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Boids flocking simulation")
    parser.add_argument("--headless", action="store_true", help="Run without a display")
    parser.add_argument("--frames", type=int, default=5000, help="Simulation duration in frames")
    parser.add_argument("--trials", type=_positive_int, default=1, help="Number of headless trials")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--boids", type=int, default=None, help="Population size")
    parser.add_argument("--no-autopilot", action="store_true", help="Start with auto-pilot off")
    parser.add_argument("--snapshot", action="store_true",
                        help="Snapshot-then-commit update instead of sequential")
    parser.add_argument("--config", default=None, help="JSON file of config/parameter overrides")
    parser.add_argument("--export", action="store_true", help="Export CSV/JSON results (headless)")
    parser.add_argument("--plot", action="store_true", help="Save plots (headless)")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    return parser


def main(argv=None):
    """Main entry point."""
    from .core.config import ConfigError, SimulationConfig, SimulationParameters, load_config

    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.config:
        try:
            config, params = load_config(args.config)
        except ConfigError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2
    else:
        config, params = SimulationConfig(), SimulationParameters()

    if args.seed is not None:
        config.seed = args.seed
    if args.boids is not None:
        params.populationSize = args.boids
    if args.no_autopilot:
        config.autopilot = False
    if args.snapshot:
        config.sequentialUpdate = False

    try:
        if args.headless:
            run_headless(config, params, frames=args.frames, trials=args.trials,
                         export=args.export, plot=args.plot)
        else:
            run_interactive(config, params)
    except OSError as e:
        logger.error("Run failed: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
