"""
Export functions for saving headless run results to CSV and JSON.
"""

import csv
import json
import logging
from typing import Any, Dict, List

import numpy as np


logger = logging.getLogger(__name__)

TIMESERIES_FIELDS = [
    "frame", "avg_speed", "cohesion", "avg_neighbors", "agitated_fraction",
    "boid_count", "alignmentWeight", "cohesionWeight", "separationWeight",
    "perceptionRadius",
]


def export_timeseries_to_csv(results: Dict[str, Any],
                             filename: str = "flock_timeseries.csv") -> str:
    """
    Export the time series of one run to CSV.

    Args:
        results: Results from HeadlessSimulation.run
        filename: Output filename

    Returns:
        Path to saved CSV file
    """
    with open(filename, 'w', newline='') as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=TIMESERIES_FIELDS, extrasaction='ignore')
        writer.writeheader()

        for entry in results["timeseries"]:
            writer.writerow({
                key: f"{value:.4f}" if isinstance(value, float) else value
                for key, value in entry.items()
            })

    logger.info("Time series saved to: %s", filename)
    return filename


def export_run_report(report: Dict[str, Any], filename: str = "flock_run_report.json") -> str:
    """
    Export a full run report to JSON.

    Args:
        report: Report dictionary (results, aggregates, config)
        filename: Output filename

    Returns:
        Path to saved JSON file
    """
    with open(filename, 'w') as f:
        json.dump(report, f, indent=2)

    logger.info("Run report saved to: %s", filename)
    return filename


def calculate_aggregate_stats(trial_results: List[Dict]) -> Dict[str, float]:
    """
    Calculate mean and standard deviation across trials.

    Args:
        trial_results: List of result dictionaries from multiple runs

    Returns:
        Dictionary with mean and std for each metric
    """
    if not trial_results:
        return {}

    metrics = ["avg_speed", "avg_cohesion", "final_boid_count", "elapsed_time_seconds"]

    aggregates = {}
    for metric in metrics:
        values = np.array([r[metric] for r in trial_results if r.get(metric) is not None],
                          dtype=float)
        if values.size:
            aggregates[f"{metric}_mean"] = float(values.mean())
            aggregates[f"{metric}_std"] = float(values.std(ddof=1)) if values.size > 1 else 0.0

    return aggregates
