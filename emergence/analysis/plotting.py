"""
Plotting functions for visualizing headless run results.
"""

import logging
from typing import Any, Dict

import matplotlib.pyplot as plt


logger = logging.getLogger(__name__)

PARAMETER_COLORS = {
    "alignmentWeight": '#FF6B6B',
    "cohesionWeight": '#FFB347',
    "separationWeight": '#4ECDC4',
    "perceptionRadius": '#95E1D3',
}


def plot_timeseries(results: Dict[str, Any], output_file: str = "flock_timeseries.png",
                    show: bool = False) -> str:
    """
    Plot speed, cohesion and neighbour count over time.

    Args:
        results: Results from HeadlessSimulation.run
        output_file: Output filename for the plot
        show: Open an interactive window after saving

    Returns:
        Path to saved plot file
    """
    series = results["timeseries"]
    frames = [d["frame"] for d in series]

    fig, axes = plt.subplots(3, 1, figsize=(12, 10), sharex=True)

    axes[0].plot(frames, [d["avg_speed"] for d in series], linewidth=2, color='#FF6B6B')
    axes[0].set_ylabel('Avg Speed', fontsize=10)

    axes[1].plot(frames, [d["cohesion"] for d in series], linewidth=2, color='#4ECDC4')
    axes[1].set_ylabel('Cohesion (avg dist to centroid)', fontsize=10)

    axes[2].plot(frames, [d["avg_neighbors"] for d in series], linewidth=2, color='#FFB347')
    axes[2].set_ylabel('Avg Neighbors', fontsize=10)
    axes[2].set_xlabel('Frame Number', fontsize=12, fontweight='bold')

    for ax in axes:
        ax.grid(True, alpha=0.3, linestyle='--')

    fig.suptitle('Flock Behaviour Over Time', fontsize=14, fontweight='bold')
    fig.tight_layout()
    fig.savefig(output_file, dpi=150, bbox_inches='tight')
    logger.info("Plot saved to: %s", output_file)

    if show:
        plt.show()
    plt.close(fig)
    return output_file


def plot_parameter_drift(results: Dict[str, Any], output_file: str = "parameter_drift.png",
                         show: bool = False) -> str:
    """
    Plot the four autopilot-driven parameters over time.

    Weights share the left axis; perception radius uses the right axis.

    Args:
        results: Results from HeadlessSimulation.run
        output_file: Output filename for the plot
        show: Open an interactive window after saving

    Returns:
        Path to saved plot file
    """
    series = results["timeseries"]
    frames = [d["frame"] for d in series]

    fig, ax = plt.subplots(figsize=(12, 6))
    for key in ("alignmentWeight", "cohesionWeight", "separationWeight"):
        ax.plot(frames, [d[key] for d in series], label=key, linewidth=2,
                color=PARAMETER_COLORS[key])
    ax.set_xlabel('Frame Number', fontsize=12, fontweight='bold')
    ax.set_ylabel('Weight', fontsize=12)
    ax.grid(True, alpha=0.3, linestyle='--')

    radius_ax = ax.twinx()
    radius_ax.plot(frames, [d["perceptionRadius"] for d in series], label="perceptionRadius",
                   linewidth=2, linestyle='--', color=PARAMETER_COLORS["perceptionRadius"])
    radius_ax.set_ylabel('Perception Radius', fontsize=12)

    handles, labels = ax.get_legend_handles_labels()
    radius_handles, radius_labels = radius_ax.get_legend_handles_labels()
    ax.legend(handles + radius_handles, labels + radius_labels, fontsize=10, loc='upper right')

    ax.set_title('Auto-Pilot Parameter Drift', fontsize=14, fontweight='bold', pad=20)
    fig.tight_layout()
    fig.savefig(output_file, dpi=150, bbox_inches='tight')
    logger.info("Parameter drift plot saved to: %s", output_file)

    if show:
        plt.show()
    plt.close(fig)
    return output_file
