"""
Analysis module for plotting and exporting simulation results.
"""

from .plotting import plot_timeseries, plot_parameter_drift
from .export import export_timeseries_to_csv, export_run_report, calculate_aggregate_stats

__all__ = [
    'plot_timeseries',
    'plot_parameter_drift',
    'export_timeseries_to_csv',
    'export_run_report',
    'calculate_aggregate_stats',
]
