# Visualization package
"""
Plotting utilities.

Modules:
- frontier_plot: population scatter and Pareto front in risk/return space
"""

from .frontier_plot import plot_frontier

__all__ = ['plot_frontier']
