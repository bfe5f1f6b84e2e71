#!/usr/bin/env python3
"""
Smoke tests for the frontier plot.
"""

import matplotlib
matplotlib.use('Agg')

from portfolio_frontier.config import SimulationConfig
from portfolio_frontier.montecarlo import PortfolioSimulation
from portfolio_frontier.visualization import plot_frontier


def test_plot_saved_to_disk(tmp_path):
    simulation = PortfolioSimulation.from_config(SimulationConfig(num_simulations=300, seed=11))
    result = simulation.run()
    path = tmp_path / 'plots' / 'frontier.png'

    fig = plot_frontier(result.population, result.front, market=simulation.market, save_path=str(path))

    assert path.exists()
    ax = fig.axes[0]
    assert ax.get_xlabel() == 'Risk (volatility)'
    # front line: one point per member, in front order
    front_line = ax.get_lines()[0]
    assert len(front_line.get_xdata()) == len(result.front)


def test_plot_empty_inputs():
    fig = plot_frontier([], [])
    assert fig.axes[0].get_title() == 'Monte Carlo Portfolios and Pareto Front'
