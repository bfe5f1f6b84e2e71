#!/usr/bin/env python3
"""
Frontier plot - simulated population vs. Pareto front in risk/return space.
"""

import logging
import os
from typing import Iterable, Optional, Sequence

import matplotlib.pyplot as plt
from matplotlib.ticker import FuncFormatter
import numpy as np


POPULATION_COLOR = '#1f77b4'  # Blue
FRONT_COLOR = '#d62728'       # Red
ASSET_COLOR = '#2ca02c'       # Green


def _percent_formatter(value, _pos):
    return f'{value*100:.1f}%'


def plot_frontier(population: Iterable,
                  front: Iterable,
                  market=None,
                  asset_names: Optional[Sequence[str]] = None,
                  title: str = 'Monte Carlo Portfolios and Pareto Front',
                  save_path: Optional[str] = None,
                  show_interactive: bool = False):
    """
    Scatter the population and draw the Pareto front.

    Parameters:
    -----------
    population : iterable of Portfolio
        Evaluated portfolios
    front : iterable of Portfolio
        Pareto front members (drawn in front order)
    market : MarketModel, optional
        If given, individual assets are marked at (asset volatility, expected return)
    asset_names : sequence of str, optional
        Labels for the individual asset markers
    title : str
        Plot title
    save_path : str, optional
        Save the figure here (PNG, dpi=150)
    show_interactive : bool
        Show the figure (non-blocking) instead of closing it

    Returns:
    --------
    plt.Figure
    """
    population = list(population)
    front = list(front)

    fig, ax = plt.subplots(figsize=(10, 7))

    if population:
        ax.scatter([p.volatility for p in population], [p.net_return for p in population],
                   s=6, alpha=0.3, color=POPULATION_COLOR, label=f'Population ({len(population)})')

    if front:
        ax.plot([p.volatility for p in front], [p.net_return for p in front],
                'o-', markersize=4, linewidth=1.5, color=FRONT_COLOR, label=f'Pareto front ({len(front)})')

    if market is not None:
        vols = market.asset_volatilities()
        rets = np.asarray(market.expected_returns)
        ax.scatter(vols, rets, marker='D', s=40, color=ASSET_COLOR, label='Single assets')
        labels = asset_names or [f'Asset {i + 1}' for i in range(len(rets))]
        for label, x, y in zip(labels, vols, rets):
            ax.annotate(label, (x, y), textcoords='offset points', xytext=(5, 5), fontsize=9)

    ax.set_xlabel('Risk (volatility)', fontsize=11)
    ax.set_ylabel('Net return', fontsize=11)
    ax.set_title(title, fontsize=12, fontweight='bold')
    ax.xaxis.set_major_formatter(FuncFormatter(_percent_formatter))
    ax.yaxis.set_major_formatter(FuncFormatter(_percent_formatter))
    ax.grid(True, alpha=0.3)
    if population or front or market is not None:
        ax.legend(loc='lower right')

    if save_path:
        directory = os.path.dirname(save_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        fig.savefig(save_path, dpi=150, bbox_inches='tight')
        logging.info(f"Frontier plot saved to {save_path}")

    if show_interactive:
        plt.show(block=False)
    else:
        plt.close(fig)

    return fig
