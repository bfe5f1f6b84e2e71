#!/usr/bin/env python3
"""
Allocation and frontier metrics.

Holdings count, concentration (HHI), Sharpe ratio and front summary statistics.
"""

from typing import Any, Dict, Iterable, Sequence, Union

import numpy as np


DEFAULT_ACTIVE_THRESHOLD = 0.01


def active_asset_count(allocations: Union[Sequence[float], np.ndarray],
                       threshold: float = DEFAULT_ACTIVE_THRESHOLD) -> int:
    """Number of assets with weight strictly greater than threshold."""
    return int(np.count_nonzero(np.asarray(allocations, dtype=float) > threshold))


def herfindahl_index(allocations: Union[Sequence[float], np.ndarray]) -> float:
    """
    Herfindahl-Hirschman concentration index: sum of squared weights.

    1.0 for a single-asset portfolio, 1/N for equal weights.
    """
    weights = np.asarray(allocations, dtype=float)
    return float(np.sum(weights ** 2))


def sharpe_ratio(net_return: float, volatility: float, risk_free_rate: float = 0.0) -> float:
    '''(Return - RF rate) / volatility; NaN when volatility is zero'''
    if volatility == 0:
        return float('nan')
    return (net_return - risk_free_rate) / volatility


def summarize_front(front: Iterable, population_size: int = None) -> Dict[str, Any]:
    """
    Summary statistics of a Pareto front.

    Parameters:
    -----------
    front : iterable of Portfolio
        Front members
    population_size : int, optional
        Size of the population the front was built from

    Returns:
    --------
    Dict with keys: size, population_size, min_return, max_return,
    min_volatility, max_volatility (None where the front is empty)
    """
    members = list(front)
    returns = np.array([p.net_return for p in members])
    vols = np.array([p.volatility for p in members])

    summary = {
        'size': len(members),
        'population_size': population_size,
        'min_return': None,
        'max_return': None,
        'min_volatility': None,
        'max_volatility': None,
    }
    if members:
        summary.update({
            'min_return': float(returns.min()),
            'max_return': float(returns.max()),
            'min_volatility': float(vols.min()),
            'max_volatility': float(vols.max()),
        })
    return summary
