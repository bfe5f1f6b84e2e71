#!/usr/bin/env python3
"""
Frontier reporting - console report and tabular (pandas) export.

Each front member is reported on one line:
    Return: <net_return>, Risk: <volatility>, Transaction Cost: <transaction_cost>
with numbers in general format (6 significant digits, format spec 'g').
"""

import logging
import os
from typing import Iterable, List, Optional, Sequence

import pandas as pd

from ..metrics.allocation import (
    DEFAULT_ACTIVE_THRESHOLD,
    active_asset_count,
    herfindahl_index,
    sharpe_ratio,
)


REPORT_HEADER = "Pareto Front:"


def format_number(value: float) -> str:
    """Format with 6 significant digits, switching to exponent notation for extremes."""
    return f"{value:g}"


def format_portfolio_line(portfolio) -> str:
    """One report line for a portfolio."""
    return (f"Return: {format_number(portfolio.net_return)}, "
            f"Risk: {format_number(portfolio.volatility)}, "
            f"Transaction Cost: {format_number(portfolio.transaction_cost)}")


def format_front_report(front: Iterable) -> List[str]:
    """Report lines: header, then one line per front member in front order."""
    return [REPORT_HEADER] + [format_portfolio_line(p) for p in front]


def print_front_report(front: Iterable) -> None:
    """Print the front report to stdout."""
    for line in format_front_report(front):
        print(line)


def population_to_dataframe(portfolios: Iterable,
                            asset_names: Optional[Sequence[str]] = None,
                            risk_free_rate: float = 0.0,
                            active_threshold: float = DEFAULT_ACTIVE_THRESHOLD) -> pd.DataFrame:
    """
    Convert portfolios to a DataFrame (one row per portfolio, in iteration order).

    Parameters:
    -----------
    portfolios : iterable of Portfolio
        Evaluated portfolios (a population list or a ParetoFront)
    asset_names : sequence of str, optional
        Column labels for the allocation columns. Default: 'Asset 1'..'Asset N'
    risk_free_rate : float
        Risk-free rate for the Sharpe ratio column
    active_threshold : float
        Weight strictly above this counts as active

    Returns:
    --------
    pd.DataFrame with columns: net_return, volatility, transaction_cost,
    active_assets, hhi, sharpe_ratio, then one column per asset
    """
    portfolios = list(portfolios)
    metric_columns = ['net_return', 'volatility', 'transaction_cost', 'active_assets', 'hhi', 'sharpe_ratio']

    if not portfolios:
        columns = metric_columns + list(asset_names or [])
        return pd.DataFrame(columns=columns)

    num_assets = portfolios[0].allocations.shape[0]
    if asset_names is None:
        asset_names = [f'Asset {i + 1}' for i in range(num_assets)]
    if len(asset_names) != num_assets:
        raise ValueError(f"Expected {num_assets} asset names, got {len(asset_names)}")

    rows = []
    for p in portfolios:
        row = {
            'net_return': p.net_return,
            'volatility': p.volatility,
            'transaction_cost': p.transaction_cost,
            'active_assets': active_asset_count(p.allocations, active_threshold),
            'hhi': herfindahl_index(p.allocations),
            'sharpe_ratio': sharpe_ratio(p.net_return, p.volatility, risk_free_rate),
        }
        row.update(dict(zip(asset_names, p.allocations)))
        rows.append(row)

    return pd.DataFrame(rows, columns=metric_columns + list(asset_names))


def front_to_dataframe(front: Iterable,
                       asset_names: Optional[Sequence[str]] = None,
                       risk_free_rate: float = 0.0) -> pd.DataFrame:
    """Front members as a DataFrame, in front order (ascending return, then volatility)."""
    return population_to_dataframe(front, asset_names=asset_names, risk_free_rate=risk_free_rate)


def save_front_csv(front: Iterable,
                   path: str,
                   asset_names: Optional[Sequence[str]] = None,
                   risk_free_rate: float = 0.0) -> pd.DataFrame:
    """Write the front to CSV and return the DataFrame that was written."""
    df = front_to_dataframe(front, asset_names=asset_names, risk_free_rate=risk_free_rate)
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    df.to_csv(path, index=False)
    logging.info(f"Pareto front ({len(df)} rows) saved to {path}")
    return df
