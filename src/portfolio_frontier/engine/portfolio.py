#!/usr/bin/env python3
"""
Portfolio Class - one allocation vector and its derived risk/return metrics.

A portfolio is created by the simulation engine with random weights, normalized,
evaluated once against the market model and is read-only afterwards.

Dominance (Pareto order) and the storage key (return, then volatility) are two
separate functions: the key only gives the front a canonical order, it says
nothing about which portfolio is better.
"""

import math
from typing import Sequence, Tuple, Union

import numpy as np

from .exceptions import ShapeMismatchError, InvalidCovarianceError


# Round-off allowance when a PSD covariance yields a tiny negative variance
VARIANCE_TOLERANCE = 1e-12


class Portfolio:
    """
    Single portfolio: asset weights plus net return, volatility and transaction cost.

    Attributes:
    -----------
    allocations : np.ndarray
        Weight per asset (non-negative, sums to 1 after generation)
    net_return : float
        Expected return minus transaction cost (set by evaluate)
    volatility : float
        Square root of portfolio variance (set by evaluate)
    transaction_cost : float
        Cost set at generation time, overwritten by evaluate
    """

    def __init__(self, num_assets: int = 0):
        if num_assets < 0:
            raise ValueError(f"num_assets cannot be negative, got {num_assets}")
        self.allocations = np.zeros(num_assets)
        self.net_return = 0.0
        self.volatility = 0.0
        self.transaction_cost = 0.0

    @classmethod
    def from_allocations(cls,
                         allocations: Union[Sequence[float], np.ndarray],
                         transaction_cost: float = 0.0) -> 'Portfolio':
        """
        Create a portfolio from explicit weights.

        Example:
        --------
        >>> p = Portfolio.from_allocations([0.5, 0.5])
        >>> p.evaluate([0.10, 0.20], [[0.01, 0.0], [0.0, 0.04]], 0.0)
        """
        weights = np.asarray(allocations, dtype=float)
        if weights.ndim != 1:
            raise ShapeMismatchError(f"allocations must be one-dimensional, got shape {weights.shape}")
        portfolio = cls(weights.shape[0])
        portfolio.allocations = weights.copy()
        portfolio.transaction_cost = float(transaction_cost)
        return portfolio

    @property
    def num_assets(self) -> int:
        return self.allocations.shape[0]

    def evaluate(self,
                 expected_returns: Union[Sequence[float], np.ndarray],
                 covariance_matrix: Union[Sequence[Sequence[float]], np.ndarray],
                 transaction_cost_rate: float) -> None:
        """
        Compute net return and volatility against the market model.

        net_return is charged the transaction cost stored BEFORE this call
        (the generation-time cost, scaled by the raw pre-normalization weight sum).
        The cost is then overwritten with transaction_cost_rate * sum(allocations),
        which is never subtracted from anything. Outputs depend on this order;
        it is most likely an unintended asymmetry but is kept as-is.

        Parameters:
        -----------
        expected_returns : array-like
            Expected return per asset (length = num_assets)
        covariance_matrix : array-like
            Covariance matrix (num_assets x num_assets)
        transaction_cost_rate : float
            Proportional transaction cost rate

        Raises:
        -------
        ShapeMismatchError
            If the dimensions of the inputs and the allocations disagree
        InvalidCovarianceError
            If the computed variance is negative (covariance not PSD)
        """
        returns = np.asarray(expected_returns, dtype=float)
        cov = np.asarray(covariance_matrix, dtype=float)
        n = self.num_assets

        if returns.shape != (n,):
            raise ShapeMismatchError(
                f"expected_returns has shape {returns.shape}, portfolio has {n} assets"
            )
        if cov.shape != (n, n):
            raise ShapeMismatchError(
                f"covariance_matrix has shape {cov.shape}, expected ({n}, {n})"
            )

        total_return = float(self.allocations @ returns)
        # Full quadratic form w' C w
        total_risk = float(self.allocations @ cov @ self.allocations)

        if total_risk < 0:
            if total_risk < -VARIANCE_TOLERANCE:
                raise InvalidCovarianceError(
                    f"Negative portfolio variance {total_risk:.3e}: covariance matrix is not positive semi-definite"
                )
            total_risk = 0.0

        self.net_return = total_return - self.transaction_cost
        self.volatility = math.sqrt(total_risk)
        self.transaction_cost = transaction_cost_rate * float(self.allocations.sum())

    def dominates(self, other: 'Portfolio') -> bool:
        """
        Pareto dominance: at least as good on both return (higher) and risk (lower),
        strictly better on at least one.
        """
        return ((self.net_return > other.net_return and self.volatility < other.volatility) or
                (self.net_return >= other.net_return and self.volatility <= other.volatility and
                 (self.net_return > other.net_return or self.volatility < other.volatility)))

    def __repr__(self) -> str:
        return (f"Portfolio(net_return={self.net_return:.6g}, volatility={self.volatility:.6g}, "
                f"transaction_cost={self.transaction_cost:.6g}, allocations={np.round(self.allocations, 4).tolist()})")


def frontier_key(portfolio: Portfolio) -> Tuple[float, float]:
    """Canonical storage key of a front member: net return, then volatility (both ascending)."""
    return (portfolio.net_return, portfolio.volatility)
