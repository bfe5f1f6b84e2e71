#!/usr/bin/env python3
"""
Market model - expected returns and covariance shared by every portfolio in a run.
"""

from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np

from .exceptions import ShapeMismatchError, InvalidCovarianceError


ArrayLike = Union[Sequence[float], np.ndarray]


def as_returns_vector(expected_returns: ArrayLike) -> np.ndarray:
    """Convert expected returns to a 1-D float array."""
    returns = np.array(expected_returns, dtype=float)
    if returns.ndim != 1:
        raise ShapeMismatchError(
            f"expected_returns must be one-dimensional, got shape {returns.shape}"
        )
    return returns


def as_covariance_matrix(covariance_matrix: ArrayLike) -> np.ndarray:
    """Convert a covariance matrix to a square 2-D float array."""
    cov = np.array(covariance_matrix, dtype=float)
    if cov.ndim != 2 or cov.shape[0] != cov.shape[1]:
        raise InvalidCovarianceError(
            f"covariance_matrix must be square, got shape {cov.shape}"
        )
    return cov


@dataclass(frozen=True, eq=False)
class MarketModel:
    """
    Immutable market inputs for a simulation run.

    Parameters:
    -----------
    expected_returns : np.ndarray
        Expected return of each asset (length = num_assets)
    covariance_matrix : np.ndarray
        Symmetric covariance matrix (num_assets x num_assets)
    """

    expected_returns: np.ndarray
    covariance_matrix: np.ndarray

    def __post_init__(self):
        returns = as_returns_vector(self.expected_returns)
        cov = as_covariance_matrix(self.covariance_matrix)

        if cov.shape[0] != returns.shape[0]:
            raise ShapeMismatchError(
                f"covariance_matrix is {cov.shape[0]}x{cov.shape[1]} but "
                f"expected_returns has {returns.shape[0]} assets"
            )
        if not np.allclose(cov, cov.T):
            raise InvalidCovarianceError("covariance_matrix must be symmetric")

        returns.setflags(write=False)
        cov.setflags(write=False)
        # frozen dataclass: bypass __setattr__ to store the normalized arrays
        object.__setattr__(self, 'expected_returns', returns)
        object.__setattr__(self, 'covariance_matrix', cov)

    @property
    def num_assets(self) -> int:
        return self.expected_returns.shape[0]

    def asset_volatilities(self) -> np.ndarray:
        """Standalone volatility of each asset (sqrt of the diagonal)."""
        return np.sqrt(np.diag(self.covariance_matrix))
