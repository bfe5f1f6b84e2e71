#!/usr/bin/env python3
"""
Exception types raised by the simulation pipeline.

- ShapeMismatchError: returns / covariance / allocation dimensions disagree (fatal)
- DegenerateSampleError: a random draw produced an all-zero weight vector
  (recovered inside the engine by resampling)
- InvalidCovarianceError: covariance matrix is malformed or produced a negative
  portfolio variance (fatal)
"""


class PortfolioFrontierError(Exception):
    """Base class for all errors raised by portfolio_frontier."""


class ShapeMismatchError(PortfolioFrontierError, ValueError):
    """Dimensions of the returns vector, covariance matrix or allocations disagree."""


class DegenerateSampleError(PortfolioFrontierError):
    """Raw weights of a generated portfolio sum to zero and cannot be normalized."""


class InvalidCovarianceError(PortfolioFrontierError, ValueError):
    """Covariance matrix is not square/symmetric, or yields a negative variance."""
