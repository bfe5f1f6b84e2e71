# Engine package - portfolio model and Pareto front
"""
Core portfolio model and Pareto-front infrastructure.

Modules:
- portfolio: Portfolio class (evaluation, dominance) and the front ordering key
- pareto: ParetoFront container and build_pareto_front
- market: MarketModel (expected returns + covariance)
- exceptions: error taxonomy
"""

from .exceptions import (
    PortfolioFrontierError,
    ShapeMismatchError,
    DegenerateSampleError,
    InvalidCovarianceError,
)
from .market import MarketModel
from .portfolio import Portfolio, frontier_key
from .pareto import ParetoFront, build_pareto_front

__all__ = [
    'PortfolioFrontierError',
    'ShapeMismatchError',
    'DegenerateSampleError',
    'InvalidCovarianceError',
    'MarketModel',
    'Portfolio',
    'frontier_key',
    'ParetoFront',
    'build_pareto_front',
]
