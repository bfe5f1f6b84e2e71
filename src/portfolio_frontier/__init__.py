# Monte Carlo Pareto-Front Portfolio Package
"""
Monte Carlo simulation of asset-allocation portfolios and Pareto-front extraction.

Subpackages:
- engine: Portfolio model, market model, Pareto front, exceptions
- montecarlo: Random portfolio generation and the simulation engine
- config: SimulationConfig and JSON loading
- metrics: Holdings count, concentration, Sharpe ratio, front summary
- reporting: Console report and pandas export
- visualization: Frontier plot

Usage:
    from portfolio_frontier import PortfolioSimulation, SimulationConfig

    simulation = PortfolioSimulation.from_config(SimulationConfig(seed=42))
    result = simulation.run()
    for portfolio in result.front:
        print(portfolio.net_return, portfolio.volatility)
"""

__version__ = "0.1.0"

# Convenience imports for commonly used classes
from .engine import (
    Portfolio,
    ParetoFront,
    MarketModel,
    frontier_key,
    build_pareto_front,
    PortfolioFrontierError,
    ShapeMismatchError,
    DegenerateSampleError,
    InvalidCovarianceError,
)
from .montecarlo import PortfolioSimulation, SimulationResult
from .config import SimulationConfig, load_simulation_config

__all__ = [
    'Portfolio',
    'ParetoFront',
    'MarketModel',
    'frontier_key',
    'build_pareto_front',
    'PortfolioFrontierError',
    'ShapeMismatchError',
    'DegenerateSampleError',
    'InvalidCovarianceError',
    'PortfolioSimulation',
    'SimulationResult',
    'SimulationConfig',
    'load_simulation_config',
]
