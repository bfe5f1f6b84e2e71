# Monte Carlo simulation package
"""
Monte Carlo portfolio sampling.

Modules:
- simulation: PortfolioSimulation engine (generation, constraint filter, Pareto front)
"""

from .simulation import PortfolioSimulation, SimulationResult, MAX_RAW_WEIGHT

__all__ = [
    'PortfolioSimulation',
    'SimulationResult',
    'MAX_RAW_WEIGHT',
]
