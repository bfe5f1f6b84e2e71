#!/usr/bin/env python3
"""
Monte Carlo Portfolio Simulation.

Generates random long-only portfolios, evaluates them against a fixed market
model, keeps the ones whose active-asset count is within bounds, and folds the
survivors into a Pareto front.

All randomness comes from ONE numpy Generator owned by the simulation.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

import numpy as np

from ..engine.exceptions import DegenerateSampleError, ShapeMismatchError
from ..engine.market import MarketModel
from ..engine.pareto import ParetoFront, build_pareto_front
from ..engine.portfolio import Portfolio
from ..metrics.allocation import DEFAULT_ACTIVE_THRESHOLD, active_asset_count


# Raw weights are drawn uniformly from the integers [0, MAX_RAW_WEIGHT)
MAX_RAW_WEIGHT = 100


@dataclass
class SimulationResult:
    """Population that passed the constraint filter and its Pareto front."""
    population: List[Portfolio]
    front: ParetoFront


class PortfolioSimulation:
    """
    Random portfolio generator and Pareto-front builder.

    Public methods:
    - generate_random_portfolio(): one normalized random portfolio
    - simulate_portfolios(): constrained, evaluated population
    - construct_pareto_front(population): non-dominated subset
    - run(): simulate + construct in one call
    """

    def __init__(self,
                 num_assets: int,
                 num_simulations: int,
                 transaction_cost_rate: float,
                 min_assets: int,
                 max_assets: int,
                 expected_returns: Union[Sequence[float], np.ndarray],
                 covariance_matrix: Union[Sequence[Sequence[float]], np.ndarray],
                 rng: Optional[np.random.Generator] = None,
                 seed: Optional[int] = None,
                 active_weight_threshold: float = DEFAULT_ACTIVE_THRESHOLD):
        """
        Initialize simulation with a fixed configuration.

        Parameters:
        -----------
        num_assets : int
            Number of assets per portfolio
        num_simulations : int
            Number of random portfolios to generate
        transaction_cost_rate : float
            Proportional transaction cost rate
        min_assets, max_assets : int
            Inclusive bounds on the number of active assets
        expected_returns : array-like
            Expected return per asset (length = num_assets)
        covariance_matrix : array-like
            Symmetric covariance matrix (num_assets x num_assets)
        rng : np.random.Generator, optional
            Random source. Takes precedence over seed
        seed : int, optional
            Seed for a new Generator when rng is not given.
            With neither, the generator is seeded from OS entropy
        active_weight_threshold : float
            Weight strictly above this counts as an active asset
        """
        if num_assets < 1:
            raise ValueError(f"num_assets must be at least 1, got {num_assets}")
        if num_simulations < 0:
            raise ValueError(f"num_simulations cannot be negative, got {num_simulations}")
        if transaction_cost_rate < 0:
            raise ValueError(f"transaction_cost_rate cannot be negative, got {transaction_cost_rate}")
        if not (0 <= min_assets <= max_assets <= num_assets):
            raise ValueError(
                f"Asset bounds must satisfy 0 <= min_assets <= max_assets <= num_assets, "
                f"got min_assets={min_assets}, max_assets={max_assets}, num_assets={num_assets}"
            )

        self.market = MarketModel(expected_returns=expected_returns, covariance_matrix=covariance_matrix)
        if self.market.num_assets != num_assets:
            raise ShapeMismatchError(
                f"Market model has {self.market.num_assets} assets, num_assets is {num_assets}"
            )

        self.num_assets = num_assets
        self.num_simulations = num_simulations
        self.transaction_cost_rate = transaction_cost_rate
        self.min_assets = min_assets
        self.max_assets = max_assets
        self.active_weight_threshold = active_weight_threshold
        self.rng = rng if rng is not None else np.random.default_rng(seed)

        logging.info(f"PortfolioSimulation initialized: {num_assets} assets, {num_simulations} simulations, "
                     f"active assets in [{min_assets}, {max_assets}]")

    @classmethod
    def from_config(cls, config, rng: Optional[np.random.Generator] = None) -> 'PortfolioSimulation':
        """Create a simulation from a SimulationConfig."""
        market = config.market_model()
        return cls(
            num_assets=config.num_assets,
            num_simulations=config.num_simulations,
            transaction_cost_rate=config.transaction_cost_rate,
            min_assets=config.min_assets,
            max_assets=config.max_assets,
            expected_returns=market.expected_returns,
            covariance_matrix=market.covariance_matrix,
            rng=rng,
            seed=config.seed,
            active_weight_threshold=config.active_weight_threshold
        )

    @property
    def expected_returns(self) -> np.ndarray:
        return self.market.expected_returns

    @property
    def covariance_matrix(self) -> np.ndarray:
        return self.market.covariance_matrix

    # =========================================================================
    # GENERATION
    # =========================================================================

    def _draw_raw_weights(self) -> np.ndarray:
        """Draw integer weights in [0, 99]; raises DegenerateSampleError if all are zero."""
        raw = self.rng.integers(0, MAX_RAW_WEIGHT, size=self.num_assets).astype(float)
        if raw.sum() == 0:
            raise DegenerateSampleError(f"All {self.num_assets} raw weights are zero")
        return raw

    def generate_random_portfolio(self) -> Portfolio:
        """
        Generate one random portfolio.

        Weights are independent uniform integers in [0, 99] divided by their sum,
        which is NOT a uniform draw on the simplex. An all-zero draw is resampled.
        The transaction cost is set from the raw (pre-normalization) weight sum.

        Returns:
        --------
        Portfolio with normalized allocations, not yet evaluated
        """
        while True:
            try:
                raw = self._draw_raw_weights()
                break
            except DegenerateSampleError as e:
                logging.debug(f"Resampling degenerate draw: {e}")

        total_weight = float(raw.sum())
        portfolio = Portfolio(self.num_assets)
        portfolio.allocations = raw / total_weight
        portfolio.transaction_cost = total_weight * self.transaction_cost_rate
        return portfolio

    # =========================================================================
    # SIMULATION
    # =========================================================================

    def simulate_portfolios(self) -> List[Portfolio]:
        """
        Generate and evaluate num_simulations portfolios, keeping those whose
        active-asset count is within [min_assets, max_assets].

        Returns:
        --------
        List[Portfolio] in generation order
        """
        population = []

        for _ in range(self.num_simulations):
            portfolio = self.generate_random_portfolio()
            portfolio.evaluate(self.expected_returns, self.covariance_matrix, self.transaction_cost_rate)

            active_assets = active_asset_count(portfolio.allocations, self.active_weight_threshold)
            if self.min_assets <= active_assets <= self.max_assets:
                population.append(portfolio)

        logging.info(f"Simulated {self.num_simulations} portfolios, {len(population)} satisfy asset constraints")
        return population

    def construct_pareto_front(self, population: Sequence[Portfolio]) -> ParetoFront:
        """
        Build the Pareto front of a population (single pass, input order).

        Parameters:
        -----------
        population : sequence of Portfolio
            Evaluated portfolios

        Returns:
        --------
        ParetoFront
        """
        front = build_pareto_front(population)
        logging.info(f"Pareto front: {len(front)} of {len(population)} portfolios are non-dominated")
        return front

    def run(self) -> SimulationResult:
        """Simulate the population and construct its Pareto front."""
        population = self.simulate_portfolios()
        front = self.construct_pareto_front(population)
        return SimulationResult(population=population, front=front)
