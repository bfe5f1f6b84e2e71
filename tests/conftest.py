"""Shared fixtures for portfolio_frontier tests."""

import numpy as np
import pytest

from portfolio_frontier.config import SimulationConfig
from portfolio_frontier.engine import Portfolio


TWO_ASSET_RETURNS = [0.10, 0.20]
TWO_ASSET_COVARIANCE = [[0.01, 0.0], [0.0, 0.04]]


class ScriptedGenerator:
    """Stand-in for np.random.Generator that replays fixed integer draws."""

    def __init__(self, draws):
        self.draws = [np.asarray(d) for d in draws]
        self.calls = 0

    def integers(self, low, high, size=None):
        draw = self.draws[self.calls]
        self.calls += 1
        assert draw.shape == (size,)
        assert np.all((draw >= low) & (draw < high))
        return draw


def make_portfolio(net_return: float, volatility: float, num_assets: int = 2) -> Portfolio:
    """Portfolio with metrics set directly (bypasses evaluate)."""
    portfolio = Portfolio(num_assets)
    portfolio.net_return = net_return
    portfolio.volatility = volatility
    return portfolio


@pytest.fixture
def two_asset_market():
    """Two uncorrelated assets: 10%/10% vol and 20%/20% vol."""
    return np.array(TWO_ASSET_RETURNS), np.array(TWO_ASSET_COVARIANCE)


@pytest.fixture
def seeded_rng():
    return np.random.default_rng(12345)


@pytest.fixture
def small_config():
    """Default 5-asset example, fewer simulations, fixed seed."""
    return SimulationConfig(num_simulations=500, seed=7)
