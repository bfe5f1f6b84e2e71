#!/usr/bin/env python3
"""
Configuration for a Monte Carlo Pareto-front run.

Everything is fixed at construction and immutable for the run:
- Simulation size and cardinality constraints
- Transaction cost rate
- Market model (expected returns, covariance matrix)
- Reporting options (asset names, risk-free rate for Sharpe ratios)
"""

import json
from dataclasses import dataclass, field, asdict
from typing import List, Dict, Any, Optional

import numpy as np

from ..engine.exceptions import ShapeMismatchError, InvalidCovarianceError
from ..engine.market import MarketModel


@dataclass
class SimulationConfig:
    """
    Settings for one simulation run.

    Defaults reproduce the bundled 5-asset example dataset.
    """

    # ============================================================================
    # Simulation Settings
    # ============================================================================
    num_assets: int = 5                     # Number of assets in every portfolio
    num_simulations: int = 10_000           # Number of random portfolios to generate
    transaction_cost_rate: float = 0.001    # Proportional transaction cost (0.1%)
    seed: Optional[int] = None              # Random seed. None = fresh OS entropy (not reproducible)

    # ============================================================================
    # Cardinality Constraints
    # ============================================================================
    min_assets: int = 2                     # Minimum number of active assets
    max_assets: int = 4                     # Maximum number of active assets
    active_weight_threshold: float = 0.01   # Weight strictly above this counts as active

    # ============================================================================
    # Market Model
    # ============================================================================
    expected_returns: List[float] = field(default_factory=lambda: [0.12, 0.10, 0.14, 0.08, 0.11])
    covariance_matrix: List[List[float]] = field(default_factory=lambda: [
        [0.10, 0.02, 0.04, 0.01, 0.03],
        [0.02, 0.15, 0.05, 0.02, 0.01],
        [0.04, 0.05, 0.20, 0.01, 0.02],
        [0.01, 0.02, 0.01, 0.30, 0.01],
        [0.03, 0.01, 0.02, 0.01, 0.25],
    ])
    asset_names: Optional[List[str]] = None  # Labels for exports. None = 'Asset 1'..'Asset N'

    # ============================================================================
    # Reporting
    # ============================================================================
    risk_free_rate: float = 0.0             # Used only for the Sharpe ratio column of exports

    # ============================================================================
    # Validation
    # ============================================================================

    def __post_init__(self):
        """Validate configuration parameters."""
        if self.num_assets < 1:
            raise ValueError(f"num_assets must be at least 1, got {self.num_assets}")

        if self.num_simulations < 0:
            raise ValueError(f"num_simulations cannot be negative, got {self.num_simulations}")

        if self.transaction_cost_rate < 0:
            raise ValueError(f"transaction_cost_rate cannot be negative, got {self.transaction_cost_rate}")

        if not (0 <= self.min_assets <= self.max_assets <= self.num_assets):
            raise ValueError(
                f"Asset bounds must satisfy 0 <= min_assets <= max_assets <= num_assets, "
                f"got min_assets={self.min_assets}, max_assets={self.max_assets}, num_assets={self.num_assets}"
            )

        if not (0 <= self.active_weight_threshold < 1):
            raise ValueError(f"active_weight_threshold must be in [0, 1), got {self.active_weight_threshold}")

        # Market model dimensions
        if len(self.expected_returns) != self.num_assets:
            raise ShapeMismatchError(
                f"expected_returns has {len(self.expected_returns)} entries, num_assets is {self.num_assets}"
            )

        cov = np.asarray(self.covariance_matrix, dtype=float)
        if cov.ndim != 2 or cov.shape[0] != cov.shape[1]:
            raise InvalidCovarianceError(f"covariance_matrix must be square, got shape {cov.shape}")
        if cov.shape[0] != self.num_assets:
            raise ShapeMismatchError(
                f"covariance_matrix is {cov.shape[0]}x{cov.shape[1]}, num_assets is {self.num_assets}"
            )
        if not np.allclose(cov, cov.T):
            raise InvalidCovarianceError("covariance_matrix must be symmetric")

        if self.asset_names is not None and len(self.asset_names) != self.num_assets:
            raise ShapeMismatchError(
                f"asset_names has {len(self.asset_names)} entries, num_assets is {self.num_assets}"
            )

    # ============================================================================
    # Serialization
    # ============================================================================

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'SimulationConfig':
        """Create SimulationConfig from dictionary."""
        return cls(**config_dict)

    @classmethod
    def from_json(cls, filepath: str) -> 'SimulationConfig':
        """Load SimulationConfig from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        # Remove comment keys (convention: keys starting with '_')
        config_dict = {k: v for k, v in config_dict.items() if not k.startswith('_')}
        return cls.from_dict(config_dict)

    def to_json(self, filepath: str, indent: int = 2) -> None:
        """Save SimulationConfig to JSON file."""
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=indent)

    # ============================================================================
    # Utility Methods
    # ============================================================================

    def market_model(self) -> MarketModel:
        """Build the immutable market model for this run."""
        return MarketModel(
            expected_returns=np.asarray(self.expected_returns, dtype=float),
            covariance_matrix=np.asarray(self.covariance_matrix, dtype=float)
        )

    def get_asset_names(self) -> List[str]:
        """Asset labels, generated as 'Asset 1'..'Asset N' when not configured."""
        if self.asset_names is not None:
            return list(self.asset_names)
        return [f'Asset {i + 1}' for i in range(self.num_assets)]


# ============================================================================
# Default Configuration
# ============================================================================

DEFAULT_SIMULATION_CONFIG = SimulationConfig()


# ============================================================================
# Convenience Functions
# ============================================================================

def load_simulation_config(filepath: str = None) -> SimulationConfig:
    """
    Load simulation configuration from file or return default.

    Parameters:
    -----------
    filepath : str, optional
        Path to JSON config file. If None, returns default config.

    Returns:
    --------
    SimulationConfig instance
    """
    if filepath is None:
        return DEFAULT_SIMULATION_CONFIG
    return SimulationConfig.from_json(filepath)
