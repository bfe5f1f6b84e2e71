# Configuration package
"""
Configuration handling utilities.

Modules:
- simulation_config: SimulationConfig dataclass and JSON loading
"""

from .simulation_config import (
    SimulationConfig,
    DEFAULT_SIMULATION_CONFIG,
    load_simulation_config,
)

__all__ = [
    'SimulationConfig',
    'DEFAULT_SIMULATION_CONFIG',
    'load_simulation_config',
]
