# Allocation metrics package
"""
Allocation and frontier metrics.

Modules:
- allocation: active asset count, HHI concentration, Sharpe ratio, front summary
"""

from .allocation import (
    DEFAULT_ACTIVE_THRESHOLD,
    active_asset_count,
    herfindahl_index,
    sharpe_ratio,
    summarize_front,
)

__all__ = [
    'DEFAULT_ACTIVE_THRESHOLD',
    'active_asset_count',
    'herfindahl_index',
    'sharpe_ratio',
    'summarize_front',
]
