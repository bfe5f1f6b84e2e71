#!/usr/bin/env python3
"""
Unit tests for ParetoFront and build_pareto_front.
"""

import numpy as np
import pytest

from portfolio_frontier.engine import (
    ParetoFront,
    Portfolio,
    build_pareto_front,
    frontier_key,
)
from conftest import make_portfolio


def random_population(seed: int, size: int = 60):
    """Synthetic population with random (return, volatility) points."""
    rng = np.random.default_rng(seed)
    return [make_portfolio(r, v) for r, v in rng.uniform(0.0, 0.3, size=(size, 2))]


def test_empty_population_gives_empty_front():
    front = build_pareto_front([])
    assert len(front) == 0
    assert front.to_list() == []


def test_two_asset_scenario_keeps_all_three(two_asset_market):
    """Test the two extremes and the 50/50 mix all stay on the front"""
    returns, cov = two_asset_market
    population = []
    for allocations in ([1.0, 0.0], [0.0, 1.0], [0.5, 0.5]):
        p = Portfolio.from_allocations(allocations)
        p.evaluate(returns, cov, 0.0)
        population.append(p)

    front = build_pareto_front(population)

    assert len(front) == 3
    assert [round(p.net_return, 10) for p in front] == [0.10, 0.15, 0.20]


def test_dominated_candidate_is_rejected():
    front = ParetoFront([make_portfolio(0.20, 0.10)])
    assert not front.add(make_portfolio(0.15, 0.12))
    assert len(front) == 1


def test_candidate_evicts_dominated_members():
    a = make_portfolio(0.10, 0.20)
    b = make_portfolio(0.12, 0.25)
    winner = make_portfolio(0.15, 0.10)
    front = ParetoFront([a, b])
    assert len(front) == 2

    assert front.add(winner)
    assert front.to_list() == [winner]


def test_candidate_evicts_only_what_it_dominates():
    keep = make_portfolio(0.30, 0.40)
    evict = make_portfolio(0.10, 0.20)
    newcomer = make_portfolio(0.12, 0.15)
    front = ParetoFront([keep, evict])

    front.add(newcomer)
    assert front.to_list() == [newcomer, keep]


def test_identical_keys_collapse_to_first_seen():
    """Test two non-dominated portfolios with the same key are stored once"""
    first = make_portfolio(0.10, 0.10)
    second = make_portfolio(0.10, 0.10)
    front = build_pareto_front([first, second])

    assert len(front) == 1
    assert first in front
    assert second not in front


def test_iteration_is_ascending_return_then_volatility():
    population = [make_portfolio(0.30, 0.30), make_portfolio(0.10, 0.05), make_portfolio(0.20, 0.15)]
    front = build_pareto_front(population)
    keys = [frontier_key(p) for p in front]
    assert keys == sorted(keys)


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_front_is_mutually_non_dominated(seed):
    front = build_pareto_front(random_population(seed)).to_list()
    for p in front:
        for q in front:
            assert not p.dominates(q)


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_front_matches_brute_force(seed):
    """Test the incremental front equals the O(n^2) non-dominated set"""
    population = random_population(seed)
    front = build_pareto_front(population)

    brute_force = [p for p in population if not any(q.dominates(p) for q in population)]
    assert sorted(map(frontier_key, front)) == sorted(map(frontier_key, brute_force))

    for p in population:
        if p not in front:
            assert front.dominates(p)


def test_front_completeness_with_duplicates():
    """Test every excluded member is dominated or shares a key with a member"""
    population = random_population(9, size=30)
    population += [make_portfolio(p.net_return, p.volatility) for p in population[:10]]
    front = build_pareto_front(population)
    front_keys = {frontier_key(p) for p in front}

    for p in population:
        if p not in front:
            assert front.dominates(p) or frontier_key(p) in front_keys


@pytest.mark.parametrize("seed", [5, 6, 7])
def test_front_is_a_fixed_point(seed):
    front = build_pareto_front(random_population(seed))
    rebuilt = build_pareto_front(front)
    assert rebuilt.to_list() == front.to_list()


def test_front_independent_of_population_order():
    population = random_population(11)
    forward = build_pareto_front(population)
    backward = build_pareto_front(reversed(population))
    assert [frontier_key(p) for p in forward] == [frontier_key(p) for p in backward]
