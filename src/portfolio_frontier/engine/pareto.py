#!/usr/bin/env python3
"""
Pareto front container.

Members are stored keyed by frontier_key (net return, volatility). The front is
kept mutually non-dominated: adding a candidate either rejects it (some member
dominates it) or drops every member it dominates and stores it. Survivors are
collected first and swapped in as a new mapping, so the stored members are never
mutated while being scanned.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Tuple

from .portfolio import Portfolio, frontier_key


class ParetoFront:
    """
    Mutually non-dominated set of portfolios, iterated by ascending return then volatility.

    Two portfolios with exactly the same (net_return, volatility) share one entry;
    the one added first is kept.
    """

    def __init__(self, portfolios: Iterable[Portfolio] = ()):
        self._members: Dict[Tuple[float, float], Portfolio] = {}
        for portfolio in portfolios:
            self.add(portfolio)

    def add(self, candidate: Portfolio) -> bool:
        """
        Offer a candidate to the front.

        Returns:
        --------
        bool: True if the candidate is now stored, False if it was dominated
              or its key was already present
        """
        survivors: Dict[Tuple[float, float], Portfolio] = {}
        for key, member in self._members.items():
            if member.dominates(candidate):
                return False
            if not candidate.dominates(member):
                survivors[key] = member

        key = frontier_key(candidate)
        stored = key not in survivors
        if stored:
            survivors[key] = candidate

        removed = len(self._members) - (len(survivors) - int(stored))
        if removed:
            logging.debug(f"ParetoFront: candidate {key} displaced {removed} member(s)")

        self._members = survivors
        return stored

    def dominates(self, portfolio: Portfolio) -> bool:
        """True if any member of the front dominates the given portfolio."""
        return any(member.dominates(portfolio) for member in self._members.values())

    def to_list(self) -> List[Portfolio]:
        """Members in front order (ascending return, then ascending volatility)."""
        return [self._members[key] for key in sorted(self._members)]

    def __iter__(self) -> Iterator[Portfolio]:
        return iter(self.to_list())

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, portfolio: object) -> bool:
        return any(member is portfolio for member in self._members.values())

    def __repr__(self) -> str:
        return f"ParetoFront({len(self)} members)"


def build_pareto_front(population: Iterable[Portfolio]) -> ParetoFront:
    """
    Fold a population into a Pareto front, one portfolio at a time, in input order.

    Parameters:
    -----------
    population : iterable of Portfolio
        Evaluated portfolios

    Returns:
    --------
    ParetoFront containing exactly the non-dominated portfolios of the population
    """
    front = ParetoFront()
    for portfolio in population:
        front.add(portfolio)
    return front
