#!/usr/bin/env python3
"""
Monte Carlo Pareto-front simulation - command line entry point.

With no arguments, runs the bundled 5-asset example (10,000 simulations,
fresh random seed) and prints the Pareto front.

Usage:
    python -m portfolio_frontier
    python -m portfolio_frontier --seed 42 --csv results/front.csv --plot plots/front.png
    python -m portfolio_frontier --config configs/default_simulation.json --verbose
"""

import argparse
import dataclasses
import logging
import sys
from typing import List, Optional

from .config import load_simulation_config
from .engine.exceptions import PortfolioFrontierError
from .metrics.allocation import summarize_front
from .montecarlo.simulation import PortfolioSimulation
from .reporting.frontier_report import print_front_report, save_front_csv
from .visualization.frontier_plot import plot_frontier


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Monte Carlo portfolio simulation with Pareto-front extraction'
    )
    parser.add_argument('--config', dest='config_file',
                        help='JSON configuration file (default: built-in example dataset)')
    parser.add_argument('--seed', type=int,
                        help='Random seed for a reproducible run')
    parser.add_argument('--simulations', dest='num_simulations', type=int,
                        help='Override the number of simulated portfolios')
    parser.add_argument('--csv', dest='csv_path',
                        help='Also write the Pareto front to this CSV file')
    parser.add_argument('--plot', dest='plot_path',
                        help='Also save a frontier plot to this PNG file')
    parser.add_argument('--verbose', action='store_true',
                        help='Enable debug logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    args = build_parser().parse_args(argv)

    # Logs go to stderr so the report on stdout stays clean
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)]
    )

    try:
        config = load_simulation_config(args.config_file)

        overrides = {}
        if args.seed is not None:
            overrides['seed'] = args.seed
        if args.num_simulations is not None:
            overrides['num_simulations'] = args.num_simulations
        if overrides:
            config = dataclasses.replace(config, **overrides)

        simulation = PortfolioSimulation.from_config(config)
        result = simulation.run()

        # Exports finish before anything reaches stdout
        if args.csv_path:
            save_front_csv(result.front, args.csv_path,
                           asset_names=config.get_asset_names(),
                           risk_free_rate=config.risk_free_rate)

        if args.plot_path:
            plot_frontier(result.population, result.front,
                          market=simulation.market,
                          asset_names=config.get_asset_names(),
                          save_path=args.plot_path)
    except (PortfolioFrontierError, ValueError, TypeError, OSError) as e:
        logging.error(f"Simulation aborted: {e}")
        return 1

    print_front_report(result.front)

    summary = summarize_front(result.front, population_size=len(result.population))
    logging.info(f"Front summary: {summary}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
