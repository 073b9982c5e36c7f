#!/usr/bin/env python3
"""CLI entrypoint for the investment simulator.

Usage::

    python run_simulator.py
    python run_simulator.py --config config/default.yaml --seed 42

Without ``--config`` the built-in nine-stock market and a $3000.00 starting
balance are used. Log records go to stderr so they never interleave with the
menu on stdout.
"""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from models.config import SimulatorConfig
from simulation.menu import MenuSession
from simulation.simulator import InvestmentSimulator


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run the interactive investment simulator.",
    )
    parser.add_argument(
        "--config",
        default=None,
        type=str,
        help="Optional path to a YAML configuration file.",
    )
    parser.add_argument(
        "--seed",
        default=None,
        type=int,
        help="Seed for the price random walk (overrides the config seed).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING).",
    )
    return parser.parse_args(argv)


def _setup_logging(level: str) -> None:
    """Configure root logger with a clean format."""
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def load_config(path: str | None, seed: int | None = None) -> SimulatorConfig:
    """Load the config at *path* (or the defaults) and apply a seed override."""
    config = SimulatorConfig.from_yaml(path) if path is not None else SimulatorConfig()
    if seed is not None:
        config = config.model_copy(update={"seed": seed})
    return config


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    _setup_logging(args.log_level)

    logger = logging.getLogger(__name__)
    if args.config is not None:
        logger.info("Loading config from '%s'...", args.config)

    try:
        config = load_config(args.config, args.seed)
    except (OSError, ValueError, ValidationError) as exc:
        logger.error("Invalid configuration: %s", exc)
        return 1

    simulator = InvestmentSimulator(config)
    MenuSession(simulator).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
