#!/usr/bin/env python3
"""
SIR Meeple Simulation

Agent-based epidemic model: meeples wander an arena and pass an infection
on close contact.

Usage:
    epidemic-abm [--config configs/default.yaml] [options]

Examples:
    epidemic-abm
    epidemic-abm --config configs/default.yaml --seed 42
    epidemic-abm --config configs/default.yaml --steps 0
    epidemic-abm --steps 500 --quiet
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from epidemic_abm.config import ConfigError, SimulationConfig, load_config
from epidemic_abm.model.engine import SimulationEngine
from epidemic_abm.report.reporter import Reporter


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog='epidemic-abm',
        description='Agent-based SIR epidemic simulation',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    epidemic-abm
    epidemic-abm --config configs/default.yaml --seed 42
    epidemic-abm --config configs/default.yaml --steps 0
    epidemic-abm --steps 500 --quiet
        """
    )

    parser.add_argument('--config', type=Path, default=None,
                        help='Path to YAML configuration file (default: built-in values)')

    # Optional overrides
    parser.add_argument('--steps', type=int, default=None,
                        help='Override max simulation steps (0 runs until interrupted)')
    parser.add_argument('--dt', type=float, default=None,
                        help='Override simulated time per step')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducibility')

    parser.add_argument('--quiet', action='store_true', default=False,
                        help='Suppress stdout output')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level for diagnostics on stderr (default: WARNING)')

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    # Load configuration
    try:
        config = load_config(args.config) if args.config else SimulationConfig()
    except FileNotFoundError:
        print(f"Error: Configuration file not found: {args.config}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: Cannot read configuration file {args.config}: {e}", file=sys.stderr)
        return 1
    except ConfigError as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    # Apply CLI overrides
    if args.steps is not None:
        config.max_steps = None if args.steps == 0 else args.steps
    if args.dt is not None:
        config.dt = args.dt
    if args.seed is not None:
        config.seed = args.seed
    config.quiet = args.quiet

    try:
        config.validate()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # Initialize engine
    if not config.quiet:
        print("Initializing simulation...")
        print(f"  Arena: {config.arena.width}x{config.arena.height} "
              f"centered at {tuple(config.arena.center)}")
        print(f"  Population: {config.population}")
        print(f"  Max steps: {config.max_steps if config.max_steps is not None else 'unbounded'}")

    engine = SimulationEngine(config)

    if not config.quiet:
        print(f"  Initially infected: {engine.initial_infected}")

    reporter = Reporter(str(args.config) if args.config else None, config.seed)

    # Main simulation loop
    if not config.quiet:
        print("\nRunning simulation...")

    final_state = None
    try:
        while not engine.is_finished():
            state = engine.step()
            final_state = state

            reporter.update(state)

            # Progress indicator
            if not config.quiet and state.step % 100 == 0:
                counts = state.status_counts()
                print(f"  Step {state.step}: {counts['susceptible']} susceptible, "
                      f"{counts['infected']} infected")

    except KeyboardInterrupt:
        if not config.quiet:
            print("\nSimulation interrupted by user.")

    # Print summary report
    if not config.quiet and final_state:
        print(reporter.generate_summary(final_state, engine.get_summary()))

    return 0


if __name__ == '__main__':
    sys.exit(main())
