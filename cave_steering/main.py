#!/usr/bin/env python3
"""
Cave Steering Simulation

Generates a cellular-automaton cave and lets brain-steered agents
learn their way from the start cell to a target.

Usage:
    python -m cave_steering.main --config configs/default.yaml [options]

Examples:
    cave-steering --config configs/default.yaml
    cave-steering --config configs/default.yaml --width 80 --height 60
    cave-steering --config configs/default.yaml --no-csv --quiet
    cave-steering --config configs/default.yaml --seed 42
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .config import load_config
from .errors import CaveGenerationError, InvalidParameterError
from .model.engine import SimulationEngine
from .export.csv_writer import CSVWriter
from .export.grid_writer import save_grid
from .export.reporter import Reporter


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Cave Steering Simulation',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    cave-steering --config configs/default.yaml
    cave-steering --config configs/default.yaml --width 80 --height 60
    cave-steering --config configs/default.yaml --no-csv --quiet
    cave-steering --config configs/default.yaml --seed 42
        """
    )

    # Required arguments
    parser.add_argument('--config', type=Path, required=True,
                        help='Path to YAML configuration file')

    # Optional overrides
    parser.add_argument('--steps', type=int, default=None,
                        help='Override max simulation steps')
    parser.add_argument('--width', type=int, default=None,
                        help='Override cave width')
    parser.add_argument('--height', type=int, default=None,
                        help='Override cave height')
    parser.add_argument('--out-dir', type=Path, default=Path('./output'),
                        help='Output directory for exports (default: ./output)')

    # Export toggles
    parser.add_argument('--csv', dest='csv', action='store_true', default=None,
                        help='Enable CSV export (default)')
    parser.add_argument('--no-csv', dest='csv', action='store_false',
                        help='Disable CSV export')

    parser.add_argument('--grid', dest='grid', action='store_true', default=None,
                        help='Enable cave grid export (default)')
    parser.add_argument('--no-grid', dest='grid', action='store_false',
                        help='Disable cave grid export')

    parser.add_argument('--quiet', action='store_true', default=False,
                        help='Suppress stdout output')

    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducibility')

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Load configuration
    try:
        config = load_config(args.config)
    except FileNotFoundError:
        print(f"Error: Configuration file not found: {args.config}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    # Apply CLI overrides
    if args.steps is not None:
        config.max_steps = args.steps
    if args.width is not None:
        config.cave.width = args.width
    if args.height is not None:
        config.cave.height = args.height
    if args.csv is not None:
        config.csv_enabled = args.csv
    if args.grid is not None:
        config.grid_enabled = args.grid
    config.quiet = args.quiet
    if args.seed is not None:
        config.seed = args.seed
    config.out_dir = args.out_dir

    if not config.quiet:
        print("Initializing simulation...")
        print(f"  Cave: {config.cave.width}x{config.cave.height} "
              f"(alive {config.cave.alive_chance}, "
              f"{config.cave.step_count} smoothing steps)")
        print(f"  Agents: {config.agents.count} "
              f"[{', '.join(config.agents.behaviours)}]")
        print(f"  Max steps: {config.max_steps}")

    try:
        engine = SimulationEngine(config)
    except (InvalidParameterError, CaveGenerationError) as e:
        print(f"Error generating cave: {e}", file=sys.stderr)
        return 1

    if not config.quiet:
        if engine.regenerations:
            print(f"  Regenerated cave {engine.regenerations} time(s)")
        print(f"  Start: {engine.cave.start}  Target: {engine.target}  "
              f"Hazard: {engine.hazard}")

    if config.grid_enabled:
        grid_path = config.out_dir / 'cave.txt'
        save_grid(engine.cave.grid, grid_path)
        if not config.quiet:
            print(f"Cave grid saved: {grid_path}")

    # Initialize exporters
    csv_writer = None
    if config.csv_enabled:
        csv_writer = CSVWriter(config.out_dir / 'simulation_log.csv')
        csv_writer.open()

    reporter = Reporter(str(args.config), config.seed)

    # Main simulation loop
    if not config.quiet:
        print("\nRunning simulation...")

    final_state = None
    try:
        while not engine.is_finished():
            state = engine.step()
            final_state = state

            if csv_writer:
                csv_writer.append(state)

            reporter.update(state)

            # Progress indicator
            if not config.quiet and state.step % 100 == 0:
                active = state.metrics.get('active_agents', 0)
                arrived = int(state.metrics.get('arrived', 0))
                print(f"  Step {state.step}: {active} active, {arrived} arrived")

    except KeyboardInterrupt:
        if not config.quiet:
            print("\nSimulation interrupted by user.")

    # Cleanup and final exports
    if csv_writer:
        csv_writer.close()
        if not config.quiet:
            print(f"\nCSV saved: {config.out_dir / 'simulation_log.csv'}")

    # Print summary report
    if not config.quiet and final_state:
        report = reporter.generate_summary(
            final_state,
            engine.cave.grid,
            engine.cave.start,
            config.out_dir,
            config.csv_enabled,
            config.grid_enabled
        )
        print(report)

    return 0


if __name__ == '__main__':
    sys.exit(main())
