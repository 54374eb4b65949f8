"""
Main entry point for CLI Solver.

Usage:
    python -m cli_solver [options]

Example:
    python -m cli_solver --days 1,2,14 --input-dir input
"""

import argparse
import logging
import sys
from typing import List, Optional

from aoc_core.logging_config import setup_logging
from .config_builder import build_run_config, format_config_summary
from .runner import run_all_days, has_failures
from .reporter import print_full_report, export_to_csv, export_detailed_csv

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="cli_solver",
        description="Advent of Code 2022 puzzle solvers - print both answers for each day",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m cli_solver
  python -m cli_solver --days 14
  python -m cli_solver --days 1-6,9 --input-dir ~/aoc/input
  python -m cli_solver --keep-going --output answers.csv
        """
    )

    # Basic arguments
    parser.add_argument(
        "-d", "--days",
        type=str,
        default=None,
        help="Days to solve, comma-separated, ranges allowed (default: all implemented days)"
    )
    parser.add_argument(
        "-i", "--input-dir",
        type=str,
        default="input",
        help="Directory holding the dayN input files (default: input)"
    )
    parser.add_argument(
        "--suffix",
        type=str,
        default=".dat",
        help="Input file suffix (default: .dat)"
    )
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output CSV file path"
    )
    parser.add_argument(
        "-k", "--keep-going",
        action="store_true",
        help="Continue with the remaining days after a failure"
    )

    # Output control
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show debug logging"
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Also write logs to this file"
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Only print the final report"
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    setup_logging(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        log_file=args.log_file,
    )

    try:
        # Build run configuration
        config = build_run_config(args)

        # Print configuration
        print("\n" + "=" * 80)
        print("Advent of Code 2022 CLI Solver")
        print("=" * 80)
        print("\nConfiguration:")
        print(format_config_summary(config))
        print("=" * 80)

        # Run all days
        results = run_all_days(
            config=config,
            show_progress=not args.no_progress,
        )

        # Print results
        print("\n")
        print_full_report(results, config)

        # Export to CSV if requested
        if args.output:
            export_to_csv(results, args.output)
            export_detailed_csv(results, config, args.output)

        return 1 if has_failures(results) else 0

    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n\nInterrupted by user.", file=sys.stderr)
        return 130
    except OSError as e:
        logger.exception("Unable to write output")
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
