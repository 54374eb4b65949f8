"""
Configuration builder for CLI Solver.

Converts command-line arguments to RunConfig.
"""

from argparse import Namespace
from pathlib import Path
from typing import List, Tuple

from aoc_core.config import RunConfig, PuzzleDay
from aoc_core.solvers import list_solvers


def parse_days(days_str: str) -> Tuple[PuzzleDay, ...]:
    """
    Parse days string like "1,2,14" or "1-6" into PuzzleDay tuple.

    Args:
        days_str: Comma-separated day numbers, ranges allowed (e.g., "1-4,8")

    Returns:
        Tuple of PuzzleDay members in the given order

    Raises:
        ValueError: If a token is not a number or a day is not implemented
    """
    numbers: List[int] = []
    for token in days_str.split(","):
        token = token.strip()
        if not token:
            continue
        if "-" in token:
            low, high = (int(x) for x in token.split("-", 1))
            if low > high:
                raise ValueError(f"Invalid day range: {token}")
            # Ranges skip days that have no solver
            implemented = {d.number for d in PuzzleDay}
            numbers.extend(n for n in range(low, high + 1) if n in implemented)
        else:
            numbers.append(int(token))

    if not numbers:
        raise ValueError(f"No days selected: {days_str!r}")

    return tuple(PuzzleDay.from_number(n) for n in numbers)


def get_all_days() -> Tuple[PuzzleDay, ...]:
    """
    Get all days that have a registered solver.

    Returns:
        Tuple of PuzzleDay members in calendar order
    """
    return tuple(list_solvers())


def build_run_config(args: Namespace) -> RunConfig:
    """
    Build a RunConfig from command-line arguments.

    Args:
        args: Parsed command-line arguments

    Returns:
        RunConfig with all parameters set
    """
    if args.days:
        days = parse_days(args.days)
    else:
        days = get_all_days()

    return RunConfig(
        days=days,
        input_dir=Path(args.input_dir),
        input_suffix=args.suffix,
        fail_fast=not args.keep_going,
    )


def format_config_summary(config: RunConfig) -> str:
    """
    Format configuration summary for display.

    Args:
        config: RunConfig to summarize

    Returns:
        Formatted string summary
    """
    day_desc = ", ".join(str(d.number) for d in config.days)

    lines = [
        f"  Days: {day_desc} ({config.n_days} total)",
        f"  Input: {config.input_dir}/dayN{config.input_suffix}",
        f"  On error: {'stop' if config.fail_fast else 'keep going'}",
    ]

    return "\n".join(lines)
