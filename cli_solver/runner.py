"""
Runner for executing puzzle solvers across selected days.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Callable

from aoc_core.config import RunConfig, PuzzleDay
from aoc_core.engine import PuzzleEngine
from aoc_core.exceptions import AocSolverError
from aoc_core.results import DayResult, RunResults

logger = logging.getLogger(__name__)


@dataclass
class DayRunResult:
    """Result for a single day."""
    day: PuzzleDay
    result: Optional[DayResult]
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None or self.result is None


def run_all_days(
    config: RunConfig,
    show_progress: bool = True,
    progress_callback: Optional[Callable[[str, int, int], None]] = None,
) -> Dict[PuzzleDay, DayRunResult]:
    """
    Run the solvers for every configured day.

    A day that fails is recorded with its error message. With
    config.fail_fast set, the remaining days are not run.

    Args:
        config: Run configuration
        show_progress: Whether to print each day's answers as it finishes
        progress_callback: Optional callback for progress updates

    Returns:
        Dictionary mapping PuzzleDay to DayRunResult, in run order
    """
    engine = PuzzleEngine(config)
    n_days = config.n_days
    results: Dict[PuzzleDay, DayRunResult] = {}

    for i, day in enumerate(config.days, 1):
        if show_progress:
            print(f"\n[{i}/{n_days}] {day.label}", flush=True)

        if progress_callback:
            progress_callback(day.name, i, n_days)

        try:
            day_result = engine.solve_day(day)
        except (AocSolverError, OSError) as e:
            error_msg = str(e)
            logger.error(f"{day.label} failed: {error_msg}")
            if show_progress:
                print(f"  error: {error_msg}")
            results[day] = DayRunResult(day=day, result=None, error=error_msg)
            if config.fail_fast:
                break
            continue

        if show_progress:
            print(f"  Part 1: {day_result.format_answer(1)}")
            print(f"  Part 2: {day_result.format_answer(2)}")

        results[day] = DayRunResult(day=day, result=day_result)

    return results


def has_failures(results: Dict[PuzzleDay, DayRunResult]) -> bool:
    """Whether any day failed."""
    return any(r.failed for r in results.values())


def collect_run_results(
    results: Dict[PuzzleDay, DayRunResult],
    config: RunConfig
) -> RunResults:
    """
    Gather the successful days into a RunResults.

    Args:
        results: Dictionary of day results
        config: Run configuration

    Returns:
        RunResults holding only days that produced answers
    """
    days: List[DayResult] = [
        r.result for r in results.values() if not r.failed
    ]
    return RunResults(days=days, config_summary=config.to_dict())
