"""
Reporter for displaying and exporting puzzle answers.
"""

import csv
from pathlib import Path
from typing import Dict, Optional

from aoc_core.config import RunConfig, PuzzleDay
from .runner import DayRunResult, collect_run_results


SEPARATOR = "=" * 80
THIN_SEPARATOR = "-" * 80


def print_header() -> None:
    """Print report header."""
    print(SEPARATOR)
    print("                    Advent of Code 2022 - Puzzle Answers")
    print(SEPARATOR)


def print_configuration(config: RunConfig) -> None:
    """Print configuration summary."""
    print("Configuration:")
    print(f"  Days: {', '.join(str(d.number) for d in config.days)}")
    print(f"  Input directory: {config.input_dir}")
    print(THIN_SEPARATOR)


def format_answer_cell(value: object, width: int = 16) -> str:
    """Format an answer for a table cell (multi-line answers are summarized)."""
    if value is None:
        return "-"
    text = str(value)
    if "\n" in text:
        return f"<{text.count(chr(10)) + 1} lines>"
    if len(text) > width:
        return text[:width - 3] + "..."
    return text


def format_table_row(
    day: int,
    title: str,
    part_one: object,
    part_two: object,
    runtime_ms: Optional[float],
    error: Optional[str] = None
) -> str:
    """Format a single table row."""
    if error:
        return f"{day:>3} | {title:<24} | {'ERROR':>16} | {error[:34]}"

    runtime = f"{runtime_ms:>9.1f}" if runtime_ms is not None else f"{'':>9}"
    return (
        f"{day:>3} | {title:<24} | {format_answer_cell(part_one):>16} | "
        f"{format_answer_cell(part_two):>16} | {runtime} |"
    )


def print_answers_table(results: Dict[PuzzleDay, DayRunResult]) -> None:
    """Print the answers table."""
    print("\nAnswers:")
    print(THIN_SEPARATOR)
    print(f"{'Day':>3} | {'Title':<24} | {'Part 1':>16} | {'Part 2':>16} | {'Time (ms)':>9} |")
    print(THIN_SEPARATOR)

    for day, dr in sorted(results.items(), key=lambda item: item[0].number):
        if dr.failed:
            row = format_table_row(day.number, day.value, None, None, None, dr.error or "Unknown error")
        else:
            r = dr.result
            row = format_table_row(r.day, r.title, r.part_one, r.part_two, r.runtime_ms)
        print(row)

    print(THIN_SEPARATOR)


def print_multiline_answers(results: Dict[PuzzleDay, DayRunResult]) -> None:
    """Print answers that do not fit in a table cell (e.g. the CRT image)."""
    for day, dr in sorted(results.items(), key=lambda item: item[0].number):
        if dr.failed:
            continue
        for part in (1, 2):
            value = dr.result.answer(part)
            if isinstance(value, str) and "\n" in value:
                print(f"\n{day.label} - Part {part}:")
                print(value)


def print_full_report(
    results: Dict[PuzzleDay, DayRunResult],
    config: RunConfig
) -> None:
    """Print the full answers report."""
    print_header()
    print_configuration(config)
    print_answers_table(results)
    print_multiline_answers(results)

    n_failed = sum(1 for r in results.values() if r.failed)
    n_skipped = config.n_days - len(results)
    print(f"\nSolved: {len(results) - n_failed}/{config.n_days}", end="")
    if n_failed:
        print(f", failed: {n_failed}", end="")
    if n_skipped:
        print(f", not run: {n_skipped}", end="")
    print()
    print(SEPARATOR)


def export_to_csv(
    results: Dict[PuzzleDay, DayRunResult],
    output_path: str
) -> None:
    """
    Export answers to CSV file.

    Args:
        results: Dictionary of day results
        output_path: Path to output CSV file
    """
    path = Path(output_path)

    with open(path, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)

        # Header
        writer.writerow(['day', 'title', 'part', 'answer', 'error'])

        # Data rows
        for day, dr in results.items():
            if dr.failed:
                writer.writerow([day.number, day.value, '', '', dr.error or 'Unknown error'])
                continue

            for part in (1, 2):
                value = dr.result.answer(part)
                writer.writerow([
                    day.number,
                    day.value,
                    part,
                    '' if value is None else value,
                    '',
                ])

    print(f"\nAnswers exported to: {path.absolute()}")


def export_detailed_csv(
    results: Dict[PuzzleDay, DayRunResult],
    config: RunConfig,
    output_path: str
) -> None:
    """
    Export one row per solved day (answers, runtime, input path) to CSV.

    Args:
        results: Dictionary of day results
        config: Run configuration
        output_path: Path of the summary CSV; "_detailed" is appended to its stem
    """
    path = Path(output_path)
    detailed_path = path.parent / f"{path.stem}_detailed{path.suffix}"

    collect_run_results(results, config).to_csv(str(detailed_path))

    print(f"Detailed results exported to: {detailed_path.absolute()}")
