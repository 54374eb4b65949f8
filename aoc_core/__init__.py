"""
AoC Puzzle Solver Core Package

Advent of Code 2022 の日別パズルソルバのコアモジュール
"""

from .config import PuzzleDay, RunConfig
from .reader import read_input, read_input_lines
from .results import DayResult, RunResults
from .engine import PuzzleEngine
from .exceptions import (
    AocSolverError,
    InputFormatError,
    PuzzleInputNotFoundError,
    SimulationError,
    SolverNotFoundError,
)

__version__ = "0.1.0"

__all__ = [
    # Config
    "PuzzleDay",
    "RunConfig",
    # Core
    "read_input",
    "read_input_lines",
    "DayResult",
    "RunResults",
    "PuzzleEngine",
    # Exceptions
    "AocSolverError",
    "InputFormatError",
    "PuzzleInputNotFoundError",
    "SimulationError",
    "SolverNotFoundError",
]
