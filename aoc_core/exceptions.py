"""
Exception classes for AoC Puzzle Solver
"""

from pathlib import Path
from typing import Optional


class AocSolverError(Exception):
    """ソルバの基底例外クラス"""
    pass


class InputFormatError(AocSolverError):
    """入力テキストの書式エラー"""
    def __init__(
        self,
        message: str,
        line_no: Optional[int] = None,
        line: Optional[str] = None,
    ) -> None:
        self.line_no = line_no
        self.line = line
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)


class PuzzleInputNotFoundError(AocSolverError):
    """入力ファイルが存在しない"""
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Input file not found: {path}")


class SimulationError(AocSolverError):
    """入力は正しいがシミュレーションを継続できない"""
    pass


class SolverNotFoundError(AocSolverError):
    """指定した日付のソルバが登録されていない"""
    def __init__(self, day_number: int) -> None:
        self.day_number = day_number
        super().__init__(f"No solver registered for day {day_number}")
