"""
Puzzle engine for AoC Puzzle Solver

日別ソルバの実行エンジン
"""

import logging
import time
from typing import Callable, List

from .config import RunConfig, PuzzleDay
from .reader import read_input
from .results import DayResult, RunResults
from .solvers import get_solver

logger = logging.getLogger(__name__)


class PuzzleEngine:
    """パズル実行エンジン"""

    def __init__(
        self,
        config: RunConfig,
        progress_callback: Callable[[int, int], None] | None = None
    ) -> None:
        """
        Args:
            config: 実行設定
            progress_callback: 進捗コールバック (current, total) -> None
        """
        self.config = config
        self.progress_callback = progress_callback

    def run(self) -> RunResults:
        """
        設定された全ての日を順に実行

        Returns:
            実行結果

        Raises:
            AocSolverError: いずれかの日で入力・解析・シミュレーションに失敗した場合
        """
        days: List[DayResult] = []
        n_days = self.config.n_days

        for i, day in enumerate(self.config.days):
            if self.progress_callback:
                self.progress_callback(i, n_days)

            days.append(self.solve_day(day))

        if self.progress_callback:
            self.progress_callback(n_days, n_days)

        return RunResults(days=days, config_summary=self.config.to_dict())

    def solve_day(self, day: PuzzleDay) -> DayResult:
        """
        入力ファイルを読み込み1日分を解く

        Args:
            day: パズル日付

        Returns:
            解答
        """
        path = self.config.input_path(day)
        logger.info(f"Solving {day.label} from {path}")
        text = read_input(path)
        result = self.solve_text(day, text)
        result.input_path = str(path)
        return result

    @staticmethod
    def solve_text(day: PuzzleDay, text: str) -> DayResult:
        """
        入力テキストから1日分を解く

        Args:
            day: パズル日付
            text: 入力テキスト

        Returns:
            解答（input_pathはNone）
        """
        solver = get_solver(day)

        start_time = time.perf_counter()
        part_one, part_two = solver.solve(text)
        elapsed_ms = (time.perf_counter() - start_time) * 1000

        logger.info(f"{day.label} solved in {elapsed_ms:.1f} ms")
        logger.debug(f"{day.label} answers: part 1={part_one!r}, part 2={part_two!r}")

        return DayResult(
            day=day.number,
            title=day.value,
            part_one=part_one,
            part_two=part_two,
            runtime_ms=elapsed_ms,
        )
