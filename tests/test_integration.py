"""
Integration tests for AoC Puzzle Solver
"""

import logging
from pathlib import Path
from typing import List, Tuple

import pandas as pd
import pytest

from aoc_core.config import PuzzleDay, RunConfig
from aoc_core.engine import PuzzleEngine
from aoc_core.exceptions import InputFormatError, PuzzleInputNotFoundError
from aoc_core.logging_config import LOGGER_NAMESPACES, setup_logging
from aoc_core.reader import read_input, read_input_lines
from aoc_core.results import DayResult, RunResults
from aoc_core.solvers import get_solver_class

CRT_EXAMPLE_SCREEN = "\n".join([
    "##..##..##..##..##..##..##..##..##..##..",
    "###...###...###...###...###...###...###.",
    "####....####....####....####....####....",
    "#####.....#####.....#####.....#####.....",
    "######......######......######......####",
    "#######.......#######.......#######.....",
])

EXAMPLE_ANSWERS = [
    (PuzzleDay.DAY1, 24000, 45000),
    (PuzzleDay.DAY2, 15, 12),
    (PuzzleDay.DAY3, 157, 70),
    (PuzzleDay.DAY4, 2, 4),
    (PuzzleDay.DAY5, "CMZ", "MCD"),
    (PuzzleDay.DAY6, 7, 19),
    (PuzzleDay.DAY8, 21, 8),
    (PuzzleDay.DAY9, 13, 1),
    (PuzzleDay.DAY10, 13140, CRT_EXAMPLE_SCREEN),
    (PuzzleDay.DAY14, 24, 93),
]


def write_example_inputs(input_dir: Path, days, suffix: str = ".dat") -> None:
    """例題入力を dayN<suffix> として書き出す"""
    for day in days:
        path = input_dir / f"day{day.number}{suffix}"
        path.write_text(get_solver_class(day).example, encoding="utf-8")


@pytest.fixture(autouse=True)
def reset_logging():
    """テストごとにパッケージロガーのハンドラを閉じる"""
    yield
    for namespace in LOGGER_NAMESPACES:
        logger = logging.getLogger(namespace)
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)


class TestIntegration:
    """統合テスト"""

    @pytest.mark.parametrize("day, part_one, part_two", EXAMPLE_ANSWERS)
    def test_example_answers(self, day: PuzzleDay, part_one, part_two) -> None:
        """全ての日で例題の解答が得られること"""
        result = PuzzleEngine.solve_text(day, get_solver_class(day).example)

        assert result.day == day.number
        assert result.title == day.value
        assert result.part_one == part_one
        assert result.part_two == part_two
        assert result.runtime_ms is not None and result.runtime_ms >= 0
        assert result.input_path is None

    def test_run_from_input_files(self, tmp_path: Path) -> None:
        """入力ファイルから全日を実行できること"""
        days = tuple(day for day, _, _ in EXAMPLE_ANSWERS)
        write_example_inputs(tmp_path, days)

        config = RunConfig(days=days, input_dir=tmp_path)
        results = PuzzleEngine(config).run()

        assert results.n_days == len(days)
        assert [d.day for d in results.days] == [day.number for day in days]
        assert results.days[0].input_path == str(tmp_path / "day1.dat")
        for (_, part_one, part_two), result in zip(EXAMPLE_ANSWERS, results.days):
            assert (result.part_one, result.part_two) == (part_one, part_two)

    def test_runs_in_given_order(self, tmp_path: Path) -> None:
        """指定した順に実行されること"""
        days = (PuzzleDay.DAY14, PuzzleDay.DAY2)
        write_example_inputs(tmp_path, days)

        results = PuzzleEngine(RunConfig(days=days, input_dir=tmp_path)).run()
        assert [d.day for d in results.days] == [14, 2]

    def test_progress_callback(self, tmp_path: Path) -> None:
        """進捗コールバックが日ごとと最後に呼ばれること"""
        days = (PuzzleDay.DAY1, PuzzleDay.DAY4)
        write_example_inputs(tmp_path, days)
        calls: List[Tuple[int, int]] = []

        engine = PuzzleEngine(
            RunConfig(days=days, input_dir=tmp_path),
            progress_callback=lambda current, total: calls.append((current, total)),
        )
        engine.run()

        assert calls == [(0, 2), (1, 2), (2, 2)]

    def test_missing_input_file(self, tmp_path: Path) -> None:
        """入力ファイルがなければエラー"""
        config = RunConfig(days=(PuzzleDay.DAY3,), input_dir=tmp_path)
        with pytest.raises(PuzzleInputNotFoundError, match="day3.dat"):
            PuzzleEngine(config).run()

    def test_solve_logs_progress(self, caplog: pytest.LogCaptureFixture) -> None:
        """解答時にINFOログが出ること"""
        with caplog.at_level(logging.INFO, logger="aoc_core"):
            PuzzleEngine.solve_text(PuzzleDay.DAY4, get_solver_class(PuzzleDay.DAY4).example)
        assert "Day 4: Camp Cleanup solved in" in caplog.text


class TestReader:
    """入力読み込みのテスト"""

    def test_read_input(self, tmp_path: Path) -> None:
        """ファイル全体の読み込み"""
        path = tmp_path / "day1.dat"
        path.write_text("1\n\n2\n", encoding="utf-8")
        assert read_input(path) == "1\n\n2\n"
        assert read_input(str(path)) == "1\n\n2\n"

    def test_read_input_lines_keeps_blank_lines(self, tmp_path: Path) -> None:
        """空行を保持した行単位の読み込み"""
        path = tmp_path / "day1.dat"
        path.write_text("1\n\n2\n", encoding="utf-8")
        assert read_input_lines(path) == ["1", "", "2"]

    def test_missing_file(self, tmp_path: Path) -> None:
        """存在しないファイルでエラー"""
        with pytest.raises(PuzzleInputNotFoundError) as exc:
            read_input(tmp_path / "missing.dat")
        assert exc.value.path == tmp_path / "missing.dat"

    def test_undecodable_file(self, tmp_path: Path) -> None:
        """UTF-8でないファイルは書式エラー"""
        path = tmp_path / "day1.dat"
        path.write_bytes(b"\xff\xfe100\n")
        with pytest.raises(InputFormatError, match="not valid UTF-8"):
            read_input(path)

    def test_directory_is_not_input(self, tmp_path: Path) -> None:
        """ディレクトリは入力ファイルとして扱わない"""
        with pytest.raises(PuzzleInputNotFoundError):
            read_input(tmp_path)


class TestResults:
    """結果データ構造のテスト"""

    @pytest.fixture
    def results(self) -> RunResults:
        days = [
            DayResult(1, "Calorie Counting", 24000, 45000, runtime_ms=1.5),
            DayResult(10, "Cathode-Ray Tube", 13140, CRT_EXAMPLE_SCREEN, runtime_ms=0.5),
            DayResult(6, "Tuning Trouble", None, None),
        ]
        return RunResults(days=days, config_summary={"input_dir": "input"})

    def test_answer_part(self, results: RunResults) -> None:
        """Part番号での解答取得"""
        assert results.days[0].answer(1) == 24000
        assert results.days[0].answer(2) == 45000
        with pytest.raises(ValueError, match="part must be 1 or 2"):
            results.days[0].answer(3)

    def test_format_answer(self, results: RunResults) -> None:
        """表示用の解答文字列"""
        assert results.days[0].format_answer(1) == "24000"
        assert results.days[1].format_answer(2) == "\n" + CRT_EXAMPLE_SCREEN
        assert results.days[2].format_answer(1) == "(no answer)"

    def test_total_runtime(self, results: RunResults) -> None:
        """処理時間の合計（未計測は0扱い）"""
        assert results.n_days == 3
        assert results.total_runtime_ms == pytest.approx(2.0)

    def test_to_dataframe(self, results: RunResults) -> None:
        """DataFrame変換"""
        df = results.to_dataframe()
        assert len(df) == 3
        assert list(df.columns) == [
            "day", "title", "part_one", "part_two", "runtime_ms", "input_path"
        ]
        assert list(df["day"]) == [1, 10, 6]

    def test_empty_dataframe_has_columns(self) -> None:
        """結果が空でも列を持つ"""
        df = RunResults(days=[], config_summary={}).to_dataframe()
        assert df.empty
        assert "part_one" in df.columns

    def test_to_csv(self, results: RunResults, tmp_path: Path) -> None:
        """CSV出力"""
        path = tmp_path / "answers.csv"
        results.to_csv(str(path))
        df = pd.read_csv(path)
        assert list(df["title"]) == ["Calorie Counting", "Cathode-Ray Tube", "Tuning Trouble"]

    def test_summary_text(self, results: RunResults) -> None:
        """サマリテキスト"""
        text = results.get_summary_text()
        assert text.startswith("=== Puzzle Answers ===")
        assert "Day 1: Calorie Counting" in text
        assert "  Part 2: 45000" in text
        assert "(no answer)" in text
        assert "Total runtime: 2.0 ms" in text


class TestLogging:
    """ロギング設定のテスト"""

    def test_setup_is_idempotent(self) -> None:
        """繰り返し設定してもハンドラが重複しない"""
        setup_logging()
        setup_logging()
        for namespace in LOGGER_NAMESPACES:
            assert len(logging.getLogger(namespace).handlers) == 1

    def test_log_file(self, tmp_path: Path) -> None:
        """ログファイルへの出力"""
        log_file = tmp_path / "solver.log"
        setup_logging(level=logging.DEBUG, log_file=str(log_file))

        logging.getLogger("aoc_core.test").debug("hello from the solver")
        for handler in logging.getLogger("aoc_core").handlers:
            handler.flush()

        assert "hello from the solver" in log_file.read_text(encoding="utf-8")
        assert logging.getLogger("aoc_core").level == logging.DEBUG

    def test_log_file_handler_is_shared(self, tmp_path: Path) -> None:
        """全ての名前空間が1つのファイルハンドラを共有すること"""
        log_file = tmp_path / "solver.log"
        setup_logging(log_file=str(log_file))

        file_handlers = [
            handler
            for namespace in LOGGER_NAMESPACES
            for handler in logging.getLogger(namespace).handlers
            if isinstance(handler, logging.FileHandler)
        ]
        assert len(file_handlers) == len(LOGGER_NAMESPACES)
        assert len({id(handler) for handler in file_handlers}) == 1

        logging.getLogger("aoc_core.engine").info("core message")
        logging.getLogger("cli_solver.runner").info("cli message")
        file_handlers[0].flush()

        lines = log_file.read_text(encoding="utf-8").splitlines()
        assert [line.split(" - ", 1)[1] for line in lines] == [
            "aoc_core.engine - INFO - core message",
            "cli_solver.runner - INFO - cli message",
        ]
