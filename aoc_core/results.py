"""
Result data structures for AoC Puzzle Solver

日別の解答と実行結果の集約
"""

from dataclasses import dataclass
from typing import List, Dict, Any
import pandas as pd

Answer = int | str | None


@dataclass
class DayResult:
    """単一日の解答"""

    day: int                          # カレンダー上の日付
    title: str                        # パズルタイトル
    part_one: Answer                  # Part 1の解答
    part_two: Answer                  # Part 2の解答
    runtime_ms: float | None = None   # 処理時間（ミリ秒）
    input_path: str | None = None     # 入力ファイル（文字列入力の場合None）

    def answer(self, part: int) -> Answer:
        """Part番号（1 or 2）の解答を取得"""
        if part == 1:
            return self.part_one
        if part == 2:
            return self.part_two
        raise ValueError(f"part must be 1 or 2: {part}")

    def format_answer(self, part: int) -> str:
        """
        解答を表示用文字列に変換

        複数行の解答（CRT画像など）は改行から始めて別行に表示する。
        """
        value = self.answer(part)
        if value is None:
            return "(no answer)"
        text = str(value)
        if "\n" in text:
            return "\n" + text
        return text

    def to_dict(self) -> Dict[str, Any]:
        """辞書形式に変換"""
        return {
            "day": self.day,
            "title": self.title,
            "part_one": self.part_one,
            "part_two": self.part_two,
            "runtime_ms": self.runtime_ms,
            "input_path": self.input_path,
        }


@dataclass
class RunResults:
    """全日の結果を集約"""

    days: List[DayResult]
    config_summary: Dict[str, Any]

    @property
    def n_days(self) -> int:
        """解答した日数"""
        return len(self.days)

    @property
    def total_runtime_ms(self) -> float:
        """合計処理時間（ミリ秒）"""
        return sum(d.runtime_ms or 0.0 for d in self.days)

    def to_dataframe(self) -> pd.DataFrame:
        """
        結果をDataFrameに変換

        Returns:
            日別結果のDataFrame
        """
        records = [d.to_dict() for d in self.days]
        return pd.DataFrame(records, columns=list(DayResult.__dataclass_fields__))

    def to_csv(self, path: str, index: bool = False) -> None:
        """
        結果をCSVに出力

        Args:
            path: 出力ファイルパス
            index: インデックスを出力するか
        """
        self.to_dataframe().to_csv(path, index=index)

    def get_summary_text(self) -> str:
        """
        結果のサマリテキストを生成

        Returns:
            人間可読なサマリ文字列
        """
        lines = [
            "=== Puzzle Answers ===",
            f"Days: {self.n_days}",
            f"Input directory: {self.config_summary.get('input_dir', 'N/A')}",
            "",
        ]
        for d in self.days:
            lines.append(f"Day {d.day}: {d.title}")
            lines.append(f"  Part 1: {d.format_answer(1)}")
            lines.append(f"  Part 2: {d.format_answer(2)}")
        lines.append("")
        lines.append(f"Total runtime: {self.total_runtime_ms:.1f} ms")

        return "\n".join(lines)
