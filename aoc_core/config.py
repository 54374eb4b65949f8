"""
Configuration classes for AoC Puzzle Solver

パズル日付の定義と実行設定
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Tuple


class PuzzleDay(Enum):
    """実装済みのパズル日付（値はパズルタイトル）"""
    DAY1 = "Calorie Counting"
    DAY2 = "Rock Paper Scissors"
    DAY3 = "Rucksack Reorganization"
    DAY4 = "Camp Cleanup"
    DAY5 = "Supply Stacks"
    DAY6 = "Tuning Trouble"
    DAY8 = "Treetop Tree House"
    DAY9 = "Rope Bridge"
    DAY10 = "Cathode-Ray Tube"
    DAY14 = "Regolith Reservoir"

    @property
    def number(self) -> int:
        """カレンダー上の日付"""
        return int(self.name[len("DAY"):])

    @property
    def label(self) -> str:
        """表示用ラベル（例: "Day 1: Calorie Counting"）"""
        return f"Day {self.number}: {self.value}"

    @classmethod
    def from_number(cls, number: int) -> "PuzzleDay":
        """
        日付番号からPuzzleDayを取得

        Args:
            number: カレンダー上の日付（1〜25）

        Returns:
            対応するPuzzleDay

        Raises:
            ValueError: 未実装の日付
        """
        for day in cls:
            if day.number == number:
                return day
        available = ", ".join(str(d.number) for d in cls)
        raise ValueError(
            f"Day {number} is not implemented. Available days: {available}"
        )


@dataclass(frozen=True)
class RunConfig:
    """実行設定（イミュータブル）"""

    days: Tuple[PuzzleDay, ...]              # 実行する日付（指定順に実行）
    input_dir: Path = Path("input")          # 入力ファイルのディレクトリ
    input_suffix: str = ".dat"               # 入力ファイルの拡張子
    fail_fast: bool = True                   # 最初のエラーで中断するか

    def __post_init__(self) -> None:
        """バリデーション"""
        if len(self.days) == 0:
            raise ValueError("実行する日付を1つ以上指定してください")

        if len(set(self.days)) != len(self.days):
            duplicated = sorted(
                {d.number for d in self.days if self.days.count(d) > 1}
            )
            raise ValueError(f"日付が重複しています: {duplicated}")

        if not self.input_suffix.startswith("."):
            raise ValueError(
                f"拡張子は'.'で始まる必要があります: {self.input_suffix!r}"
            )

    @property
    def n_days(self) -> int:
        """実行する日数"""
        return len(self.days)

    def input_path(self, day: PuzzleDay) -> Path:
        """
        日付に対応する入力ファイルのパス

        Args:
            day: パズル日付

        Returns:
            input_dir/dayN.dat 形式のパス
        """
        return Path(self.input_dir) / f"day{day.number}{self.input_suffix}"

    def to_dict(self) -> dict:
        """設定を辞書形式に変換"""
        return {
            "days": tuple(d.number for d in self.days),
            "n_days": self.n_days,
            "input_dir": str(self.input_dir),
            "input_suffix": self.input_suffix,
            "fail_fast": self.fail_fast,
        }
