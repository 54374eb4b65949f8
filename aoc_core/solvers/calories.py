"""
Day 1: Calorie Counting

各エルフの所持カロリーを集計する
"""

from dataclasses import dataclass
from typing import List

from .base import BaseSolver
from .registry import register_solver
from ..config import PuzzleDay
from ..exceptions import InputFormatError


@dataclass(frozen=True)
class Elf:
    """エルフ（idxは1始まりの登場順）"""
    idx: int
    calories: int

    def __str__(self) -> str:
        return f"Elf #{self.idx} carries {self.calories} cals"


def elves_by_calories(lines: List[str]) -> List[Elf]:
    """
    入力行をエルフごとに集計し、カロリーの降順で返す

    Args:
        lines: 入力行（空行でエルフを区切る）

    Returns:
        カロリー降順のエルフのリスト（同値は登場順）

    Raises:
        InputFormatError: 数値でない行がある場合
    """
    elves: List[Elf] = []
    idx = 1
    calories = 0
    has_items = False

    for line_no, line in enumerate(lines, 1):
        line = line.strip()
        if not line:
            if has_items:
                elves.append(Elf(idx, calories))
                idx += 1
            calories = 0
            has_items = False
            continue

        try:
            calories += int(line)
        except ValueError:
            raise InputFormatError(
                f"calories must be an integer, got {line!r}", line_no, line
            ) from None
        has_items = True

    # 最後のエルフは末尾の空行がなくても数える
    if has_items:
        elves.append(Elf(idx, calories))

    return sorted(elves, key=lambda elf: elf.calories, reverse=True)


@register_solver(PuzzleDay.DAY1)
class CalorieCountingSolver(BaseSolver):
    """
    Part 1: 最もカロリーを持つエルフの合計カロリー
    Part 2: 上位3人の合計カロリー
    """

    example = (
        "1000\n2000\n3000\n\n4000\n\n5000\n6000\n\n7000\n8000\n9000\n\n10000\n"
    )

    def parse(self, text: str) -> List[Elf]:
        return elves_by_calories(self._lines(text))

    def part_one(self, elves: List[Elf]) -> int | None:
        if not elves:
            return None
        return elves[0].calories

    def part_two(self, elves: List[Elf]) -> int:
        return sum(elf.calories for elf in elves[:3])
