"""
Day 4: Camp Cleanup

エルフ2人組の担当区画の包含・重複判定
"""

from dataclasses import dataclass
from typing import List

from .base import BaseSolver
from .registry import register_solver
from ..config import PuzzleDay
from ..exceptions import InputFormatError


@dataclass(frozen=True)
class SectionRange:
    """区画IDの範囲（両端を含む）"""
    start: int
    end: int

    @classmethod
    def parse(cls, text: str) -> "SectionRange":
        """
        "a-b" 形式（a <= b）を解析

        Raises:
            InputFormatError: 書式が不正、またはa > bの場合
        """
        bounds = text.split("-")
        if len(bounds) != 2:
            raise InputFormatError(f"invalid range format {text!r}")
        try:
            start, end = int(bounds[0]), int(bounds[1])
        except ValueError:
            raise InputFormatError(f"invalid range format {text!r}") from None
        if start > end:
            raise InputFormatError(
                "range of IDs for each elf must be expressed as `a-b`, "
                f"where a <= b, got {text!r}"
            )
        return cls(start, end)

    def contains(self, other: "SectionRange") -> bool:
        """otherを完全に含むか"""
        return self.start <= other.start and other.end <= self.end

    def overlaps(self, other: "SectionRange") -> bool:
        """otherと1区画以上重なるか"""
        return self.start <= other.end and other.start <= self.end


@dataclass(frozen=True)
class Pair:
    """エルフ2人組"""
    first: SectionRange
    second: SectionRange

    @classmethod
    def parse(cls, line: str, line_no: int | None = None) -> "Pair":
        """"a-b,c-d" 形式を解析"""
        left, sep, right = line.partition(",")
        if not sep:
            raise InputFormatError(
                "unable to find two elves in this group", line_no, line
            )
        try:
            return cls(SectionRange.parse(left.strip()), SectionRange.parse(right.strip()))
        except InputFormatError as e:
            raise InputFormatError(str(e), line_no, line) from None

    def fully_contained(self) -> bool:
        """どちらか一方がもう一方を完全に含むか"""
        return self.first.contains(self.second) or self.second.contains(self.first)

    def overlap(self) -> bool:
        """範囲が重なるか"""
        return self.first.overlaps(self.second)


@register_solver(PuzzleDay.DAY4)
class CampCleanupSolver(BaseSolver):
    """
    Part 1: 一方が他方を完全に含む組の数
    Part 2: 範囲が重なる組の数
    """

    example = "2-4,6-8\n2-3,4-5\n5-7,7-9\n2-8,3-7\n6-6,4-6\n2-6,4-8\n"

    def parse(self, text: str) -> List[Pair]:
        return [
            Pair.parse(line, line_no)
            for line_no, line in enumerate(self._lines(text), 1)
        ]

    def part_one(self, pairs: List[Pair]) -> int:
        return sum(1 for pair in pairs if pair.fully_contained())

    def part_two(self, pairs: List[Pair]) -> int:
        return sum(1 for pair in pairs if pair.overlap())
