"""
Day 3: Rucksack Reorganization

リュックサックの重複アイテムとグループのバッジの優先度
"""

import string
from dataclasses import dataclass
from typing import FrozenSet, List, Sequence

from .base import BaseSolver
from .registry import register_solver
from ..config import PuzzleDay
from ..exceptions import InputFormatError, SimulationError

GROUP_SIZE = 3


def item_priority(item: str) -> int:
    """
    アイテムの優先度（a-z: 1〜26, A-Z: 27〜52）

    Raises:
        InputFormatError: 英字以外のアイテム
    """
    if len(item) == 1:
        if item in string.ascii_lowercase:
            return ord(item) - ord("a") + 1
        if item in string.ascii_uppercase:
            return ord(item) - ord("A") + 27
    raise InputFormatError(f"rucksack contains unexpected item {item!r}")


@dataclass(frozen=True)
class Rucksack:
    """2つの区画を持つリュックサック"""
    first: str
    second: str

    @classmethod
    def parse(cls, line: str, line_no: int | None = None) -> "Rucksack":
        """
        1行を前半・後半の区画に分割

        Raises:
            InputFormatError: アイテム数が奇数、または英字以外を含む場合
        """
        if len(line) % 2 != 0:
            raise InputFormatError(
                "number of items in a rucksack must be even", line_no, line
            )
        for item in line:
            if item not in string.ascii_letters:
                raise InputFormatError(
                    f"rucksack contains unexpected item {item!r}", line_no, line
                )
        half = len(line) // 2
        return cls(line[:half], line[half:])

    @property
    def items(self) -> FrozenSet[str]:
        """両区画のアイテム集合"""
        return frozenset(self.first + self.second)

    def shared_item(self) -> str:
        """
        両区画に共通するアイテム

        Raises:
            SimulationError: 共通アイテムがない場合
        """
        for item in self.first:
            if item in self.second:
                return item
        raise SimulationError("rucksack compartments share no item")


def group_badge(group: Sequence[Rucksack]) -> str:
    """
    グループ（3人）全員が持つバッジアイテム

    Raises:
        InputFormatError: グループが3人でない場合
        SimulationError: 共通アイテムがない場合
    """
    if len(group) != GROUP_SIZE:
        raise InputFormatError(f"group is not formed by {GROUP_SIZE} elves")

    common = set(group[0].items)
    for rucksack in group[1:]:
        common &= rucksack.items
    if not common:
        raise SimulationError("badge not found")
    # 最初のリュックサックでの出現順で決める
    for item in group[0].first + group[0].second:
        if item in common:
            return item
    raise SimulationError("badge not found")


@register_solver(PuzzleDay.DAY3)
class RucksackSolver(BaseSolver):
    """
    Part 1: 各リュックサックの重複アイテムの優先度の合計
    Part 2: 3人グループごとのバッジの優先度の合計
    """

    example = (
        "vJrwpWtwJgWrhcsFMMfFFhFp\n"
        "jqHRNqRjqzjGDLGLrsFMfFZSrLrFZsSL\n"
        "PmmdzqPrVvPwwTWBwg\n"
        "wMqvLMZHhHMvwLHjbvcjnnSBnvTQFn\n"
        "ttgJtRGJQctTZtZT\n"
        "CrZsJsPPZsGzwwsLwLmpwMDw\n"
    )

    def parse(self, text: str) -> List[Rucksack]:
        return [
            Rucksack.parse(line, line_no)
            for line_no, line in enumerate(self._lines(text), 1)
        ]

    def part_one(self, rucksacks: List[Rucksack]) -> int:
        return sum(item_priority(r.shared_item()) for r in rucksacks)

    def part_two(self, rucksacks: List[Rucksack]) -> int:
        if len(rucksacks) % GROUP_SIZE != 0:
            raise InputFormatError(
                f"number of rucksacks ({len(rucksacks)}) is not a multiple of {GROUP_SIZE}"
            )
        return sum(
            item_priority(group_badge(rucksacks[i:i + GROUP_SIZE]))
            for i in range(0, len(rucksacks), GROUP_SIZE)
        )
