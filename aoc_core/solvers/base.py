"""
Base class for Solvers in AoC Puzzle Solver

日別ソルバの抽象基底クラス
"""

from abc import ABC, abstractmethod
from typing import Any, List, Tuple

from ..config import PuzzleDay
from ..results import Answer


class BaseSolver(ABC):
    """
    ソルバ抽象基底クラス

    全ての日別ソルバはこのクラスを継承して実装する。
    parse()で入力を一度だけ解析し、part_one()/part_two()は
    同じ解析結果から異なるルールで解答を計算する。
    """

    # サブクラスで定義必須
    day: PuzzleDay
    # パズル文中の例題入力
    example: str = ""

    @abstractmethod
    def parse(self, text: str) -> Any:
        """
        入力テキストを解析

        Args:
            text: 入力テキスト全体

        Returns:
            日別の解析結果

        Raises:
            InputFormatError: 入力の書式が不正な場合
        """
        pass

    @abstractmethod
    def part_one(self, puzzle: Any) -> Answer:
        """Part 1の解答を計算"""
        pass

    @abstractmethod
    def part_two(self, puzzle: Any) -> Answer:
        """Part 2の解答を計算"""
        pass

    def solve(self, text: str) -> Tuple[Answer, Answer]:
        """
        入力を解析し両パートの解答を計算

        Note:
            状態を変更するシミュレーション（Day 5, Day 14）は
            各パートで解析結果から新しい状態を構築するため、
            パート間で状態は共有されない。
        """
        puzzle = self.parse(text)
        return self.part_one(puzzle), self.part_two(puzzle)

    @property
    def name(self) -> str:
        """表示名"""
        return self.day.label

    @staticmethod
    def _lines(text: str) -> List[str]:
        """
        テキストを行に分割

        途中の空行は保持し、末尾の空行は除去する。
        """
        return text.rstrip("\r\n").splitlines()
