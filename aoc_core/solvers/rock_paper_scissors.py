"""
Day 2: Rock Paper Scissors

攻略表に従った場合のじゃんけんの得点計算
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List

from .base import BaseSolver
from .registry import register_solver
from ..config import PuzzleDay
from ..exceptions import InputFormatError


class Shape(Enum):
    """手（値は手の得点）"""
    ROCK = 1
    PAPER = 2
    SCISSORS = 3

    @property
    def beats(self) -> "Shape":
        """この手が勝つ相手の手"""
        return _BEATS[self]

    @property
    def loses_to(self) -> "Shape":
        """この手が負ける相手の手"""
        return _LOSES_TO[self]

    @classmethod
    def for_outcome(cls, opponent: "Shape", outcome: "Outcome") -> "Shape":
        """相手の手に対して指定した結果になる自分の手"""
        if outcome is Outcome.DRAW:
            return opponent
        if outcome is Outcome.WIN:
            return opponent.loses_to
        return opponent.beats


_BEATS: Dict[Shape, Shape] = {
    Shape.ROCK: Shape.SCISSORS,
    Shape.PAPER: Shape.ROCK,
    Shape.SCISSORS: Shape.PAPER,
}
_LOSES_TO: Dict[Shape, Shape] = {loser: winner for winner, loser in _BEATS.items()}


class Outcome(Enum):
    """勝敗（値は結果の得点）"""
    WIN = 6
    DRAW = 3
    LOSE = 0

    @classmethod
    def of(cls, player: Shape, opponent: Shape) -> "Outcome":
        """自分の手と相手の手から勝敗を判定"""
        if player is opponent:
            return cls.DRAW
        if player.beats is opponent:
            return cls.WIN
        return cls.LOSE


OPPONENT_CODES: Dict[str, Shape] = {"A": Shape.ROCK, "B": Shape.PAPER, "C": Shape.SCISSORS}
PLAYER_CODES: Dict[str, Shape] = {"X": Shape.ROCK, "Y": Shape.PAPER, "Z": Shape.SCISSORS}
OUTCOME_CODES: Dict[str, Outcome] = {"X": Outcome.LOSE, "Y": Outcome.DRAW, "Z": Outcome.WIN}


@dataclass(frozen=True)
class Round:
    """攻略表の1行（相手の手のコードと2列目のコード）"""
    opponent: Shape
    code: str

    @classmethod
    def parse(cls, line: str, line_no: int | None = None) -> "Round":
        """
        "A Y" 形式の行を解析

        Raises:
            InputFormatError: 書式またはコードが不正な場合
        """
        if len(line) != 3 or line[1] != " ":
            raise InputFormatError(
                f"round must be formatted as 'A X', got {line!r}", line_no, line
            )
        if line[0] not in OPPONENT_CODES:
            raise InputFormatError(
                f"{line[0]!r} is not a valid sign for opponent", line_no, line
            )
        if line[2] not in PLAYER_CODES:
            raise InputFormatError(
                f"{line[2]!r} is not a valid sign for player", line_no, line
            )
        return cls(OPPONENT_CODES[line[0]], line[2])


def score(player: Shape, opponent: Shape) -> int:
    """1ラウンドの得点（手の得点 + 勝敗の得点）"""
    return player.value + Outcome.of(player, opponent).value


@register_solver(PuzzleDay.DAY2)
class RockPaperScissorsSolver(BaseSolver):
    """
    Part 1: 2列目を自分の手（X=グー, Y=パー, Z=チョキ）として解釈
    Part 2: 2列目を結果（X=負け, Y=あいこ, Z=勝ち）として解釈
    """

    example = "A Y\nB X\nC Z\n"

    def parse(self, text: str) -> List[Round]:
        return [
            Round.parse(line, line_no)
            for line_no, line in enumerate(self._lines(text), 1)
        ]

    def part_one(self, rounds: List[Round]) -> int:
        return sum(score(PLAYER_CODES[r.code], r.opponent) for r in rounds)

    def part_two(self, rounds: List[Round]) -> int:
        return sum(
            score(Shape.for_outcome(r.opponent, OUTCOME_CODES[r.code]), r.opponent)
            for r in rounds
        )
