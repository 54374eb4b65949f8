"""
Day 9: Rope Bridge

結び目が連なるロープの追従シミュレーション
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Set, Tuple
import numpy as np
from numpy.typing import NDArray

from .base import BaseSolver
from .registry import register_solver
from ..config import PuzzleDay
from ..exceptions import InputFormatError

Position = Tuple[int, int]

# Part 1 / Part 2 のロープの結び目数
SHORT_ROPE_KNOTS = 2
LONG_ROPE_KNOTS = 10


class Direction(Enum):
    """移動方向（値は1ステップの変位 (dx, dy)、上がy正）"""
    UP = (0, 1)
    DOWN = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @classmethod
    def from_code(cls, code: str) -> "Direction":
        """
        U/D/L/Rから方向を取得

        Raises:
            InputFormatError: 不正な方向コード
        """
        try:
            return _DIRECTION_CODES[code]
        except KeyError:
            raise InputFormatError(f"invalid direction {code!r}") from None


_DIRECTION_CODES = {
    "U": Direction.UP,
    "D": Direction.DOWN,
    "L": Direction.LEFT,
    "R": Direction.RIGHT,
}


@dataclass(frozen=True)
class Motion:
    """先頭の結び目の移動"""
    direction: Direction
    steps: int

    @classmethod
    def parse(cls, line: str, line_no: int | None = None) -> "Motion":
        """"R 4" 形式を解析"""
        code, sep, amount = line.strip().partition(" ")
        if not sep:
            raise InputFormatError("badly formatted motion", line_no, line)
        try:
            direction = Direction.from_code(code)
        except InputFormatError as e:
            raise InputFormatError(str(e), line_no, line) from None
        try:
            steps = int(amount)
        except ValueError:
            raise InputFormatError(f"invalid amount {amount!r}", line_no, line) from None
        if steps < 0:
            raise InputFormatError(f"invalid amount {amount!r}", line_no, line)
        return cls(direction, steps)


class Rope:
    """
    結び目の列（先頭がhead、末尾がtail）

    先頭が1マス動くたびに、各結び目は直前の結び目と接していなければ
    各軸について差の符号の方向へ1マス追従する。
    """

    def __init__(self, n_knots: int) -> None:
        """
        Args:
            n_knots: 結び目の数（2以上）
        """
        if n_knots < 2:
            raise ValueError(f"ロープには2つ以上の結び目が必要です: {n_knots}")
        self.knots: NDArray[np.int64] = np.zeros((n_knots, 2), dtype=np.int64)
        # 開始位置も訪問済み
        self.tail_history: Set[Position] = {(0, 0)}

    @property
    def n_knots(self) -> int:
        """結び目の数"""
        return int(self.knots.shape[0])

    @property
    def tail(self) -> Position:
        """末尾の結び目の位置"""
        x, y = self.knots[-1]
        return int(x), int(y)

    def step(self, direction: Direction) -> None:
        """先頭を1マス動かし、後続の結び目を追従させる"""
        self.knots[0] += direction.value
        for i in range(1, self.n_knots):
            delta = self.knots[i - 1] - self.knots[i]
            if np.abs(delta).max() <= 1:
                # 接している結び目より後ろは動かない
                break
            self.knots[i] += np.sign(delta)
        self.tail_history.add(self.tail)

    def start(self, motions: Iterable[Motion]) -> None:
        """全ての移動を実行"""
        for motion in motions:
            for _ in range(motion.steps):
                self.step(motion.direction)

    def unique_visited_positions(self) -> int:
        """末尾が訪れた位置の数"""
        return len(self.tail_history)


def tail_visits(motions: Iterable[Motion], n_knots: int) -> int:
    """n_knots個の結び目のロープで末尾が訪れた位置の数"""
    rope = Rope(n_knots)
    rope.start(motions)
    return rope.unique_visited_positions()


@register_solver(PuzzleDay.DAY9)
class RopeBridgeSolver(BaseSolver):
    """
    Part 1: 2結び目のロープで末尾が訪れた位置の数
    Part 2: 10結び目のロープで末尾が訪れた位置の数
    """

    example = "R 4\nU 4\nL 3\nD 1\nR 4\nD 1\nL 5\nR 2\n"

    def parse(self, text: str) -> List[Motion]:
        return [
            Motion.parse(line, line_no)
            for line_no, line in enumerate(self._lines(text), 1)
        ]

    def part_one(self, motions: List[Motion]) -> int:
        return tail_visits(motions, SHORT_ROPE_KNOTS)

    def part_two(self, motions: List[Motion]) -> int:
        return tail_visits(motions, LONG_ROPE_KNOTS)
