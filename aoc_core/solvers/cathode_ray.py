"""
Day 10: Cathode-Ray Tube

単純なCPUの命令実行とCRTの描画
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Sequence, Tuple
import numpy as np
from numpy.typing import NDArray

from .base import BaseSolver
from .registry import register_solver
from ..config import PuzzleDay
from ..exceptions import InputFormatError

# 信号強度を計測するサイクル
SIGNAL_CYCLES: Tuple[int, ...] = (20, 60, 100, 140, 180, 220)

CRT_WIDTH = 40
CRT_HEIGHT = 6
LIT_PIXEL = "#"
DARK_PIXEL = "."


class Opcode(Enum):
    """命令の種類（値は所要サイクル数）"""
    NOOP = 1
    ADDX = 2


@dataclass(frozen=True)
class Instruction:
    """CPU命令"""
    opcode: Opcode
    argument: int = 0

    @classmethod
    def parse(cls, line: str, line_no: int | None = None) -> "Instruction":
        """
        "noop" / "addx V" を解析

        Raises:
            InputFormatError: 不明な命令、引数の欠落・不正
        """
        tokens = line.split()
        if not tokens:
            raise InputFormatError("empty CPU instruction", line_no, line)

        mnemonic = tokens[0]
        if mnemonic == "noop":
            if len(tokens) != 1:
                raise InputFormatError("`noop` takes no argument", line_no, line)
            return cls(Opcode.NOOP)

        if mnemonic == "addx":
            if len(tokens) != 2:
                raise InputFormatError(
                    "`addx` instruction must be followed by one integer argument",
                    line_no, line
                )
            try:
                return cls(Opcode.ADDX, int(tokens[1]))
            except ValueError:
                raise InputFormatError(
                    f"`addx` argument must be an integer, got {tokens[1]!r}",
                    line_no, line
                ) from None

        raise InputFormatError(
            f"`{mnemonic}` is not a valid CPU instruction", line_no, line
        )

    @property
    def cycles(self) -> int:
        """所要サイクル数"""
        return self.opcode.value


class Cpu:
    """レジスタXを1つ持つCPU"""

    def __init__(self) -> None:
        self.register = 1
        self.cycle = 0

    def execute(self, instruction: Instruction) -> None:
        """命令の効果をレジスタに反映（サイクル完了後に呼ぶ）"""
        if instruction.opcode is Opcode.ADDX:
            self.register += instruction.argument

    def run(self, program: Sequence[Instruction]) -> Iterator[Tuple[int, int]]:
        """
        プログラムを実行し、各サイクル「実行中」の (サイクル番号, X) を返す

        addxの加算は2サイクル目の完了後に反映される。
        """
        for instruction in program:
            for _ in range(instruction.cycles):
                self.cycle += 1
                yield self.cycle, self.register
            self.execute(instruction)


def signal_strength_sum(
    program: Sequence[Instruction],
    cycles: Sequence[int] = SIGNAL_CYCLES
) -> int:
    """指定サイクルでの信号強度（サイクル番号 × X）の合計"""
    targets = set(cycles)
    return sum(
        cycle * x for cycle, x in Cpu().run(program) if cycle in targets
    )


class Crt:
    """40×6のCRT画面"""

    def __init__(self, width: int = CRT_WIDTH, height: int = CRT_HEIGHT) -> None:
        self.width = width
        self.height = height
        self.pixels: NDArray[np.bool_] = np.zeros((height, width), dtype=bool)

    def draw(self, program: Sequence[Instruction]) -> "Crt":
        """
        プログラム実行に合わせて画面を描画

        サイクルcでは列 (c-1) % width のピクセルを描き、
        スプライト（X-1〜X+1）に重なれば点灯する。
        """
        n_pixels = self.width * self.height
        for cycle, x in Cpu().run(program):
            if cycle > n_pixels:
                break
            row, col = divmod(cycle - 1, self.width)
            self.pixels[row, col] = abs(col - x) <= 1
        return self

    def render(self) -> str:
        """'#' と '.' による画面の文字列表現"""
        return "\n".join(
            "".join(LIT_PIXEL if lit else DARK_PIXEL for lit in row)
            for row in self.pixels
        )


# 信号強度とCRT画像を確認できる例題プログラム
EXAMPLE_PROGRAM = """\
addx 15
addx -11
addx 6
addx -3
addx 5
addx -1
addx -8
addx 13
addx 4
noop
addx -1
addx 5
addx -1
addx 5
addx -1
addx 5
addx -1
addx 5
addx -1
addx -35
addx 1
addx 24
addx -19
addx 1
addx 16
addx -11
noop
noop
addx 21
addx -15
noop
noop
addx -3
addx 9
addx 1
addx -3
addx 8
addx 1
addx 5
noop
noop
noop
noop
noop
addx -36
noop
addx 1
addx 7
noop
noop
noop
addx 2
addx 6
noop
noop
noop
noop
noop
addx 1
noop
noop
addx 7
addx 1
noop
addx -13
addx 13
addx 7
noop
addx 1
addx -33
noop
noop
noop
addx 2
noop
noop
noop
addx 8
noop
addx -1
addx 2
addx 1
noop
addx 17
addx -9
addx 1
addx 1
addx -3
addx 11
noop
noop
addx 1
noop
addx 1
noop
noop
addx -13
addx -19
addx 1
addx 3
addx 26
addx -30
addx 12
addx -1
addx 3
addx 1
noop
noop
noop
addx -9
addx 18
addx 1
addx 2
noop
noop
addx 9
noop
noop
noop
addx -1
addx 2
addx -37
addx 1
addx 3
noop
addx 15
addx -21
addx 22
addx -6
addx 1
noop
addx 2
addx 1
noop
addx -10
noop
noop
addx 20
addx 1
addx 2
addx 2
addx -6
addx -11
noop
noop
noop
"""


@register_solver(PuzzleDay.DAY10)
class CathodeRaySolver(BaseSolver):
    """
    Part 1: サイクル20, 60, ..., 220の信号強度の合計
    Part 2: CRTに描画された画像
    """

    example = EXAMPLE_PROGRAM

    def parse(self, text: str) -> List[Instruction]:
        return [
            Instruction.parse(line, line_no)
            for line_no, line in enumerate(self._lines(text), 1)
        ]

    def part_one(self, program: List[Instruction]) -> int:
        return signal_strength_sum(program)

    def part_two(self, program: List[Instruction]) -> str:
        return Crt().draw(program).render()
