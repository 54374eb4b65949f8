"""
Day 5: Supply Stacks

クレーンによる積荷の並べ替えシミュレーション
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from .base import BaseSolver
from .registry import register_solver
from ..config import PuzzleDay
from ..exceptions import InputFormatError, SimulationError

logger = logging.getLogger(__name__)

MOVE_KEYWORDS: Tuple[str, ...] = ("move", "from", "to")


class CrateMover(Enum):
    """クレーンの機種"""
    CRATEMOVER_9000 = "CrateMover 9000"  # 1個ずつ移動（順序が反転する）
    CRATEMOVER_9001 = "CrateMover 9001"  # まとめて移動（順序を保つ）

    @property
    def reverses_order(self) -> bool:
        """移動したクレートの順序が反転するか"""
        return self is CrateMover.CRATEMOVER_9000


@dataclass(frozen=True)
class Move:
    """クレーンの1手順"""
    amount: int         # 移動するクレート数
    origin: int         # 移動元スタック（1始まり）
    destination: int    # 移動先スタック（1始まり）

    @classmethod
    def parse(cls, line: str, line_no: int | None = None) -> "Move":
        """
        "move 6 from 5 to 7" 形式を解析

        Raises:
            InputFormatError: キーワードや数値が不正な場合
        """
        tokens = line.split()
        if len(tokens) != 2 * len(MOVE_KEYWORDS):
            raise InputFormatError("badly formatted move instruction", line_no, line)

        for keyword, token in zip(MOVE_KEYWORDS, tokens[0::2]):
            if token != keyword:
                raise InputFormatError(
                    f"unexpected keyword {token!r}, expected {keyword!r}", line_no, line
                )

        try:
            amount, origin, destination = (int(t) for t in tokens[1::2])
        except ValueError:
            raise InputFormatError(
                "move instruction values must be integers", line_no, line
            ) from None

        if amount < 0:
            raise InputFormatError(
                f"number of crates to move must not be negative, got {amount}",
                line_no, line
            )
        if origin < 1 or destination < 1:
            raise InputFormatError(
                "stack numbers start at 1", line_no, line
            )

        return cls(amount, origin, destination)


@dataclass
class Storage:
    """スタックの並び（各スタックは下から上の順）"""
    stacks: List[List[str]] = field(default_factory=list)

    @classmethod
    def parse(cls, drawing: str) -> "Storage":
        """
        積荷の図を解析

        Example:
                [D]
            [N] [C]
            [Z] [M] [P]
             1   2   3

        Raises:
            InputFormatError: 番号行やクレートの書式が不正な場合
        """
        lines = drawing.split("\n")
        numbering = lines[-1].split()
        if not numbering:
            raise InputFormatError("storage must contain at least one stack")
        try:
            size = int(numbering[-1])
        except ValueError:
            raise InputFormatError(
                f"unable to retrieve storage size from {lines[-1]!r}"
            ) from None

        stacks: List[List[str]] = [[] for _ in range(size)]
        # 下の行から積み上げる
        for line_no in range(len(lines) - 2, -1, -1):
            line = lines[line_no]
            for idx in range(size):
                col = 1 + 4 * idx
                if col >= len(line) or line[col] == " ":
                    continue
                if line[col - 1] != "[" or col + 1 >= len(line) or line[col + 1] != "]":
                    raise InputFormatError(
                        "crates must be drawn as '[X]'", line_no + 1, line
                    )
                stacks[idx].append(line[col])

        return cls(stacks)

    def copy(self) -> "Storage":
        """スタックを複製した新しいStorage"""
        return Storage([list(stack) for stack in self.stacks])

    def get_stack(self, n: int) -> List[str] | None:
        """n番目（1始まり）のスタック。範囲外はNone"""
        if 1 <= n <= len(self.stacks):
            return self.stacks[n - 1]
        return None

    def top_crates_sequence(self) -> str:
        """各スタックの一番上のクレートを連結（空のスタックは空白）"""
        return "".join(stack[-1] if stack else " " for stack in self.stacks)


@dataclass
class Crane:
    """貨物クレーン"""
    model: CrateMover
    storage: Storage
    procedure: List[Move]

    def execute_procedure(self) -> Storage:
        """
        手順を順に実行し、並べ替え後のStorageを返す

        Raises:
            SimulationError: 存在しないスタック、またはクレート数不足
        """
        for step, move in enumerate(self.procedure, 1):
            origin = self.storage.get_stack(move.origin)
            if origin is None:
                raise SimulationError(
                    f"step {step}: required origin stack {move.origin} does not exist"
                )
            destination = self.storage.get_stack(move.destination)
            if destination is None:
                raise SimulationError(
                    f"step {step}: required destination stack {move.destination} does not exist"
                )
            if move.amount > len(origin):
                raise SimulationError(
                    f"step {step}: cannot move {move.amount} crates from stack "
                    f"{move.origin} holding {len(origin)}"
                )

            crates = origin[len(origin) - move.amount:]
            del origin[len(origin) - move.amount:]
            if self.model.reverses_order:
                crates.reverse()
            destination.extend(crates)

        logger.debug(
            f"{self.model.value} executed {len(self.procedure)} moves"
        )
        return self.storage


@dataclass(frozen=True)
class SupplyPlan:
    """解析済みの初期配置と手順"""
    storage: Storage
    procedure: Tuple[Move, ...]

    def rearrange(self, model: CrateMover) -> Storage:
        """初期配置を複製して手順を実行"""
        return Crane(model, self.storage.copy(), list(self.procedure)).execute_procedure()


@register_solver(PuzzleDay.DAY5)
class SupplyStacksSolver(BaseSolver):
    """
    Part 1: CrateMover 9000で並べ替えた後の最上段のクレート
    Part 2: CrateMover 9001で並べ替えた後の最上段のクレート
    """

    example = (
        "    [D]    \n"
        "[N] [C]    \n"
        "[Z] [M] [P]\n"
        " 1   2   3 \n"
        "\n"
        "move 1 from 2 to 1\n"
        "move 3 from 1 to 3\n"
        "move 2 from 2 to 1\n"
        "move 1 from 1 to 2\n"
    )

    def parse(self, text: str) -> SupplyPlan:
        text = text.replace("\r\n", "\n").strip("\n")
        drawing, sep, instructions = text.partition("\n\n")
        if not sep:
            raise InputFormatError(
                "input must contain the storage drawing and the procedure "
                "separated by a blank line"
            )

        drawing_lines = drawing.count("\n") + 2
        procedure = tuple(
            Move.parse(line, drawing_lines + line_no)
            for line_no, line in enumerate(instructions.split("\n"), 1)
            if line.strip()
        )
        return SupplyPlan(Storage.parse(drawing), procedure)

    def part_one(self, plan: SupplyPlan) -> str:
        return plan.rearrange(CrateMover.CRATEMOVER_9000).top_crates_sequence()

    def part_two(self, plan: SupplyPlan) -> str:
        return plan.rearrange(CrateMover.CRATEMOVER_9001).top_crates_sequence()
