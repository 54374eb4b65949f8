"""
Day 14: Regolith Reservoir

洞窟の断面に落下する砂のシミュレーション
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, Tuple
import numpy as np
from numpy.typing import NDArray

from .base import BaseSolver
from .registry import register_solver
from ..config import PuzzleDay
from ..exceptions import InputFormatError

logger = logging.getLogger(__name__)

# 砂の落下方向の優先順（真下、左下、右下）
FALL_OFFSETS: Tuple[int, ...] = (0, -1, 1)
FLOOR_OFFSET = 2

# 描画用のセル種別
AIR = 0
ROCK = 1
SAND = 2


@dataclass(frozen=True)
class Point:
    """断面上の点（yは下向きに増加）"""
    x: int
    y: int

    @classmethod
    def parse(cls, text: str) -> "Point":
        """
        "x,y" 形式（非負整数）を解析

        Raises:
            InputFormatError: 座標の欠落、または非負整数でない場合
        """
        x, sep, y = text.strip().partition(",")
        if not sep:
            raise InputFormatError(f"missing coordinates in {text.strip()!r}")
        try:
            point = cls(int(x), int(y))
        except ValueError:
            raise InputFormatError("coordinates must be unsigned integers") from None
        if point.x < 0 or point.y < 0:
            raise InputFormatError("coordinates must be unsigned integers")
        return point

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


SOURCE = Point(500, 0)


class Abyss(Enum):
    """最も低い岩より下の扱い"""
    VOID = "void"    # 砂は無限に落下する
    FLOOR = "floor"  # max_y + 2 に無限に広い床がある


@dataclass(frozen=True)
class RockPath:
    """岩の経路（水平・垂直な線分の連なり）"""
    verts: Tuple[Point, ...]

    @classmethod
    def parse(cls, line: str, line_no: int | None = None) -> "RockPath":
        """
        "498,4 -> 498,6 -> 496,6" 形式を解析

        Raises:
            InputFormatError: 座標の書式が不正、または斜めの線分を含む場合
        """
        try:
            verts = tuple(Point.parse(part) for part in line.split("->"))
        except InputFormatError as e:
            raise InputFormatError(str(e), line_no, line) from None

        for start, end in zip(verts, verts[1:]):
            if start.x != end.x and start.y != end.y:
                raise InputFormatError(
                    f"rock path segment {start} -> {end} must be horizontal or vertical",
                    line_no, line
                )
        return cls(verts)

    def contains(self, point: Point) -> bool:
        """点がいずれかの線分上にあるか"""
        if len(self.verts) == 1:
            return self.verts[0] == point
        for start, end in zip(self.verts, self.verts[1:]):
            if (
                min(start.x, end.x) <= point.x <= max(start.x, end.x)
                and min(start.y, end.y) <= point.y <= max(start.y, end.y)
            ):
                return True
        return False


class CaveSlice:
    """
    洞窟の断面

    岩と静止した砂を占有グリッドで保持する。グリッドの幅は床がある場合に
    砂が積もる三角形（砂の供給口から左右にfloor_yマス）を収める。
    """

    def __init__(self, paths: Sequence[RockPath]) -> None:
        """
        Args:
            paths: 岩の経路（1本以上）
        """
        if not paths:
            raise InputFormatError("cave must contain at least one rock path")

        self.rock_paths = list(paths)
        points = [p for path in paths for p in path.verts]
        self.max_y = max(p.y for p in points)
        self.floor_y = self.max_y + FLOOR_OFFSET

        self.min_x = min(min(p.x for p in points), SOURCE.x - self.floor_y) - 1
        max_x = max(max(p.x for p in points), SOURCE.x + self.floor_y) + 1
        width = max_x - self.min_x + 1
        height = self.floor_y + 1

        self.rock: NDArray[np.bool_] = np.zeros((height, width), dtype=bool)
        self.sand: NDArray[np.bool_] = np.zeros((height, width), dtype=bool)
        for path in paths:
            self._draw_path(path)

    def _draw_path(self, path: RockPath) -> None:
        """経路上のマスを岩にする"""
        verts = path.verts
        if len(verts) == 1:
            self.rock[verts[0].y, verts[0].x - self.min_x] = True
        for start, end in zip(verts, verts[1:]):
            y0, y1 = sorted((start.y, end.y))
            x0, x1 = sorted((start.x, end.x))
            self.rock[y0:y1 + 1, x0 - self.min_x:x1 - self.min_x + 1] = True

    def reset(self) -> None:
        """静止した砂を全て取り除く"""
        self.sand[:] = False

    def is_occupied(self, x: int, y: int, abyss: Abyss = Abyss.VOID) -> bool:
        """(x, y)が岩・砂・床で塞がれているか"""
        if abyss is Abyss.FLOOR and y >= self.floor_y:
            return True
        col = x - self.min_x
        return bool(self.rock[y, col] or self.sand[y, col])

    def drop_grain(self, abyss: Abyss) -> Point | None:
        """
        供給口から砂を1粒落とす

        Returns:
            静止した位置。奈落へ落ちた場合はNone
        """
        x, y = SOURCE.x, SOURCE.y
        while True:
            if abyss is Abyss.VOID and y >= self.max_y:
                # 最も低い岩より下には何もない
                return None

            for dx in FALL_OFFSETS:
                if not self.is_occupied(x + dx, y + 1, abyss):
                    x += dx
                    y += 1
                    break
            else:
                self.sand[y, x - self.min_x] = True
                return Point(x, y)

    def count_sand_grains(self, abyss: Abyss) -> int:
        """
        砂が奈落に落ちる、または供給口が塞がるまで砂を落とし、
        静止した砂の粒数を返す

        Note:
            既に積もっている砂はそのまま残して続きから落とす。
        """
        while not self.sand[SOURCE.y, SOURCE.x - self.min_x]:
            rest = self.drop_grain(abyss)
            if rest is None:
                break
        count = int(self.sand.sum())
        logger.debug(f"{count} grains of sand at rest ({abyss.value})")
        return count

    def cells(self) -> NDArray[np.int8]:
        """描画用グリッド（AIR / ROCK / SAND）"""
        grid = np.full(self.rock.shape, AIR, dtype=np.int8)
        grid[self.rock] = ROCK
        grid[self.sand] = SAND
        return grid


def parse_cave(text: str) -> List[RockPath]:
    """入力全体から岩の経路を解析"""
    return [
        RockPath.parse(line, line_no)
        for line_no, line in enumerate(text.strip().splitlines(), 1)
        if line.strip()
    ]


@register_solver(PuzzleDay.DAY14)
class RegolithSolver(BaseSolver):
    """
    Part 1: 砂が奈落に落ち始めるまでに静止する砂の粒数
    Part 2: 床がある場合に供給口が塞がるまでに静止する砂の粒数
    """

    example = (
        "498,4 -> 498,6 -> 496,6\n"
        "503,4 -> 502,4 -> 502,9 -> 494,9\n"
    )

    def parse(self, text: str) -> List[RockPath]:
        return parse_cave(text)

    def part_one(self, paths: List[RockPath]) -> int:
        return CaveSlice(paths).count_sand_grains(Abyss.VOID)

    def part_two(self, paths: List[RockPath]) -> int:
        return CaveSlice(paths).count_sand_grains(Abyss.FLOOR)
