"""
Day 8: Treetop Tree House

森の木の可視判定と景観スコア
"""

import string
from typing import List
import numpy as np
from numpy.typing import NDArray

from .base import BaseSolver
from .registry import register_solver
from ..config import PuzzleDay
from ..exceptions import InputFormatError


def _viewing_distance(height: int, line: NDArray[np.int64]) -> int:
    """木から外側へ並んだ列に対して、視界を遮る木までの本数"""
    blocking = np.flatnonzero(line >= height)
    if blocking.size == 0:
        return int(line.size)
    return int(blocking[0]) + 1


def _visible_from_left(grid: NDArray[np.int64]) -> NDArray[np.bool_]:
    """各行で左側の全ての木より高い木のマスク"""
    running_max = np.maximum.accumulate(grid, axis=1)
    # 自分より左側の最大値（左端は-1）
    left_max = np.full_like(grid, -1)
    left_max[:, 1:] = running_max[:, :-1]
    return grid > left_max


class Forest:
    """木の高さ（0〜9）のグリッド"""

    def __init__(self, grid: NDArray[np.int64]) -> None:
        """
        Args:
            grid: 木の高さの2次元配列（shape: (rows, cols)）
        """
        self.grid = grid

    @classmethod
    def parse(cls, text: str) -> "Forest":
        """
        数字のグリッドを解析

        Raises:
            InputFormatError: 数字以外、または行の長さが揃っていない場合
        """
        lines = [line.strip() for line in text.strip().splitlines()]
        if not lines or not lines[0]:
            raise InputFormatError("forest must contain at least one tree")

        cols = len(lines[0])
        rows: List[List[int]] = []
        for line_no, line in enumerate(lines, 1):
            if len(line) != cols:
                raise InputFormatError(
                    f"expected {cols} trees per row, got {len(line)}", line_no, line
                )
            if not set(line) <= set(string.digits):
                raise InputFormatError(
                    "tree heights must be single digits", line_no, line
                )
            rows.append([int(c) for c in line])

        return cls(np.array(rows, dtype=np.int64))

    @property
    def rows(self) -> int:
        """行数"""
        return int(self.grid.shape[0])

    @property
    def cols(self) -> int:
        """列数"""
        return int(self.grid.shape[1])

    def height(self, i: int, j: int) -> int | None:
        """(i, j)の木の高さ。範囲外はNone"""
        if not (0 <= i < self.rows and 0 <= j < self.cols):
            return None
        return int(self.grid[i, j])

    def is_edge(self, i: int, j: int) -> bool:
        """森の外周の木か"""
        return i == 0 or j == 0 or i == self.rows - 1 or j == self.cols - 1

    def is_visible(self, i: int, j: int) -> bool:
        """少なくとも1方向から外周まで見通せるか（外周は常に可視）"""
        h = self.grid[i, j]
        return bool(
            (self.grid[i, :j] < h).all()
            or (self.grid[i, j + 1:] < h).all()
            or (self.grid[:i, j] < h).all()
            or (self.grid[i + 1:, j] < h).all()
        )

    def visibility_mask(self) -> NDArray[np.bool_]:
        """
        全ての木の可視マスク

        各方向の累積最大値と比較する。右・下方向は反転して左方向と同じ処理を行う。
        """
        g = self.grid
        left = _visible_from_left(g)
        right = _visible_from_left(g[:, ::-1])[:, ::-1]
        top = _visible_from_left(g.T).T
        bottom = _visible_from_left(g[::-1, :].T).T[::-1, :]
        return left | right | top | bottom

    def count_visible(self) -> int:
        """可視の木の本数（外周を含む）"""
        return int(self.visibility_mask().sum())

    def scenic_score(self, i: int, j: int) -> int:
        """(i, j)の景観スコア（4方向の視距離の積）"""
        h = int(self.grid[i, j])
        return (
            _viewing_distance(h, self.grid[i, :j][::-1])
            * _viewing_distance(h, self.grid[i, j + 1:])
            * _viewing_distance(h, self.grid[:i, j][::-1])
            * _viewing_distance(h, self.grid[i + 1:, j])
        )

    def scenic_scores(self) -> NDArray[np.int64]:
        """全ての木の景観スコア"""
        scores = np.zeros_like(self.grid)
        for i in range(self.rows):
            for j in range(self.cols):
                scores[i, j] = self.scenic_score(i, j)
        return scores

    def highest_scenic_score(self) -> int:
        """景観スコアの最大値"""
        return int(self.scenic_scores().max())


@register_solver(PuzzleDay.DAY8)
class TreetopSolver(BaseSolver):
    """
    Part 1: 森の外から見える木の本数
    Part 2: 景観スコアの最大値
    """

    example = "30373\n25512\n65332\n33549\n35390\n"

    def parse(self, text: str) -> Forest:
        return Forest.parse(text)

    def part_one(self, forest: Forest) -> int:
        return forest.count_visible()

    def part_two(self, forest: Forest) -> int:
        return forest.highest_scenic_score()
