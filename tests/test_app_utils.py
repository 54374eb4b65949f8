"""
Tests for the Streamlit figure helpers
"""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
import pytest  # noqa: E402

from app.utils import (  # noqa: E402
    create_bar_chart,
    create_category_map,
    create_heatmap,
    create_trail_plot,
    format_answer,
)
from aoc_core.solvers.regolith import CaveSlice, Abyss, RegolithSolver, parse_cave  # noqa: E402
from aoc_core.solvers.treetop import Forest, TreetopSolver  # noqa: E402


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


class TestFigures:
    """可視化用figureのテスト"""

    def test_bar_chart(self) -> None:
        """棒の数と強調色"""
        fig = create_bar_chart(
            ["#4", "#3", "#5"], [24000, 11000, 10000], "Calories", "Elf", "Calories",
            highlight=1,
        )
        patches = fig.axes[0].patches
        assert len(patches) == 3
        assert patches[0].get_facecolor() != patches[1].get_facecolor()

    def test_heatmap_with_colorbar(self) -> None:
        """カラーバー付きヒートマップ"""
        forest = Forest.parse(TreetopSolver.example)
        fig = create_heatmap(forest.scenic_scores(), "Scenic", colorbar_label="Score")
        # 本体とカラーバー
        assert len(fig.axes) == 2
        assert fig.axes[0].images[0].get_array().shape == (5, 5)

    def test_category_map(self) -> None:
        """カテゴリグリッド"""
        cave = CaveSlice(parse_cave(RegolithSolver.example))
        cave.count_sand_grains(Abyss.VOID)
        fig = create_category_map(cave.cells(), ["white", "brown", "yellow"], "Cave")
        assert fig.axes[0].images[0].get_array().shape == cave.cells().shape

    def test_trail_plot(self) -> None:
        """訪問位置の散布図"""
        fig = create_trail_plot({(0, 0), (1, 0), (2, 1)}, "Trail")
        offsets = fig.axes[0].collections[0].get_offsets()
        assert np.asarray(offsets).shape == (3, 2)

    def test_trail_plot_empty(self) -> None:
        """訪問位置が空でも描画できる"""
        fig = create_trail_plot(set(), "Trail")
        assert len(fig.axes) == 1


class TestFormatAnswer:
    """解答表示のテスト"""

    @pytest.mark.parametrize("value, expected", [
        (None, "-"),
        (24000, "24,000"),
        ("CMZ", "CMZ"),
    ])
    def test_format(self, value, expected: str) -> None:
        """整数は桁区切り"""
        assert format_answer(value) == expected
