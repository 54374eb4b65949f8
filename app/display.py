"""
Display component for Streamlit UI
"""

import streamlit as st
import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from aoc_core.config import PuzzleDay
from aoc_core.engine import PuzzleEngine
from aoc_core.exceptions import AocSolverError
from aoc_core.results import RunResults
from aoc_core.solvers.calories import elves_by_calories
from aoc_core.solvers.treetop import Forest
from aoc_core.solvers.rope_bridge import Rope, LONG_ROPE_KNOTS, RopeBridgeSolver
from aoc_core.solvers.cathode_ray import Crt, CathodeRaySolver
from aoc_core.solvers.regolith import Abyss, CaveSlice, parse_cave
from app.utils import (
    create_bar_chart,
    create_category_map,
    create_heatmap,
    create_trail_plot,
    format_answer,
)


def _show(fig: Figure) -> None:
    """figureを表示して閉じる"""
    st.pyplot(fig)
    plt.close(fig)


def render_visualization(day: PuzzleDay, text: str) -> None:
    """
    日別の状態を可視化

    Args:
        day: パズル日付
        text: 入力テキスト（解答済みなので解析は成功する前提）
    """
    if day is PuzzleDay.DAY1:
        elves = elves_by_calories(text.rstrip("\r\n").splitlines())[:30]
        _show(create_bar_chart(
            labels=[f"#{elf.idx}" for elf in elves],
            values=[elf.calories for elf in elves],
            title="Calories per Elf (top 30)",
            xlabel="Elf",
            ylabel="Calories",
            highlight=3,
        ))

    elif day is PuzzleDay.DAY8:
        forest = Forest.parse(text)
        col_left, col_right = st.columns(2)
        with col_left:
            st.markdown("**Visible trees**")
            _show(create_heatmap(forest.visibility_mask(), "Visible from outside", cmap="Greens"))
        with col_right:
            st.markdown("**Scenic scores**")
            _show(create_heatmap(
                forest.scenic_scores(), "Scenic score", cmap="magma", colorbar_label="Score"
            ))

    elif day is PuzzleDay.DAY9:
        rope = Rope(LONG_ROPE_KNOTS)
        rope.start(RopeBridgeSolver().parse(text))
        _show(create_trail_plot(
            rope.tail_history, f"Tail positions ({LONG_ROPE_KNOTS} knots)"
        ))

    elif day is PuzzleDay.DAY10:
        crt = Crt().draw(CathodeRaySolver().parse(text))
        _show(create_category_map(
            crt.pixels.astype(int), ["#1B1B1B", "#7CFC00"], "CRT screen", figsize=(10, 2)
        ))

    elif day is PuzzleDay.DAY14:
        cave = CaveSlice(parse_cave(text))
        cave.count_sand_grains(Abyss.FLOOR)
        _show(create_category_map(
            cave.cells(), ["#F5F5F5", "#5C4033", "#E3C16F"], "Cave slice with floor"
        ))


def render_results(day: PuzzleDay, text: str) -> None:
    """
    パズルを解いて結果を表示

    Args:
        day: パズル日付
        text: 入力テキスト
    """
    st.subheader(day.label)

    try:
        result = PuzzleEngine.solve_text(day, text)
    except AocSolverError as e:
        st.error(f"Solver failed: {e}")
        return

    col1, col2, col3 = st.columns(3)
    for col, part in ((col1, 1), (col2, 2)):
        value = result.answer(part)
        if isinstance(value, str) and "\n" in value:
            col.markdown(f"**Part {part}**")
            col.code(value, language=None)
        else:
            col.metric(f"Part {part}", format_answer(value))
    col3.metric("Runtime", f"{result.runtime_ms:.1f} ms")

    st.markdown("---")

    st.subheader("Visualization")
    render_visualization(day, text)

    st.markdown("---")

    # CSVダウンロード
    df = RunResults(days=[result], config_summary={}).to_dataframe()
    st.dataframe(df, use_container_width=True, hide_index=True)
    st.download_button(
        label="Download Answers (CSV)",
        data=df.to_csv(index=False),
        file_name=f"day{day.number}_answers.csv",
        mime="text/csv",
        use_container_width=True
    )
