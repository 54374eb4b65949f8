"""
Sidebar component for Streamlit UI
"""

from typing import Tuple

import streamlit as st

from aoc_core.config import PuzzleDay
from aoc_core.solvers import get_solver_class, list_solvers

INPUT_EXAMPLE = "Puzzle example"
INPUT_PASTE = "Paste text"
INPUT_UPLOAD = "Upload file"


def render_sidebar() -> Tuple[PuzzleDay, str | None, bool]:
    """
    サイドバーをレンダリング

    Returns:
        (選択した日付, 入力テキスト or None, 実行ボタンが押されたか)
    """
    st.sidebar.header("Puzzle Settings")

    # 日付選択
    days = list_solvers()
    day = st.sidebar.selectbox(
        "Day",
        options=days,
        format_func=lambda d: d.label,
        help="Select the puzzle to solve"
    )

    st.sidebar.markdown("---")

    # 入力ソース
    source = st.sidebar.radio(
        "Input",
        options=[INPUT_EXAMPLE, INPUT_PASTE, INPUT_UPLOAD],
        help="Use the worked example from the puzzle, paste your input, or upload dayN.dat"
    )

    text: str | None = None
    if source == INPUT_EXAMPLE:
        text = get_solver_class(day).example
        st.sidebar.code(text, language=None)
    elif source == INPUT_PASTE:
        pasted = st.sidebar.text_area(
            "Puzzle input",
            height=240,
            key=f"paste_{day.name}",
        )
        text = pasted if pasted.strip() else None
    else:
        uploaded = st.sidebar.file_uploader(
            f"day{day.number}.dat",
            type=None,
            key=f"upload_{day.name}",
        )
        if uploaded is not None:
            try:
                text = uploaded.getvalue().decode("utf-8")
            except UnicodeDecodeError:
                st.sidebar.error("Input file must be UTF-8 text")
                return day, None, False

    st.sidebar.markdown("---")

    run_clicked = st.sidebar.button(
        "Solve",
        type="primary",
        use_container_width=True,
        disabled=text is None,
    )

    return day, text, run_clicked
