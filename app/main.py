"""
Streamlit application entry point for AoC Puzzle Solver
"""

import streamlit as st

from app.sidebar import render_sidebar
from app.display import render_results


def main() -> None:
    """Streamlitアプリのエントリーポイント"""

    # ページ設定
    st.set_page_config(
        page_title="AoC 2022 Solver",
        page_icon=":christmas_tree:",
        layout="wide",
        initial_sidebar_state="expanded"
    )

    # タイトル
    st.title("Advent of Code 2022")
    st.markdown(
        "Solve a day's puzzle from its worked example or your own input "
        "and inspect the simulated state."
    )

    st.markdown("---")

    # サイドバーで日付と入力を選択
    day, text, run_clicked = render_sidebar()

    # メイン領域
    if run_clicked and text is not None:
        render_results(day, text)
    else:
        # 初期表示
        st.info(
            "Pick a day and an input source in the sidebar and click "
            "**Solve**."
        )

        with st.expander("How to Use", expanded=True):
            st.markdown("""
            ### Input

            - **Puzzle example**: the worked example from the puzzle text
            - **Paste text**: paste your personal puzzle input
            - **Upload file**: upload `dayN.dat`

            ### Output

            - **Part 1 / Part 2**: the two answers computed from the same input
            - **Visualization**: the simulated state for days that have one
              (calories per elf, forest visibility and scenic scores, rope tail
              trail, CRT screen, sand in the cave)
            """)


if __name__ == "__main__":
    main()
