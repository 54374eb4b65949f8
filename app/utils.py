"""
Utility functions for Streamlit UI
"""

from typing import Iterable, Sequence, Tuple
import matplotlib.pyplot as plt
import matplotlib
from matplotlib.colors import ListedColormap
from matplotlib.figure import Figure
import numpy as np
from numpy.typing import NDArray

matplotlib.rcParams['font.family'] = ['DejaVu Sans', 'sans-serif']


def create_bar_chart(
    labels: Sequence[str],
    values: Sequence[int],
    title: str,
    xlabel: str,
    ylabel: str,
    highlight: int = 0,
    figsize: Tuple[float, float] = (10, 5)
) -> Figure:
    """
    棒グラフを作成（先頭highlight本を強調）

    Args:
        labels: 各棒のラベル
        values: 各棒の値
        title: グラフタイトル
        xlabel: X軸ラベル
        ylabel: Y軸ラベル
        highlight: 強調する棒の数
        figsize: 図のサイズ

    Returns:
        Matplotlibのfigureオブジェクト
    """
    fig, ax = plt.subplots(figsize=figsize)

    colors = [
        "#E45756" if i < highlight else "#4C78A8" for i in range(len(values))
    ]
    ax.bar(labels, values, edgecolor="black", alpha=0.8, color=colors)

    ax.set_xlabel(xlabel)
    ax.set_ylabel(ylabel)
    ax.set_title(title)
    ax.tick_params(axis='x', labelrotation=90)
    ax.grid(axis='y', alpha=0.3)
    fig.tight_layout()

    return fig


def create_heatmap(
    values: NDArray,
    title: str,
    cmap: str = "viridis",
    colorbar_label: str | None = None,
    figsize: Tuple[float, float] = (6, 6)
) -> Figure:
    """
    2次元グリッドのヒートマップを作成

    Args:
        values: 2次元配列
        title: グラフタイトル
        cmap: カラーマップ名
        colorbar_label: カラーバーのラベル（Noneならカラーバーなし）
        figsize: 図のサイズ

    Returns:
        Matplotlibのfigureオブジェクト
    """
    fig, ax = plt.subplots(figsize=figsize)

    image = ax.imshow(np.asarray(values), cmap=cmap, interpolation="nearest")
    if colorbar_label is not None:
        fig.colorbar(image, ax=ax, label=colorbar_label)

    ax.set_title(title)
    ax.set_xticks([])
    ax.set_yticks([])
    fig.tight_layout()

    return fig


def create_category_map(
    cells: NDArray,
    colors: Sequence[str],
    title: str,
    figsize: Tuple[float, float] = (10, 6)
) -> Figure:
    """
    カテゴリ値（0, 1, 2, ...）のグリッドを色分け表示

    Args:
        cells: 整数カテゴリの2次元配列
        colors: カテゴリごとの色
        title: グラフタイトル
        figsize: 図のサイズ

    Returns:
        Matplotlibのfigureオブジェクト
    """
    fig, ax = plt.subplots(figsize=figsize)

    cmap = ListedColormap(list(colors))
    ax.imshow(
        np.asarray(cells),
        cmap=cmap,
        vmin=0,
        vmax=len(colors) - 1,
        interpolation="nearest",
        aspect="auto",
    )

    ax.set_title(title)
    ax.set_xticks([])
    ax.set_yticks([])
    fig.tight_layout()

    return fig


def create_trail_plot(
    positions: Iterable[Tuple[int, int]],
    title: str,
    figsize: Tuple[float, float] = (6, 6)
) -> Figure:
    """
    訪問位置の散布図を作成（原点を強調）

    Args:
        positions: (x, y) 座標
        title: グラフタイトル
        figsize: 図のサイズ

    Returns:
        Matplotlibのfigureオブジェクト
    """
    fig, ax = plt.subplots(figsize=figsize)

    points = np.array(sorted(positions), dtype=np.int64).reshape(-1, 2)
    ax.scatter(points[:, 0], points[:, 1], s=6, color="#4C78A8", label="Tail visited")
    ax.scatter([0], [0], s=40, color="#E45756", marker="x", label="Start")

    ax.set_title(title)
    ax.set_aspect("equal")
    ax.legend()
    ax.grid(alpha=0.3)
    fig.tight_layout()

    return fig


def format_answer(value: object) -> str:
    """
    解答を表示用にフォーマット

    Args:
        value: 解答（整数、文字列、None）

    Returns:
        フォーマットされた文字列
    """
    if value is None:
        return "-"
    if isinstance(value, int):
        return f"{value:,}"
    return str(value)
