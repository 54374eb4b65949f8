"""
Input reader for AoC Puzzle Solver

パズル入力ファイルの読み込み
"""

import logging
from pathlib import Path
from typing import List

from .exceptions import InputFormatError, PuzzleInputNotFoundError

logger = logging.getLogger(__name__)


def read_input(path: Path | str) -> str:
    """
    入力ファイル全体を文字列として読み込む

    Args:
        path: 入力ファイルのパス

    Returns:
        ファイル内容

    Raises:
        PuzzleInputNotFoundError: ファイルが存在しない場合
        InputFormatError: UTF-8として読めない場合
    """
    path = Path(path)
    if not path.is_file():
        raise PuzzleInputNotFoundError(path)

    try:
        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise InputFormatError(
            f"input file {path} is not valid UTF-8 text (byte {e.start})"
        ) from None

    logger.debug(f"Read {len(text)} characters from {path}")
    return text


def read_input_lines(path: Path | str) -> List[str]:
    """
    入力ファイルを行単位で読み込む（改行文字は除去）

    Args:
        path: 入力ファイルのパス

    Returns:
        行のリスト（空行も保持）
    """
    lines = read_input(path).splitlines()
    logger.debug(f"Read {len(lines)} lines from {path}")
    return lines
