"""
Day 6: Tuning Trouble

データストリーム中のマーカー検出
"""

from collections import Counter
from enum import Enum

from .base import BaseSolver
from .registry import register_solver
from ..config import PuzzleDay
from ..exceptions import InputFormatError


class MarkerKind(Enum):
    """マーカーの種類（値は重複のない連続文字数）"""
    PACKET = 4
    MESSAGE = 14


def chars_before_marker(stream: str, kind: MarkerKind) -> int | None:
    """
    最初のマーカーが完成するまでに処理する文字数

    直近n文字に重複がない位置をスライディングウィンドウで探す。

    Args:
        stream: データストリーム
        kind: マーカーの種類

    Returns:
        マーカー末尾までの文字数。マーカーがなければNone
    """
    n = kind.value
    if len(stream) < n:
        return None

    window = Counter(stream[:n])
    if len(window) == n:
        return n

    for end in range(n, len(stream)):
        dropped = stream[end - n]
        window[dropped] -= 1
        if window[dropped] == 0:
            del window[dropped]
        window[stream[end]] += 1
        if len(window) == n:
            return end + 1

    return None


@register_solver(PuzzleDay.DAY6)
class TuningTroubleSolver(BaseSolver):
    """
    Part 1: start-of-packetマーカー（4文字）までの文字数
    Part 2: start-of-messageマーカー（14文字）までの文字数
    """

    example = "mjqjpqmgbljsphdztnvjfqwrcgsmlb\n"

    def parse(self, text: str) -> str:
        stream = text.strip()
        if not stream:
            raise InputFormatError("datastream is empty")
        if any(c.isspace() for c in stream):
            raise InputFormatError("datastream must be a single line without spaces")
        return stream

    def part_one(self, stream: str) -> int | None:
        return chars_before_marker(stream, MarkerKind.PACKET)

    def part_two(self, stream: str) -> int | None:
        return chars_before_marker(stream, MarkerKind.MESSAGE)
