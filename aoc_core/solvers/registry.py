"""
Solver registry for AoC Puzzle Solver

ソルバクラスの登録・取得機構（プラグインパターン）
"""

from typing import Type, Callable, Dict, List

from .base import BaseSolver
from ..config import PuzzleDay
from ..exceptions import SolverNotFoundError


# ソルバクラスの登録用辞書
_SOLVER_REGISTRY: Dict[PuzzleDay, Type[BaseSolver]] = {}


def register_solver(
    day: PuzzleDay
) -> Callable[[Type[BaseSolver]], Type[BaseSolver]]:
    """
    ソルバクラスを登録するデコレータ

    Usage:
        @register_solver(PuzzleDay.DAY1)
        class CalorieCountingSolver(BaseSolver):
            ...

    Args:
        day: 登録するPuzzleDay

    Returns:
        デコレータ関数

    Raises:
        ValueError: 同じPuzzleDayが既に登録されている場合
    """
    def decorator(cls: Type[BaseSolver]) -> Type[BaseSolver]:
        if day in _SOLVER_REGISTRY:
            existing = _SOLVER_REGISTRY[day]
            raise ValueError(
                f"PuzzleDay {day} is already registered by {existing.__name__}"
            )
        cls.day = day
        _SOLVER_REGISTRY[day] = cls
        return cls

    return decorator


def get_solver(day: PuzzleDay) -> BaseSolver:
    """
    登録されたソルバをインスタンス化して取得

    Args:
        day: パズル日付

    Returns:
        ソルバインスタンス

    Raises:
        SolverNotFoundError: 未登録のPuzzleDay
    """
    return get_solver_class(day)()


def list_solvers() -> List[PuzzleDay]:
    """
    登録済みのPuzzleDay一覧を取得（日付順）

    Returns:
        登録済みPuzzleDayのリスト
    """
    return sorted(_SOLVER_REGISTRY.keys(), key=lambda d: d.number)


def get_solver_class(day: PuzzleDay) -> Type[BaseSolver]:
    """
    登録されたソルバクラスを取得（インスタンス化なし）

    Raises:
        SolverNotFoundError: 未登録のPuzzleDay
    """
    if day not in _SOLVER_REGISTRY:
        raise SolverNotFoundError(day.number)
    return _SOLVER_REGISTRY[day]


def is_registered(day: PuzzleDay) -> bool:
    """指定したPuzzleDayが登録済みか確認"""
    return day in _SOLVER_REGISTRY
