"""
Solver implementations for AoC Puzzle Solver
"""

from .base import BaseSolver
from .registry import (
    register_solver,
    get_solver,
    get_solver_class,
    list_solvers,
    is_registered,
)

# Import solvers to trigger registration
from .calories import CalorieCountingSolver
from .rock_paper_scissors import RockPaperScissorsSolver
from .rucksack import RucksackSolver
from .camp_cleanup import CampCleanupSolver
from .supply_stacks import SupplyStacksSolver
from .tuning_trouble import TuningTroubleSolver
from .treetop import TreetopSolver
from .rope_bridge import RopeBridgeSolver
from .cathode_ray import CathodeRaySolver
from .regolith import RegolithSolver

__all__ = [
    "BaseSolver",
    "register_solver",
    "get_solver",
    "get_solver_class",
    "list_solvers",
    "is_registered",
    "CalorieCountingSolver",
    "RockPaperScissorsSolver",
    "RucksackSolver",
    "CampCleanupSolver",
    "SupplyStacksSolver",
    "TuningTroubleSolver",
    "TreetopSolver",
    "RopeBridgeSolver",
    "CathodeRaySolver",
    "RegolithSolver",
]
