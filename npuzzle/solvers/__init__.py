"""Solvers module for N-puzzle boards."""

from .base_solver import BaseSolver, SolverStats, SearchCancelled
from .astar_solver import Solver, AStarSolver, Priority, SearchState
from .bfs_solver import BFSSolver

__all__ = [
    "BaseSolver",
    "SolverStats",
    "SearchCancelled",
    "Solver",
    "AStarSolver",
    "Priority",
    "SearchState",
    "BFSSolver"
]
