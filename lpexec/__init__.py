"""lpexec: run LP/MIP problems through external engine executables."""

from lpexec.core.problem import FileProblem, LpProblem
from lpexec.core.solution import Solution, Status
from lpexec.errors import LaunchFailure, MalformedSolution, ProblemFileError, SolverError, SolverFailure
from lpexec.solvers.cbc import CbcSolver
from lpexec.solvers.parsing import parse_solution
from lpexec.version import __version__

__all__ = [
    "__version__",
    "CbcSolver",
    "FileProblem",
    "LaunchFailure",
    "LpProblem",
    "MalformedSolution",
    "ProblemFileError",
    "Solution",
    "SolverError",
    "SolverFailure",
    "Status",
    "parse_solution",
]
