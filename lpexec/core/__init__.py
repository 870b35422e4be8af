from lpexec.core.problem import FileProblem, LpProblem, LpVariable, Variable
from lpexec.core.solution import Solution, Status

__all__ = [
    "FileProblem",
    "LpProblem",
    "LpVariable",
    "Solution",
    "Status",
    "Variable",
]
