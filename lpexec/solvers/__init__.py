from lpexec.solvers.base import ExternalSolver, with_max_seconds, with_nb_threads
from lpexec.solvers.cbc import CbcSolver, get_plugin
from lpexec.solvers.parsing import parse_solution, parse_status, parse_value_line

__all__ = [
    "CbcSolver",
    "ExternalSolver",
    "get_plugin",
    "parse_solution",
    "parse_status",
    "parse_value_line",
    "with_max_seconds",
    "with_nb_threads",
]
