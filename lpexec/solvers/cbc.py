"""CBC command line adapter."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import TextIO

from pydantic import Field, NonNegativeInt

from lpexec.config import cbc_command, default_max_seconds, default_threads
from lpexec.core.problem import LpProblem
from lpexec.core.solution import Solution
from lpexec.solvers.base import ExternalSolver
from lpexec.solvers.parsing import parse_solution


class CbcSolver(ExternalSolver):
    name: str = "Cbc"
    command_name: str = Field(default_factory=cbc_command)
    seconds: NonNegativeInt | None = Field(default_factory=default_max_seconds)
    threads: NonNegativeInt | None = Field(default_factory=default_threads)

    def option_flags(self) -> list[str]:
        optional_params = [
            ("seconds", self.max_seconds()),
            ("threads", self.nb_threads()),
        ]
        flags: list[str] = []
        for flag, value in optional_params:
            if value is not None:
                flags.extend([flag, str(value)])
        return flags

    def build_command(self, problem_path: str | Path) -> list[str]:
        return [
            self.command_name,
            str(problem_path),
            *self.option_flags(),
            "solve",
            "solution",
            self.temp_solution_file,
        ]

    def read_specific_solution(self, stream: TextIO, problem: LpProblem | None = None) -> Solution:
        names = None
        if problem is not None:
            names = [var.name for var in problem.variables()]
        return parse_solution(stream, names)


def get_plugin(command_name: str | None = None) -> CbcSolver | None:
    solver = CbcSolver() if command_name is None else CbcSolver(command_name=command_name)
    if shutil.which(solver.command_name) is None:
        return None
    return solver
