"""Base class for adapters around external engine executables."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, TextIO, TypeVar

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt

from lpexec.backends.base import Backend
from lpexec.backends.local import LocalBackend
from lpexec.config import new_solution_path
from lpexec.core.problem import LpProblem
from lpexec.core.solution import Solution
from lpexec.errors import LaunchFailure, MalformedSolution, ProblemFileError, SolverFailure

logger = logging.getLogger(__name__)

SolverT = TypeVar("SolverT", bound="ExternalSolver")


class ExternalSolver(BaseModel, ABC):
    """Immutable engine configuration plus the run/read protocol.

    Every ``with_*`` method returns a new solver; fields that are not named
    in the call are carried over unchanged.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    command_name: str
    temp_solution_file: str = Field(default_factory=new_solution_path)
    seconds: NonNegativeInt | None = None
    threads: NonNegativeInt | None = None

    def _replace(self: SolverT, **changes: Any) -> SolverT:
        return type(self).model_validate({**self.model_dump(), **changes})

    def max_seconds(self) -> int | None:
        return self.seconds

    def with_max_seconds(self: SolverT, seconds: int) -> SolverT:
        return self._replace(seconds=seconds)

    def nb_threads(self) -> int | None:
        return self.threads

    def with_nb_threads(self: SolverT, threads: int) -> SolverT:
        return self._replace(threads=threads)

    def with_command_name(self: SolverT, command_name: str) -> SolverT:
        return self._replace(command_name=command_name)

    def with_temp_solution_file(self: SolverT, temp_solution_file: str | Path) -> SolverT:
        return self._replace(temp_solution_file=str(temp_solution_file))

    @abstractmethod
    def build_command(self, problem_path: str | Path) -> list[str]:
        raise NotImplementedError

    @abstractmethod
    def read_specific_solution(self, stream: TextIO, problem: LpProblem | None = None) -> Solution:
        raise NotImplementedError

    def read_solution(self, path: str | Path, problem: LpProblem | None = None) -> Solution:
        try:
            with Path(path).open("r", encoding="utf-8") as f:
                return self.read_specific_solution(f, problem)
        except OSError as exc:
            raise MalformedSolution(f"Unable to read solution file {path}: {exc}") from exc

    def run(self, problem: LpProblem, backend: Backend | None = None) -> Solution:
        try:
            problem_path = problem.to_tmp_file()
        except OSError as exc:
            raise ProblemFileError(f"Unable to create {self.command_name} problem file: {exc}") from exc

        command = self.build_command(problem_path)
        runner = backend if backend is not None else LocalBackend()
        try:
            result = runner.run(command)
        except OSError as exc:
            raise LaunchFailure(self.name) from exc

        if not result.success():
            raise SolverFailure(result.status_text(), returncode=result.returncode)

        solution = self.read_solution(self.temp_solution_file, problem)
        logger.info("%s finished with status %s", self.name, solution.status.value)
        return solution


def with_max_seconds(config: SolverT, seconds: int) -> SolverT:
    return config.with_max_seconds(seconds)


def with_nb_threads(config: SolverT, threads: int) -> SolverT:
    return config.with_nb_threads(threads)
