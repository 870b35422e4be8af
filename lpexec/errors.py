"""Errors raised while running an external engine or reading its output."""

from __future__ import annotations


class SolverError(RuntimeError):
    """Base class for every failure of a solve attempt."""


class ProblemFileError(SolverError):
    """The problem could not be written to a solver-readable file."""


class LaunchFailure(SolverError):
    """The engine process could not be started."""

    def __init__(self, engine: str, message: str | None = None) -> None:
        self.engine = engine
        super().__init__(message or f"Error running the {engine} solver")


class SolverFailure(SolverError):
    """The engine ran but exited with a non-success status."""

    def __init__(self, status: str, returncode: int | None = None) -> None:
        self.status = status
        self.returncode = returncode
        super().__init__(status)


class MalformedSolution(SolverError):
    """The solution file does not follow the expected line format."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        self.line_number = line_number
        super().__init__(message)
