"""Reader for CBC-style solution files.

The first line carries the solve status; only its first word matters.
Every following line describes one variable::

    [**] <index> <name> <value> <reduced cost>

The engine only lists variables away from zero, so known variables are
seeded with 0.0 before any line is applied. One malformed line aborts the
whole read.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TextIO

from lpexec.core.solution import Solution, Status
from lpexec.errors import MalformedSolution

logger = logging.getLogger(__name__)

# CBC prefixes values outside the integer/primal tolerance with this token.
TOLERANCE_MARKER = "**"
DATA_LINE_TOKENS = 4

_STATUS_WORDS: dict[str, Status] = {
    "Optimal": Status.OPTIMAL,
    # "Infeasible" or "Integer infeasible"
    "Infeasible": Status.INFEASIBLE,
    "Integer": Status.INFEASIBLE,
    "Unbounded": Status.UNBOUNDED,
    # "Stopped on time", "on iterations", "on difficulties", "on ctrl-c"
    "Stopped": Status.SUBOPTIMAL,
}


def parse_status(line: str) -> Status:
    tokens = line.split()
    if not tokens:
        raise MalformedSolution("Incorrect solution format: missing status line", line_number=1)
    status = _STATUS_WORDS.get(tokens[0])
    if status is None:
        logger.warning("Unrecognized solution status %r", tokens[0])
        return Status.NOT_SOLVED
    return status


def parse_value_line(line: str, line_number: int) -> tuple[str, float]:
    tokens = line.split()
    if tokens and tokens[0] == TOLERANCE_MARKER:
        tokens = tokens[1:]
    if len(tokens) != DATA_LINE_TOKENS:
        raise MalformedSolution(
            f"Incorrect solution format at line {line_number}: {line.rstrip()!r}",
            line_number=line_number,
        )
    try:
        value = float(tokens[2])
    except ValueError as exc:
        raise MalformedSolution(str(exc), line_number=line_number) from exc
    return tokens[1], value


def parse_solution(stream: TextIO, variable_names: Iterable[str] | None = None) -> Solution:
    try:
        status = parse_status(stream.readline())

        values: dict[str, float] = {}
        if variable_names is not None:
            for name in variable_names:
                values[name] = 0.0

        for line_number, line in enumerate(stream, start=2):
            name, value = parse_value_line(line, line_number)
            values[name] = value
    except (OSError, UnicodeDecodeError) as exc:
        raise MalformedSolution(f"Unable to read solution: {exc}") from exc

    return Solution(status=status, values=values)
