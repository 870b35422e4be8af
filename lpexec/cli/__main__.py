"""Command line interface for lpexec."""

from __future__ import annotations

import argparse
import json
import logging
import shutil
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from lpexec.core.problem import FileProblem
from lpexec.core.solution import Solution
from lpexec.errors import SolverError
from lpexec.solvers.cbc import CbcSolver
from lpexec.solvers.parsing import parse_solution
from lpexec.version import __version__

logger = logging.getLogger(__name__)


def _non_negative_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value!r}") from None
    if parsed < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value!r}")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lpexec",
        description="Run LP/MIP problem files through an external engine.",
    )
    parser.add_argument("--version", action="version", version=f"lpexec {__version__}")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log engine commands and output")

    sub = parser.add_subparsers(dest="command")

    info = sub.add_parser("info", help="Show the configured engine and whether it is installed")
    info.add_argument("--command", dest="engine", default=None, help="Engine executable to check")
    info.set_defaults(func=cmd_info)

    solve = sub.add_parser("solve", help="Solve a problem file with the engine")
    solve.add_argument("problem", type=Path, help="Problem JSON description OR raw LP/MPS file")
    solve.add_argument(
        "--var",
        dest="variables",
        action="append",
        default=[],
        help="Variable name reported as 0.0 when the engine omits it; can be repeated",
    )
    solve.add_argument("--seconds", type=_non_negative_int, default=None, help="Engine time limit")
    solve.add_argument("--threads", type=_non_negative_int, default=None, help="Engine thread count")
    solve.add_argument("--command", dest="engine", default=None, help="Engine executable name or path")
    solve.add_argument("--solution-file", type=Path, default=None, help="Where the engine writes its solution")
    solve.add_argument("--keep-solution", action="store_true", help="Do not delete the solution file")
    solve.add_argument("--json", action="store_true", help="Print the solution as JSON")
    solve.set_defaults(func=cmd_solve)

    parse = sub.add_parser("parse", help="Read an existing solution file")
    parse.add_argument("solution", type=Path, help="Solution file written by the engine")
    parse.add_argument("--var", dest="variables", action="append", default=[], help="Known variable name")
    parse.add_argument("--json", action="store_true", help="Print the solution as JSON")
    parse.set_defaults(func=cmd_parse)

    return parser


def _load_problem(path: Path, variables: list[str]) -> FileProblem:
    if path.suffix.lower() == ".json":
        problem = FileProblem.from_json_file(path)
        if variables:
            names = list(dict.fromkeys(problem.variable_names() + variables))
            problem = FileProblem.from_names(problem.path, names)
        return problem
    return FileProblem.from_names(path, list(dict.fromkeys(variables)))


def _print_solution(solution: Solution, as_json: bool) -> None:
    if as_json:
        print(json.dumps(solution.model_dump(mode="json"), indent=2, sort_keys=True))
        return

    console = Console()
    console.print(f"Status: {solution.status.value}")
    if not solution.values:
        return
    table = Table(title="Values")
    table.add_column("Variable", style="cyan")
    table.add_column("Value", justify="right")
    for name, value in solution.values.items():
        table.add_row(name, f"{value:.6g}")
    console.print(table)


def cmd_info(args: argparse.Namespace) -> int:
    try:
        solver = CbcSolver() if args.engine is None else CbcSolver(command_name=args.engine)
    except ValueError as exc:
        print(f"Info failed: {exc}")
        return 1
    print(f"lpexec {__version__}")
    print(f"Engine: {solver.name} ({solver.command_name})")
    location = shutil.which(solver.command_name)
    if location is None:
        print("Engine executable not found on PATH.")
        return 1
    print(f"Found: {location}")
    if solver.max_seconds() is not None:
        print(f"Default seconds: {solver.max_seconds()}")
    if solver.nb_threads() is not None:
        print(f"Default threads: {solver.nb_threads()}")
    return 0


def cmd_solve(args: argparse.Namespace) -> int:
    try:
        problem = _load_problem(args.problem, list(args.variables))
        solver = CbcSolver()
    except (OSError, ValueError) as exc:
        print(f"Solve failed: {exc}")
        return 1

    if args.engine is not None:
        solver = solver.with_command_name(args.engine)
    if args.seconds is not None:
        solver = solver.with_max_seconds(args.seconds)
    if args.threads is not None:
        solver = solver.with_nb_threads(args.threads)
    if args.solution_file is not None:
        solver = solver.with_temp_solution_file(args.solution_file)

    solution_path = Path(solver.temp_solution_file)
    try:
        solution = solver.run(problem)
    except SolverError as exc:
        print(f"Solve failed: {exc}")
        return 1
    finally:
        if not args.keep_solution and solution_path.exists():
            solution_path.unlink()
            logger.debug("Removed %s", solution_path)

    _print_solution(solution, args.json)
    return 0 if solution.is_success() else 1


def cmd_parse(args: argparse.Namespace) -> int:
    names = list(dict.fromkeys(args.variables)) or None
    try:
        with args.solution.open("r", encoding="utf-8") as f:
            solution = parse_solution(f, names)
    except (OSError, SolverError) as exc:
        print(f"Parse failed: {exc}")
        return 1

    _print_solution(solution, args.json)
    return 0 if solution.is_success() else 1


def main(argv: list[str] | None = None) -> int:
    argv = list(argv) if argv is not None else sys.argv[1:]

    parser = build_parser()
    if not argv:
        parser.print_help()
        return 0

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
