import io

import pytest

from lpexec.core.solution import Status
from lpexec.errors import MalformedSolution
from lpexec.solvers.parsing import parse_solution, parse_status, parse_value_line


def _parse(text: str, names: list[str] | None = None):
    return parse_solution(io.StringIO(text), names)


def test_optimal_without_data_lines_defaults_every_variable_to_zero() -> None:
    solution = _parse("Optimal - objective value 0.00000000\n", ["x1", "x2", "y"])

    assert solution.status == Status.OPTIMAL
    assert solution.values == {"x1": 0.0, "x2": 0.0, "y": 0.0}


def test_data_line_overrides_default() -> None:
    solution = _parse("Optimal - objective value 3.5\n0 x1 3.5 0\n", ["x1", "x2"])

    assert solution.values["x1"] == 3.5
    assert solution.values["x2"] == 0.0


def test_tolerance_marker_is_stripped() -> None:
    solution = _parse("Optimal\n** 1 y2 -2.0 0.1\n", ["y2"])

    assert solution.values["y2"] == -2.0


def test_without_problem_only_reported_variables_are_present() -> None:
    solution = _parse("Optimal\n      0 a 1 0\n      2 c 4.25 -1\n")

    assert solution.values == {"a": 1.0, "c": 4.25}


def test_repeated_variable_keeps_last_value() -> None:
    solution = _parse("Optimal\n0 x 1 0\n0 x 7 0\n", ["x"])

    assert solution.values == {"x": 7.0}


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("Optimal - objective value 12", Status.OPTIMAL),
        ("Infeasible - objective value 0", Status.INFEASIBLE),
        ("Integer infeasible - objective value 0", Status.INFEASIBLE),
        ("Unbounded - objective value 0", Status.UNBOUNDED),
        ("Stopped on time - objective value 4", Status.SUBOPTIMAL),
        ("Stopped on iterations - objective value 4", Status.SUBOPTIMAL),
        ("Foo bar", Status.NOT_SOLVED),
    ],
)
def test_status_word_mapping(line: str, expected: Status) -> None:
    assert parse_status(line) == expected


def test_status_word_is_case_sensitive() -> None:
    assert parse_status("optimal - objective value 1") == Status.NOT_SOLVED


def test_unrecognized_status_still_parses_values() -> None:
    solution = _parse("Infeasible?? weird\n0 x 2 0\n", ["x", "z"])

    assert solution.status == Status.NOT_SOLVED
    assert solution.values == {"x": 2.0, "z": 0.0}


def test_only_first_line_decides_status() -> None:
    with pytest.raises(MalformedSolution):
        _parse("Optimal\nInfeasible\n")


@pytest.mark.parametrize("text", ["", "\n", "   \n0 x 1 0\n"])
def test_missing_status_word_is_malformed(text: str) -> None:
    with pytest.raises(MalformedSolution) as excinfo:
        _parse(text, ["x"])
    assert excinfo.value.line_number == 1


def test_three_token_line_aborts_whole_parse() -> None:
    text = "Optimal\n0 x1 1 0\n1 x2 2 0\n2 x3 3\n"

    with pytest.raises(MalformedSolution) as excinfo:
        _parse(text, ["x1", "x2", "x3"])

    assert excinfo.value.line_number == 4
    assert "2 x3 3" in str(excinfo.value)


def test_too_many_tokens_after_marker_is_malformed() -> None:
    with pytest.raises(MalformedSolution):
        _parse("Optimal\n** 0 x 1 0 extra\n")


def test_marker_alone_is_malformed() -> None:
    with pytest.raises(MalformedSolution):
        _parse("Optimal\n**\n")


def test_blank_data_line_is_malformed() -> None:
    with pytest.raises(MalformedSolution):
        _parse("Optimal\n0 x 1 0\n\n")


def test_non_numeric_value_reports_float_error() -> None:
    with pytest.raises(MalformedSolution) as excinfo:
        _parse("Optimal\n0 x abc 0\n", ["x"])

    assert str(excinfo.value) == "could not convert string to float: 'abc'"
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_parse_value_line_accepts_scientific_notation() -> None:
    assert parse_value_line("  12 flow_3 1.5e+02 0", 3) == ("flow_3", 150.0)
