import shutil
from pathlib import Path

import pytest

from lpexec.core.problem import FileProblem
from lpexec.core.solution import Status
from lpexec.solvers.cbc import CbcSolver

MODEL = """Maximize
 obj: 3 x + 2 y
Subject To
 c1: x + y <= 4
 c2: x + 3 y <= 6
Bounds
 0 <= x <= 3
 0 <= y
 0 <= unused <= 1
General
 x
 y
End
"""


@pytest.mark.integration
def test_solve_small_milp_with_cbc(tmp_path: Path) -> None:
    if shutil.which("cbc") is None:
        pytest.skip("cbc executable is not installed")

    model = tmp_path / "model.lp"
    model.write_text(MODEL, encoding="utf-8")
    problem = FileProblem.from_names(model, ["x", "y", "unused"])

    solver = CbcSolver(command_name="cbc").with_nb_threads(1).with_max_seconds(30)
    solver = solver.with_temp_solution_file(tmp_path / "model.sol")
    solution = solver.run(problem)

    assert solution.status == Status.OPTIMAL
    assert solution.values["x"] == pytest.approx(3.0)
    assert solution.values["y"] == pytest.approx(1.0)
    assert solution.values["unused"] == 0.0
