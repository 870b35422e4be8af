"""Problem collaborators consumed by solver adapters.

Adapters only need two things from a problem: a file the engine can read
and the ordered names of its variables. ``FileProblem`` covers the common
case of a model that was already written to disk by some other tool.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


@runtime_checkable
class LpVariable(Protocol):
    @property
    def name(self) -> str:
        ...


@runtime_checkable
class LpProblem(Protocol):
    def to_tmp_file(self) -> Path:
        ...

    def variables(self) -> Iterable[LpVariable]:
        ...


class Variable(BaseModel):
    name: str


class FileProblem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    path: Path
    declared_variables: list[Variable] = Field(default_factory=list, alias="variables")

    @field_validator("declared_variables", mode="before")
    @classmethod
    def _coerce_names(cls, value: object) -> object:
        if isinstance(value, list):
            return [{"name": v} if isinstance(v, str) else v for v in value]
        return value

    @model_validator(mode="after")
    def _validate_names(self) -> "FileProblem":
        names = self.variable_names()
        if len(names) != len(set(names)):
            raise ValueError("variable names must be unique")
        return self

    @classmethod
    def from_names(cls, path: str | Path, names: Iterable[str] = ()) -> "FileProblem":
        return cls.model_validate({"path": path, "variables": list(names)})

    @classmethod
    def from_json_file(cls, path: str | Path) -> "FileProblem":
        source = Path(path)
        with source.open("r", encoding="utf-8") as f:
            data = json.load(f)
        problem = cls.model_validate(data)
        if not problem.path.is_absolute():
            problem = problem.model_copy(update={"path": (source.parent / problem.path).resolve()})
        return problem

    def to_tmp_file(self) -> Path:
        if not self.path.is_file():
            raise FileNotFoundError(f"problem file not found: {self.path}")
        return self.path

    def variables(self) -> list[Variable]:
        return list(self.declared_variables)

    def variable_names(self) -> list[str]:
        return [v.name for v in self.declared_variables]
