"""Solution and status models."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class Status(str, Enum):
    OPTIMAL = "OPTIMAL"
    INFEASIBLE = "INFEASIBLE"
    UNBOUNDED = "UNBOUNDED"
    SUBOPTIMAL = "SUBOPTIMAL"
    NOT_SOLVED = "NOT_SOLVED"


class Solution(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Status
    values: Mapping[str, float] = Field(default_factory=dict, validate_default=True)

    @field_validator("values", mode="after")
    @classmethod
    def _freeze_values(cls, value: Mapping[str, float]) -> Mapping[str, float]:
        return MappingProxyType(dict(value))

    @field_serializer("values")
    def _dump_values(self, value: Mapping[str, float]) -> dict[str, float]:
        return dict(value)

    def is_success(self) -> bool:
        return self.status in {Status.OPTIMAL, Status.SUBOPTIMAL}

    def value(self, name: str) -> float:
        """Value of ``name``; raises ``KeyError`` for unknown variables."""
        return self.values[name]
