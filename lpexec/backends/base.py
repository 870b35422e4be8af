"""Backend protocol for running external engine commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class CommandResult:
    returncode: int
    stdout: str = ""
    stderr: str = ""

    def success(self) -> bool:
        return self.returncode == 0

    def status_text(self) -> str:
        if self.returncode < 0:
            return f"signal: {-self.returncode}"
        return f"exit status: {self.returncode}"


class Backend(Protocol):
    def run(self, command: list[str]) -> CommandResult:
        ...
