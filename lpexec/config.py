"""Environment defaults for solver adapters."""

from __future__ import annotations

import os
import uuid
from pathlib import Path

_COMMAND_ENV = "LPEXEC_CBC_COMMAND"
_TMPDIR_ENV = "LPEXEC_TMPDIR"
_SECONDS_ENV = "LPEXEC_MAX_SECONDS"
_THREADS_ENV = "LPEXEC_THREADS"

DEFAULT_CBC_COMMAND = "cbc"
SOLUTION_SUFFIX = ".sol"


def _read_env(key: str) -> str | None:
    value = os.environ.get(key)
    if value is None:
        return None
    cleaned = value.strip()
    return cleaned or None


def _read_int_env(key: str) -> int | None:
    value = _read_env(key)
    if value is None:
        return None
    try:
        parsed = int(value)
    except ValueError:
        raise ValueError(f"{key} must be a non-negative integer, got {value!r}") from None
    if parsed < 0:
        raise ValueError(f"{key} must be a non-negative integer, got {value!r}")
    return parsed


def cbc_command() -> str:
    """Engine executable, overridable with LPEXEC_CBC_COMMAND."""
    return _read_env(_COMMAND_ENV) or DEFAULT_CBC_COMMAND


def temp_dir() -> Path | None:
    value = _read_env(_TMPDIR_ENV)
    if value is None:
        return None
    return Path(value).expanduser()


def new_solution_path() -> str:
    """Unique solution file path so concurrent solvers never share one."""
    filename = f"{uuid.uuid4()}{SOLUTION_SUFFIX}"
    directory = temp_dir()
    if directory is None:
        return filename
    return str(directory / filename)


def default_max_seconds() -> int | None:
    return _read_int_env(_SECONDS_ENV)


def default_threads() -> int | None:
    return _read_int_env(_THREADS_ENV)
