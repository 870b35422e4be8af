"""Local subprocess backend."""

from __future__ import annotations

import logging
import subprocess

from lpexec.backends.base import CommandResult

logger = logging.getLogger(__name__)


class LocalBackend:
    """Runs the engine as a child process and blocks until it exits.

    ``OSError`` from spawning (missing executable, permission denied) is
    left to the caller, which knows the engine identity to report.
    """

    name = "local"

    def run(self, command: list[str]) -> CommandResult:
        logger.debug("Running %s", " ".join(command))
        completed = subprocess.run(
            command,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
        if completed.stdout:
            logger.debug(completed.stdout)
        if completed.stderr:
            logger.debug(completed.stderr)
        return CommandResult(
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
