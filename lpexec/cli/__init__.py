"""CLI package for lpexec."""

from __future__ import annotations


def main(argv: list[str] | None = None) -> int:
    from lpexec.cli.__main__ import main as _main

    return _main(argv)

__all__ = ["main"]
