"""CLI package for the mrm command.

This package contains the modular CLI components, factored into separate
modules for better maintainability and testability.
"""

from __future__ import annotations

__all__ = ["CommandRunner", "cli", "main"]

from MrmReader.cli.runner import CommandRunner
from MrmReader.cli.ui import cli


def main() -> None:
    """Run the mrm CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
