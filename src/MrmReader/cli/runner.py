"""Command runner for coordinating CLI execution.

Manages component lifecycle, resource cleanup, logging configuration,
and error handling for command execution.
"""

from __future__ import annotations

import click

from MrmReader.cli.commands import LatestPapersCommand
from MrmReader.cli.factories import SourceFactory
from MrmReader.config import AppConfig
from MrmReader.renderers import create_output_writer
from MrmReader.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution with proper resource management."""

    def __init__(self, config: AppConfig) -> None:
        """Initialize command runner.

        Args:
            config: Application configuration.
        """
        self.config = config

    def run_latest(self, action: str) -> None:
        """Fetch and display the latest papers.

        Configures logging, creates components, executes the command and
        closes the HTTP session whatever the outcome.

        Args:
            action: The CLI command name (e.g., 'mrm').

        Raises:
            click.Abort: When fetching or writing fails.
        """
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
        source = None
        try:
            source = SourceFactory.create_crossref_source(self.config)
            output_writer = create_output_writer(self.config, self.config.display.to_options())

            command = LatestPapersCommand(
                config=self.config,
                source=source,
                output_writer=output_writer,
            )
            command.execute()
            output_writer.finalize(action)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Run failed: %s", e)
            raise click.Abort from e
        finally:
            if source is not None:
                source.close()
