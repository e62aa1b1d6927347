"""Output renderers for command results.

Provides abstraction and implementations for writing framed papers to
the terminal and to plain-text files, plus a factory function to
instantiate writers based on configuration.
"""

from __future__ import annotations

from MrmReader.config import AppConfig
from MrmReader.core.models import DisplayOptions
from MrmReader.renderers.base import MultiOutputWriter, OutputWriter
from MrmReader.renderers.console import ConsoleOutputWriter, format_paper, format_papers, render_text
from MrmReader.renderers.text import TextFileWriter


def create_output_writer(config: AppConfig, options: DisplayOptions) -> OutputWriter:
    """Create output writer based on config.

    Args:
        config: Application configuration.
        options: Display options shared by all writers.

    Returns:
        Appropriate OutputWriter instance for configured formats.
    """
    writers: list[OutputWriter] = []
    if "console" in config.output.formats:
        writers.append(ConsoleOutputWriter(options))
    if "text" in config.output.formats:
        writers.append(TextFileWriter(config.output.base_dir, options))

    if not writers:
        raise ValueError("No output writers configured")
    return MultiOutputWriter(writers)


__all__ = [
    "OutputWriter",
    "ConsoleOutputWriter",
    "TextFileWriter",
    "MultiOutputWriter",
    "format_paper",
    "format_papers",
    "render_text",
    "create_output_writer",
]
