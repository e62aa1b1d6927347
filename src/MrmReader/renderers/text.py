"""Plain-text file output.

Collects framed papers during a run and writes them, without color codes,
to a timestamped file when the command finalizes.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from pathlib import Path
from typing import Sequence

from MrmReader.core.models import DisplayOptions, Palette, PaperRecord
from MrmReader.formatting import strip_ansi
from MrmReader.renderers.base import OutputWriter
from MrmReader.renderers.console import render_text
from MrmReader.utils.log import log


class TextFileWriter(OutputWriter):
    """Write framed papers to ``<base_dir>/<action>_<timestamp>.txt``."""

    def __init__(self, base_dir: str, options: DisplayOptions) -> None:
        """Initialize the writer.

        Args:
            base_dir: Output directory; created on finalize.
            options: Display options; colors are always disabled for files.
        """
        self.base_dir = Path(base_dir)
        self.options = replace(options, palette=Palette.plain())
        self._chunks: list[str] = []
        self.output_path: Path | None = None

    def write_papers(self, papers: Sequence[PaperRecord]) -> None:
        """Buffer rendered papers until finalize."""
        self._chunks.append(strip_ansi(render_text(papers, self.options)))

    def finalize(self, action: str) -> None:
        """Write buffered papers to disk.

        Args:
            action: Command name used as the file name stem.
        """
        payload = "".join(self._chunks)
        if not payload:
            log.info("No papers to write to %s", self.base_dir)
            return

        self.base_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = self.base_dir / f"{action}_{timestamp}.txt"
        output_path.write_text(payload, encoding="utf-8")
        log.info("Text saved to %s", output_path)
        self.output_path = output_path
