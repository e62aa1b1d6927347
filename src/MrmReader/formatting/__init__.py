"""Plain-text rendering pipeline.

Pure string transformations composed by the paper formatter: markup
cleanup, abstract segmentation, ANSI-aware wrapping and framing.
"""

from __future__ import annotations

from MrmReader.formatting.ansi import strip_ansi, visible_width
from MrmReader.formatting.clean import clean_text
from MrmReader.formatting.frame import render_frame
from MrmReader.formatting.segment import segment_abstract
from MrmReader.formatting.wrap import wrap_text

__all__ = [
    "clean_text",
    "render_frame",
    "segment_abstract",
    "strip_ansi",
    "visible_width",
    "wrap_text",
]
