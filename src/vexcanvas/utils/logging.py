"""Logging utilities for VexCanvas."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class RenderStats:
    """Counters for the recoverable edge cases hit while drawing."""

    glyphs_drawn: int = 0
    missing_glyphs: int = 0
    unmapped_codepoints: int = 0
    skipped_arcs: int = 0
    empty_restores: int = 0
    # Distinct codepoints, however often each was drawn
    missing_codepoints: set[int] = field(default_factory=set)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("vexcanvas")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class RenderLogger:
    """Logger for drawing diagnostics and statistics.

    Each drawing context owns one. Recoverable edge cases (missing glyph
    outlines, unsupported arcs, unbalanced restore) are reported here instead
    of being raised.
    """

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("vexcanvas")
        self._stats = RenderStats()

    def log_glyph_drawn(self, codepoint: int, width: int, height: int) -> None:
        """Log a glyph bitmap composited onto the surface."""
        self._logger.debug(
            "Glyph drawn",
            codepoint=f"U+{codepoint:04X}",
            width=width,
            height=height,
        )
        self._stats.glyphs_drawn += 1

    def log_missing_glyph(self, codepoint: int) -> None:
        """Log a codepoint whose glyph has no outline."""
        self._logger.warning("No glyph found", codepoint=f"U+{codepoint:04X}")
        self._stats.missing_glyphs += 1
        self._stats.missing_codepoints.add(codepoint)

    def log_unmapped_codepoint(self, codepoint: int, font: str) -> None:
        """Log a codepoint absent from the cmap of the chosen font."""
        self._logger.debug(
            "Codepoint not in cmap, using .notdef",
            codepoint=f"U+{codepoint:04X}",
            font=font,
        )
        self._stats.unmapped_codepoints += 1

    def log_skipped_arc(self, start_angle: float, end_angle: float) -> None:
        """Log an arc sweep that is not a full circle."""
        self._logger.warning(
            "Non circle arc encountered, ignoring",
            start_angle=start_angle,
            end_angle=end_angle,
        )
        self._stats.skipped_arcs += 1

    def log_empty_restore(self) -> None:
        """Log restore() on an empty save stack."""
        self._logger.warning("restore() called with empty stack")
        self._stats.empty_restores += 1

    def log_surface_saved(self, path: Path, width: int, height: int) -> None:
        """Log a surface written to disk."""
        self._logger.info("Surface saved", path=str(path), width=width, height=height)

    @property
    def stats(self) -> RenderStats:
        """Get current render statistics."""
        return self._stats
