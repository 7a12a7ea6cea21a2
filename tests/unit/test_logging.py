"""Unit tests for logging utilities."""

import logging
from unittest.mock import MagicMock

import pytest

from vexcanvas.utils.logging import RenderLogger, RenderStats, configure_logging


@pytest.fixture
def restore_root_handlers():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


class TestRenderStats:
    """Tests for RenderStats."""

    def test_defaults(self):
        stats = RenderStats()
        assert stats.glyphs_drawn == 0
        assert stats.missing_codepoints == set()


class TestRenderLogger:
    """Tests for RenderLogger."""

    def test_missing_glyph(self):
        mock = MagicMock()
        render_logger = RenderLogger(mock)
        render_logger.log_missing_glyph(0xE050)

        mock.warning.assert_called_once_with("No glyph found", codepoint="U+E050")
        assert render_logger.stats.missing_glyphs == 1
        assert render_logger.stats.missing_codepoints == {0xE050}

    def test_missing_codepoints_are_distinct(self):
        """Test drawing the same missing glyph again only bumps the counter."""
        render_logger = RenderLogger(MagicMock())
        for _ in range(50):
            render_logger.log_missing_glyph(0x2003)
        render_logger.log_missing_glyph(0xE050)

        assert render_logger.stats.missing_glyphs == 51
        assert render_logger.stats.missing_codepoints == {0x2003, 0xE050}

    def test_skipped_arc(self):
        mock = MagicMock()
        render_logger = RenderLogger(mock)
        render_logger.log_skipped_arc(0.0, 3.14)

        assert mock.warning.call_args.kwargs == {"start_angle": 0.0, "end_angle": 3.14}
        assert render_logger.stats.skipped_arcs == 1

    def test_counters(self):
        render_logger = RenderLogger(MagicMock())
        render_logger.log_glyph_drawn(0x41, 18, 30)
        render_logger.log_unmapped_codepoint(0x263A, "AcademicoRegular")
        render_logger.log_empty_restore()
        stats = render_logger.stats
        assert stats.glyphs_drawn == 1
        assert stats.unmapped_codepoints == 1
        assert stats.empty_restores == 1

    def test_default_logger(self):
        """Test a structlog logger is created when none is given."""
        render_logger = RenderLogger()
        render_logger.log_empty_restore()
        assert render_logger.stats.empty_restores == 1


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_without_file(self, restore_root_handlers):
        before = len(logging.getLogger().handlers)
        logger = configure_logging()
        assert logger is not None
        handlers = logging.getLogger().handlers[before:]
        assert len(handlers) == 1
        assert not isinstance(handlers[0], logging.FileHandler)

    def test_with_file(self, tmp_path, restore_root_handlers):
        log_file = tmp_path / "logs" / "vexcanvas.log"
        configure_logging(log_file=log_file, quiet=True)

        handlers = logging.getLogger().handlers
        file_handlers = [h for h in handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].level == logging.DEBUG
        assert log_file.parent.is_dir()

    def test_quiet_console(self, restore_root_handlers):
        before = len(logging.getLogger().handlers)
        configure_logging(console_level="DEBUG", quiet=True)
        console_handler = logging.getLogger().handlers[before]
        assert console_handler.level == logging.ERROR
