"""Unit tests for configuration models."""

import pytest
from pydantic import ValidationError

from vexcanvas.config import (
    DEFAULT_FONT_DIR,
    CanvasConfig,
    FontConfig,
    FontRole,
    ResampleFilter,
    VexCanvasSettings,
    get_default_settings,
)


class TestFontConfig:
    """Tests for FontConfig."""

    def test_defaults(self):
        config = FontConfig()
        assert config.font_dir == DEFAULT_FONT_DIR
        assert config.path_for(FontRole.MUSIC) == DEFAULT_FONT_DIR / "Bravura.otf"
        assert config.path_for(FontRole.BOLD_ITALIC).name == "AcademicoBoldItalic.otf"

    def test_every_role_has_a_file(self, tmp_path):
        config = FontConfig(font_dir=tmp_path)
        paths = {config.path_for(role) for role in FontRole}
        assert len(paths) == 5
        assert all(path.parent == tmp_path for path in paths)


class TestCanvasConfig:
    """Tests for CanvasConfig."""

    def test_defaults(self):
        config = CanvasConfig()
        assert config.zoom == 1.0
        assert config.background == "#fff"
        assert config.foreground == "#000"
        assert config.arc_epsilon == 1e-10
        assert config.resample_filter == ResampleFilter.BEST

    @pytest.mark.parametrize("zoom", [0.0, -2.0])
    def test_zoom_must_be_positive(self, zoom):
        with pytest.raises(ValidationError):
            CanvasConfig(zoom=zoom)

    def test_filter_from_string(self):
        assert CanvasConfig(resample_filter="bilinear").resample_filter == ResampleFilter.BILINEAR


class TestSettings:
    """Tests for VexCanvasSettings."""

    def test_default_settings(self):
        settings = get_default_settings()
        assert isinstance(settings, VexCanvasSettings)
        assert settings.logging.log_file is None
        assert settings.logging.log_level == "WARNING"
