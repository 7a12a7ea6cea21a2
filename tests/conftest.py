"""Shared fixtures: a font library built from synthetic fonts and contexts over it."""

from pathlib import Path

import pytest
from font_factory import build_font_set

from vexcanvas.config import FontConfig, VexCanvasSettings
from vexcanvas.core.context import DrawContext
from vexcanvas.core.fonts import FontLibrary
from vexcanvas.utils.logging import RenderLogger


@pytest.fixture(scope="session")
def font_config(tmp_path_factory: pytest.TempPathFactory) -> FontConfig:
    """Config pointing at all five synthetic fonts under their default names."""
    return build_font_set(tmp_path_factory.mktemp("fonts"))


@pytest.fixture(scope="session")
def font_dir(font_config: FontConfig) -> Path:
    return font_config.font_dir


@pytest.fixture(scope="session")
def library(font_config: FontConfig):
    """Font library shared by all tests; it is never mutated."""
    fonts = FontLibrary.from_config(font_config)
    yield fonts
    fonts.close()


@pytest.fixture
def settings(font_config: FontConfig) -> VexCanvasSettings:
    return VexCanvasSettings(fonts=font_config)


@pytest.fixture
def render_logger() -> RenderLogger:
    return RenderLogger()


@pytest.fixture
def make_context(library: FontLibrary, settings: VexCanvasSettings, render_logger: RenderLogger):
    """Factory for contexts sharing the session font library and a test logger."""

    def _make(
        width: int = 100,
        height: int = 60,
        zoom: float = 1.0,
        background: str = "#fff",
        foreground: str = "#000",
    ) -> DrawContext:
        return DrawContext(
            width,
            height,
            zoom,
            background,
            foreground,
            fonts=library,
            settings=settings,
            render_logger=render_logger,
        )

    return _make


@pytest.fixture
def ctx(make_context) -> DrawContext:
    """100x60 context at zoom 1, white background, black foreground."""
    return make_context()
