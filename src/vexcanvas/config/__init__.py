"""Configuration management for vexcanvas.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- FontConfig: Where the bundled font assets live
- CanvasConfig: Drawing context defaults
- LoggingConfig: Logging settings
- VexCanvasSettings: Main application settings
"""

from vexcanvas.config.settings import (
    DEFAULT_FONT_DIR,
    CanvasConfig,
    FontConfig,
    FontRole,
    LoggingConfig,
    ResampleFilter,
    VexCanvasSettings,
    get_default_settings,
)

__all__ = [
    "DEFAULT_FONT_DIR",
    "CanvasConfig",
    "FontConfig",
    "FontRole",
    "LoggingConfig",
    "ResampleFilter",
    "VexCanvasSettings",
    "get_default_settings",
]
