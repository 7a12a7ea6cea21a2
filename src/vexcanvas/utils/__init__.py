"""Utility functions for vexcanvas.

This module provides utility functions including:

- Logging setup and configuration
- Render diagnostics and counters
"""

from vexcanvas.utils.logging import (
    RenderLogger,
    RenderStats,
    configure_logging,
)

__all__ = [
    "RenderLogger",
    "RenderStats",
    "configure_logging",
]
