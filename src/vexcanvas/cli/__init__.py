"""Command-line interface for vexcanvas.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Render text and music symbols to PNG
- Measure text with the bundled fonts
- Detailed error reporting
"""

from vexcanvas.cli.app import cli, main

__all__ = ["cli", "main"]
