"""CLI application entry point for vexcanvas.

This module provides the main CLI interface using Typer.
"""

import signal
from collections import deque
from pathlib import Path
from typing import Annotated

import typer

from vexcanvas import __version__
from vexcanvas.cli.output import (
    console,
    print_canvas_info,
    print_cancellation_summary,
    print_error,
    print_header,
    print_metrics,
    print_step,
    print_success,
)
from vexcanvas.config import (
    DEFAULT_FONT_DIR,
    CanvasConfig,
    FontConfig,
    LoggingConfig,
    VexCanvasSettings,
)
from vexcanvas.core import DrawContext, FontLibrary
from vexcanvas.core.grammar import parse_font, unparse_font
from vexcanvas.core.text import TextRenderer
from vexcanvas.exceptions import (
    FontLoadError,
    HostCancelledError,
    ImageSaveError,
    VexCanvasError,
)
from vexcanvas.host import CancellationToken, drain_jobs
from vexcanvas.utils.logging import RenderLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="vexcanvas",
    help="Render music notation and text with a canvas-like drawing context.",
    add_completion=False,
    no_args_is_help=True,
)

FontDirOption = Annotated[
    Path,
    typer.Option(
        "--font-dir",
        help="Directory holding the music and text font files",
    ),
]
FontOption = Annotated[
    str,
    typer.Option(
        "--font",
        "-f",
        help="CSS-like font string, e.g. 'bold 24pt Academico'",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]VexCanvas[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Render music notation and text with a canvas-like drawing context."""


@app.command()
def text(
    lines: Annotated[
        list[str],
        typer.Argument(
            help="Text to draw; each argument is drawn as its own line",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Output PNG path",
        ),
    ],
    font: FontOption = "30pt",
    width: Annotated[
        int,
        typer.Option("--width", "-w", help="Canvas width in host units", min=1),
    ] = 400,
    height: Annotated[
        int,
        typer.Option("--height", "-h", help="Canvas height in host units", min=1),
    ] = 100,
    zoom: Annotated[
        float,
        typer.Option("--zoom", "-z", help="Pixel density factor", min=0.01),
    ] = 1.0,
    x: Annotated[
        float,
        typer.Option("--x", help="Pen x of each line"),
    ] = 10.0,
    y: Annotated[
        float,
        typer.Option("--y", help="Baseline y of the first line"),
    ] = 50.0,
    color: Annotated[
        str,
        typer.Option("--color", "-c", help="Text color"),
    ] = "#000",
    background: Annotated[
        str,
        typer.Option("--background", "-b", help="Background color"),
    ] = "#fff",
    font_dir: FontDirOption = DEFAULT_FONT_DIR,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Draw one or more lines of text and save them as a PNG.

    Lines are spaced by the font's ascent plus descent.

    Example:
        vexcanvas text "Allegro" $'\\ue050' -o build/allegro.png --font "24pt"
    """
    settings = VexCanvasSettings(
        fonts=FontConfig(font_dir=font_dir),
        canvas=CanvasConfig(zoom=zoom, background=background, foreground=color),
        logging=LoggingConfig(log_file=log_file),
    )
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    if not quiet:
        print_header(__version__)

    token = CancellationToken()
    previous_handler = signal.signal(
        signal.SIGINT, lambda *_: token.cancel("interrupted by user")
    )

    try:
        ctx = DrawContext(width, height, settings=settings, render_logger=RenderLogger(logger))
        ctx.font = font

        if not quiet:
            print_canvas_info(
                ctx.surface.get_width(), ctx.surface.get_height(), zoom, ctx.font
            )
            print_step("Drawing")

        line_metrics = ctx.measure_text("")
        line_height = line_metrics.font_ascent + line_metrics.font_descent

        jobs: deque = deque()
        for index, line in enumerate(lines):
            jobs.append(
                lambda line=line, index=index: ctx.fill_text(line, x, y + index * line_height)
            )
        drawn = drain_jobs(jobs, token)

        ctx.save_png(output)

        if not quiet:
            print_success(str(output), drawn, ctx.stats)

    except HostCancelledError as e:
        if not quiet:
            print_cancellation_summary(e.processed_count, e.pending_count)
        raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code
    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}", details=e.path)
        raise typer.Exit(code=1)
    except ImageSaveError as e:
        print_error(f"Could not save image: {e.reason}", details=e.path)
        raise typer.Exit(code=1)
    except VexCanvasError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    finally:
        signal.signal(signal.SIGINT, previous_handler)


@app.command()
def measure(
    text: Annotated[
        str,
        typer.Argument(help="Text to measure", show_default=False),
    ],
    font: FontOption = "30pt",
    font_dir: FontDirOption = DEFAULT_FONT_DIR,
) -> None:
    """Print the TextMetrics of a string without drawing it."""
    style = parse_font(font)
    try:
        library = FontLibrary.from_config(FontConfig(font_dir=font_dir))
    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}", details=e.path)
        raise typer.Exit(code=1)

    try:
        metrics = TextRenderer(library, RenderLogger()).measure_text(style, text)
    except VexCanvasError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    finally:
        library.close()

    print_metrics(text, unparse_font(style), metrics)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
