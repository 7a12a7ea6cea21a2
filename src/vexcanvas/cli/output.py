"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from vexcanvas.domain.metrics import TextMetrics
from vexcanvas.utils.logging import RenderStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]VexCanvas[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_canvas_info(width: int, height: int, zoom: float, font: str) -> None:
    """Print the size and font of the canvas being drawn.

    Args:
        width: Surface width in pixels
        height: Surface height in pixels
        zoom: Pixel density factor
        font: Normalized font string
    """
    console.print(f"  {width}x{height} px {SYM_DOT} zoom {zoom:g} {SYM_DOT} {font}")


def print_metrics(text: str, font: str, metrics: TextMetrics) -> None:
    """Print text measurements as a table.

    Args:
        text: The measured string
        font: Normalized font string it was measured with
        metrics: Measurement result
    """
    table = Table(title=f"{text!r} in {font}", title_justify="left")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    for name, value in metrics.to_host_dict().items():
        table.add_row(name, f"{value:.2f}")
    console.print(table)


def print_success(output_path: str, lines: int, stats: RenderStats) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to the written image
        lines: Number of text lines drawn
        stats: Render counters of the context
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green]")

    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)

    missing_style = "red" if stats.missing_glyphs > 0 else "green"
    console.print(
        f"  {lines} lines {SYM_DOT} {stats.glyphs_drawn} glyphs {SYM_DOT} "
        f"[{missing_style}]{stats.missing_glyphs} missing[/{missing_style}]"
    )
    if stats.missing_codepoints:
        codepoints = " ".join(f"U+{cp:04X}" for cp in sorted(stats.missing_codepoints))
        console.print(f"  [dim]no glyph for {codepoints}[/dim]")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_cancellation_summary(processed: int, cancelled: int) -> None:
    """Print cancellation summary.

    Args:
        processed: Number of lines drawn before cancellation
        cancelled: Number of lines that were not drawn
    """
    console.print(f"\n{SYM_DOT} [bold]Cancelled[/bold]")
    console.print(f"  {processed} lines drawn {SYM_DOT} {cancelled} lines skipped")
    console.print("  No output file created")
