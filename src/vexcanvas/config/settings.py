"""Configuration settings for VexCanvas."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_FONT_DIR = Path(__file__).resolve().parent.parent / "fonts"


class FontRole(str, Enum):
    """Slot a font asset fills in the font library."""

    MUSIC = "music"
    REGULAR = "regular"
    ITALIC = "italic"
    BOLD = "bold"
    BOLD_ITALIC = "bold_italic"


class ResampleFilter(str, Enum):
    """Resampling filter used when compositing rendered glyphs."""

    BEST = "best"
    GOOD = "good"
    BILINEAR = "bilinear"


class FontConfig(BaseModel):
    """Location of the five bundled font assets.

    The music font covers the SMuFL private-use range, the four text fonts
    cover everything else and are picked by the bold/italic flags.
    """

    font_dir: Path = Field(
        default=DEFAULT_FONT_DIR,
        description="Directory holding the bundled font files",
    )
    music: str = Field(
        default="Bravura.otf",
        description="Music notation (SMuFL) font file name",
    )
    regular: str = Field(
        default="AcademicoRegular.otf",
        description="Regular text font file name",
    )
    italic: str = Field(
        default="AcademicoItalic.otf",
        description="Italic text font file name",
    )
    bold: str = Field(
        default="AcademicoBold.otf",
        description="Bold text font file name",
    )
    bold_italic: str = Field(
        default="AcademicoBoldItalic.otf",
        description="Bold italic text font file name",
    )

    def path_for(self, role: FontRole) -> Path:
        """Get the full path of the font asset for a role.

        Args:
            role: Library slot to look up

        Returns:
            Path inside font_dir
        """
        return self.font_dir / getattr(self, role.value)


class CanvasConfig(BaseModel):
    """Defaults for newly created drawing contexts."""

    zoom: float = Field(
        default=1.0,
        gt=0.0,
        description="Pixel density factor applied on top of host coordinates",
    )
    background: str = Field(
        default="#fff",
        description="Initial clear color (CSS color string)",
    )
    foreground: str = Field(
        default="#000",
        description="Initial fill and stroke color (CSS color string)",
    )
    arc_epsilon: float = Field(
        default=1e-10,
        gt=0.0,
        le=1e-3,
        description="Tolerance when recognizing a full-circle arc sweep",
    )
    resample_filter: ResampleFilter = Field(
        default=ResampleFilter.BEST,
        description="Filter used to composite glyph bitmaps through the transform",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class VexCanvasSettings(BaseModel):
    """Main application settings."""

    fonts: FontConfig = Field(default_factory=FontConfig)
    canvas: CanvasConfig = Field(default_factory=CanvasConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> VexCanvasSettings:
    """Get default application settings."""
    return VexCanvasSettings()
