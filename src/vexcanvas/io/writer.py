"""Image writer for saving drawing surfaces.

This module provides the PngWriter class for writing a cairo image surface
to disk as a PNG file.
"""

from pathlib import Path

import cairo

from vexcanvas.exceptions import ImageSaveError


class PngWriter:
    """Writes a surface to a PNG file.

    Missing parent directories are created first, so hosts can write into
    per-test output folders without preparing them.

    Example:
        writer = PngWriter(surface, Path("build/images/test.png"))
        writer.save()
    """

    def __init__(self, surface: cairo.ImageSurface, output_path: Path) -> None:
        """Initialize the PNG writer.

        Args:
            surface: The surface to serialize
            output_path: Path where the image will be saved
        """
        self._surface = surface
        self._output_path = output_path

    @property
    def output_path(self) -> Path:
        return self._output_path

    def save(self) -> None:
        """Save the surface to the output path.

        Raises:
            ImageSaveError: If the directory or file cannot be written
        """
        try:
            self._output_path.parent.mkdir(parents=True, exist_ok=True)
            self._surface.flush()
            self._surface.write_to_png(str(self._output_path))
        except (OSError, cairo.Error) as e:
            raise ImageSaveError(str(self._output_path), str(e)) from e
