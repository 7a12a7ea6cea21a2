"""Exception hierarchy for VexCanvas.

Cosmetic input (font and color strings) never raises. The errors below are
either structural misuse by the caller (PreconditionError and subclasses) or
I/O failures at the edges of the library.
"""


class VexCanvasError(Exception):
    """Base exception for all VexCanvas errors."""

    pass


class PreconditionError(VexCanvasError):
    """A drawing call was issued in a state where it can never succeed."""

    pass


class NoActivePathError(PreconditionError):
    """A path operation was issued before begin_path()."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation}() called with no active path, call begin_path() first")


class InvalidCodepointError(PreconditionError):
    """Codepoint cannot be converted to a character."""

    def __init__(self, codepoint: int) -> None:
        self.codepoint = codepoint
        super().__init__(f"Illegal codepoint {codepoint:#x}, is not a char")


class SurfaceSizeError(PreconditionError):
    """Pixel surface of the requested size cannot be created."""

    def __init__(self, width: int, height: int, reason: str) -> None:
        self.width = width
        self.height = height
        self.reason = reason
        super().__init__(f"Could not create {width}x{height} surface: {reason}")


class GlyphScaleError(PreconditionError):
    """Font cannot be scaled to the requested size."""

    def __init__(self, size: float) -> None:
        self.size = size
        super().__init__(f"Illegal font size {size!r}")


class FontError(VexCanvasError):
    """Errors related to the bundled font assets."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class ImageSaveError(VexCanvasError):
    """Error writing the surface to an image file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save image '{path}': {reason}")


class HostError(VexCanvasError):
    """Errors raised at the boundary with the scripting host."""

    pass


class UnknownHostMemberError(HostError, AttributeError):
    """Host asked for a method or property the context does not expose."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"DrawContext has no host member '{name}'")


class HostCancelledError(HostError):
    """The host requested termination while jobs were still queued."""

    def __init__(self, processed_count: int, pending_count: int) -> None:
        self.processed_count = processed_count
        self.pending_count = pending_count
        super().__init__(
            f"Host cancelled: {processed_count} jobs completed, {pending_count} pending"
        )
