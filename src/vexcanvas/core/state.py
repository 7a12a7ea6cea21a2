"""Draw state and the save/restore stack.

The draw state is everything save() checkpoints: colors, line width, font
and transform. The pixel surface and the path under construction are not
part of it.
"""

from dataclasses import dataclass, field, replace

from vexcanvas.domain.geometry import AffineTransform
from vexcanvas.domain.style import Color, FontStyle


@dataclass(frozen=True)
class DrawState:
    """Immutable bundle of the current drawing attributes.

    Attributes:
        line_width: Stroke width in user units
        fill_style: Color for fill(), fill_rect() and text
        stroke_style: Color for stroke()
        clear_style: Color written by clear_rect()
        font: Current font description
        transform: User space to device pixel transform
    """

    line_width: float = 1.0
    fill_style: Color = field(default_factory=Color.black)
    stroke_style: Color = field(default_factory=Color.black)
    clear_style: Color = field(default_factory=lambda: Color(1.0, 1.0, 1.0, 1.0))
    font: FontStyle = field(default_factory=FontStyle)
    transform: AffineTransform = field(default_factory=AffineTransform.identity)

    def with_transform(self, operation: AffineTransform) -> "DrawState":
        """Copy with an operation composed onto the transform."""
        return replace(self, transform=self.transform.then(operation))


class StateStack:
    """LIFO stack of draw state snapshots."""

    def __init__(self) -> None:
        self._snapshots: list[DrawState] = []

    def push(self, state: DrawState) -> None:
        # DrawState is frozen, storing the instance is a copy by value
        self._snapshots.append(state)

    def pop(self) -> DrawState | None:
        """Remove and return the latest snapshot, or None if empty."""
        if not self._snapshots:
            return None
        return self._snapshots.pop()

    def __len__(self) -> int:
        return len(self._snapshots)

    def __bool__(self) -> bool:
        return bool(self._snapshots)
