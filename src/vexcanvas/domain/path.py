"""Path segment types.

A path is an ordered list of segments in host (untransformed) coordinates.
Segments are immutable so a finished copy of a path can be replayed any
number of times by fill() and stroke().
"""

from dataclasses import dataclass
from enum import Enum, auto


class SegmentKind(Enum):
    """Kind of a path segment."""

    MOVE = auto()
    LINE = auto()
    QUAD = auto()
    CUBIC = auto()
    CLOSE = auto()
    CIRCLE = auto()
    RECT = auto()


@dataclass(frozen=True, slots=True)
class Point:
    """A point in host coordinates."""

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class Segment:
    """One path command.

    Attributes:
        kind: Command type
        points: Control and end points, in drawing order
        radius: Circle radius (CIRCLE only)
        size: (width, height) of a RECT, anchored at points[0]
    """

    kind: SegmentKind
    points: tuple[Point, ...] = ()
    radius: float = 0.0
    size: tuple[float, float] = (0.0, 0.0)

    @classmethod
    def move(cls, x: float, y: float) -> "Segment":
        return cls(SegmentKind.MOVE, (Point(x, y),))

    @classmethod
    def line(cls, x: float, y: float) -> "Segment":
        return cls(SegmentKind.LINE, (Point(x, y),))

    @classmethod
    def quad(cls, x1: float, y1: float, x: float, y: float) -> "Segment":
        return cls(SegmentKind.QUAD, (Point(x1, y1), Point(x, y)))

    @classmethod
    def cubic(
        cls, x1: float, y1: float, x2: float, y2: float, x: float, y: float
    ) -> "Segment":
        return cls(SegmentKind.CUBIC, (Point(x1, y1), Point(x2, y2), Point(x, y)))

    @classmethod
    def close(cls) -> "Segment":
        return cls(SegmentKind.CLOSE)

    @classmethod
    def circle(cls, x: float, y: float, radius: float) -> "Segment":
        return cls(SegmentKind.CIRCLE, (Point(x, y),), radius=radius)

    @classmethod
    def rect(cls, x: float, y: float, width: float, height: float) -> "Segment":
        return cls(SegmentKind.RECT, (Point(x, y),), size=(width, height))

    @property
    def end_point(self) -> Point | None:
        """Where the pen ends up after this segment, if it moves the pen."""
        if self.kind in (SegmentKind.CLOSE, SegmentKind.CIRCLE, SegmentKind.RECT):
            return None
        return self.points[-1]
