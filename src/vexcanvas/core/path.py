"""Path construction and replay.

PathBuilder records canvas path commands in host coordinates. fill() and
stroke() replay a finished copy onto a cairo context, leaving the builder
untouched so the same path can be filled and then stroked.
"""

import math

import cairo

from vexcanvas.domain.path import Point, Segment, SegmentKind


class PathBuilder:
    """Accumulates path segments between begin_path() and fill()/stroke()."""

    def __init__(self) -> None:
        self._segments: list[Segment] = []

    def move_to(self, x: float, y: float) -> None:
        self._segments.append(Segment.move(x, y))

    def line_to(self, x: float, y: float) -> None:
        self._segments.append(Segment.line(x, y))

    def quad_to(self, x1: float, y1: float, x: float, y: float) -> None:
        self._segments.append(Segment.quad(x1, y1, x, y))

    def cubic_to(self, x1: float, y1: float, x2: float, y2: float, x: float, y: float) -> None:
        self._segments.append(Segment.cubic(x1, y1, x2, y2, x, y))

    def close(self) -> None:
        self._segments.append(Segment.close())

    def push_circle(self, x: float, y: float, radius: float) -> None:
        """Add a full circle as its own closed subpath."""
        self._segments.append(Segment.circle(x, y, radius))

    def push_rect(self, x: float, y: float, width: float, height: float) -> None:
        """Add a rectangle as its own closed subpath."""
        self._segments.append(Segment.rect(x, y, width, height))

    def finish(self) -> tuple[Segment, ...]:
        """Snapshot of the segments recorded so far."""
        return tuple(self._segments)

    def __len__(self) -> int:
        return len(self._segments)


def replay_path(segments: tuple[Segment, ...], context: cairo.Context) -> None:
    """Build a cairo path from recorded segments.

    Quadratic curves are raised to cubics since cairo only draws cubics. A
    curve or line with no current point starts a subpath at its first point,
    as canvas does.

    Args:
        segments: Finished path
        context: Target context; its current matrix applies
    """
    context.new_path()
    current: Point | None = None
    start: Point | None = None

    for segment in segments:
        kind = segment.kind
        if kind is SegmentKind.MOVE:
            current = start = segment.points[0]
            context.move_to(*current.to_tuple())
        elif kind is SegmentKind.CLOSE:
            if current is not None:
                context.close_path()
                current = start
        elif kind is SegmentKind.CIRCLE:
            center = segment.points[0]
            context.new_sub_path()
            context.arc(center.x, center.y, segment.radius, 0.0, 2.0 * math.pi)
            context.close_path()
            current = start = None
        elif kind is SegmentKind.RECT:
            corner = segment.points[0]
            width, height = segment.size
            context.rectangle(corner.x, corner.y, width, height)
            current = start = corner
        else:
            if current is None:
                current = start = segment.points[0]
                context.move_to(*current.to_tuple())
            if kind is SegmentKind.LINE:
                context.line_to(*segment.points[0].to_tuple())
            elif kind is SegmentKind.QUAD:
                control, end = segment.points
                context.curve_to(
                    current.x + 2.0 / 3.0 * (control.x - current.x),
                    current.y + 2.0 / 3.0 * (control.y - current.y),
                    end.x + 2.0 / 3.0 * (control.x - end.x),
                    end.y + 2.0 / 3.0 * (control.y - end.y),
                    end.x,
                    end.y,
                )
            else:
                c1, c2, end = segment.points
                context.curve_to(c1.x, c1.y, c2.x, c2.y, end.x, end.y)
            current = segment.end_point
