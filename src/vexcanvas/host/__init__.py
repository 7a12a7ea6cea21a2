"""Host integration layer for vexcanvas.

Everything a scripting host needs that is not drawing itself:

- binding: Canvas-named method and property tables over DrawContext
- loop: Job draining with an explicit cancellation token
"""

from vexcanvas.host.binding import METHOD_TABLE, PROPERTY_TABLE, HostBinding
from vexcanvas.host.loop import CancellationToken, drain_jobs

__all__ = [
    "METHOD_TABLE",
    "PROPERTY_TABLE",
    "CancellationToken",
    "HostBinding",
    "drain_jobs",
]
