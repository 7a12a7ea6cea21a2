"""Fixed method table between a scripting host and DrawContext.

Script hosts use browser canvas names (fillStyle, measureText, ...). The
tables below map each of them to the Python member implementing it, so an
adapter only has to marshal arguments and never needs reflection over the
context.
"""

from typing import Any

from vexcanvas.core.context import DrawContext
from vexcanvas.domain.metrics import TextMetrics
from vexcanvas.exceptions import UnknownHostMemberError

METHOD_TABLE: dict[str, str] = {
    "getTransform": "get_transform",
    "setTransform": "set_transform",
    "scale": "scale",
    "translate": "translate",
    "rotate": "rotate",
    "measureChar": "measure_char",
    "measureText": "measure_text",
    "fillText": "fill_text",
    "beginPath": "begin_path",
    "moveTo": "move_to",
    "lineTo": "line_to",
    "closePath": "close_path",
    "quadraticCurveTo": "quadratic_curve_to",
    "bezierCurveTo": "bezier_curve_to",
    "arc": "arc",
    "rect": "rect",
    "fill": "fill",
    "stroke": "stroke",
    "fillRect": "fill_rect",
    "clearRect": "clear_rect",
    "clear": "clear",
    "setLineDash": "set_line_dash",
    "save": "save",
    "restore": "restore",
    "savePng": "save_png",
}

PROPERTY_TABLE: dict[str, str] = {
    "fillStyle": "fill_style",
    "strokeStyle": "stroke_style",
    "lineWidth": "line_width",
    "font": "font",
}


class HostBinding:
    """Dispatches host calls by their canvas names.

    Example:
        binding = HostBinding(ctx)
        binding.set("fillStyle", "red")
        binding.call("fillRect", 0, 0, 10, 10)
        width = binding.call("measureText", "Andante")["width"]
    """

    def __init__(self, context: DrawContext) -> None:
        self._context = context

    @property
    def context(self) -> DrawContext:
        return self._context

    def call(self, name: str, *args: Any) -> Any:
        """Invoke a host method.

        TextMetrics results are returned as dictionaries with browser
        property names.

        Raises:
            UnknownHostMemberError: If name is not in METHOD_TABLE
        """
        try:
            method = getattr(self._context, METHOD_TABLE[name])
        except KeyError:
            raise UnknownHostMemberError(name) from None
        result = method(*args)
        if isinstance(result, TextMetrics):
            return result.to_host_dict()
        return result

    def get(self, name: str) -> Any:
        """Read a host property.

        Raises:
            UnknownHostMemberError: If name is not in PROPERTY_TABLE
        """
        if name not in PROPERTY_TABLE:
            raise UnknownHostMemberError(name)
        return getattr(self._context, PROPERTY_TABLE[name])

    def set(self, name: str, value: Any) -> None:
        """Write a host property.

        Raises:
            UnknownHostMemberError: If name is not in PROPERTY_TABLE
        """
        if name not in PROPERTY_TABLE:
            raise UnknownHostMemberError(name)
        setattr(self._context, PROPERTY_TABLE[name], value)
