"""Tests for domain models to verify they work correctly."""

import pytest

from vexcanvas.domain import (
    AffineTransform,
    Color,
    FontStyle,
    PixelBounds,
    Point,
    Rect,
    Segment,
    SegmentKind,
    TextMetrics,
    pt_to_px,
)


class TestColor:
    """Tests for Color class."""

    def test_default_alpha_is_opaque(self) -> None:
        assert Color(0.5, 0.5, 0.5).alpha == 1.0

    def test_to_bytes_rounds(self) -> None:
        """Test channels round to the nearest byte."""
        assert Color(0.5, 1.0, 0.0, 0.2).to_bytes() == (128, 255, 0, 51)

    def test_premultiplied(self) -> None:
        assert Color(1.0, 0.5, 0.0, 0.5).premultiplied() == (0.5, 0.25, 0.0, 0.5)
        assert Color(1.0, 1.0, 1.0, 1.0).premultiplied(0.25) == (0.25, 0.25, 0.25, 0.25)

    def test_color_immutable(self) -> None:
        c = Color.black()
        with pytest.raises(AttributeError):
            c.red = 1.0  # type: ignore[misc]


class TestFontStyle:
    """Tests for FontStyle class."""

    def test_defaults(self) -> None:
        style = FontStyle()
        assert style.family == ()
        assert style.size == 30.0
        assert not style.bold
        assert not style.italic

    def test_pt_to_px(self) -> None:
        """Test 1pt is 4/3 px, exactly for multiples of 3."""
        assert pt_to_px(30.0) == 40.0
        assert pt_to_px(24.0) == 32.0


class TestAffineTransform:
    """Tests for AffineTransform class."""

    def test_identity(self) -> None:
        assert AffineTransform.identity().to_list() == [1.0, 0.0, 0.0, 1.0, 0.0, 0.0]

    def test_then_applies_operation_first(self) -> None:
        """Test scale then translate moves by the scaled amount."""
        t = AffineTransform.from_scale(2.0, 3.0).then(AffineTransform.from_translate(10.0, 10.0))
        assert t.to_list() == [2.0, 0.0, 0.0, 3.0, 20.0, 30.0]

    def test_rotation_quarter_turn(self) -> None:
        t = AffineTransform.from_rotate(90.0)
        assert t.to_list() == pytest.approx([0.0, -1.0, 1.0, 0.0, 0.0, 0.0], abs=1e-12)

    def test_from_list_roundtrip(self) -> None:
        values = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
        assert AffineTransform.from_list(values).to_list() == values

    @pytest.mark.parametrize("values", [[], [1.0] * 5, [1.0] * 7])
    def test_from_list_wrong_length(self, values: list[float]) -> None:
        with pytest.raises(ValueError, match="6 values"):
            AffineTransform.from_list(values)

    def test_max_scale(self) -> None:
        assert AffineTransform.from_scale(2.0, -3.0).max_scale() == 3.0

    def test_max_scale_quarter_turn_falls_back_to_columns(self) -> None:
        """Test a rotated scale still reports its magnification."""
        t = AffineTransform.from_scale(2.0, 2.0).then(AffineTransform(0.0, -1.0, 1.0, 0.0))
        assert t.max_scale() == pytest.approx(2.0)


class TestRect:
    """Tests for Rect class."""

    def test_normalized_negative_extents(self) -> None:
        assert Rect.normalized(10.0, 20.0, -4.0, -6.0) == Rect(6.0, 14.0, 4.0, 6.0)

    def test_normalized_positive_unchanged(self) -> None:
        assert Rect.normalized(1.0, 2.0, 3.0, 4.0) == Rect(1.0, 2.0, 3.0, 4.0)


class TestSegment:
    """Tests for path segments."""

    def test_end_points(self) -> None:
        assert Segment.line(1.0, 2.0).end_point == Point(1.0, 2.0)
        assert Segment.cubic(0, 0, 1, 1, 5, 6).end_point == Point(5, 6)
        assert Segment.close().end_point is None
        assert Segment.circle(0, 0, 3).end_point is None

    def test_rect_segment(self) -> None:
        segment = Segment.rect(1.0, 2.0, 3.0, 4.0)
        assert segment.kind is SegmentKind.RECT
        assert segment.size == (3.0, 4.0)


class TestPixelBounds:
    """Tests for PixelBounds class."""

    def test_enclosing_rounds_outwards(self) -> None:
        bounds = PixelBounds.enclosing(1.2, -3.5, 4.0, 0.1)
        assert bounds == PixelBounds(1, -4, 4, 1)
        assert bounds.width == 3
        assert bounds.height == 5


class TestTextMetrics:
    """Tests for TextMetrics class."""

    def test_followed_by(self) -> None:
        first = TextMetrics(10.0, 8.0, 2.0, ink_ascent=5.0, ink_descent=1.0, ink_right=9.0)
        second = TextMetrics(6.0, 8.0, 2.0, ink_ascent=7.0, ink_descent=0.0, ink_right=5.0)
        combined = first.followed_by(second)
        assert combined.width == 16.0
        assert combined.ink_right == 15.0
        assert combined.ink_ascent == 7.0
        assert combined.ink_descent == 1.0

    def test_to_host_dict_names(self) -> None:
        data = TextMetrics(1.0, 2.0, 3.0).to_host_dict()
        assert data["width"] == 1.0
        assert data["fontBoundingBoxAscent"] == 2.0
        assert data["fontBoundingBoxDescent"] == 3.0
        assert set(data) >= {"actualBoundingBoxLeft", "actualBoundingBoxRight"}
