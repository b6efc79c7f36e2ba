"""Tests for Rect / Viewport geometry."""

import math

import pytest

from ladybug.domain.geometry import Rect, Viewport


class TestOverlap:
    def test_identical_rects_overlap(self):
        """A rect always overlaps itself."""
        r = Rect(10.0, 20.0, 30.0, 40.0)
        assert r.overlaps(Rect(10.0, 20.0, 30.0, 40.0))

    def test_touching_edges_do_not_overlap(self):
        """Shared edges are not a hit (landing on top must not kill)."""
        a = Rect(0.0, 0.0, 10.0, 10.0)
        assert not a.overlaps(Rect(10.0, 0.0, 10.0, 10.0))
        assert not a.overlaps(Rect(0.0, 10.0, 10.0, 10.0))

    def test_separated_on_one_axis(self):
        """Overlap on x alone is not enough."""
        a = Rect(0.0, 0.0, 10.0, 10.0)
        b = Rect(5.0, 50.0, 10.0, 10.0)
        assert not a.overlaps(b)
        assert not b.overlaps(a)

    def test_partial_overlap_is_symmetric(self):
        a = Rect(0.0, 0.0, 10.0, 10.0)
        b = Rect(9.0, 9.0, 10.0, 10.0)
        assert a.overlaps(b)
        assert b.overlaps(a)


class TestRect:
    def test_inset_shrinks_every_side(self):
        r = Rect(100.0, 200.0, 60.0, 60.0).inset(8.0)
        assert r == Rect(108.0, 208.0, 44.0, 44.0)

    def test_inset_never_goes_negative(self):
        r = Rect(0.0, 0.0, 4.0, 4.0).inset(8.0)
        assert r.w == 0.0 and r.h == 0.0

    def test_negative_size_rejected(self):
        with pytest.raises(ValueError):
            Rect(0.0, 0.0, -1.0, 5.0)

    def test_non_finite_rejected(self):
        with pytest.raises(ValueError):
            Rect(math.nan, 0.0, 1.0, 1.0)
        with pytest.raises(ValueError):
            Rect(0.0, 0.0, math.inf, 1.0)


def test_viewport_ground_line():
    """Ground strip is 80px tall at the bottom of the viewport."""
    assert Viewport(800.0, 450.0).ground_y == 370.0
