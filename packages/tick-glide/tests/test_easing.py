"""Tests for easing functions."""

import pytest
from tick_glide import EASINGS
from tick_glide.easing import back_in, back_out, bounce_out, elastic_out, quad_in_out


class TestLinearEasing:
    """Test linear easing function."""

    def test_linear_at_zero(self):
        """Linear easing should return 0 at t=0."""
        assert EASINGS["linear"](0.0) == 0.0

    def test_linear_at_half(self):
        assert EASINGS["linear"](0.5) == 0.5

    def test_linear_at_one(self):
        assert EASINGS["linear"](1.0) == 1.0


class TestQuadEasing:
    """Test the quadratic family and its short aliases."""

    def test_ease_in_at_half(self):
        """Ease-in easing should return 0.25 at t=0.5 (t*t)."""
        assert EASINGS["ease_in"](0.5) == 0.25

    def test_ease_out_at_half(self):
        """Ease-out easing should return 0.75 at t=0.5 (t*(2-t))."""
        assert EASINGS["ease_out"](0.5) == 0.75

    def test_ease_in_out_symmetry(self):
        assert quad_in_out(0.25) == 0.125
        assert quad_in_out(0.75) == 0.875

    def test_aliases(self):
        assert EASINGS["ease_in"] is EASINGS["quad_in"]
        assert EASINGS["ease_in_out"] is EASINGS["quad_in_out"]


@pytest.mark.parametrize("name", sorted(EASINGS))
def test_endpoints(name):
    """Every easing starts at 0 and ends at 1."""
    ease = EASINGS[name]
    assert ease(0.0) == pytest.approx(0.0, abs=1e-6)
    assert ease(1.0) == pytest.approx(1.0, abs=1e-6)


@pytest.mark.parametrize("family", ["quad", "cubic", "quart", "quint", "sine", "expo", "circ"])
def test_in_out_midpoint(family):
    assert EASINGS[f"{family}_in_out"](0.5) == pytest.approx(0.5)


class TestOvershoot:
    """Back and elastic curves leave [0, 1]."""

    def test_back_in_dips_below_zero(self):
        assert back_in(0.2) < 0

    def test_back_out_exceeds_one(self):
        assert back_out(0.8) > 1

    def test_elastic_out_exceeds_one(self):
        assert max(elastic_out(i / 100) for i in range(101)) > 1


def test_bounce_out_touches_one_on_first_landing():
    assert bounce_out(1 / 2.75) == pytest.approx(1.0)
    assert bounce_out(0.5) < 1.0
