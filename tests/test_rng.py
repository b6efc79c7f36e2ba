"""Tests for uniform() over a RandomSource."""

import random

import pytest

from ladybug.domain.rng import uniform


def test_uniform_maps_unit_interval(make_rng):
    assert uniform(make_rng(0.0), 40.0, 70.0) == 40.0
    assert uniform(make_rng(0.5), 40.0, 70.0) == pytest.approx(55.0)


def test_uniform_never_returns_upper_bound(make_rng):
    """Even the largest double below 1.0 stays inside the half-open range."""
    v = uniform(make_rng(1.0 - 2.0 ** -53), 40.0, 70.0)
    assert 40.0 <= v < 70.0


def test_uniform_degenerate_range(make_rng):
    assert uniform(make_rng(0.7), 3.0, 3.0) == 3.0


def test_uniform_rejects_inverted_range(make_rng):
    with pytest.raises(ValueError):
        uniform(make_rng(0.1), 2.0, 1.0)


def test_stdlib_random_satisfies_protocol():
    rng = random.Random(7)
    for _ in range(200):
        assert 0.9 <= uniform(rng, 0.9, 1.8) < 1.8
