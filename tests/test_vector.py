"""
Tests for the zero-safe vector helpers.
"""

import math

import pygame
import pytest

from emergence.core import vector


class TestArithmetic:
    """add / subtract / scale / divide."""

    def test_add_and_subtract_return_new_vectors(self):
        a = pygame.Vector2(1, 2)
        b = pygame.Vector2(3, 5)
        assert vector.add(a, b) == pygame.Vector2(4, 7)
        assert vector.subtract(b, a) == pygame.Vector2(2, 3)
        assert a == pygame.Vector2(1, 2)

    def test_scale(self):
        assert vector.scale(pygame.Vector2(1, -2), 3) == pygame.Vector2(3, -6)

    def test_divide(self):
        assert vector.divide(pygame.Vector2(4, 8), 4) == pygame.Vector2(1, 2)

    def test_divide_by_zero_is_noop(self):
        v = pygame.Vector2(3, 4)
        result = vector.divide(v, 0)
        assert result == v
        assert result is not v


class TestMagnitude:
    """magnitude / set_magnitude / limit / heading."""

    def test_magnitude(self):
        assert vector.magnitude(pygame.Vector2(3, 4)) == pytest.approx(5)

    def test_set_magnitude(self):
        result = vector.set_magnitude(pygame.Vector2(3, 4), 10)
        assert result.x == pytest.approx(6)
        assert result.y == pytest.approx(8)

    def test_set_magnitude_of_zero_vector_stays_zero(self):
        result = vector.set_magnitude(pygame.Vector2(0, 0), 5)
        assert result == pygame.Vector2(0, 0)
        assert all(math.isfinite(c) for c in result)

    def test_limit_rescales_long_vectors(self):
        result = vector.limit(pygame.Vector2(30, 40), 5)
        assert result.length() == pytest.approx(5)
        assert result.x == pytest.approx(3)

    def test_limit_leaves_short_vectors(self):
        v = pygame.Vector2(1, 1)
        assert vector.limit(v, 5) == v

    def test_heading(self):
        assert vector.heading(pygame.Vector2(1, 0)) == pytest.approx(0)
        assert vector.heading(pygame.Vector2(0, 1)) == pytest.approx(math.pi / 2)
        assert vector.heading(pygame.Vector2(-1, 0)) == pytest.approx(math.pi)


class TestLerp:
    """Range mapping."""

    def test_maps_endpoints_and_midpoint(self):
        assert vector.lerp(0, 0, 1, 50, 200) == pytest.approx(50)
        assert vector.lerp(1, 0, 1, 50, 200) == pytest.approx(200)
        assert vector.lerp(0.5, 0, 1, 50, 200) == pytest.approx(125)

    def test_reversed_target_range(self):
        assert vector.lerp(2.5, 0, 5, 240, 0) == pytest.approx(120)

    def test_clamp(self):
        assert vector.lerp(2, 0, 1, 0, 5, clamp=True) == 5
        assert vector.lerp(-1, 0, 1, 0, 5, clamp=True) == 0

    def test_empty_source_range(self):
        assert vector.lerp(3, 1, 1, 7, 9) == 7
