#!/usr/bin/env python3
"""
2D vector helpers on plain (x, y) tuples.
"""
import math
from typing import Tuple

Vec2 = Tuple[float, float]

ZERO: Vec2 = (0.0, 0.0)


def clamp(x: float, a: float, b: float) -> float:
    """Clamp x to the inclusive range [a, b]."""
    return max(a, min(b, x))


def vec_add(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] + b[0], a[1] + b[1])


def vec_sub(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] - b[0], a[1] - b[1])


def vec_scale(a: Vec2, s: float) -> Vec2:
    return (a[0] * s, a[1] * s)


def vec_len_sq(a: Vec2) -> float:
    return a[0] * a[0] + a[1] * a[1]


def vec_norm(a: Vec2) -> Vec2:
    """Unit vector along a; the zero vector normalizes to itself."""
    l = math.hypot(a[0], a[1])
    if l == 0:
        return ZERO
    return (a[0] / l, a[1] / l)


def vec_mean(a: Vec2, b: Vec2) -> Vec2:
    return ((a[0] + b[0]) / 2.0, (a[1] + b[1]) / 2.0)
