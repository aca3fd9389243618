"""Scalar helpers shared by the animation step and the drawing code."""

import math


def max_scale(scale: float, i: int, n: int) -> float:
    """Progress past the start of the i-th of n sub-segments, never negative."""
    return max(0.0, scale - i / n)


def divide_scale(scale: float, i: int, n: int) -> float:
    """Progress in [0, 1] within the i-th of n equal sub-segments of ``scale``."""
    return min(1.0 / n, max_scale(scale, i, n)) * n


def scale_factor(scale: float, sc_div: float) -> float:
    """Discretized step index of ``scale``: 0 below ``sc_div``, 1 at or above."""
    return math.floor(scale / sc_div)


def mirror_value(scale: float, a: int, b: int, sc_div: float) -> float:
    """Value that jumps from 1/a to 1/b as ``scale`` crosses ``sc_div``."""
    k = scale_factor(scale, sc_div)
    return (1 - k) / a + k / b


def update_value(
    scale: float, direction: float, a: int, b: int, sc_div: float, gap: float
) -> float:
    """Signed per-tick increment for ``scale``."""
    return mirror_value(scale, a, b, sc_div) * direction * gap
