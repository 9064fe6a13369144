"""Sector geometry and the entry under the pointer.

The pointer sits at wheel coordinate 0. Sector ``i`` covers the half-open
range ``[bounds[i - 1], bounds[i])`` where ``bounds`` are the prefix sums of
each entry's share of the full turn.
"""

import math
from bisect import bisect_right
from collections.abc import Sequence

from namewheel.entries import Entry

TAU = 2 * math.pi


def normalize_angle(angle: float) -> float:
    """Map any angle into [0, 2π)."""
    angle = math.fmod(angle, TAU)
    if angle < 0:
        angle += TAU
    # fmod of a value just below a multiple of TAU can round up to TAU itself
    return 0.0 if angle >= TAU else angle


def _weights(entries: Sequence[Entry]) -> list[float]:
    weights = [max(0.0, float(getattr(e, "weight", 1.0))) for e in entries]
    if sum(weights) <= 0:
        return [1.0] * len(entries)
    return weights


def sector_bounds(entries: Sequence[Entry]) -> list[float]:
    """Cumulative end angle of every sector. The last bound is exactly 2π."""
    if not entries:
        return []
    weights = _weights(entries)
    total = sum(weights)
    bounds = []
    running = 0.0
    for w in weights:
        running += w
        bounds.append(running / total * TAU)
    bounds[-1] = TAU
    return bounds


def sector_start(bounds: Sequence[float], index: int) -> float:
    return bounds[index - 1] if index > 0 else 0.0


def sector_width(entries: Sequence[Entry], index: int) -> float:
    bounds = sector_bounds(entries)
    return bounds[index] - sector_start(bounds, index)


def sector_center(entries: Sequence[Entry], index: int) -> float:
    bounds = sector_bounds(entries)
    return (sector_start(bounds, index) + bounds[index]) / 2


def index_from_bounds(bounds: Sequence[float], angle: float) -> int:
    """Binary search variant for callers that cache the bounds."""
    if not bounds:
        return -1
    index = bisect_right(bounds, normalize_angle(angle))
    # Only reachable through float noise right at 2π
    return min(index, len(bounds) - 1)


def get_index_at_pointer(entries: Sequence[Entry], angle: float) -> int:
    """Return the index of the entry whose sector contains the pointer.

    Returns -1 for an empty wheel.
    """
    return index_from_bounds(sector_bounds(entries), angle)
