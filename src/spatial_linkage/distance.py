"""Squared Euclidean distance between integer points."""

from __future__ import annotations

from typing import Iterable

from .structures import Point

# With |coordinate| <= 2**29 the largest squared distance is 3 * (2**30) ** 2,
# which still fits a signed 64-bit integer.
MAX_COORDINATE = 2**29


def distance_squared(a: Point, b: Point) -> int:
    """Return the squared Euclidean distance between `a` and `b`."""

    dx = a.x - b.x
    dy = a.y - b.y
    dz = a.z - b.z
    return dx * dx + dy * dy + dz * dz


def check_coordinates(points: Iterable[Point]) -> None:
    """Raise `OverflowError` if any coordinate is too wide for int64 distances."""

    for index, point in enumerate(points):
        for value in point:
            if abs(value) > MAX_COORDINATE:
                raise OverflowError(
                    f"Point {index} {tuple(point)} exceeds the supported coordinate range +/-{MAX_COORDINATE}"
                )
