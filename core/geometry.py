# =============================================================================
# core/geometry.py - Boundary Polygon Area
# =============================================================================
# Computes the planar area of a property boundary with the shoelace formula.
#
# Coordinates are used as-is (lat as x, lng as y). No unit conversion or
# geodesic correction is applied, so the result is in "squared coordinate
# units". Callers are responsible for validating the boundary shape
# (at least 3 points, finite coordinates) before calling.
#
# Usage:
#   from core.geometry import compute_area
#   compute_area([(0, 0), (0, 4), (4, 4), (4, 0)])  # 16.0
# =============================================================================

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import numpy as np


def _coordinates(boundary: Sequence[Any]) -> np.ndarray:
    """Convert a boundary into an (n, 2) float array of (lat, lng) rows."""
    rows = []
    for point in boundary:
        if isinstance(point, Mapping):
            lng = point["lng"] if "lng" in point else point["lang"]
            rows.append((point["lat"], lng))
        elif hasattr(point, "lat") and hasattr(point, "lng"):
            rows.append((point.lat, point.lng))
        else:
            lat, lng = point
            rows.append((lat, lng))

    return np.asarray(rows, dtype=float).reshape(-1, 2)


def signed_area(boundary: Sequence[Any]) -> float:
    """
    Signed shoelace area of a boundary.

    Positive for counter-clockwise vertex order (lat as x, lng as y),
    negative for clockwise. The last vertex is joined back to the first,
    so the first point must not be repeated at the end.
    """
    coords = _coordinates(boundary)
    if len(coords) == 0:
        return 0.0

    lat, lng = coords[:, 0], coords[:, 1]
    next_lat, next_lng = np.roll(lat, -1), np.roll(lng, -1)

    return float(np.sum(lat * next_lng - next_lat * lng) / 2.0)


def compute_area(boundary: Sequence[Any]) -> float:
    """
    Enclosed area of a boundary polygon, rounded to the nearest whole unit.

    Args:
        boundary: Ordered vertices as Point models, {"lat", "lng"} mappings
            or (lat, lng) pairs

    Returns:
        Non-negative area with halves rounded up. Not finite (NaN or inf)
        if any coordinate is NaN or infinite.

    Example:
        compute_area([(0, 0), (0, 2), (2, 0)])  # 2.0
    """
    area = abs(signed_area(boundary))
    return float(np.floor(area + 0.5))
