"""Leaf-node procedural geometry. No engine imports.

Spirals and waves are sampled as polylines so the renderer only ever sees
plain ``M … L …`` path data.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from quotecanvas.utils.math_helpers import fmt_number

# Angular step for spiral sampling (radians).
SPIRAL_ANGLE_STEP = 0.1

# Horizontal step for wave sampling (canvas units).
WAVE_X_STEP = 1.0


def spiral_points(
    center_x: float,
    center_y: float,
    turns: float,
    spacing: float,
) -> NDArray[np.float64]:
    """Archimedean spiral r = spacing·θ, θ ∈ [0, turns·2π] in 0.1 rad steps.

    Returns an Nx2 array; row 0 is the center.
    """
    limit = max(0.0, turns) * 2 * math.pi
    # +1e-9 keeps the endpoint when limit is an exact multiple of the step
    count = int(math.floor(limit / SPIRAL_ANGLE_STEP + 1e-9)) + 1
    angles = np.arange(count, dtype=np.float64) * SPIRAL_ANGLE_STEP
    radii = spacing * angles
    xs = center_x + radii * np.cos(angles)
    ys = center_y + radii * np.sin(angles)
    return np.column_stack([xs, ys])


def wave_points(
    start_x: float,
    start_y: float,
    amplitude: float,
    frequency: float,
    width: float,
) -> NDArray[np.float64]:
    """Sine wave y = start_y + amplitude·sin(x·frequency), x = 0, 1, …, width.

    Returns an Nx2 array; row 0 is (start_x, start_y).
    """
    count = int(math.floor(max(0.0, width) / WAVE_X_STEP)) + 1
    offsets = np.arange(count, dtype=np.float64) * WAVE_X_STEP
    xs = start_x + offsets
    ys = start_y + amplitude * np.sin(offsets * frequency)
    return np.column_stack([xs, ys])


def points_to_path(points: NDArray[np.float64], start: tuple[float, float] | None = None) -> str:
    """Format a polyline as SVG path data: ``M x0 y0 L x1 y1 …``.

    ``start`` overrides the move-to point; the points then all become line-to
    segments (the spiral/wave convention of moving to the anchor first).
    """
    parts: list[str] = []
    rows = points.tolist()
    if start is not None:
        parts.append(f"M {fmt_number(start[0])} {fmt_number(start[1])}")
    elif rows:
        x, y = rows.pop(0)
        parts.append(f"M {fmt_number(x)} {fmt_number(y)}")
    for x, y in rows:
        parts.append(f"L {fmt_number(x)} {fmt_number(y)}")
    return " ".join(parts)


def spiral_path(center_x: float, center_y: float, turns: float, spacing: float) -> str:
    points = spiral_points(center_x, center_y, turns, spacing)
    return points_to_path(points, start=(center_x, center_y))


def wave_path(start_x: float, start_y: float, amplitude: float, frequency: float, width: float) -> str:
    points = wave_points(start_x, start_y, amplitude, frequency, width)
    return points_to_path(points, start=(start_x, start_y))


def radial_distances(points: NDArray[np.float64], center: tuple[float, float]) -> NDArray[np.float64]:
    """Distance from ``center`` to each point."""
    cx, cy = center
    return np.sqrt((points[:, 0] - cx) ** 2 + (points[:, 1] - cy) ** 2)
