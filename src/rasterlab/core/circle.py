"""Midpoint (Bresenham) circle rasterizer."""

from rasterlab.core._steps import StepSequence
from rasterlab.domain import Algorithm, Point, RasterResult

# Octant reflections of (x, y), in emission order.
_OCTANTS: tuple[tuple[int, int, bool], ...] = (
    (1, 1, False),
    (-1, 1, False),
    (1, -1, False),
    (-1, -1, False),
    (1, 1, True),
    (-1, 1, True),
    (1, -1, True),
    (-1, -1, True),
)


def bresenham_circle(center: Point, radius_point: Point) -> RasterResult:
    """Rasterize a circle with the midpoint algorithm and 8-way symmetry.

    The radius is ``|radius_point.x|``. A decision variable ``d = 3 - 2R``
    walks the first octant from ``(0, R)`` while ``x <= y``; every ``(x, y)``
    pair is reflected into the eight symmetric positions around the center.
    Reflections coincide on the axes and on the ``x == y`` diagonal, so a
    visited set keeps every coordinate unique across the whole result.

    Each note records the octant walk state that produced the pixel
    (``"x=<x> y=<y> d=<d>"``).

    Args:
        center: Circle center
        radius_point: Point whose x magnitude is the radius

    Returns:
        Result with every circle pixel exactly once, or a single
        ``"radius zero"`` step at the center when the radius is zero
    """
    steps = StepSequence()
    radius = abs(radius_point.x)

    if radius <= 0:
        steps.append(center.x, center.y, "radius zero")
        return steps.build(Algorithm.BRESENHAM_CIRCLE)

    visited: set[tuple[int, int]] = set()
    x, y = 0, radius
    d = 3 - 2 * radius
    while x <= y:
        note = f"x={x} y={y} d={d}"
        for fx, fy, transpose in _OCTANTS:
            ox, oy = (y, x) if transpose else (x, y)
            key = (center.x + fx * ox, center.y + fy * oy)
            if key in visited:
                continue
            visited.add(key)
            steps.append(key[0], key[1], note)

        if d <= 0:
            d += 4 * x + 6
        else:
            d += 4 * (x - y) + 10
            y -= 1
        x += 1

    return steps.build(Algorithm.BRESENHAM_CIRCLE)
