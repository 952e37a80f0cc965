"""Incremental line rasterizers.

This module provides the three classic line algorithms:
- step_by_step: Naive walk along the longer axis using the line equation
- dda: Digital differential analyzer with a floating accumulator
- bresenham_line: Integer-only midpoint algorithm

All functions are pure and return a fresh ``RasterResult``.
"""

from rasterlab.core._numeric import round_half_away, sign_step
from rasterlab.core._steps import StepSequence
from rasterlab.domain import Algorithm, Point, RasterResult


def step_by_step(a: Point, b: Point) -> RasterResult:
    """Rasterize a segment by stepping one unit along its longer axis.

    The other coordinate is computed from the line equation and rounded to
    the nearest integer. Vertical segments take their own branch so the
    slope is never divided by zero.

    Notes:
        - single point: ``"degenerate"``
        - vertical steps: ``"v"``
        - shallow steps: the unrounded y value
        - steep steps: ``"x=<unrounded x>"``

    Args:
        a: Start point
        b: End point

    Returns:
        Result with one step per unit along the longer axis

    Examples:
        >>> [s.point.to_tuple() for s in step_by_step(Point(0, 0), Point(4, 1))]
        [(0, 0), (1, 0), (2, 1), (3, 1), (4, 1)]
    """
    steps = StepSequence()
    x0, y0, x1, y1 = a.x, a.y, b.x, b.y
    dx, dy = x1 - x0, y1 - y0

    if a == b:
        steps.append(x0, y0, "degenerate")
    elif dx == 0:
        sy = sign_step(dy)
        for y in range(y0, y1 + sy, sy):
            steps.append(x0, y, "v")
    elif abs(dx) >= abs(dy):
        slope = dy / dx
        sx = sign_step(dx)
        for x in range(x0, x1 + sx, sx):
            yf = y0 + slope * (x - x0)
            steps.append(x, round_half_away(yf), f"{yf:g}")
    else:
        inverse_slope = dx / dy
        sy = sign_step(dy)
        for y in range(y0, y1 + sy, sy):
            xf = x0 + inverse_slope * (y - y0)
            steps.append(round_half_away(xf), y, f"x={xf:g}")

    return steps.build(Algorithm.STEP_BY_STEP)


def dda(a: Point, b: Point) -> RasterResult:
    """Rasterize a segment with a digital differential analyzer.

    The longer extent ``L = max(|dx|, |dy|)`` is the sample count; a float
    accumulator advances by ``(dx/L, dy/L)`` and is rounded at each of the
    ``L + 1`` samples. Each note carries the sample index (``"i=<n>"``).

    Args:
        a: Start point
        b: End point

    Returns:
        Result with ``L + 1`` steps, or a single ``"degenerate"`` step when
        both points coincide
    """
    steps = StepSequence()
    dx, dy = b.x - a.x, b.y - a.y
    length = max(abs(dx), abs(dy))

    if length == 0:
        steps.append(a.x, a.y, "degenerate")
        return steps.build(Algorithm.DDA)

    sx = dx / length
    sy = dy / length
    x, y = float(a.x), float(a.y)
    for i in range(length + 1):
        steps.append(round_half_away(x), round_half_away(y), f"i={i}")
        x += sx
        y += sy

    return steps.build(Algorithm.DDA)


def bresenham_line(a: Point, b: Point) -> RasterResult:
    """Rasterize a segment with Bresenham's integer midpoint algorithm.

    Uses a single running error term ``err = dx + dy`` with ``dx = |x1-x0|``
    and ``dy = -|y1-y0|``; each iteration compares ``2*err`` against ``dy``
    and ``dx`` to decide whether x, y or both advance. No floating point.

    The error walk is always run from the lexicographically smaller endpoint
    and reversed when needed, so ``bresenham_line(a, b)`` and
    ``bresenham_line(b, a)`` cover exactly the same pixels. Steps are still
    returned in ``a`` to ``b`` order. Each note is ``"err=<err>"`` for the
    error value at the time the pixel was emitted. Coincident endpoints give
    a single ``"degenerate"`` step.

    Args:
        a: Start point
        b: End point

    Returns:
        Result with one step per pixel from ``a`` to ``b``

    Examples:
        >>> [s.point.to_tuple() for s in bresenham_line(Point(0, 0), Point(5, 2))]
        [(0, 0), (1, 0), (2, 1), (3, 1), (4, 2), (5, 2)]
    """
    steps = StepSequence()
    if a == b:
        steps.append(a.x, a.y, "degenerate")
        return steps.build(Algorithm.BRESENHAM_LINE)

    reverse = b.to_tuple() < a.to_tuple()
    start, end = (b, a) if reverse else (a, b)

    x0, y0, x1, y1 = start.x, start.y, end.x, end.y
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    walk: list[tuple[int, int, int]] = []
    x, y = x0, y0
    while True:
        walk.append((x, y, err))
        if x == x1 and y == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x += sx
        if e2 <= dx:
            err += dx
            y += sy

    if reverse:
        walk.reverse()
    for x, y, e in walk:
        steps.append(x, y, f"err={e}")

    return steps.build(Algorithm.BRESENHAM_LINE)
