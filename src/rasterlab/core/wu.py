"""Xiaolin Wu antialiased line rasterizer."""

from rasterlab.core._numeric import fpart, ipart, rfpart, round_half_away
from rasterlab.core._steps import StepSequence
from rasterlab.domain import Algorithm, Point, RasterResult, Step


class _CoverageBuffer:
    """Collects weighted pixel contributions.

    A coordinate hit more than once keeps its first position in the output
    and the strongest of its intensities.
    """

    def __init__(self, steep: bool) -> None:
        self._steep = steep
        self._steps: dict[tuple[int, int], Step] = {}

    def plot(self, x: int, y: int, intensity: float, note: str) -> None:
        key = (y, x) if self._steep else (x, y)
        existing = self._steps.get(key)
        if existing is None:
            self._steps[key] = Step(Point(*key), note, intensity)
        elif intensity > existing.intensity:
            self._steps[key] = existing.with_intensity(intensity)

    def steps(self) -> list[Step]:
        return list(self._steps.values())


def wu_line(a: Point, b: Point) -> RasterResult:
    """Rasterize a segment with Xiaolin Wu's antialiasing algorithm.

    Every column (row, for steep lines) contributes two neighbouring pixels
    weighted by how far the ideal line sits from each of them. The two end
    columns are additionally scaled by their horizontal coverage gap.

    Contributions landing on the same pixel are merged by keeping the
    maximum intensity, so each coordinate appears once. Endpoint notes are
    ``"end"``; interior notes carry the ideal minor-axis coordinate
    (``"y=<value>"``, or ``"x=<value>"`` for steep lines).

    Args:
        a: Start point
        b: End point

    Returns:
        Result whose steps carry fractional intensities, or a single
        ``"degenerate"`` step when both points coincide

    Examples:
        >>> [(s.point.to_tuple(), s.intensity) for s in wu_line(Point(0, 0), Point(2, 0))]
        [((0, 0), 0.5), ((0, 1), 0.0), ((1, 0), 1.0), ((1, 1), 0.0), ((2, 0), 0.5), ((2, 1), 0.0)]
    """
    sequence = StepSequence()
    if a == b:
        sequence.append(a.x, a.y, "degenerate")
        return sequence.build(Algorithm.WU)

    x0, y0, x1, y1 = float(a.x), float(a.y), float(b.x), float(b.y)

    steep = abs(y1 - y0) > abs(x1 - x0)
    if steep:
        x0, y0 = y0, x0
        x1, y1 = y1, x1
    if x0 > x1:
        x0, x1 = x1, x0
        y0, y1 = y1, y0

    dx = x1 - x0
    dy = y1 - y0
    gradient = 0.0 if dx == 0.0 else dy / dx

    coverage = _CoverageBuffer(steep)

    # First endpoint
    xend = round_half_away(x0)
    yend = y0 + gradient * (xend - x0)
    xgap = rfpart(x0 + 0.5)
    xpxl1 = xend
    ypxl1 = ipart(yend)
    coverage.plot(xpxl1, ypxl1, rfpart(yend) * xgap, "end")
    coverage.plot(xpxl1, ypxl1 + 1, fpart(yend) * xgap, "end")
    intery = yend + gradient

    # Interior columns
    axis = "x" if steep else "y"
    xpxl2 = round_half_away(x1)
    for x in range(xpxl1 + 1, xpxl2):
        note = f"{axis}={intery:g}"
        yint = ipart(intery)
        coverage.plot(x, yint, rfpart(intery), note)
        coverage.plot(x, yint + 1, fpart(intery), note)
        intery += gradient

    # Second endpoint
    yend = y1 + gradient * (xpxl2 - x1)
    xgap = fpart(x1 + 0.5)
    ypxl2 = ipart(yend)
    coverage.plot(xpxl2, ypxl2, rfpart(yend) * xgap, "end")
    coverage.plot(xpxl2, ypxl2 + 1, fpart(yend) * xgap, "end")

    for step in coverage.steps():
        sequence.append(step.x, step.y, step.note, step.intensity)

    return sequence.build(Algorithm.WU)
