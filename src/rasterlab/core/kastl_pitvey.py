"""Kastl-Pitvey octant-normalized line rasterizer.

The segment is first mapped into the first octant (left to right, slope in
[0, 1]) by an endpoint swap plus up to three transforms: y reflection, x
reflection and axis transposition. In that canonical frame every column has
an admissible band ``[floor(y), ceil(y)]`` around the ideal y. A walk over
the columns picks Straight (``S``) or Diagonal (``D``) so the current y stays
inside the next band, producing a decision string (the "rote"). The rote is
replayed into pixels, which are then mapped back through the inverse
transforms.

Band edges and tie-breaks are decided with exact integer arithmetic, so
columns whose ideal y lands exactly on an integer never flip on
floating-point representation error.
"""

from dataclasses import dataclass

from rasterlab.core._steps import StepSequence
from rasterlab.domain import Algorithm, Point, RasterResult

STRAIGHT = "S"
DIAGONAL = "D"


@dataclass(frozen=True)
class OctantTransform:
    """Transforms applied to reach the first octant.

    Attributes:
        reflect_y: y was negated
        reflect_x: x was negated
        swap_xy: x and y were exchanged
    """

    reflect_y: bool = False
    reflect_x: bool = False
    swap_xy: bool = False

    def invert(self, x: int, y: int) -> tuple[int, int]:
        """Map a canonical pixel back to the original frame.

        Undoes the axis swap first, then the x and y reflections.
        """
        if self.swap_xy:
            x, y = y, x
        if self.reflect_x:
            x = -x
        if self.reflect_y:
            y = -y
        return x, y


@dataclass(frozen=True)
class CanonicalSegment:
    """Segment expressed in the first octant (``0 <= dy <= dx``)."""

    ax: int
    ay: int
    dx: int
    dy: int
    transform: OctantTransform


def canonicalize(a: Point, b: Point) -> CanonicalSegment:
    """Map a segment into the first octant, recording the transforms."""
    ax, ay, bx, by = a.x, a.y, b.x, b.y
    if bx < ax:
        ax, ay, bx, by = bx, by, ax, ay

    dx = bx - ax
    dy = by - ay
    reflect_y = reflect_x = swap_xy = False

    if dy < 0:
        ay, by, dy = -ay, -by, -dy
        reflect_y = True
    if dx < 0:
        ax, bx, dx = -ax, -bx, -dx
        reflect_x = True
    if dy > dx:
        ax, ay = ay, ax
        bx, by = by, bx
        dx, dy = dy, dx
        swap_xy = True

    return CanonicalSegment(
        ax=ax,
        ay=ay,
        dx=dx,
        dy=dy,
        transform=OctantTransform(reflect_y=reflect_y, reflect_x=reflect_x, swap_xy=swap_xy),
    )


def y_bands(segment: CanonicalSegment) -> tuple[list[int], list[int]]:
    """Admissible integer y band for every column ``0..dx``.

    Returns:
        Tuple of (lower, upper) lists, where ``lower[i]`` and ``upper[i]`` are
        the floor and ceiling of the ideal y at column ``i``
    """
    lower: list[int] = []
    upper: list[int] = []
    for xi in range(segment.dx + 1):
        if segment.dx == 0:
            quotient, remainder = 0, 0
        else:
            quotient, remainder = divmod(segment.dy * xi, segment.dx)
        lower.append(segment.ay + quotient)
        upper.append(segment.ay + quotient + (1 if remainder else 0))
    return lower, upper


def decide_rote(segment: CanonicalSegment, lower: list[int], upper: list[int]) -> str:
    """Walk the columns and choose Straight or Diagonal for each transition.

    When exactly one move keeps y inside the next band it is taken.
    Otherwise Straight wins unless Diagonal lands strictly closer to the
    ideal y of the next column.
    """
    dx, dy = segment.dx, segment.dy
    rote: list[str] = []
    ycur = lower[0]
    for i in range(dx):
        low, high = lower[i + 1], upper[i + 1]
        can_straight = low <= ycur <= high
        can_diagonal = low <= ycur + 1 <= high

        if can_straight != can_diagonal:
            diagonal = can_diagonal
        else:
            # |ycur - yf| vs |ycur + 1 - yf|, scaled by dx
            ideal = segment.ay * dx + dy * (i + 1)
            diagonal = abs((ycur + 1) * dx - ideal) < abs(ycur * dx - ideal)

        if diagonal:
            rote.append(DIAGONAL)
            ycur += 1
        else:
            rote.append(STRAIGHT)
    return "".join(rote)


def replay_rote(ax: int, ay: int, rote: str) -> list[tuple[int, int]]:
    """Materialize canonical pixels from a decision string."""
    x, y = ax, ay
    pixels = [(x, y)]
    for move in rote:
        x += 1
        if move == DIAGONAL:
            y += 1
        if pixels[-1] != (x, y):
            pixels.append((x, y))
    return pixels


def kastl_pitvey(a: Point, b: Point) -> RasterResult:
    """Rasterize a segment with the Kastl-Pitvey decision-string method.

    Every step's note is ``"rote:<decision string>"``; the whole string is
    shared by all steps of one call since it documents the global path.
    Pixels are emitted from the left endpoint of the canonical frame.

    Args:
        a: First endpoint
        b: Second endpoint

    Returns:
        Result covering the segment, or a single ``"degenerate"`` step when
        both points coincide

    Examples:
        >>> [s.point.to_tuple() for s in kastl_pitvey(Point(0, 0), Point(4, 2))]
        [(0, 0), (1, 0), (2, 1), (3, 1), (4, 2)]
    """
    steps = StepSequence()
    if a == b:
        steps.append(a.x, a.y, "degenerate")
        return steps.build(Algorithm.KASTL_PITVEY)

    segment = canonicalize(a, b)
    lower, upper = y_bands(segment)
    rote = decide_rote(segment, lower, upper)

    note = f"rote:{rote}"
    for px, py in replay_rote(segment.ax, segment.ay, rote):
        x, y = segment.transform.invert(px, py)
        steps.append(x, y, note)

    return steps.build(Algorithm.KASTL_PITVEY)
