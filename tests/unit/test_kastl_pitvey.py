"""Unit tests for the Kastl-Pitvey rasterizer."""

import pytest

from rasterlab.core.kastl_pitvey import (
    CanonicalSegment,
    OctantTransform,
    canonicalize,
    decide_rote,
    kastl_pitvey,
    replay_rote,
    y_bands,
)
from rasterlab.domain import Algorithm, Point, RasterResult


def coords(result: RasterResult) -> list[tuple[int, int]]:
    """Ordered pixel coordinates of a result."""
    return [step.point.to_tuple() for step in result]


class TestCanonicalize:
    """Tests for octant normalization."""

    def test_first_octant_untouched(self) -> None:
        """A segment already in the first octant needs no transform."""
        segment = canonicalize(Point(0, 0), Point(4, 2))
        assert segment == CanonicalSegment(ax=0, ay=0, dx=4, dy=2, transform=OctantTransform())

    def test_endpoints_swapped_left_to_right(self) -> None:
        """The left endpoint becomes the origin."""
        assert canonicalize(Point(4, 2), Point(0, 0)) == canonicalize(Point(0, 0), Point(4, 2))

    def test_negative_slope_reflects_y(self) -> None:
        """Descending segments are mirrored in y."""
        segment = canonicalize(Point(0, 0), Point(4, -2))
        assert segment.dy == 2
        assert segment.transform == OctantTransform(reflect_y=True)

    def test_steep_segment_swaps_axes(self) -> None:
        """Steep descending segments are mirrored and transposed."""
        segment = canonicalize(Point(0, 0), Point(1, -3))
        assert (segment.dx, segment.dy) == (3, 1)
        assert segment.transform == OctantTransform(reflect_y=True, swap_xy=True)

    def test_invert_undoes_swap_then_reflections(self) -> None:
        """Inversion transposes first, then negates."""
        transform = OctantTransform(reflect_y=True, reflect_x=True, swap_xy=True)
        assert transform.invert(2, 5) == (-5, -2)


class TestBandsAndRote:
    """Tests for the band table and decision walk."""

    def test_bands(self) -> None:
        """Each column's band brackets the ideal y."""
        lower, upper = y_bands(canonicalize(Point(0, 0), Point(4, 2)))
        assert lower == [0, 0, 1, 1, 2]
        assert upper == [0, 1, 1, 2, 2]

    def test_bands_exact_on_integers(self) -> None:
        """Columns where the ideal y is an integer have a one-value band."""
        lower, upper = y_bands(canonicalize(Point(0, 0), Point(9, 3)))
        for column in (0, 3, 6, 9):
            assert lower[column] == upper[column]

    def test_rote_prefers_straight_on_ties(self) -> None:
        """At y = 0.5 both moves are equally close, Straight wins."""
        segment = canonicalize(Point(0, 0), Point(4, 2))
        assert decide_rote(segment, *y_bands(segment)) == "SDSD"

    def test_rote_takes_strictly_closer_diagonal(self) -> None:
        """Diagonal is chosen when it is strictly closer to the ideal y."""
        segment = canonicalize(Point(0, 0), Point(5, 2))
        assert decide_rote(segment, *y_bands(segment)) == "SDSDS"

    def test_replay(self) -> None:
        """Replaying a rote advances x every move and y on 'D'."""
        assert replay_rote(1, 1, "SDD") == [(1, 1), (2, 1), (3, 2), (4, 3)]


class TestKastlPitvey:
    """Tests for kastl_pitvey."""

    def test_reference_segment(self) -> None:
        """The (0,0)-(4,2) segment."""
        result = kastl_pitvey(Point(0, 0), Point(4, 2))
        assert coords(result) == [(0, 0), (1, 0), (2, 1), (3, 1), (4, 2)]
        assert result.algorithm is Algorithm.KASTL_PITVEY

    def test_note_is_shared_rote(self) -> None:
        """Every step carries the whole decision string."""
        result = kastl_pitvey(Point(0, 0), Point(4, 2))
        assert {s.note for s in result} == {"rote:SDSD"}

    def test_reversed_input_same_pixels(self) -> None:
        """Swapping the endpoints gives the same pixel set."""
        forward = kastl_pitvey(Point(0, 0), Point(4, 2))
        backward = kastl_pitvey(Point(4, 2), Point(0, 0))
        assert forward.point_set() == backward.point_set()

    def test_negative_slope(self) -> None:
        """Descending segments are mapped back after reflection."""
        result = kastl_pitvey(Point(0, 0), Point(4, -2))
        assert coords(result) == [(0, 0), (1, 0), (2, -1), (3, -1), (4, -2)]

    def test_steep(self) -> None:
        """Steep segments are mapped back after transposition."""
        result = kastl_pitvey(Point(0, 0), Point(1, 3))
        assert coords(result) == [(0, 0), (0, 1), (1, 2), (1, 3)]
        assert result[0].note == "rote:SDS"

    def test_steep_descending(self) -> None:
        """Reflection and transposition combined."""
        result = kastl_pitvey(Point(0, 0), Point(2, -5))
        assert coords(result) == [(0, 0), (0, -1), (1, -2), (1, -3), (2, -4), (2, -5)]

    def test_vertical(self) -> None:
        """Vertical segments take the transposed branch without dividing by zero."""
        result = kastl_pitvey(Point(3, 0), Point(3, -3))
        assert coords(result) == [(3, 0), (3, -1), (3, -2), (3, -3)]
        assert result[0].note == "rote:SSS"

    def test_diagonal(self) -> None:
        """45 degree segments are all Diagonal moves."""
        result = kastl_pitvey(Point(0, 0), Point(3, 3))
        assert coords(result) == [(0, 0), (1, 1), (2, 2), (3, 3)]
        assert result[0].note == "rote:DDD"

    def test_degenerate(self) -> None:
        """Coincident endpoints give one 'degenerate' step."""
        result = kastl_pitvey(Point(2, 2), Point(2, 2))
        assert coords(result) == [(2, 2)]
        assert result[0].note == "degenerate"

    @pytest.mark.parametrize(
        ("a", "b"),
        [
            (Point(0, 0), Point(7, 3)),
            (Point(5, -2), Point(-9, 4)),
            (Point(-1, -8), Point(2, 6)),
            (Point(0, 0), Point(-6, -6)),
        ],
    )
    def test_rote_length_matches_major_axis(self, a: Point, b: Point) -> None:
        """One decision per column of the major axis."""
        result = kastl_pitvey(a, b)
        rote = result[0].note.removeprefix("rote:")
        assert len(rote) == max(abs(b.x - a.x), abs(b.y - a.y))
        assert len(result) == len(rote) + 1
