"""Lattice point and emitted pixel types.

This module defines the two value types every algorithm works with:
- Point: An integer coordinate in the logical (not screen) plane
- Step: One emitted pixel with its diagnostic note and coverage intensity
"""

from dataclasses import dataclass, replace
from typing import Any

from rasterlab.exceptions import InvalidPointError


@dataclass(frozen=True, slots=True)
class Point:
    """A lattice coordinate.

    Immutable and hashable for use in sets/dicts. The y axis points up, as
    in the logical coordinate system; mapping to screen space is up to the
    renderer.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: int
    y: int

    def __post_init__(self) -> None:
        for axis in ("x", "y"):
            value = getattr(self, axis)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidPointError(axis, value)

    def to_tuple(self) -> tuple[int, int]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def chebyshev_distance(self, other: "Point") -> int:
        """Distance in king moves; 1 means the two pixels are 8-connected."""
        return max(abs(self.x - other.x), abs(self.y - other.y))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=data["x"], y=data["y"])


def clamp_intensity(value: float) -> float:
    """Clamp a coverage value into [0.0, 1.0]."""
    return max(0.0, min(1.0, float(value)))


@dataclass(frozen=True, slots=True)
class Step:
    """One emitted pixel.

    Attributes:
        point: Pixel coordinate
        note: Diagnostic text describing the decision that produced the pixel
            (an error term, a slope value, an iteration index, a decision string)
        intensity: Fractional coverage in [0.0, 1.0]; always 1.0 except for
            the antialiased algorithm. Out-of-range values are clamped.
    """

    point: Point
    note: str = ""
    intensity: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "intensity", clamp_intensity(self.intensity))

    @property
    def x(self) -> int:
        return self.point.x

    @property
    def y(self) -> int:
        return self.point.y

    def with_intensity(self, intensity: float) -> "Step":
        """Return a copy of this step with a new (clamped) intensity."""
        return replace(self, intensity=intensity)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with point, note and intensity fields
        """
        return {
            "point": self.point.to_dict(),
            "note": self.note,
            "intensity": self.intensity,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Step":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with point, note and intensity fields

        Returns:
            Step instance
        """
        return cls(
            point=Point.from_dict(data["point"]),
            note=data.get("note", ""),
            intensity=data.get("intensity", 1.0),
        )
