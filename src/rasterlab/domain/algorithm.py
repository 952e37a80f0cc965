"""Closed set of rasterization algorithms."""

from enum import Enum

from rasterlab.exceptions import UnknownAlgorithmError


class Algorithm(str, Enum):
    """Available rasterization algorithms.

    Member order is the selection order, so ``Algorithm.from_index``
    maps the indices 0-5 onto the members below.
    """

    STEP_BY_STEP = "step_by_step"
    DDA = "dda"
    BRESENHAM_LINE = "bresenham_line"
    BRESENHAM_CIRCLE = "bresenham_circle"
    KASTL_PITVEY = "kastl_pitvey"
    WU = "wu"

    @property
    def label(self) -> str:
        """Human-readable name."""
        return _LABELS[self]

    @property
    def is_circle(self) -> bool:
        """True when the second point defines a radius rather than an endpoint."""
        return self is Algorithm.BRESENHAM_CIRCLE

    @classmethod
    def from_index(cls, index: int) -> "Algorithm":
        """Look up an algorithm by its selection index (0-5).

        Raises:
            UnknownAlgorithmError: If the index is out of range
        """
        members = list(cls)
        if not 0 <= index < len(members):
            raise UnknownAlgorithmError(str(index))
        return members[index]

    @classmethod
    def from_name(cls, name: str) -> "Algorithm":
        """Look up an algorithm by value or label, case-insensitively.

        Dashes, spaces and underscores are interchangeable, so
        ``"Bresenham Line"``, ``"bresenham-line"`` and ``"bresenham_line"``
        all resolve to ``BRESENHAM_LINE``.

        Raises:
            UnknownAlgorithmError: If nothing matches
        """
        key = _normalize(name)
        for member in cls:
            if key in (_normalize(member.value), _normalize(member.label)):
                return member
        raise UnknownAlgorithmError(name)


def _normalize(name: str) -> str:
    return name.strip().lower().replace("-", "_").replace(" ", "_")


_LABELS: dict[Algorithm, str] = {
    Algorithm.STEP_BY_STEP: "Step-by-step",
    Algorithm.DDA: "DDA",
    Algorithm.BRESENHAM_LINE: "Bresenham Line",
    Algorithm.BRESENHAM_CIRCLE: "Bresenham Circle",
    Algorithm.KASTL_PITVEY: "Kastl-Pitvey",
    Algorithm.WU: "Wu (antialiased)",
}
