"""Algorithm output container."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from rasterlab.domain.algorithm import Algorithm
from rasterlab.domain.pixel import Point, Step


@dataclass(frozen=True)
class RasterResult:
    """Ordered pixel steps produced by one algorithm call.

    Step order is emission order, which is also the traversal order along
    the primitive. The result is built once by the algorithm and never
    modified afterwards.

    Attributes:
        steps: Emitted steps in order
        elapsed_seconds: Wall-clock time spent computing the steps
        algorithm: Algorithm that produced the steps, if known
    """

    steps: tuple[Step, ...]
    elapsed_seconds: float = 0.0
    algorithm: Algorithm | None = None

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self.steps)

    def __getitem__(self, index: int) -> Step:
        return self.steps[index]

    @property
    def elapsed_ms(self) -> float:
        """Elapsed time in milliseconds."""
        return self.elapsed_seconds * 1000.0

    def points(self) -> list[Point]:
        """Coordinates of all steps, in order."""
        return [step.point for step in self.steps]

    def point_set(self) -> set[Point]:
        """Distinct coordinates covered by the result."""
        return {step.point for step in self.steps}

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the result
        """
        return {
            "algorithm": self.algorithm.value if self.algorithm else None,
            "elapsed_seconds": self.elapsed_seconds,
            "steps": [step.to_dict() for step in self.steps],
        }
