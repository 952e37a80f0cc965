"""Step buffer shared by the rasterization algorithms."""

import time

from rasterlab.domain import Algorithm, Point, RasterResult, Step


class StepSequence:
    """Ordered step buffer that drops adjacent duplicate coordinates.

    The buffer also starts the clock for the algorithm call that owns it;
    ``build`` stops it and freezes the steps into a ``RasterResult``.
    """

    def __init__(self) -> None:
        self._steps: list[Step] = []
        self._start = time.perf_counter()

    def __len__(self) -> int:
        return len(self._steps)

    def append(self, x: int, y: int, note: str = "", intensity: float = 1.0) -> bool:
        """Append a pixel unless it repeats the previous one.

        Returns:
            True if the step was appended
        """
        point = Point(x, y)
        if self._steps and self._steps[-1].point == point:
            return False
        self._steps.append(Step(point, note, intensity))
        return True

    def build(self, algorithm: Algorithm) -> RasterResult:
        """Freeze the collected steps into a result."""
        return RasterResult(
            steps=tuple(self._steps),
            elapsed_seconds=time.perf_counter() - self._start,
            algorithm=algorithm,
        )
