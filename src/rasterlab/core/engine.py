"""Algorithm dispatch and timing comparison.

This module ties the six rasterizers to the ``Algorithm`` enumeration.

Key components:
- ALGORITHMS: Mapping from ``Algorithm`` to its rasterizer function
- rasterize: Run one algorithm by identity
- RasterEngine: Logging front end used by the CLI, with a timing comparison
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass

import structlog

from rasterlab.core.circle import bresenham_circle
from rasterlab.core.kastl_pitvey import kastl_pitvey
from rasterlab.core.lines import bresenham_line, dda, step_by_step
from rasterlab.core.wu import wu_line
from rasterlab.domain import Algorithm, Point, RasterResult
from rasterlab.utils import RunLogger

Rasterizer = Callable[[Point, Point], RasterResult]

ALGORITHMS: dict[Algorithm, Rasterizer] = {
    Algorithm.STEP_BY_STEP: step_by_step,
    Algorithm.DDA: dda,
    Algorithm.BRESENHAM_LINE: bresenham_line,
    Algorithm.BRESENHAM_CIRCLE: bresenham_circle,
    Algorithm.KASTL_PITVEY: kastl_pitvey,
    Algorithm.WU: wu_line,
}

# Reference algorithm for timing comparisons
BASELINE = Algorithm.BRESENHAM_LINE


def rasterize(algorithm: Algorithm | str, a: Point, b: Point) -> RasterResult:
    """Run one algorithm.

    Args:
        algorithm: Algorithm member, value or label
        a: First point (circle: center)
        b: Second point (circle: point whose x magnitude is the radius)

    Returns:
        The algorithm's result

    Raises:
        UnknownAlgorithmError: If a string does not name an algorithm
    """
    if not isinstance(algorithm, Algorithm):
        algorithm = Algorithm.from_name(algorithm)
    return ALGORITHMS[algorithm](a, b)


@dataclass(frozen=True)
class ComparisonRow:
    """Timing of one algorithm on a shared input.

    Attributes:
        algorithm: Algorithm measured
        step_count: Number of steps it produced
        best_seconds: Fastest of the repeated runs
        relative: ``best_seconds`` divided by the baseline's best time
            (None when the baseline was too fast to measure)
    """

    algorithm: Algorithm
    step_count: int
    best_seconds: float
    relative: float | None

    @property
    def best_ms(self) -> float:
        return self.best_seconds * 1000.0


class RasterEngine:
    """Runs rasterization algorithms and logs each run.

    The engine holds no per-run state; every call is independent.

    Example:
        engine = RasterEngine()
        result = engine.run(Algorithm.DDA, Point(0, 0), Point(3, 7))
    """

    def __init__(self, run_logger: RunLogger | None = None) -> None:
        """Initialize the engine.

        Args:
            run_logger: Logger that records runs and statistics; a default
                one bound to ``rasterlab.engine`` is created when omitted
        """
        self.run_logger = run_logger or RunLogger(structlog.get_logger("rasterlab.engine"))

    def run(self, algorithm: Algorithm | str, a: Point, b: Point) -> RasterResult:
        """Run one algorithm and record it."""
        if not isinstance(algorithm, Algorithm):
            algorithm = Algorithm.from_name(algorithm)
        self.run_logger.log_run_start(algorithm.value, a.to_tuple(), b.to_tuple())
        result = rasterize(algorithm, a, b)
        self.run_logger.log_run_complete(algorithm.value, len(result), result.elapsed_ms)
        return result

    def compare(
        self,
        a: Point,
        b: Point,
        repeat: int = 1,
        algorithms: Iterable[Algorithm] | None = None,
    ) -> list[ComparisonRow]:
        """Time several algorithms on the same input.

        Each algorithm runs ``repeat`` times and its fastest run is kept.
        Times are reported relative to Bresenham line, which is always
        measured even when it is not among the requested algorithms.

        Args:
            a: First point
            b: Second point
            repeat: Runs per algorithm
            algorithms: Algorithms to measure (default: all)

        Returns:
            One row per requested algorithm, in request order

        Raises:
            ValueError: If repeat is less than 1
        """
        if repeat < 1:
            raise ValueError(f"repeat must be at least 1, got {repeat}")

        selected = list(algorithms) if algorithms is not None else list(Algorithm)
        measured: dict[Algorithm, tuple[int, float]] = {}
        for algorithm in dict.fromkeys([*selected, BASELINE]):
            best = float("inf")
            count = 0
            for _ in range(repeat):
                result = self.run(algorithm, a, b)
                best = min(best, result.elapsed_seconds)
                count = len(result)
            measured[algorithm] = (count, best)

        baseline = measured[BASELINE][1]
        rows = []
        for algorithm in selected:
            count, best = measured[algorithm]
            relative = best / baseline if baseline > 0 else None
            rows.append(ComparisonRow(algorithm, count, best, relative))
        return rows
