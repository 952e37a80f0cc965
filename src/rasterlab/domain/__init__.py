"""Domain models for rasterlab.

This module contains the value types exchanged between the raster engine and
its callers. All models are:

- Immutable (frozen dataclasses)
- Independent of any rendering or UI layer

Key classes:
- Point: An integer lattice coordinate
- Step: One emitted pixel with note and intensity
- RasterResult: Ordered steps plus elapsed time
- Algorithm: Closed enumeration of the available algorithms
"""

from rasterlab.domain.algorithm import Algorithm
from rasterlab.domain.pixel import Point, Step, clamp_intensity
from rasterlab.domain.result import RasterResult

__all__: list[str] = [
    # Enums
    "Algorithm",
    # Core types
    "Point",
    "Step",
    "RasterResult",
    # Helpers
    "clamp_intensity",
]
