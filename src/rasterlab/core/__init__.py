"""Rasterization algorithms for rasterlab.

This module contains the raster primitive engine:

- Incremental lines (step-by-step, DDA, Bresenham)
- Midpoint circle with 8-way symmetry
- Kastl-Pitvey octant-normalized line
- Xiaolin Wu antialiased line

All algorithms are:
- Stateless (each call allocates its own working buffers)
- Pure (same input, same pixels)
- Free functions taking two points and returning a RasterResult

Key functions:
- step_by_step, dda, bresenham_line: Line rasterizers
- bresenham_circle: Circle rasterizer
- kastl_pitvey: Decision-string line rasterizer
- wu_line: Antialiased line rasterizer
- rasterize: Dispatch by Algorithm

Key classes:
- RasterEngine: Logged dispatch and timing comparison
- ComparisonRow: One line of a timing comparison
"""

from rasterlab.core._numeric import round_half_away
from rasterlab.core.circle import bresenham_circle
from rasterlab.core.engine import (
    ALGORITHMS,
    BASELINE,
    ComparisonRow,
    RasterEngine,
    rasterize,
)
from rasterlab.core.kastl_pitvey import kastl_pitvey
from rasterlab.core.lines import bresenham_line, dda, step_by_step
from rasterlab.core.wu import wu_line

__all__ = [
    # Dispatch
    "ALGORITHMS",
    "BASELINE",
    "ComparisonRow",
    "RasterEngine",
    # Algorithms
    "bresenham_circle",
    "bresenham_line",
    "dda",
    "kastl_pitvey",
    "rasterize",
    "round_half_away",
    "step_by_step",
    "wu_line",
]
