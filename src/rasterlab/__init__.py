"""rasterlab - Line and circle rasterization algorithms.

rasterlab turns two lattice points into the ordered sequence of pixels a
raster algorithm would light up, with a diagnostic note on every pixel and a
coverage intensity for the antialiased variant. Six algorithms are provided:
step-by-step, DDA, Bresenham line, Bresenham circle, Kastl-Pitvey and Wu.

Example:
    $ rasterlab run bresenham_line --start 0 0 --end 5 2 --show-calculations

This prints the six pixels of the segment together with the error term that
selected each of them.
"""

__version__ = "0.1.0"
__author__ = "rasterlab contributors"

__all__ = ["__author__", "__version__"]
