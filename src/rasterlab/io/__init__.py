"""Report I/O layer for rasterlab.

This module turns algorithm results into plain-text reports and writes them
to disk.

Key classes:
- Report: Title, step list and elapsed time of one run
- ReportWriter: Save reports to text files
"""

from rasterlab.io.report import REPORT_HEADER, Report, ReportWriter

__all__ = [
    "REPORT_HEADER",
    "Report",
    "ReportWriter",
]
