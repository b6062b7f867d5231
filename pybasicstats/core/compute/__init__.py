"""
Shared compute infrastructure for PyBasicStats.

Submodules:
    timing: Execution timing utilities
"""

from pybasicstats.core.compute.timing import Timer, timed

__all__ = [
    "Timer",
    "timed",
]
