"""
Domain helpers built on the numeric core.
"""

from stark_math.core.domain.ranges import (
    ClosedRange,
    MergeableRange,
    merge_overlapping_ranges,
)

__all__ = [
    "ClosedRange",
    "MergeableRange",
    "merge_overlapping_ranges",
]
