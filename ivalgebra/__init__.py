from .edges import (
    adjacent,
    lower_begins_before,
    overlaps,
    touches_or_passes,
    upper_ends_before,
)
from .interval import Interval

__all__ = [
    "Interval",
    "lower_begins_before",
    "upper_ends_before",
    "adjacent",
    "touches_or_passes",
    "overlaps",
]
