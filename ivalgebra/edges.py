"""Endpoint comparison primitives.

Every interval operation reduces to comparing one edge of an interval with
one edge of another. An edge is either unbounded (the interval runs off to
infinity on that side) or sits at a finite value that is included or
excluded. At a shared value, an included lower edge begins before an
excluded one, and an included upper edge ends after an excluded one.
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ivalgebra.interval import Interval


def lower_begins_before(a: "Interval[Any]", b: "Interval[Any]") -> bool:
    """True if the lower edge of ``a`` lies strictly left of the lower edge of ``b``."""
    if a.lower_unbounded:
        return not b.lower_unbounded
    if b.lower_unbounded:
        return False
    if a.lower < b.lower:
        return True
    if a.lower > b.lower:
        return False
    return a.lower_included and not b.lower_included


def upper_ends_before(a: "Interval[Any]", b: "Interval[Any]") -> bool:
    """True if the upper edge of ``a`` lies strictly left of the upper edge of ``b``."""
    if a.upper_unbounded:
        return False
    if b.upper_unbounded:
        return True
    if a.upper < b.upper:
        return True
    if a.upper > b.upper:
        return False
    return b.upper_included and not a.upper_included


def adjacent(a: "Interval[Any]", b: "Interval[Any]") -> bool:
    """True if ``a`` ends exactly where ``b`` begins, sharing no point.

    The shared value must be included by exactly one of the two sides.
    """
    if a.upper_unbounded or b.lower_unbounded:
        return False
    return a.upper == b.lower and a.upper_included != b.lower_included


def touches_or_passes(a: "Interval[Any]", b: "Interval[Any]") -> bool:
    """True if no gap separates the upper edge of ``a`` from the lower edge of ``b``.

    Either ``a`` ends right of where ``b`` begins, or both meet at one value
    that at least one of them includes.
    """
    if a.upper_unbounded or b.lower_unbounded:
        return True
    if a.upper > b.lower:
        return True
    return a.upper == b.lower and (a.upper_included or b.lower_included)


def reaches(a: "Interval[Any]", b: "Interval[Any]") -> bool:
    """True if the upper edge of ``a`` and the lower edge of ``b`` share a point.

    Like ``touches_or_passes`` except that a meeting value must be included
    on both sides.
    """
    if a.upper_unbounded or b.lower_unbounded:
        return True
    if a.upper > b.lower:
        return True
    return a.upper == b.lower and a.upper_included and b.lower_included


def overlaps(a: "Interval[Any]", b: "Interval[Any]") -> bool:
    """True if ``a`` and ``b`` share at least one scalar."""
    return reaches(a, b) and reaches(b, a)
