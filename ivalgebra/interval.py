import logging
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from typing_extensions import override

from ivalgebra.edges import (
    adjacent,
    lower_begins_before,
    overlaps,
    touches_or_passes,
    upper_ends_before,
)
from ivalgebra.util import (
    LOWER_CLOSED,
    LOWER_OPEN,
    NEG_INFINITY,
    POS_INFINITY,
    UPPER_CLOSED,
    UPPER_OPEN,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", int, float)


@dataclass(frozen=True)
class Interval(Generic[T]):
    """A connected subset of an ordered line.

    Each side is either unbounded or sits at a finite value that is
    included or excluded. A ``None`` value marks its side as unbounded.
    An unbounded side is stored as ``None`` and not included, so structural
    equality ignores whatever was passed for it.

    Intervals are never empty: the combinators return ``None`` instead.
    """

    lower: T | None = None
    upper: T | None = None
    lower_included: bool = True
    lower_unbounded: bool = False
    upper_included: bool = True
    upper_unbounded: bool = False

    def __post_init__(self) -> None:
        if self.lower is None or self.lower_unbounded:
            object.__setattr__(self, "lower", None)
            object.__setattr__(self, "lower_unbounded", True)
            object.__setattr__(self, "lower_included", False)
        if self.upper is None or self.upper_unbounded:
            object.__setattr__(self, "upper", None)
            object.__setattr__(self, "upper_unbounded", True)
            object.__setattr__(self, "upper_included", False)

        for edge, value in (("lower", self.lower), ("upper", self.upper)):
            if value is not None and value != value:
                raise ValueError(
                    f"Interval {edge} bound must not be NaN.\n"
                    f"Got: {edge}={value!r}\n"
                    f"Hint: Use None (or {edge}_unbounded=True) for an "
                    f"unbounded side"
                )

        if self.lower is None or self.upper is None:
            return
        if self.lower > self.upper:
            raise ValueError(
                f"Interval lower ({self.lower}) must be <= upper ({self.upper})"
            )
        if self.lower == self.upper and not (
            self.lower_included and self.upper_included
        ):
            raise ValueError(
                f"Interval with lower == upper ({self.lower}) is empty unless "
                f"both ends are included.\n"
                f"Got: lower_included={self.lower_included}, "
                f"upper_included={self.upper_included}\n"
                f"Hint: Use Interval.point({self.lower!r}) for a singleton"
            )

    @override
    def __str__(self) -> str:
        """Human-friendly string in mathematical notation, e.g. ``[4, 12)``."""
        if self.lower_unbounded:
            left = f"{LOWER_OPEN}{NEG_INFINITY}"
        else:
            bracket = LOWER_CLOSED if self.lower_included else LOWER_OPEN
            left = f"{bracket}{self.lower}"
        if self.upper_unbounded:
            right = f"{POS_INFINITY}{UPPER_OPEN}"
        else:
            bracket = UPPER_CLOSED if self.upper_included else UPPER_OPEN
            right = f"{self.upper}{bracket}"
        return f"{left}, {right}"

    # --- Factories ---

    @classmethod
    def closed(cls, lower: T, upper: T) -> "Interval[T]":
        """``[lower, upper]``"""
        return cls(lower, upper, True, False, True, False)

    @classmethod
    def open(cls, lower: T, upper: T) -> "Interval[T]":
        """``(lower, upper)``"""
        return cls(lower, upper, False, False, False, False)

    @classmethod
    def closed_open(cls, lower: T, upper: T) -> "Interval[T]":
        """``[lower, upper)``"""
        return cls(lower, upper, True, False, False, False)

    @classmethod
    def open_closed(cls, lower: T, upper: T) -> "Interval[T]":
        """``(lower, upper]``"""
        return cls(lower, upper, False, False, True, False)

    @classmethod
    def point(cls, value: T) -> "Interval[T]":
        """``[value, value]``"""
        return cls(value, value, True, False, True, False)

    @classmethod
    def at_least(cls, lower: T) -> "Interval[T]":
        """``[lower, +∞)``"""
        return cls(lower, None, True, False, False, True)

    @classmethod
    def greater_than(cls, lower: T) -> "Interval[T]":
        """``(lower, +∞)``"""
        return cls(lower, None, False, False, False, True)

    @classmethod
    def at_most(cls, upper: T) -> "Interval[T]":
        """``(-∞, upper]``"""
        return cls(None, upper, False, True, True, False)

    @classmethod
    def less_than(cls, upper: T) -> "Interval[T]":
        """``(-∞, upper)``"""
        return cls(None, upper, False, True, False, False)

    @classmethod
    def whole(cls) -> "Interval[Any]":
        """``(-∞, +∞)``"""
        return cls(None, None, False, True, False, True)

    # --- Queries ---

    @property
    def is_bounded(self) -> bool:
        return not (self.lower_unbounded or self.upper_unbounded)

    @property
    def is_singleton(self) -> bool:
        return self.is_bounded and self.lower == self.upper

    def has(self, value: T) -> bool:
        """Return True if the scalar ``value`` belongs to this interval."""
        if not self.lower_unbounded:
            if value < self.lower:
                return False
            if value == self.lower and not self.lower_included:
                return False
        if not self.upper_unbounded:
            if value > self.upper:
                return False
            if value == self.upper and not self.upper_included:
                return False
        return True

    def __contains__(self, value: T) -> bool:
        return self.has(value)

    def lt_begin_of(self, other: "Interval[T]") -> bool:
        """Return True if this interval begins strictly before ``other`` begins."""
        _check_operand(other, "lt_begin_of")
        return lower_begins_before(self, other)

    def le_end_of(self, other: "Interval[T]") -> bool:
        """Return True if this interval ends at or before the end of ``other``."""
        _check_operand(other, "le_end_of")
        return not upper_ends_before(other, self)

    def contains(self, other: "Interval[T]") -> bool:
        """Return True if every scalar of ``other`` also lies in this interval."""
        _check_operand(other, "contains")
        return not lower_begins_before(other, self) and not upper_ends_before(
            self, other
        )

    def overlaps(self, other: "Interval[T]") -> bool:
        """Return True if the two intervals share at least one scalar."""
        _check_operand(other, "overlaps")
        return overlaps(self, other)

    def is_adjacent(self, other: "Interval[T]") -> bool:
        """Return True if the intervals meet at one value without sharing it."""
        _check_operand(other, "is_adjacent")
        return adjacent(self, other) or adjacent(other, self)

    # --- Combinators ---

    def intersect(self, other: "Interval[T]") -> "Interval[T] | None":
        """Return the scalars in both intervals, or None if they are disjoint.

        The result takes the rightmost lower edge and the leftmost upper edge.
        At a shared endpoint value it is included only if both sides include it.
        """
        _check_operand(other, "intersect")
        low = other if lower_begins_before(self, other) else self
        high = self if upper_ends_before(self, other) else other
        result = _join(low, high)
        if result is None:
            logger.debug("intersect: %s and %s are disjoint", self, other)
        return result

    def __and__(self, other: "Interval[T]") -> "Interval[T] | None":
        return self.intersect(other)

    def encompass(self, other: "Interval[T]") -> "Interval[T]":
        """Return the smallest interval covering both (the convex hull)."""
        _check_operand(other, "encompass")
        low = other if lower_begins_before(other, self) else self
        high = other if upper_ends_before(self, other) else self
        hull = _join(low, high)
        assert hull is not None
        return hull

    def adjoin(self, other: "Interval[T]") -> "Interval[T] | None":
        """Return the union if it is a single interval, otherwise None.

        The union is convex when the intervals overlap or are adjacent, i.e.
        no scalar between them is missing from both.
        """
        _check_operand(other, "adjoin")
        if touches_or_passes(self, other) and touches_or_passes(other, self):
            return self.encompass(other)
        logger.debug("adjoin: gap between %s and %s", self, other)
        return None

    def subtract(
        self, other: "Interval[T]"
    ) -> "tuple[Interval[T] | None, Interval[T] | None]":
        """Remove ``other`` from this interval.

        Returns ``(before, after)``: the part of this interval left of
        ``other`` and the part right of it. Either is None when empty.
        """
        _check_operand(other, "subtract")
        if not overlaps(self, other):
            if lower_begins_before(self, other):
                return self, None
            return None, self

        before = None
        if lower_begins_before(self, other):
            before = _make(
                self.lower,
                self.lower_included,
                self.lower_unbounded,
                other.lower,
                not other.lower_included,
                False,
            )
        after = None
        if upper_ends_before(other, self):
            after = _make(
                other.upper,
                not other.upper_included,
                False,
                self.upper,
                self.upper_included,
                self.upper_unbounded,
            )
        return before, after


def _make(
    lower: Any,
    lower_included: bool,
    lower_unbounded: bool,
    upper: Any,
    upper_included: bool,
    upper_unbounded: bool,
) -> "Interval[Any] | None":
    """Build an interval from edges, or return None if they enclose nothing."""
    if not (lower_unbounded or upper_unbounded):
        if lower > upper:
            return None
        if lower == upper and not (lower_included and upper_included):
            return None
    return Interval(
        lower, upper, lower_included, lower_unbounded, upper_included, upper_unbounded
    )


def _join(low: "Interval[Any]", high: "Interval[Any]") -> "Interval[Any] | None":
    """Interval from the lower edge of ``low`` to the upper edge of ``high``."""
    return _make(
        low.lower,
        low.lower_included,
        low.lower_unbounded,
        high.upper,
        high.upper_included,
        high.upper_unbounded,
    )


def _check_operand(other: Any, operation: str) -> None:
    if not isinstance(other, Interval):
        raise TypeError(
            f"Interval.{operation}() expects an Interval operand.\n"
            f"Got {type(other).__name__!r}: {other!r}\n"
            f"Hint: Use Interval.point(v) to treat a scalar as an interval, "
            f"or interval.has(v) to test membership"
        )
