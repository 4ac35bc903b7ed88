"""Algebraic laws checked over every combination of endpoint modalities.

Endpoints are drawn from a small integer range. Membership is then probed on
a grid of integers and half-integers that extends one step past that range,
which is enough to tell any two such intervals (or their gaps) apart.
"""

from hypothesis import given
from hypothesis import strategies as st

from ivalgebra import Interval

LIMIT = 20
GRID = [x / 2 for x in range(-2 * (LIMIT + 1), 2 * (LIMIT + 1) + 1)]

_unbounded = st.sampled_from([False, False, False, True])


@st.composite
def intervals(draw: st.DrawFn) -> Interval[int]:
    lower, upper = sorted(
        (draw(st.integers(-LIMIT, LIMIT)), draw(st.integers(-LIMIT, LIMIT)))
    )
    lower_unbounded, upper_unbounded = draw(_unbounded), draw(_unbounded)
    lower_included, upper_included = draw(st.booleans()), draw(st.booleans())
    if lower == upper and not (lower_unbounded or upper_unbounded):
        lower_included = upper_included = True
    return Interval(
        lower, upper, lower_included, lower_unbounded, upper_included, upper_unbounded
    )


def members(ivl: Interval[int] | None) -> set[float]:
    if ivl is None:
        return set()
    return {v for v in GRID if ivl.has(v)}


@given(intervals())
def test_contains_is_reflexive(a: Interval[int]) -> None:
    assert a.contains(a)


@given(intervals(), intervals())
def test_contains_agrees_with_membership(a: Interval[int], b: Interval[int]) -> None:
    assert a.contains(b) == (members(b) <= members(a))


@given(intervals(), intervals())
def test_intersect_is_commutative(a: Interval[int], b: Interval[int]) -> None:
    assert a.intersect(b) == b.intersect(a)


@given(intervals())
def test_intersect_is_idempotent(a: Interval[int]) -> None:
    assert a.intersect(a) == a


@given(intervals(), intervals())
def test_intersect_is_common_subset(a: Interval[int], b: Interval[int]) -> None:
    both = a.intersect(b)
    assert members(both) == members(a) & members(b)
    if both is not None:
        assert a.contains(both)
        assert b.contains(both)
    assert (both is not None) == a.overlaps(b)


@given(intervals(), intervals())
def test_encompass_is_commutative_hull(a: Interval[int], b: Interval[int]) -> None:
    hull = a.encompass(b)
    assert hull == b.encompass(a)
    assert hull.contains(a)
    assert hull.contains(b)


@given(intervals(), intervals())
def test_adjoin_is_convex_union(a: Interval[int], b: Interval[int]) -> None:
    joined = a.adjoin(b)
    union = members(a) | members(b)
    if joined is None:
        assert members(a.encompass(b)) != union
    else:
        assert joined == a.encompass(b)
        assert members(joined) == union


@given(intervals(), intervals())
def test_subtract_reconstitutes(a: Interval[int], b: Interval[int]) -> None:
    before, after = a.subtract(b)
    pieces = [members(before), members(a.intersect(b)), members(after)]
    assert pieces[0] | pieces[1] | pieces[2] == members(a)
    assert not pieces[0] & pieces[1]
    assert not pieces[1] & pieces[2]
    assert not pieces[0] & pieces[2]
    if before is not None and after is not None:
        assert before.le_end_of(after)
        assert before.lt_begin_of(after)


@given(intervals(), intervals())
def test_subtract_disjoint_returns_self(a: Interval[int], b: Interval[int]) -> None:
    if a.overlaps(b):
        return
    assert a.subtract(b) in ((a, None), (None, a))


@given(intervals(), st.integers(-LIMIT - 1, LIMIT + 1))
def test_membership_matches_singleton_containment(a: Interval[int], v: int) -> None:
    assert a.contains(Interval.point(v)) == a.has(v)


@given(intervals(), intervals())
def test_lt_begin_of_is_asymmetric(a: Interval[int], b: Interval[int]) -> None:
    assert not (a.lt_begin_of(b) and b.lt_begin_of(a))


@given(intervals(), intervals())
def test_equality_is_structural(a: Interval[int], b: Interval[int]) -> None:
    if a == b:
        assert members(a) == members(b)
        assert str(a) == str(b)
