"""Rendering constants for ivalgebra.

Interval endpoints are rendered in the usual mathematical notation.
These symbols are used by ``Interval.__str__`` for consistent output.
"""

# Unbounded sides
NEG_INFINITY = "-∞"
POS_INFINITY = "+∞"

# Brackets (included / excluded)
LOWER_CLOSED = "["
LOWER_OPEN = "("
UPPER_CLOSED = "]"
UPPER_OPEN = ")"
