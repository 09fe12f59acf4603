"""Condition language for media queries.

Provides parse_condition() to convert query strings like
'(width >= 600vp) and (orientation: landscape)' into Condition
dataclasses, and serialize_condition() for the reverse operation.
"""

from mediaquery.expressions.parser import (
    find_top_level_operator,
    has_matching_outer_parens,
    is_balanced_parens,
    is_range_query,
    parse_condition,
)
from mediaquery.expressions.serializer import serialize_condition

__all__ = [
    "find_top_level_operator",
    "has_matching_outer_parens",
    "is_balanced_parens",
    "is_range_query",
    "parse_condition",
    "serialize_condition",
]
