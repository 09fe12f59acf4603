"""Tests for converting conditions back to query strings."""

import pytest

from mediaquery.expressions import parse_condition, serialize_condition
from mediaquery.types.conditions import (
    AndCondition,
    FeatureCondition,
    NotCondition,
    OrCondition,
)

A = FeatureCondition(name="a", operator=":", value="1")
B = FeatureCondition(name="b", operator=":", value="1")
C = FeatureCondition(name="c", operator=":", value="1")


class TestSerializeCondition:
    def test_colon_feature(self):
        condition = FeatureCondition(
            name="orientation", operator=":", value="landscape"
        )
        assert serialize_condition(condition) == "(orientation: landscape)"

    def test_comparison_feature(self):
        condition = FeatureCondition(name="width", operator=">=", value="600vp")
        assert serialize_condition(condition) == "(width >= 600vp)"

    def test_and(self):
        assert serialize_condition(AndCondition(left=A, right=B)) == (
            "(a: 1) and (b: 1)"
        )

    def test_or_is_written_with_keyword(self):
        assert serialize_condition(OrCondition(left=A, right=B)) == "(a: 1) or (b: 1)"

    def test_not(self):
        assert serialize_condition(NotCondition(inner=A)) == "not (a: 1)"

    def test_not_wraps_compound_inner(self):
        condition = NotCondition(inner=AndCondition(left=A, right=B))
        assert serialize_condition(condition) == "not ((a: 1) and (b: 1))"

    def test_and_inside_or_needs_no_parentheses(self):
        condition = OrCondition(left=AndCondition(left=A, right=B), right=C)
        assert serialize_condition(condition) == "(a: 1) and (b: 1) or (c: 1)"

    def test_or_inside_and_is_parenthesized(self):
        condition = AndCondition(left=OrCondition(left=A, right=B), right=C)
        assert serialize_condition(condition) == "((a: 1) or (b: 1)) and (c: 1)"

    def test_left_nested_chain_is_parenthesized(self):
        condition = AndCondition(left=AndCondition(left=A, right=B), right=C)
        assert serialize_condition(condition) == "((a: 1) and (b: 1)) and (c: 1)"

    def test_right_nested_chain_is_flat(self):
        condition = AndCondition(left=A, right=AndCondition(left=B, right=C))
        assert serialize_condition(condition) == "(a: 1) and (b: 1) and (c: 1)"

    def test_not_operand_is_parenthesized(self):
        condition = AndCondition(left=NotCondition(inner=A), right=B)
        assert serialize_condition(condition) == "(not (a: 1)) and (b: 1)"

    def test_unknown_type_raises(self):
        with pytest.raises(ValueError, match="Unknown condition type"):
            serialize_condition("(a: 1)")  # type: ignore[arg-type]


class TestRoundTrip:
    @pytest.mark.parametrize(
        "condition",
        [
            AndCondition(left=AndCondition(left=A, right=B), right=C),
            OrCondition(left=OrCondition(left=A, right=B), right=C),
            AndCondition(left=OrCondition(left=A, right=B), right=C),
            OrCondition(left=A, right=AndCondition(left=B, right=C)),
            AndCondition(left=NotCondition(inner=A), right=NotCondition(inner=B)),
            NotCondition(inner=OrCondition(left=A, right=NotCondition(inner=B))),
            NotCondition(inner=NotCondition(inner=A)),
        ],
    )
    def test_serialized_form_parses_to_same_tree(self, condition):
        assert parse_condition(serialize_condition(condition)) == condition

    def test_long_chain_is_written_flat(self):
        query = " and ".join(["(dark-mode: true)"] * 1500)
        assert serialize_condition(parse_condition(query)) == query

    def test_comma_query_normalizes_to_keyword(self):
        parsed = parse_condition("(device-type: tablet), (device-type: tv)")
        assert serialize_condition(parsed) == (
            "(device-type: tablet) or (device-type: tv)"
        )
