"""Serializer that converts Condition dataclasses back to query strings.

Used to display parsed conditions and to key listeners on a canonical
form. The output re-parses to the same tree.
"""

from __future__ import annotations

from mediaquery.types.conditions import (
    AndCondition,
    Condition,
    FeatureCondition,
    NotCondition,
    OrCondition,
    chain_operands,
)


class _Precedence:
    """Operator precedence levels (higher = tighter binding).

    'not ' consumes the rest of its text, so it binds loosest of all.
    """

    NOT = 0
    OR = 1
    AND = 2
    ATOM = 3


def serialize_condition(condition: Condition) -> str:
    """Convert a Condition dataclass into a media query string.

    Features are always wrapped in parentheses; compound operands get
    parentheses only where the parser would otherwise split them
    differently.

    Args:
        condition: The condition to serialize.

    Returns:
        A query string that parses back to the same condition.
    """
    if isinstance(condition, FeatureCondition):
        if condition.operator == ":":
            return f"({condition.name}: {condition.value})"
        return f"({condition.name} {condition.operator} {condition.value})"

    if isinstance(condition, OrCondition):
        return _serialize_binary(condition, "or", _Precedence.OR)

    if isinstance(condition, AndCondition):
        return _serialize_binary(condition, "and", _Precedence.AND)

    if isinstance(condition, NotCondition):
        inner = serialize_condition(condition.inner)
        if isinstance(condition.inner, (AndCondition, OrCondition)):
            inner = f"({inner})"
        return f"not {inner}"

    msg = f"Unknown condition type: {type(condition).__name__}"
    raise ValueError(msg)


def _serialize_binary(
    condition: AndCondition | OrCondition, keyword: str, precedence: int
) -> str:
    # The parser splits at every top-level operator and folds right, so a
    # left-nested operand of equal precedence needs parentheses while the
    # right-nested chain can be written flat.
    operands = chain_operands(condition)
    parts = []
    for index, operand in enumerate(operands):
        text = serialize_condition(operand)
        is_last = index == len(operands) - 1
        operand_precedence = _precedence_of(operand)
        if operand_precedence < precedence or (
            not is_last and operand_precedence == precedence
        ):
            text = f"({text})"
        parts.append(text)
    return f" {keyword} ".join(parts)


def _precedence_of(condition: Condition) -> int:
    if isinstance(condition, OrCondition):
        return _Precedence.OR
    if isinstance(condition, AndCondition):
        return _Precedence.AND
    if isinstance(condition, NotCondition):
        return _Precedence.NOT
    return _Precedence.ATOM
