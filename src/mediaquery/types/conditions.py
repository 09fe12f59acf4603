"""Condition types for media queries.

A parsed media query is a tree of these frozen dataclasses. Leaves are
FeatureCondition; inner nodes combine sub-conditions with and/or/not.

Examples:
    "(width >= 600vp)"          -> FeatureCondition("width", ">=", "600vp")
    "(a: 1) and (b: 1)"         -> AndCondition(Feature a, Feature b)
    "(a: 1), (b: 1)"            -> OrCondition(Feature a, Feature b)
    "not (dark-mode: true)"     -> NotCondition(FeatureCondition(...))
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FeatureCondition:
    """Single named feature compared against a raw value.

    The value keeps its unit suffix (e.g. "600vp"); it is only interpreted
    at evaluation time.
    """

    name: str  # "width", "orientation", "dark-mode", ...
    operator: str  # ">=", "<=", ">", "<", ":"
    value: str  # "600vp", "landscape", "true", ...


@dataclass(frozen=True)
class AndCondition:
    """Both sub-conditions must be true (logical AND)."""

    left: "Condition"
    right: "Condition"


@dataclass(frozen=True)
class OrCondition:
    """At least one sub-condition must be true (logical OR)."""

    left: "Condition"
    right: "Condition"


@dataclass(frozen=True)
class NotCondition:
    """Negate a condition (logical NOT)."""

    inner: "Condition"


Condition = FeatureCondition | AndCondition | OrCondition | NotCondition


def chain_operands(condition: AndCondition | OrCondition) -> list[Condition]:
    """Flatten a right-nested chain of one operator into its operands.

    And(a, And(b, c)) -> [a, b, c]. A left operand of the same type stays
    a single operand.
    """
    node_type = type(condition)
    operands: list[Condition] = []
    node: Condition = condition
    while type(node) is node_type:
        operands.append(node.left)
        node = node.right
    operands.append(node)
    return operands
